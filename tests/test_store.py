"""Tests for Entry, EntryStore and Document."""

import dataclasses

import pytest

from snippets import (
    Document,
    DuplicateTopicError,
    Entry,
    EntryStore,
    NotFoundError,
    TopicNotFoundError,
)


class TestEntry:
    def test_entry_is_immutable(self):
        entry = Entry("Variables", "Ruby", "foo = 1", "let foo = 1;")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.topic = "Other"

    def test_key_is_topic_and_language(self):
        entry = Entry("Variables", "Ruby", "foo = 1", "let foo = 1;")
        assert entry.key == ("Variables", "Ruby")

    def test_dict_form_keeps_all_fields(self):
        entry = Entry("Maps", "JavaScript", "new Map()", "HashMap::new()", note="std", incomplete=True)
        assert Entry.from_dict(entry.to_dict()) == entry

    def test_from_dict_defaults(self):
        entry = Entry.from_dict({"topic": "Maps", "source_language": "JavaScript"})
        assert entry.source_code == ""
        assert entry.target_language == "Rust"
        assert entry.note is None
        assert entry.incomplete is False


class TestEntryStore:
    def test_list_entries_in_authoring_order(self):
        store = EntryStore("C#")
        for topic in ["Variables", "Functions", "Conditionals"]:
            store.add_entry(topic, "a", "b")
        assert [e.topic for e in store.list_entries()] == ["Variables", "Functions", "Conditionals"]

    def test_list_entries_is_restartable(self):
        store = EntryStore("Ruby")
        store.add_entry("Variables", "a", "b")
        store.add_entry("Functions", "c", "d")
        assert list(store.list_entries()) == list(store.list_entries())
        assert list(store) == list(store)

    def test_entries_take_store_languages(self):
        store = EntryStore("Ruby", target_language="Rust")
        entry = store.add_entry("Variables", "foo = 1", "let foo = 1;")
        assert entry.source_language == "Ruby"
        assert entry.target_language == "Rust"

    def test_get_entry_missing_raises_not_found(self):
        store = EntryStore("Ruby")
        with pytest.raises(TopicNotFoundError) as excinfo:
            store.get_entry("Closures")
        assert isinstance(excinfo.value, NotFoundError)
        assert isinstance(excinfo.value, KeyError)
        assert "Closures" in str(excinfo.value)

    def test_find_entry_missing_returns_none(self):
        assert EntryStore("Ruby").find_entry("Closures") is None

    def test_non_strict_duplicate_is_last_write_wins(self, warnings_log):
        store = EntryStore("JavaScript")
        store.add_entry("Maps", "old", "old")
        store.add_entry("Maps", "new Map()", "HashMap::new()")

        assert store.get_entry("Maps").source_code == "new Map()"
        assert len(store) == 2
        assert store.topics() == ["Maps"]
        assert any("Duplicate topic 'Maps'" in m for m in warnings_log)

    def test_strict_duplicate_raises_and_keeps_prior_entry(self):
        store = EntryStore("JavaScript", strict=True)
        first = store.add_entry("Maps", "new Map()", "HashMap::new()")

        with pytest.raises(DuplicateTopicError) as excinfo:
            store.add_entry("Maps", "other", "other")

        assert excinfo.value.topic == "Maps"
        assert store.get_entry("Maps") is first
        assert len(store) == 1

    def test_distinct_topics_allowed_in_strict_mode(self):
        store = EntryStore("JavaScript", strict=True)
        store.add_entry("Maps", "new Map()", "HashMap::new()")
        store.add_entry("WeakMap", "new WeakMap()", "")
        assert store.topics() == ["Maps", "WeakMap"]

    def test_membership(self):
        store = EntryStore("Ruby")
        store.add_entry("Variables", "a", "b")
        assert "Variables" in store
        assert "Functions" not in store


class TestDocument:
    def test_document_owns_its_store(self, ruby_doc):
        assert ruby_doc.store.source_language == "Ruby"
        assert len(ruby_doc) == 3
        assert ruby_doc.get_entry("Functions").target_code == "fn f() {}"

    def test_strict_document(self):
        doc = Document(title="C#", source_language="C#", strict=True)
        doc.add_entry("Variables", "a", "b")
        with pytest.raises(DuplicateTopicError):
            doc.add_entry("Variables", "c", "d")

    def test_dict_form_preserves_order_and_notes(self, ruby_doc):
        restored = Document.from_dict(ruby_doc.to_dict())
        assert restored.title == ruby_doc.title
        assert restored.intro == ruby_doc.intro
        assert restored.list_entries() == ruby_doc.list_entries()
