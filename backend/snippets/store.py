"""
Snippet Data Structures

Defines cheat-sheet entries, the per-document entry store and documents.
"""
from typing import List, Optional, Dict, Any, Iterator, Tuple
from dataclasses import dataclass, field
from loguru import logger

from .errors import DuplicateTopicError, TopicNotFoundError

DEFAULT_TARGET_LANGUAGE = "Rust"

# Rendered in place of a snippet that has not been written yet
MISSING_EXAMPLE = "_Example not yet provided._"


@dataclass(frozen=True)
class Entry:
    """One topic's paired snippets: source-language example and its target equivalent"""
    topic: str
    source_language: str
    source_code: str
    target_code: str
    note: Optional[str] = None
    target_language: str = DEFAULT_TARGET_LANGUAGE
    incomplete: bool = False  # Placeholder section, text not yet provided

    @property
    def key(self) -> Tuple[str, str]:
        """Identity of the entry"""
        return (self.topic, self.source_language)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "topic": self.topic,
            "source_language": self.source_language,
            "source_code": self.source_code,
            "target_code": self.target_code,
            "note": self.note,
            "target_language": self.target_language,
            "incomplete": self.incomplete,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        """Create from dictionary"""
        return cls(
            topic=data["topic"],
            source_language=data["source_language"],
            source_code=data.get("source_code", ""),
            target_code=data.get("target_code", ""),
            note=data.get("note"),
            target_language=data.get("target_language", DEFAULT_TARGET_LANGUAGE),
            incomplete=data.get("incomplete", False),
        )


class EntryStore:
    """
    Ordered entries for one document.

    Entries are kept in authoring order. In non-strict mode a repeated topic is
    appended anyway and lookups return the latest one; in strict mode it is
    rejected with DuplicateTopicError.
    """

    def __init__(
        self,
        source_language: str,
        target_language: str = DEFAULT_TARGET_LANGUAGE,
        strict: bool = False
    ):
        self.source_language = source_language
        self.target_language = target_language
        self.strict = strict
        self._entries: List[Entry] = []
        self._latest: Dict[str, Entry] = {}

    def add_entry(
        self,
        topic: str,
        source_code: str,
        target_code: str,
        note: Optional[str] = None,
        incomplete: bool = False
    ) -> Entry:
        """Append a new entry for a topic"""
        if topic in self._latest:
            if self.strict:
                raise DuplicateTopicError(topic, self.source_language)
            logger.warning(
                f"Duplicate topic '{topic}' in {self.source_language} document; "
                f"later entry wins on lookup"
            )

        entry = Entry(
            topic=topic,
            source_language=self.source_language,
            source_code=source_code,
            target_code=target_code,
            note=note,
            target_language=self.target_language,
            incomplete=incomplete,
        )
        self._entries.append(entry)
        self._latest[topic] = entry
        logger.debug(f"Added {self.source_language} entry '{topic}'")
        return entry

    def get_entry(self, topic: str) -> Entry:
        """Get the latest entry for a topic"""
        try:
            return self._latest[topic]
        except KeyError:
            raise TopicNotFoundError(topic, self.source_language) from None

    def find_entry(self, topic: str) -> Optional[Entry]:
        """Get the latest entry for a topic, or None"""
        return self._latest.get(topic)

    def list_entries(self) -> Tuple[Entry, ...]:
        """All entries in authoring order"""
        return tuple(self._entries)

    def topics(self) -> List[str]:
        """Distinct topic names in order of first appearance"""
        seen: Dict[str, None] = {}
        for entry in self._entries:
            seen.setdefault(entry.topic, None)
        return list(seen)

    def __contains__(self, topic: object) -> bool:
        return topic in self._latest

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.list_entries())

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class Document:
    """An ordered cheat sheet for one source language"""
    title: str
    source_language: str
    intro: str = ""
    target_language: str = DEFAULT_TARGET_LANGUAGE
    strict: bool = False
    store: EntryStore = field(init=False, repr=False)

    def __post_init__(self):
        self.store = EntryStore(
            source_language=self.source_language,
            target_language=self.target_language,
            strict=self.strict,
        )

    def add_entry(
        self,
        topic: str,
        source_code: str,
        target_code: str,
        note: Optional[str] = None,
        incomplete: bool = False
    ) -> Entry:
        return self.store.add_entry(topic, source_code, target_code, note, incomplete)

    def get_entry(self, topic: str) -> Entry:
        return self.store.get_entry(topic)

    def find_entry(self, topic: str) -> Optional[Entry]:
        return self.store.find_entry(topic)

    def list_entries(self) -> Tuple[Entry, ...]:
        return self.store.list_entries()

    def topics(self) -> List[str]:
        return self.store.topics()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "title": self.title,
            "source_language": self.source_language,
            "intro": self.intro,
            "target_language": self.target_language,
            "entries": [e.to_dict() for e in self.list_entries()],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], strict: bool = False) -> "Document":
        """Create from dictionary"""
        document = cls(
            title=data["title"],
            source_language=data["source_language"],
            intro=data.get("intro", ""),
            target_language=data.get("target_language", DEFAULT_TARGET_LANGUAGE),
            strict=strict,
        )
        for item in data.get("entries", []):
            document.add_entry(
                topic=item["topic"],
                source_code=item.get("source_code", ""),
                target_code=item.get("target_code", ""),
                note=item.get("note"),
                incomplete=item.get("incomplete", False),
            )
        return document

    def __len__(self) -> int:
        return len(self.store)
