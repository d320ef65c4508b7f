"""
Topic Index

Groups entries from several documents (one per source language) by topic,
for cross-language comparison views.
"""
from typing import List, Dict, Iterable
from loguru import logger

from .errors import EmptyInputError, DuplicateLanguageError, LanguageNotFoundError
from .store import Document, Entry


class TopicIndex:
    """
    Read-only view over a set of documents keyed by topic.

    Usage:
        index = build_index([ruby_doc, js_doc])
        index.topics_for("Ruby")
        index.cross_reference("Conditionals")
    """

    def __init__(self, documents: Dict[str, Document], topics: Dict[str, List[str]]):
        self._documents = documents
        # topic -> languages that define it, in document order
        self._topics = topics

    def languages(self) -> List[str]:
        """Source languages in the order their documents were supplied"""
        return list(self._documents)

    def topics(self) -> List[str]:
        """All topic names in order of first appearance across documents"""
        return list(self._topics)

    def document_for(self, source_language: str) -> Document:
        try:
            return self._documents[source_language]
        except KeyError:
            raise LanguageNotFoundError(source_language) from None

    def topics_for(self, source_language: str) -> List[str]:
        """Topic names of one language, in authoring order"""
        return self.document_for(source_language).topics()

    def cross_reference(self, topic: str) -> Dict[str, Entry]:
        """
        Collate every language's entry for one topic.

        Languages without the topic are omitted; an unknown topic yields an
        empty mapping.
        """
        return {
            language: self._documents[language].get_entry(topic)
            for language in self._topics.get(topic, [])
        }

    def __contains__(self, topic: object) -> bool:
        return topic in self._topics

    def __len__(self) -> int:
        return len(self._topics)


def build_index(documents: Iterable[Document]) -> TopicIndex:
    """
    Build a topic index from documents.

    Args:
        documents: Documents, at most one per source language

    Returns:
        TopicIndex over the documents

    Raises:
        EmptyInputError: no documents were supplied
        DuplicateLanguageError: two documents share a source language
    """
    by_language: Dict[str, Document] = {}
    topics: Dict[str, List[str]] = {}

    for document in documents:
        language = document.source_language
        if language in by_language:
            raise DuplicateLanguageError(language)
        by_language[language] = document

        for topic in document.topics():
            topics.setdefault(topic, []).append(language)

    if not by_language:
        raise EmptyInputError("Cannot build an index from zero documents")

    logger.info(f"Indexed {len(topics)} topics across {len(by_language)} languages")
    return TopicIndex(by_language, topics)
