"""
Snippet Registry

Holds one cheat-sheet Document per source language. Built once at load
time; to pick up edited sources, build a new registry and swap references.
"""
from typing import List, Optional, Dict, Any
from pathlib import Path
from loguru import logger

from .errors import DuplicateLanguageError, LanguageNotFoundError
from .index import TopicIndex, build_index
from .parser import CheatSheetParser
from .store import Document, DEFAULT_TARGET_LANGUAGE


class SnippetRegistry:
    """
    Registry of cheat-sheet documents keyed by source language.

    Features:
    - Directory loading of Markdown cheat sheets
    - Topic index construction for cross-language views
    - Summary statistics
    """

    def __init__(
        self,
        target_language: str = DEFAULT_TARGET_LANGUAGE,
        strict: bool = False
    ):
        """
        Initialize registry.

        Args:
            target_language: Language every document is compared against
            strict: Reject repeated topics inside a document
        """
        self.target_language = target_language
        self.strict = strict
        self.documents: Dict[str, Document] = {}

    @classmethod
    def from_directory(
        cls,
        content_dir: Path,
        target_language: str = DEFAULT_TARGET_LANGUAGE,
        strict: bool = False
    ) -> "SnippetRegistry":
        registry = cls(target_language=target_language, strict=strict)
        registry.load_directory(content_dir)
        return registry

    def load_directory(self, content_dir: Path, pattern: str = "*.md") -> int:
        """
        Load every cheat sheet in a directory, in file-name order.

        Returns:
            Number of documents loaded
        """
        content_dir = Path(content_dir)
        if not content_dir.is_dir():
            logger.error(f"Content directory not found: {content_dir}")
            raise FileNotFoundError(content_dir)

        parser = CheatSheetParser(target_language=self.target_language, strict=self.strict)
        loaded = 0
        for file_path in sorted(content_dir.glob(pattern)):
            self.add_document(parser.parse_file(file_path))
            loaded += 1

        logger.info(f"Loaded {loaded} cheat sheets from {content_dir}")
        return loaded

    def add_document(self, document: Document) -> None:
        """Register a document under its source language"""
        if document.source_language in self.documents:
            raise DuplicateLanguageError(document.source_language)
        self.documents[document.source_language] = document
        logger.info(
            f"Added {document.source_language} document '{document.title}' "
            f"with {len(document)} entries"
        )

    def get_document(self, source_language: str) -> Document:
        """Get the document for a source language"""
        try:
            return self.documents[source_language]
        except KeyError:
            raise LanguageNotFoundError(source_language) from None

    def find_document(self, source_language: str) -> Optional[Document]:
        return self.documents.get(source_language)

    def list_languages(self) -> List[str]:
        """Source languages in registration order"""
        return list(self.documents.keys())

    def build_index(self) -> TopicIndex:
        return build_index(self.documents.values())

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about loaded documents"""
        return {
            "documents": len(self.documents),
            "total_entries": sum(len(d) for d in self.documents.values()),
            "document_details": {
                language: {
                    "title": d.title,
                    "entries": len(d),
                    "topics": len(d.topics()),
                    "incomplete": sum(1 for e in d.list_entries() if e.incomplete),
                }
                for language, d in self.documents.items()
            },
        }

    def __contains__(self, source_language: object) -> bool:
        return source_language in self.documents

    def __len__(self) -> int:
        return len(self.documents)
