"""
Snippet Registry Module

Provides:
- Cheat-sheet entries and per-language documents
- Topic index for cross-language lookup
- Markdown cheat-sheet parsing
"""
from .errors import (
    SnippetError,
    DuplicateTopicError,
    NotFoundError,
    TopicNotFoundError,
    LanguageNotFoundError,
    EmptyInputError,
    DuplicateLanguageError,
)
from .store import Entry, EntryStore, Document, MISSING_EXAMPLE
from .index import TopicIndex, build_index
from .parser import CheatSheetParser
from .registry import SnippetRegistry

__all__ = [
    "SnippetError",
    "DuplicateTopicError",
    "NotFoundError",
    "TopicNotFoundError",
    "LanguageNotFoundError",
    "EmptyInputError",
    "DuplicateLanguageError",
    "Entry",
    "EntryStore",
    "Document",
    "MISSING_EXAMPLE",
    "TopicIndex",
    "build_index",
    "CheatSheetParser",
    "SnippetRegistry",
]
