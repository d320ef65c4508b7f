"""
Snippet Registry Errors

All errors are local and recoverable; callers decide how to surface them.
"""


class SnippetError(Exception):
    """Base class for snippet registry errors"""


class DuplicateTopicError(SnippetError):
    """A topic was added twice to a strict entry store"""

    def __init__(self, topic: str, source_language: str = ""):
        self.topic = topic
        self.source_language = source_language
        where = f" in {source_language} document" if source_language else ""
        super().__init__(f"Topic '{topic}' already exists{where}")


class NotFoundError(SnippetError, KeyError):
    """Lookup of an absent topic or language"""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class TopicNotFoundError(NotFoundError):
    def __init__(self, topic: str, source_language: str = ""):
        self.topic = topic
        self.source_language = source_language
        where = f" in {source_language} document" if source_language else ""
        super().__init__(f"Topic '{topic}' not found{where}")


class LanguageNotFoundError(NotFoundError):
    def __init__(self, source_language: str):
        self.source_language = source_language
        super().__init__(f"No document for language '{source_language}'")


class EmptyInputError(SnippetError, ValueError):
    """An index was requested from zero documents"""


class DuplicateLanguageError(SnippetError, ValueError):
    """Two documents claim the same source language"""

    def __init__(self, source_language: str):
        self.source_language = source_language
        super().__init__(f"Duplicate document for language '{source_language}'")
