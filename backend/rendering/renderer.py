"""
Cheat Sheet Renderer Module

Formats documents and topic indexes as Markdown text.
Pure text production: no filesystem or network access.
"""
import re
from typing import List, Optional, Dict, Iterable
from dataclasses import dataclass, field
from loguru import logger

from snippets import Document, Entry, TopicIndex, TopicNotFoundError, MISSING_EXAMPLE

# Language names -> code fence info strings
DEFAULT_FENCE_ALIASES: Dict[str, str] = {
    "C#": "csharp",
    "Ruby": "ruby",
    "JavaScript": "javascript",
    "TypeScript": "typescript",
    "Python": "python",
    "Rust": "rust",
}


@dataclass
class RenderConfig:
    """Rendering options"""
    # Block order for cross-reference views; unlisted languages follow alphabetically
    language_order: List[str] = field(default_factory=lambda: ["C#", "Ruby", "JavaScript"])
    include_notes: bool = True
    fence_aliases: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FENCE_ALIASES))
    site_title: str = "Cheat Sheets"

    @classmethod
    def from_settings(cls, app_settings=None) -> "RenderConfig":
        """Build from application settings (defaults to the global settings)"""
        if app_settings is None:
            from config import settings as app_settings

        return cls(
            language_order=list(app_settings.LANGUAGE_ORDER),
            include_notes=app_settings.INCLUDE_NOTES,
        )


def slugify(name: str) -> str:
    """Page-safe slug: 'C#' -> 'csharp', 'Weak Maps' -> 'weak-maps'"""
    slug = name.lower().replace("#", "sharp").replace("+", "plus")
    slug = re.sub(r'[^a-z0-9]+', '-', slug).strip('-')
    return slug or "page"


class CheatSheetRenderer:
    """
    Renders cheat sheets and cross-language comparisons as Markdown.

    Usage:
        renderer = CheatSheetRenderer(RenderConfig(include_notes=False))
        text = renderer.render_document(document)
        text = renderer.render_cross_reference(index, "Conditionals")
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render_document(self, doc: Document) -> str:
        """
        Render one cheat sheet.

        Args:
            doc: Document to render

        Returns:
            Markdown text; identical for identical input
        """
        lines = [f"# {doc.title}", ""]

        if doc.intro:
            lines.extend([doc.intro.strip(), ""])

        for entry in doc.list_entries():
            lines.append(f"## {entry.topic}")
            lines.append("")
            lines.extend(self._snippet_block(entry.source_language, entry.source_code))
            lines.extend(self._snippet_block(entry.target_language, entry.target_code))
            lines.extend(self._note_block(entry))

        return self._finish(lines)

    def render_cross_reference(self, index: TopicIndex, topic: str) -> str:
        """
        Render every known language's snippet for one topic.

        Args:
            index: Topic index
            topic: Topic name

        Returns:
            Markdown text with one section per language, in configured order;
            each section holds the language's snippet and its target equivalent

        Raises:
            TopicNotFoundError: no document defines the topic
        """
        entries = index.cross_reference(topic)
        if not entries:
            raise TopicNotFoundError(topic)

        lines = [f"# {topic}", ""]
        for language in self.ordered_languages(entries):
            entry = entries[language]
            lines.extend([f"## {language}", ""])
            lines.extend(self._snippet_block(language, entry.source_code))
            lines.extend(self._snippet_block(entry.target_language, entry.target_code))
            lines.extend(self._note_block(entry))

        return self._finish(lines)

    def render_site(self, index: TopicIndex) -> Dict[str, str]:
        """
        Render a whole site: one page per language, one per topic and an index page.

        Returns:
            Mapping of relative page path -> Markdown text
        """
        pages: Dict[str, str] = {}
        language_links = []
        topic_links = []

        for language in self.ordered_languages(index.languages()):
            path = self._unique_path(pages, "languages", language)
            pages[path] = self.render_document(index.document_for(language))
            language_links.append(f"- [{language}]({path})")

        for topic in index.topics():
            path = self._unique_path(pages, "topics", topic)
            pages[path] = self.render_cross_reference(index, topic)
            topic_links.append(f"- [{topic}]({path})")

        lines = [f"# {self.config.site_title}", "", "## Languages", ""]
        lines.extend(language_links)
        lines.extend(["", "## Topics", ""])
        lines.extend(topic_links)
        pages["index.md"] = self._finish(lines)

        logger.debug(f"Rendered {len(pages)} site pages")
        return pages

    def ordered_languages(self, languages: Iterable[str]) -> List[str]:
        """Configured order first, then any remaining languages alphabetically"""
        available = set(languages)
        ordered = [lang for lang in self.config.language_order if lang in available]
        ordered.extend(sorted(available - set(ordered)))
        return ordered

    def fence_for(self, language: str) -> str:
        return self.config.fence_aliases.get(language, slugify(language))

    def _snippet_block(self, language: str, code: str) -> List[str]:
        lines = [f"### {language}", ""]
        if not code.strip():
            lines.extend([MISSING_EXAMPLE, ""])
            return lines

        # Fence must be longer than any backtick run inside the snippet
        fence = "```"
        while fence in code:
            fence += "`"

        lines.append(f"{fence}{self.fence_for(language)}")
        lines.append(code)
        lines.append(fence)
        lines.append("")
        return lines

    def _note_block(self, entry: Entry) -> List[str]:
        if not self.config.include_notes or not entry.note:
            return []
        return [entry.note.strip(), ""]

    def _unique_path(self, pages: Dict[str, str], folder: str, name: str) -> str:
        base = f"{folder}/{slugify(name)}"
        path = f"{base}.md"
        suffix = 2
        while path in pages:
            path = f"{base}-{suffix}.md"
            suffix += 1
        return path

    def _finish(self, lines: List[str]) -> str:
        while lines and lines[-1] == "":
            lines.pop()
        return "\n".join(lines) + "\n"
