"""
Cheat Sheet Parser Module

Parses Markdown cheat sheets into Documents.

Layout understood:
- "# Title" once, followed by introductory prose
- "## Topic" per section
- first fenced code block of a section is the source snippet, second is the
  target snippet; remaining prose becomes the note
"""
import re
from typing import List, Optional, Dict, Any
from pathlib import Path
from loguru import logger

from .store import Document, DEFAULT_TARGET_LANGUAGE, MISSING_EXAMPLE

# Code fence info strings -> language names
LANGUAGE_ALIASES: Dict[str, str] = {
    "cs": "C#",
    "csharp": "C#",
    "c#": "C#",
    "rb": "Ruby",
    "ruby": "Ruby",
    "js": "JavaScript",
    "javascript": "JavaScript",
    "jsx": "JavaScript",
    "ts": "TypeScript",
    "typescript": "TypeScript",
    "py": "Python",
    "python": "Python",
    "rs": "Rust",
    "rust": "Rust",
}


def resolve_language(name: str) -> Optional[str]:
    """Map a fence info string or file-name token to a language name"""
    return LANGUAGE_ALIASES.get(name.strip().lower())


class CheatSheetParser:
    """
    Markdown cheat sheet parser.

    Usage:
        parser = CheatSheetParser()
        document = parser.parse_file("ruby.md")
        # or
        document = parser.parse_text(content, source_language="Ruby")
    """

    TITLE_PATTERN = re.compile(r'^#\s+(.+?)\s*#*\s*$')
    SECTION_PATTERN = re.compile(r'^##\s+(.+?)\s*#*\s*$')
    SUBHEADING_PATTERN = re.compile(r'^#{3,6}\s+(.+?)\s*#*\s*$')
    FENCE_PATTERN = re.compile(r'^\s*(`{3,}|~{3,})\s*([^\s`]*)')

    # Whole-snippet stand-ins for examples not yet written: a bare marker,
    # a commented marker, or an ellipsis. "todo = []" is real code.
    PLACEHOLDER_PATTERN = re.compile(
        r'^(?:'
        r'(?:TODO|TBD|FIXME)[:.!]?'
        r'|(?://|#|--|/\*)\s*(?:TODO|TBD|FIXME)\b.*'
        r'|\.\.\.|…'
        r')$',
        re.IGNORECASE
    )

    def __init__(
        self,
        target_language: str = DEFAULT_TARGET_LANGUAGE,
        strict: bool = False
    ):
        """
        Initialize parser.

        Args:
            target_language: Language of the second snippet in each section
            strict: Reject repeated topic headings within one document
        """
        self.target_language = target_language
        self.strict = strict

    def parse_file(self, file_path: Path, source_language: Optional[str] = None) -> Document:
        """
        Parse a cheat sheet file.

        Args:
            file_path: Path to Markdown file
            source_language: Override language detection

        Returns:
            Parsed Document
        """
        file_path = Path(file_path)

        if not file_path.exists():
            logger.error(f"Cheat sheet not found: {file_path}")
            raise FileNotFoundError(file_path)

        content = file_path.read_text(encoding='utf-8')
        fallback = self._language_from_filename(file_path)
        return self.parse_text(content, source_language=source_language, default_language=fallback)

    def parse_text(
        self,
        content: str,
        source_language: Optional[str] = None,
        default_language: Optional[str] = None
    ) -> Document:
        """
        Parse cheat sheet Markdown.

        Args:
            content: Markdown text
            source_language: Language of the first snippet in each section
            default_language: Used when the language cannot be detected

        Returns:
            Parsed Document

        Raises:
            ValueError: the source language cannot be determined
        """
        title, intro, sections = self._split_sections(content)

        language = (
            source_language
            or self._detect_language(sections)
            or default_language
        )
        if not language:
            raise ValueError("Cannot determine source language of cheat sheet")

        document = Document(
            title=title or f"{language} to {self.target_language}",
            source_language=language,
            intro=intro,
            target_language=self.target_language,
            strict=self.strict,
        )

        for section in sections:
            self._add_section(document, section)

        logger.info(f"Parsed {len(document)} {language} entries from '{document.title}'")
        return document

    def _split_sections(self, content: str):
        """Split Markdown into title, intro and raw sections"""
        title: Optional[str] = None
        intro_lines: List[str] = []
        sections: List[Dict[str, Any]] = []
        current: Optional[Dict[str, Any]] = None

        fence: Optional[str] = None
        fence_info = ""
        fence_lines: List[str] = []

        for line in content.splitlines():
            if fence:
                if line.strip().startswith(fence) and not line.strip().strip(fence[0]):
                    code = '\n'.join(fence_lines)
                    if current is not None:
                        current["blocks"].append((fence_info, code))
                        current["prose"].append(None)  # block position marker
                    else:
                        intro_lines.extend([f"{fence}{fence_info}", code, fence])
                    fence = None
                else:
                    fence_lines.append(line)
                continue

            fence_match = self.FENCE_PATTERN.match(line)
            if fence_match:
                fence = fence_match.group(1)
                fence_info = fence_match.group(2)
                fence_lines = []
                continue

            section_match = self.SECTION_PATTERN.match(line)
            if section_match:
                current = {"topic": section_match.group(1), "blocks": [], "prose": []}
                sections.append(current)
                continue

            if current is None:
                title_match = self.TITLE_PATTERN.match(line)
                if title_match and title is None:
                    title = title_match.group(1)
                else:
                    intro_lines.append(line)
                continue

            sub_match = self.SUBHEADING_PATTERN.match(line)
            if sub_match and self._is_language_label(sub_match.group(1)):
                continue

            if line.strip() == MISSING_EXAMPLE:
                # Rendered stand-in for an empty snippet; keeps block positions
                current["blocks"].append(("", ""))
                current["prose"].append(None)
                continue

            current["prose"].append(line)

        if fence:
            logger.warning("Unterminated code fence at end of cheat sheet")
            if current is not None:
                current["blocks"].append((fence_info, '\n'.join(fence_lines)))
                current["prose"].append(None)

        return title, '\n'.join(intro_lines).strip(), sections

    def _add_section(self, document: Document, section: Dict[str, Any]) -> None:
        blocks = section["blocks"]
        topic = section["topic"]

        # Prose around the first two blocks is the note; later blocks stay inline
        note_lines: List[str] = []
        block_iter = iter(blocks)
        seen = 0
        for line in section["prose"]:
            if line is None:
                info, code = next(block_iter)
                seen += 1
                if seen > 2:
                    note_lines.extend([f"```{info}", code, "```"])
                continue
            note_lines.append(line)

        note = '\n'.join(note_lines).strip() or None
        source_code = blocks[0][1] if len(blocks) > 0 else ""
        target_code = blocks[1][1] if len(blocks) > 1 else ""

        incomplete = (
            len(blocks) < 2
            or self._is_placeholder(source_code)
            or self._is_placeholder(target_code)
        )
        if incomplete:
            logger.warning(f"Section '{topic}' in {document.source_language} cheat sheet is incomplete")

        document.add_entry(
            topic=topic,
            source_code=source_code,
            target_code=target_code,
            note=note,
            incomplete=incomplete,
        )

    def _detect_language(self, sections: List[Dict[str, Any]]) -> Optional[str]:
        """Language of the first snippet fence that is not the target language"""
        for section in sections:
            if not section["blocks"]:
                continue
            info = section["blocks"][0][0]
            if not info:
                continue
            language = resolve_language(info)
            if language is None:
                logger.warning(f"Unrecognised code fence language: {info}")
                continue
            if language != self.target_language:
                return language
        return None

    def _language_from_filename(self, file_path: Path) -> str:
        """e.g. csharp.md, ruby-to-rust.md -> C#, Ruby"""
        token = re.split(r'[-_\s.]+', file_path.stem)[0]
        return resolve_language(token) or token.title()

    def _is_language_label(self, text: str) -> bool:
        text = text.strip()
        return text == self.target_language or text in LANGUAGE_ALIASES.values()

    def _is_placeholder(self, code: str) -> bool:
        stripped = code.strip()
        return not stripped or bool(self.PLACEHOLDER_PATTERN.match(stripped))
