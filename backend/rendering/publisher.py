"""
Site Publisher

Writes rendered cheat-sheet pages to disk. The renderer stays pure;
this is the only place files are written.
"""
from typing import List, Optional, Dict
from pathlib import Path
from loguru import logger

from snippets import SnippetRegistry
from .renderer import CheatSheetRenderer, RenderConfig


class SitePublisher:
    """
    Publishes a registry as a directory of Markdown pages.

    Usage:
        publisher = SitePublisher()
        written = publisher.publish(registry, Path("site"))
    """

    def __init__(self, renderer: Optional[CheatSheetRenderer] = None):
        self.renderer = renderer or CheatSheetRenderer()

    def publish(self, registry: SnippetRegistry, output_dir: Path) -> List[Path]:
        """
        Render every page of the registry and write it under output_dir.

        Returns:
            Paths of written files, index page last
        """
        pages = self.renderer.render_site(registry.build_index())
        return self.write_pages(pages, output_dir)

    def write_pages(self, pages: Dict[str, str], output_dir: Path) -> List[Path]:
        """Write page texts as UTF-8 files, creating folders as needed"""
        output_dir = Path(output_dir)
        written = []

        for relative_path, content in pages.items():
            file_path = output_dir / relative_path
            try:
                file_path.parent.mkdir(parents=True, exist_ok=True)
                file_path.write_text(content, encoding='utf-8')
            except OSError as e:
                logger.error(f"Failed to write page {file_path}: {e}")
                raise
            written.append(file_path)

        logger.info(f"Published {len(written)} pages to {output_dir}")
        return written


def publish_from_settings(app_settings=None) -> List[Path]:
    """Load CONTENT_DIR, render and write to OUTPUT_DIR using application settings"""
    if app_settings is None:
        from config import settings as app_settings

    registry = SnippetRegistry.from_directory(
        app_settings.CONTENT_DIR,
        target_language=app_settings.TARGET_LANGUAGE,
        strict=app_settings.STRICT_TOPICS,
    )
    renderer = CheatSheetRenderer(RenderConfig.from_settings(app_settings))
    return SitePublisher(renderer).publish(registry, app_settings.OUTPUT_DIR)
