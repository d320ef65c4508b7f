"""
Cheat Sheet Rendering Module

Provides:
- Markdown rendering of documents and cross-language comparisons
- Site page generation
- Writing rendered pages to disk
"""
from .renderer import CheatSheetRenderer, RenderConfig, slugify
from .publisher import SitePublisher, publish_from_settings

__all__ = [
    "CheatSheetRenderer",
    "RenderConfig",
    "slugify",
    "SitePublisher",
    "publish_from_settings",
]
