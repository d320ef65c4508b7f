"""
Cheatsheets - Configuration Module
"""
from pathlib import Path
from pydantic_settings import BaseSettings
from typing import List

_BASE_DIR = Path(__file__).parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "cheatsheets"

    # Paths
    BASE_DIR: Path = _BASE_DIR
    CONTENT_DIR: Path = _BASE_DIR / "content"  # Markdown cheat sheets, one per source language
    OUTPUT_DIR: Path = _BASE_DIR / "site"

    # Language every cheat sheet is compared against
    TARGET_LANGUAGE: str = "Rust"

    # Rendering
    # Block order in cross-reference pages; JSON list when set via env
    LANGUAGE_ORDER: List[str] = ["C#", "Ruby", "JavaScript"]
    INCLUDE_NOTES: bool = True

    # Reject repeated topic headings instead of warning
    STRICT_TOPICS: bool = False

    class Config:
        env_prefix = "CHEATSHEET_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
