"""Supported languages and extension-based language detection."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class LanguageConfig:
    name: str
    extensions: tuple[str, ...]


SUPPORTED_LANGUAGES: dict[str, LanguageConfig] = {
    "typescript": LanguageConfig("TypeScript", (".ts", ".tsx")),
    "javascript": LanguageConfig("JavaScript", (".js", ".jsx", ".mjs", ".cjs")),
    "python": LanguageConfig("Python", (".py",)),
    "java": LanguageConfig("Java", (".java",)),
    "go": LanguageConfig("Go", (".go",)),
}

UNKNOWN_LANGUAGE = "unknown"


def detect_language(path: str | PurePath) -> str:
    """Return the language key for a file path, or ``"unknown"``."""
    extension = PurePath(path).suffix.lower()
    for key, config in SUPPORTED_LANGUAGES.items():
        if extension in config.extensions:
            return key
    return UNKNOWN_LANGUAGE
