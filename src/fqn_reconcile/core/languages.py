from pathlib import Path

_LANGUAGE_ALIASES = {
    "php": "php",
    "php5": "php",
    "php7": "php",
    "php8": "php",
    "phtml": "php",
}

_EXTENSION_LANGUAGE_MAP = {
    ".php": "php",
    ".php5": "php",
    ".php7": "php",
    ".php8": "php",
    ".phtml": "php",
}

_SUPPORTED_LANGUAGES = set(_LANGUAGE_ALIASES.values())

SOURCE_EXTENSIONS: frozenset[str] = frozenset(_EXTENSION_LANGUAGE_MAP)


def normalize_language(language: str) -> str:
    normalized = language.strip().lower()
    resolved = _LANGUAGE_ALIASES.get(normalized, normalized)
    if resolved not in _SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{language}'. Supported: {sorted(_SUPPORTED_LANGUAGES)}")
    return resolved


def detect_language_from_path(file_path: Path) -> str:
    suffix = file_path.suffix.lower()
    if suffix in _EXTENSION_LANGUAGE_MAP:
        return _EXTENSION_LANGUAGE_MAP[suffix]
    raise ValueError(f"Unsupported file extension: {suffix}")


def resolve_language(language: str | None, file_path: Path | None) -> str:
    if language:
        return normalize_language(language)
    if file_path:
        return detect_language_from_path(file_path)
    raise ValueError("Language must be provided when no file path is available.")


def is_source_file(path: Path) -> bool:
    return path.suffix.lower() in SOURCE_EXTENSIONS
