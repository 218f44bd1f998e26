"""
Supported languages and utilities.

The queue worker and the backfill job translate into the portal's fixed
target languages; the on-demand endpoint also serves the languages offered
by the front-end language selector.
"""

# Human-readable names used in prompts
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    # Fixed backfill targets
    "es": "Spanish",
    "ht": "Haitian Creole (Kreyòl)",
    "he": "Hebrew",
    # Language selector
    "fr": "French",
    "ko": "Korean",
    "zh": "Chinese (Simplified)",
    "ar": "Arabic",
    "ru": "Russian",
    "pt": "Portuguese",
    "de": "German",
    "it": "Italian",
}

RTL_LANGUAGES = {"he", "ar"}


def normalize_language_code(code: str) -> str:
    return code.strip().lower()


def get_language_name(code: str) -> str:
    """Get human-readable language name, the code itself when unknown."""
    return LANGUAGE_NAMES.get(normalize_language_code(code), code)


def is_supported(code: str) -> bool:
    return normalize_language_code(code) in LANGUAGE_NAMES


def is_rtl(code: str) -> bool:
    return normalize_language_code(code) in RTL_LANGUAGES
