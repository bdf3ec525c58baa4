"""
Active Language Context

The language used to resolve localized setting fields is scoped to the
current request or task through a ContextVar. When nothing has been set the
configured default language applies.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Generator, Optional

from localized_settings.core.config import settings

_active_language: ContextVar[Optional[str]] = ContextVar(
    "active_language", default=None
)


def get_active_language() -> str:
    """Return the language of the current context, or the configured default."""
    return _active_language.get() or settings.locale__default_language


def set_active_language(language: Optional[str]) -> Token:
    """Set the language for the current context and return a reset token."""
    return _active_language.set(language.lower() if language else None)


def reset_active_language(token: Token) -> None:
    """Restore the language that was active before set_active_language()."""
    _active_language.reset(token)


@contextmanager
def use_language(language: Optional[str]) -> Generator[str, None, None]:
    """
    Temporarily switch the active language.

    Example:
        with use_language("ar"):
            title = setting("website").title
    """
    token = set_active_language(language)
    try:
        yield get_active_language()
    finally:
        reset_active_language(token)


def normalize_language(value: Optional[str]) -> Optional[str]:
    """
    Reduce a language tag or Accept-Language header to a supported code.

    "en-US,en;q=0.9" -> "en". Returns None when no supported language is found.
    """
    if not value:
        return None

    supported = settings.supported_languages_list
    for part in value.split(","):
        tag = part.split(";")[0].strip().lower()
        if not tag:
            continue
        if tag in supported:
            return tag
        primary = tag.replace("_", "-").split("-")[0]
        if primary in supported:
            return primary
    return None


__all__ = [
    "get_active_language",
    "set_active_language",
    "reset_active_language",
    "use_language",
    "normalize_language",
]
