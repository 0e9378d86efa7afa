"""Message-side helpers that answer display questions through an injected cache."""

from __future__ import annotations

from .manager import DisplayInfoCache
from .model import MessageLike, UserDisplayInfo


def author_display_info(message: MessageLike, cache: DisplayInfoCache) -> UserDisplayInfo:
    """Return the display info of ``message``'s author via ``cache``."""

    return cache.author_info(message)


def user_display_info(user_id: str, cache: DisplayInfoCache) -> UserDisplayInfo | None:
    """Return the display info ``cache`` holds for ``user_id``."""

    return cache.display_info(user_id)


__all__ = ["author_display_info", "user_display_info"]
