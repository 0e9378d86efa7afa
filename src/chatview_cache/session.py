"""Lifecycle of a single on-screen chat view and the cache it owns."""

from __future__ import annotations

import logging
from typing import Callable

from chatview_cache.config import cache as cache_cfg
from chatview_cache.memory.cache import DisplayInfoCache

logger = logging.getLogger(__name__)


class ChatViewSession:
    """
    Composition root for one chat view.

    The session builds (or receives) the :class:`DisplayInfoCache` and hands
    the same instance to every consumer through :attr:`cache`. Dismissing the
    view or a memory warning wipes the cache.
    """

    def __init__(self, cache: DisplayInfoCache) -> None:
        self.cache = cache
        self.visible = False

    @classmethod
    def create(cls, *, direct_mode: Callable[[], bool] | None = None) -> "ChatViewSession":
        return cls(DisplayInfoCache(direct_mode=direct_mode))

    def open(self) -> None:
        self.visible = True
        logger.info("Chat view opened")

    def dismiss(self) -> None:
        """Hide the view and drop everything the cache accumulated."""

        self.visible = False
        self.cache.clear_cache()
        logger.info("Chat view dismissed; display cache cleared")

    def handle_memory_warning(self) -> bool:
        """Clear the cache under memory pressure. Returns ``True`` if cleared."""

        if not cache_cfg.CLEAR_ON_MEMORY_WARNING:
            logger.info("Memory warning received; CLEAR_ON_MEMORY_WARNING is false, keeping cache")
            return False
        self.cache.clear_cache()
        logger.info("Memory warning received; display cache cleared")
        return True

    def show_thread(self, jump_to_reply_id: str | None = None) -> None:
        self.cache.thread_shown = True
        if jump_to_reply_id is not None:
            self.cache.jump_to_reply_id = jump_to_reply_id

    def hide_thread(self) -> None:
        self.cache.thread_shown = False


__all__ = ["ChatViewSession"]
