"""Display-info cache coordinating author tables, quote tables and view flags."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from chatview_cache.config import cache as cache_cfg

from .lookup import CachedLookup, DirectLookup, Lookup
from .model import MessageLike, UserDisplayInfo
from .snapshot import CacheSnapshot
from .tables import DisplayTables

logger = logging.getLogger(__name__)


def _config_direct_mode() -> bool:
    return cache_cfg.DIRECT_MODE


class DisplayInfoCache:
    """
    Memoize author display info and quoted messages for one chat view.

    Lookups consult ``direct_mode`` on every call. When it returns ``True`` the
    live message is read each time and the tables are left untouched;
    otherwise answers are derived once and served from :class:`DisplayTables`
    until :meth:`clear_cache`.

    ``scroll_offset``, ``thread_shown`` and ``jump_to_reply_id`` are view flags,
    not cached data. They live here because :meth:`clear_cache` resets them
    together with the tables. Setting ``thread_shown`` to ``False`` clears
    ``jump_to_reply_id``.

    Access is single-threaded; callers on other threads must serialize calls.
    """

    def __init__(
        self,
        author_index: Mapping[str, str] | None = None,
        display_infos: Mapping[str, UserDisplayInfo] | None = None,
        checked_message_ids: Iterable[str] | None = None,
        quoted_messages: Mapping[str, Any] | None = None,
        scroll_offset: float = 0.0,
        thread_shown: bool = False,
        jump_to_reply_id: str | None = None,
        *,
        direct_mode: Callable[[], bool] | None = None,
    ) -> None:
        self._tables = DisplayTables(
            author_index, display_infos, checked_message_ids, quoted_messages
        )
        self._direct: Lookup = DirectLookup()
        self._cached: Lookup = CachedLookup(self._tables)
        self._direct_mode = direct_mode or _config_direct_mode

        self.scroll_offset: float = scroll_offset
        self._thread_shown = thread_shown
        self.jump_to_reply_id: str | None = jump_to_reply_id
        # Route through the setter so a hidden thread drops any jump target.
        self.thread_shown = thread_shown

    # ------------------------------------------------------------------ #
    # View flags
    # ------------------------------------------------------------------ #

    @property
    def thread_shown(self) -> bool:
        return self._thread_shown

    @thread_shown.setter
    def thread_shown(self, shown: bool) -> None:
        self._thread_shown = shown
        if not shown:
            self.jump_to_reply_id = None

    # ------------------------------------------------------------------ #
    # READ helpers
    # ------------------------------------------------------------------ #

    def _lookup(self) -> Lookup:
        return self._direct if self._direct_mode() else self._cached

    def author_info(self, message: MessageLike) -> UserDisplayInfo:
        return self._lookup().author_info(message)

    def author_id(self, message: MessageLike) -> str:
        return self.author_info(message).id

    def author_name(self, message: MessageLike) -> str:
        return self.author_info(message).name

    def author_image_url(self, message: MessageLike) -> str | None:
        return self.author_info(message).image_url

    def quoted_message(self, message: MessageLike) -> Any | None:
        """Return the message quoted by ``message``, or ``None``."""

        return self._lookup().quoted_message(message)

    def display_info(self, user_id: str) -> UserDisplayInfo | None:
        """Return the stored display info for ``user_id``, if it was ever derived."""

        return self._tables.display_info(user_id)

    # ------------------------------------------------------------------ #
    # SNAPSHOTS
    # ------------------------------------------------------------------ #

    def snapshot(self) -> CacheSnapshot:
        """Capture copies of the tables and view flags."""

        return CacheSnapshot.capture(
            self._tables,
            scroll_offset=self.scroll_offset,
            thread_shown=self.thread_shown,
            jump_to_reply_id=self.jump_to_reply_id,
        )

    @classmethod
    def from_snapshot(
        cls,
        snapshot: CacheSnapshot,
        *,
        direct_mode: Callable[[], bool] | None = None,
    ) -> "DisplayInfoCache":
        return cls(
            author_index=snapshot.author_index,
            display_infos=snapshot.display_infos,
            checked_message_ids=snapshot.checked_message_ids,
            quoted_messages=snapshot.quoted_messages,
            scroll_offset=snapshot.scroll_offset,
            thread_shown=snapshot.thread_shown,
            jump_to_reply_id=snapshot.jump_to_reply_id,
            direct_mode=direct_mode,
        )

    # ------------------------------------------------------------------ #
    # MAINTENANCE
    # ------------------------------------------------------------------ #

    def clear_cache(self) -> None:
        logger.debug("Clearing cached message data")
        self.scroll_offset = 0.0
        self.thread_shown = False
        self._tables.reset()

    @property
    def tables(self) -> DisplayTables:
        """Live view of the underlying tables for inspection; writes here bypass the lookups."""

        return self._tables
