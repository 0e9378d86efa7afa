"""
Point-in-time copies of a display-info cache.

:class:`CacheSnapshot` holds independent copies of the four tables and the view
flags so a chat view can be torn down and rebuilt with
:meth:`DisplayInfoCache.from_snapshot` without sharing mutable state. Snapshots
stay in memory; nothing here writes to disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .model import UserDisplayInfo
from .tables import DisplayTables


@dataclass(frozen=True)
class CacheSnapshot:
    author_index: dict[str, str] = field(default_factory=dict)
    display_infos: dict[str, UserDisplayInfo] = field(default_factory=dict)
    checked_message_ids: frozenset[str] = frozenset()
    quoted_messages: dict[str, Any] = field(default_factory=dict)
    scroll_offset: float = 0.0
    thread_shown: bool = False
    jump_to_reply_id: str | None = None

    @classmethod
    def capture(
        cls,
        tables: DisplayTables,
        *,
        scroll_offset: float,
        thread_shown: bool,
        jump_to_reply_id: str | None,
    ) -> "CacheSnapshot":
        # Shallow copies: display records are immutable and quoted messages are
        # owned by the message provider.
        return cls(
            author_index=dict(tables.author_index),
            display_infos=dict(tables.display_infos),
            checked_message_ids=frozenset(tables.checked_message_ids),
            quoted_messages=dict(tables.quoted_messages),
            scroll_offset=scroll_offset,
            thread_shown=thread_shown,
            jump_to_reply_id=jump_to_reply_id,
        )
