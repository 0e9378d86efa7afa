"""
In-memory tables backing the display-info cache.

``DisplayTables`` owns the four lookup tables:

``author_index``
    message id -> author user id.
``display_infos``
    user id -> :class:`UserDisplayInfo`.
``checked_message_ids``
    message ids known to have no quoted message.
``quoted_messages``
    message id -> quoted message.

Author entries are written as a pair through :meth:`DisplayTables.store_author`
and quote answers through :meth:`record_quote`, so a message id lands in
exactly one of the two quote tables. Nothing is evicted individually; the only
removal path is :meth:`reset`.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .model import UserDisplayInfo


class DisplayTables:
    """Accumulate-then-clear store for author and quote lookups."""

    def __init__(
        self,
        author_index: Mapping[str, str] | None = None,
        display_infos: Mapping[str, UserDisplayInfo] | None = None,
        checked_message_ids: Iterable[str] | None = None,
        quoted_messages: Mapping[str, Any] | None = None,
    ) -> None:
        self.author_index: dict[str, str] = dict(author_index or {})
        self.display_infos: dict[str, UserDisplayInfo] = dict(display_infos or {})
        self.checked_message_ids: set[str] = set(checked_message_ids or ())
        self.quoted_messages: dict[str, Any] = dict(quoted_messages or {})

    # ------------------------------------------------------------------ #
    # Author tables
    # ------------------------------------------------------------------ #

    def author_for(self, message_id: str) -> UserDisplayInfo | None:
        """Return the stored record for ``message_id``'s author, if any."""

        user_id = self.author_index.get(message_id)
        if user_id is None:
            return None
        return self.display_infos.get(user_id)

    def store_author(self, message_id: str, info: UserDisplayInfo) -> None:
        """Record ``info`` as the author of ``message_id``."""

        self.author_index[message_id] = info.id
        self.display_infos[info.id] = info

    def display_info(self, user_id: str) -> UserDisplayInfo | None:
        return self.display_infos.get(user_id)

    # ------------------------------------------------------------------ #
    # Quote tables
    # ------------------------------------------------------------------ #

    def has_no_quote(self, message_id: str) -> bool:
        return message_id in self.checked_message_ids

    def quote_for(self, message_id: str) -> Any | None:
        return self.quoted_messages.get(message_id)

    def record_quote(self, message_id: str, quoted: Any | None) -> None:
        """Store the quote answer for ``message_id`` in exactly one table."""

        if quoted is None:
            self.quoted_messages.pop(message_id, None)
            self.checked_message_ids.add(message_id)
        else:
            self.checked_message_ids.discard(message_id)
            self.quoted_messages[message_id] = quoted

    # ------------------------------------------------------------------ #
    # Maintenance
    # ------------------------------------------------------------------ #

    def reset(self) -> None:
        """Drop every entry from all four tables."""

        self.author_index = {}
        self.display_infos = {}
        self.checked_message_ids = set()
        self.quoted_messages = {}

    def is_empty(self) -> bool:
        return not (
            self.author_index
            or self.display_infos
            or self.checked_message_ids
            or self.quoted_messages
        )
