"""
Lookup strategies used by :class:`DisplayInfoCache`.

Both strategies implement the same two-method surface:

``author_info(message)``
    Return the :class:`UserDisplayInfo` for the message author.
``quoted_message(message)``
    Return the quoted message, or ``None``.

:class:`DirectLookup` reads the live message on every call and never touches
the tables. :class:`CachedLookup` populates :class:`DisplayTables` on miss and
answers from them afterwards, including a negative cache for messages that have
no quote.
"""

from __future__ import annotations

from typing import Any, Protocol

from .model import MessageLike, UserDisplayInfo
from .tables import DisplayTables


class Lookup(Protocol):
    def author_info(self, message: MessageLike) -> UserDisplayInfo: ...

    def quoted_message(self, message: MessageLike) -> Any | None: ...


class DirectLookup:
    """Derive everything from the live message; no memoization."""

    def author_info(self, message: MessageLike) -> UserDisplayInfo:
        return UserDisplayInfo.from_author(message.author)

    def quoted_message(self, message: MessageLike) -> Any | None:
        return message.quoted_message


class CachedLookup:
    """Memoize author and quote answers in ``tables``."""

    def __init__(self, tables: DisplayTables) -> None:
        self._tables = tables

    def author_info(self, message: MessageLike) -> UserDisplayInfo:
        info = self._tables.author_for(message.id)
        if info is not None:
            return info

        info = UserDisplayInfo.from_author(message.author)
        self._tables.store_author(message.id, info)
        return info

    def quoted_message(self, message: MessageLike) -> Any | None:
        msg_id = message.id
        if self._tables.has_no_quote(msg_id):
            return None

        quoted = self._tables.quote_for(msg_id)
        if quoted is not None:
            return quoted

        quoted = message.quoted_message
        self._tables.record_quote(msg_id, quoted)
        return quoted


__all__ = ["CachedLookup", "DirectLookup", "Lookup"]
