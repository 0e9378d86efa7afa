"""
Expose ``discord.Message`` objects through the cache's message protocol.

Field mapping::

    id              str(message.id)
    author.id       str(author.id)
    author.name     author.display_name (None when blank)
    author.image_url str(author.display_avatar.url)
    author.role     permissions-derived role for guild members, else None
    quoted_message  message.reference.resolved when it is a live Message

Views are thin: every attribute read goes back to the wrapped discord object,
so direct-mode lookups always see the current state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from discord import Member, Message
from discord.abc import User

from chatview_cache.memory.cache.model import UserRole

logger = logging.getLogger(__name__)


def _role_for(user: User) -> UserRole | None:
    if not isinstance(user, Member):
        return None
    perms = user.guild_permissions
    if perms.administrator:
        return UserRole.ADMIN
    if perms.manage_messages:
        return UserRole.MODERATOR
    return UserRole.USER


def _avatar_url(user: User) -> Optional[str]:
    avatar = getattr(user, "display_avatar", None)
    if avatar is None:
        return None
    return str(avatar.url)


@dataclass(frozen=True)
class DiscordAuthorView:
    """Author fields read from a discord user or member."""

    user: User

    @property
    def id(self) -> str:
        return str(self.user.id)

    @property
    def name(self) -> Optional[str]:
        return self.user.display_name or None

    @property
    def image_url(self) -> Optional[str]:
        return _avatar_url(self.user)

    @property
    def role(self) -> UserRole | None:
        return _role_for(self.user)


@dataclass(frozen=True)
class DiscordMessageView:
    """Message fields read from a ``discord.Message``."""

    message: Message

    @property
    def id(self) -> str:
        return str(self.message.id)

    @property
    def author(self) -> DiscordAuthorView:
        return DiscordAuthorView(self.message.author)

    @property
    def quoted_message(self) -> "DiscordMessageView | None":
        reference = self.message.reference
        if reference is None:
            return None
        resolved = reference.resolved
        # Deleted or not-yet-fetched replies resolve to something other than a Message.
        if not isinstance(resolved, Message):
            logger.debug(
                "Reply target %s for message %s is unavailable",
                reference.message_id,
                self.message.id,
            )
            return None
        return DiscordMessageView(resolved)


__all__ = ["DiscordAuthorView", "DiscordMessageView"]
