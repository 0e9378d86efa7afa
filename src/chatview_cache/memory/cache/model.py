from __future__ import annotations

"""Value types and message protocols for the display-info cache.

The cache never imports a concrete message class. Anything that looks like the
shape below can be passed in::

    message.id              -> str
    message.author.id       -> str
    message.author.name     -> str | None
    message.author.image_url -> str | None
    message.author.role     -> UserRole | None
    message.quoted_message  -> message-shaped value | None

:class:`UserDisplayInfo` is the only record the cache builds itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol


class UserRole(str, Enum):
    """Role of a chat participant as exposed to the view layer."""

    USER = "user"
    ADMIN = "admin"
    MODERATOR = "moderator"
    GUEST = "guest"
    ANONYMOUS = "anonymous"


class AuthorLike(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def name(self) -> Optional[str]: ...

    @property
    def image_url(self) -> Optional[str]: ...

    @property
    def role(self) -> Optional[UserRole]: ...


class MessageLike(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def author(self) -> AuthorLike: ...

    @property
    def quoted_message(self) -> Any: ...


@dataclass(frozen=True, slots=True)
class UserDisplayInfo:
    """Display information for a single user."""

    id: str
    name: str
    image_url: Optional[str] = None
    role: Optional[UserRole] = None

    @classmethod
    def from_author(cls, author: AuthorLike) -> "UserDisplayInfo":
        """Build a record from ``author``, falling back to the id for the name."""

        return cls(
            id=author.id,
            name=author.name or author.id,
            image_url=author.image_url,
            role=author.role,
        )


__all__ = ["AuthorLike", "MessageLike", "UserDisplayInfo", "UserRole"]
