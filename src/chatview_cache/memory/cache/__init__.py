"""
Display-info cache package.

Modules
=======

``manager``
    Defines :class:`~chatview_cache.memory.cache.manager.DisplayInfoCache`, the
    per-view cache that answers author and quoted-message lookups.
``tables``
    Provides :class:`~chatview_cache.memory.cache.tables.DisplayTables`, the
    four lookup tables and their paired write helpers.
``lookup``
    Direct and cached lookup strategies selected per call by the manager.
``model``
    :class:`UserDisplayInfo`, :class:`UserRole` and the message protocols.
``snapshot``
    In-memory capture/restore of cache state.
``extensions``
    Message-side helpers that delegate to an injected cache.
"""

from .manager import DisplayInfoCache
from .model import UserDisplayInfo, UserRole
from .snapshot import CacheSnapshot

__all__ = ["CacheSnapshot", "DisplayInfoCache", "UserDisplayInfo", "UserRole"]
