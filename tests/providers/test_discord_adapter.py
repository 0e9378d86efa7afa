from types import SimpleNamespace

from chatview_cache.memory.cache import DisplayInfoCache, UserRole
from chatview_cache.providers import discord_adapter
from chatview_cache.providers.discord_adapter import DiscordMessageView


class FakeMessage(SimpleNamespace):
    pass


class FakeMember(SimpleNamespace):
    pass


def _member(uid=1, name="Alice", admin=False, moderator=False):
    return FakeMember(
        id=uid,
        display_name=name,
        display_avatar=SimpleNamespace(url=f"https://cdn/avatars/{uid}.png"),
        guild_permissions=SimpleNamespace(administrator=admin, manage_messages=moderator),
    )


def _patch_types(monkeypatch):
    monkeypatch.setattr(discord_adapter, "Message", FakeMessage)
    monkeypatch.setattr(discord_adapter, "Member", FakeMember)


def test_author_fields_map_from_member(monkeypatch):
    _patch_types(monkeypatch)
    msg = FakeMessage(id=10, author=_member(uid=7, admin=True), reference=None)

    view = DiscordMessageView(msg)

    assert view.id == "10"
    assert view.author.id == "7"
    assert view.author.name == "Alice"
    assert view.author.image_url == "https://cdn/avatars/7.png"
    assert view.author.role is UserRole.ADMIN


def test_role_for_plain_user_and_moderator(monkeypatch):
    _patch_types(monkeypatch)
    user = SimpleNamespace(id=3, display_name="", display_avatar=None)
    plain = DiscordMessageView(FakeMessage(id=1, author=user, reference=None))
    mod = DiscordMessageView(FakeMessage(id=2, author=_member(moderator=True), reference=None))
    member = DiscordMessageView(FakeMessage(id=3, author=_member(), reference=None))

    assert plain.author.role is None
    assert plain.author.name is None
    assert plain.author.image_url is None
    assert mod.author.role is UserRole.MODERATOR
    assert member.author.role is UserRole.USER


def test_quoted_message_resolution(monkeypatch):
    _patch_types(monkeypatch)
    target = FakeMessage(id=5, author=_member(uid=2, name="Bob"), reference=None)
    reply = FakeMessage(
        id=6,
        author=_member(),
        reference=SimpleNamespace(message_id=5, resolved=target),
    )
    deleted = FakeMessage(
        id=7,
        author=_member(),
        reference=SimpleNamespace(message_id=4, resolved=SimpleNamespace(id=4)),
    )

    quoted = DiscordMessageView(reply).quoted_message
    assert quoted.id == "5"
    assert quoted.author.name == "Bob"
    assert DiscordMessageView(deleted).quoted_message is None
    assert DiscordMessageView(target).quoted_message is None


def test_cache_over_discord_views(monkeypatch):
    _patch_types(monkeypatch)
    author = _member(uid=1, name="Alice")
    view = DiscordMessageView(FakeMessage(id=10, author=author, reference=None))
    cache = DisplayInfoCache(direct_mode=lambda: False)

    assert cache.author_name(view) == "Alice"
    author.display_name = "Renamed"
    assert cache.author_name(view) == "Alice"
    assert cache.display_info("1").image_url == "https://cdn/avatars/1.png"
    assert cache.quoted_message(view) is None
    assert "10" in cache.tables.checked_message_ids
