from types import SimpleNamespace

from chatview_cache.config import cache as cache_cfg
from chatview_cache.memory.cache import DisplayInfoCache
from chatview_cache.session import ChatViewSession


def _message(mid="m1"):
    author = SimpleNamespace(id="u1", name="Alice", image_url=None, role=None)
    return SimpleNamespace(id=mid, author=author, quoted_message=None)


def _populated_session():
    session = ChatViewSession(DisplayInfoCache(direct_mode=lambda: False))
    session.open()
    session.cache.author_info(_message())
    session.cache.scroll_offset = 10.0
    session.show_thread("r1")
    return session


def test_dismiss_clears_cache():
    session = _populated_session()

    session.dismiss()

    assert session.visible is False
    assert session.cache.tables.is_empty()
    assert session.cache.scroll_offset == 0
    assert session.cache.thread_shown is False
    assert session.cache.jump_to_reply_id is None


def test_memory_warning_clears_when_enabled(monkeypatch):
    monkeypatch.setattr(cache_cfg, "CLEAR_ON_MEMORY_WARNING", True)
    session = _populated_session()

    assert session.handle_memory_warning() is True
    assert session.cache.tables.is_empty()


def test_memory_warning_ignored_when_disabled(monkeypatch):
    monkeypatch.setattr(cache_cfg, "CLEAR_ON_MEMORY_WARNING", False)
    session = _populated_session()

    assert session.handle_memory_warning() is False
    assert session.cache.tables.author_index == {"m1": "u1"}


def test_thread_helpers():
    session = ChatViewSession.create(direct_mode=lambda: False)
    session.show_thread("r1")
    assert session.cache.thread_shown is True
    assert session.cache.jump_to_reply_id == "r1"

    session.hide_thread()
    assert session.cache.thread_shown is False
    assert session.cache.jump_to_reply_id is None

    session.show_thread()
    assert session.cache.jump_to_reply_id is None
