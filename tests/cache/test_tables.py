from chatview_cache.memory.cache.model import UserDisplayInfo
from chatview_cache.memory.cache.tables import DisplayTables


def test_record_quote_moves_between_tables():
    tables = DisplayTables()

    tables.record_quote("m1", None)
    assert tables.has_no_quote("m1")
    assert tables.quote_for("m1") is None

    tables.record_quote("m1", "quoted")
    assert not tables.has_no_quote("m1")
    assert tables.quote_for("m1") == "quoted"


def test_author_for_requires_both_tables():
    tables = DisplayTables(author_index={"m1": "u1"})
    assert tables.author_for("m1") is None

    info = UserDisplayInfo("u1", "Alice")
    tables.store_author("m1", info)
    assert tables.author_for("m1") is info
    assert tables.display_info("u1") is info


def test_initial_values_are_copied():
    source = {"m1": "u1"}
    tables = DisplayTables(author_index=source)
    tables.reset()

    assert source == {"m1": "u1"}
    assert tables.is_empty()
