import pytest

from hshell.aliases import AliasTable


def test_set_and_lookup():
    table = AliasTable()
    table.set("ll", "ls -l")
    assert table.lookup("ll") == "ls -l"


def test_lookup_missing():
    assert AliasTable().lookup("nope") is None


def test_overwrite_keeps_order_and_size():
    table = AliasTable()
    table.set("a", "1")
    table.set("b", "2")
    table.set("a", "3")
    assert list(table) == ["a", "b"]
    assert len(table) == len(["a", "b"])
    assert table.lookup("a") == "3"


def test_resolve_follows_chain():
    table = AliasTable()
    table.set("a", "b")
    table.set("b", "c")
    assert table.resolve("a") == "c"


def test_resolve_plain_value():
    table = AliasTable()
    table.set("l", "ls")
    assert table.resolve("l") == "ls"


def test_resolve_not_alias():
    assert AliasTable().resolve("ls") is None


def test_resolve_cycle_terminates():
    table = AliasTable()
    table.set("x", "y")
    table.set("y", "x")
    assert table.resolve("x") in {"x", "y"}


def test_format_one():
    table = AliasTable()
    table.set("ll", "ls -l")
    assert table.format_one("ll") == "ll='ls -l'\n"


def test_format_one_missing():
    with pytest.raises(KeyError):
        AliasTable().format_one("ghost")


def test_format_all_in_order():
    table = AliasTable()
    table.set("b", "2")
    table.set("a", "1")
    assert table.format_all() == table.format_one("b") + table.format_one("a")


def test_format_all_empty():
    assert AliasTable().format_all() == ""