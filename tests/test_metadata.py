from meta_emit.metadata import SOURCE_PATH, Metadata


def test_get_returns_first_value():
    md = Metadata()
    md.add("author", "a")
    md.add("author", "b")
    assert md.get("author") == "a"
    assert md.get_values("author") == ["a", "b"]
    assert md.get("missing") is None
    assert md.get_values("missing") == []


def test_set_replaces_values():
    md = Metadata({"k": ["1", "2"]})
    md.set("k", "3")
    assert md.get_values("k") == ["3"]


def test_to_dict_collapses_single_values():
    md = Metadata({SOURCE_PATH: "a/b.txt", "tags": ["x", "y"]})
    assert md.to_dict() == {SOURCE_PATH: "a/b.txt", "tags": ["x", "y"]}
    assert Metadata.from_dict(md.to_dict()) == md


def test_contains_and_len():
    md = Metadata({"a": "1", "b": "2"})
    assert "a" in md
    assert "c" not in md
    assert len(md) == 2
    assert md.names() == ["a", "b"]


def test_get_values_is_a_copy():
    md = Metadata({"a": "1"})
    md.get_values("a").append("2")
    assert md.get_values("a") == ["1"]


def test_add_and_set_store_strings():
    md = Metadata()
    md.add("pages", 5)
    md.set("size", 1024)
    md.set("ids", (1, 2))
    assert md.get_values("pages") == ["5"]
    assert md.get("size") == "1024"
    assert md.get_values("ids") == ["1", "2"]
