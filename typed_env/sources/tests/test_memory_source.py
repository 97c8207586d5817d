from typed_env.sources.memory_source import MemorySource


def test_get_returns_value():
    source = MemorySource({"MY_KEY": "my_value"})
    assert source.get("MY_KEY") == "my_value"


def test_get_returns_none_for_missing():
    assert MemorySource().get("NONEXISTENT_KEY_12345") is None


def test_get_or_default():
    source = MemorySource({"MY_KEY": "my_value"})
    assert source.get_or_default("MY_KEY", "fallback") == "my_value"
    assert source.get_or_default("OTHER", "fallback") == "fallback"


def test_contains():
    source = MemorySource({"MY_KEY": ""})
    assert "MY_KEY" in source
    assert "OTHER" not in source
    assert 42 not in source


def test_copies_input_mapping():
    values = {"MY_KEY": "before"}
    source = MemorySource(values)
    values["MY_KEY"] = "after"
    assert source.get("MY_KEY") == "before"
