import pytest

from pyinifile import GLOBAL_SECTION, IniConfig, IniOptions, IniSectionProxy, NotFoundError
from pyinifile.ini import NilableStr


def test_nilable_str() -> None:
    unset = NilableStr()
    assert not unset.is_set
    assert str(unset) == ""

    empty = NilableStr()
    empty.set("")
    assert empty.is_set
    assert str(empty) == ""
    assert empty != unset
    assert NilableStr("x") == NilableStr("x")


def test_add_creates_and_overwrites() -> None:
    cfg = IniConfig()
    assert not cfg.section_exists("new")
    cfg.add("new", "a", "1")
    assert cfg.section_exists("new")
    assert cfg.value("new", "a") == "1"
    cfg.add("new", "a", "2")
    assert cfg.value("new", "a") == "2"
    cfg.add("new", "empty", "")
    assert cfg.property_exists("new", "empty")


def test_add_after_parse(parse) -> None:
    cfg = parse("[a]\nb=c\n", case_sensitive=False)
    cfg.add("A", "NEW", "x")
    assert cfg.value("a", "new") == "x"
    cfg.add(GLOBAL_SECTION, "top", "y")
    assert cfg.value(GLOBAL_SECTION, "top") == "y"


def test_global_section_is_always_a_legal_key(parse) -> None:
    cfg = parse("[a]\nb=c\n")
    assert not cfg.section_exists(GLOBAL_SECTION)
    assert not cfg.property_exists(GLOBAL_SECTION, "b")
    with pytest.raises(NotFoundError):
        cfg.value(GLOBAL_SECTION, "b")


def test_not_found_messages(parse) -> None:
    cfg = parse("[a]\nb=c\n")
    with pytest.raises(NotFoundError) as excinfo:
        cfg.value("x", "b")
    assert str(excinfo.value) == "No such section [x]"
    with pytest.raises(KeyError) as excinfo:
        cfg.value("a", "x")
    assert str(excinfo.value) == "No such property [a].x"


def test_section_view(parse, types_ini) -> None:
    cfg = parse(types_ini)
    view = cfg.section("uint")
    assert isinstance(view, IniSectionProxy)
    assert view.name == "uint"
    assert str(view) == "[uint]"
    assert view.value("positive") == "4"
    assert view.value_as_uint("positive") == 4
    assert view.value_as_int("negative") == -1
    assert view.value_as_float("float") == 4.5
    assert view.value_or_zero_as_uint("negative") == 0
    assert view.value_or_zero("missing") == ""
    assert view.value_or_zero_as_int("string") == 0
    assert view.value_or_zero_as_float("string") == 0.0
    assert view.property_exists("string")
    assert "string" in view
    assert sorted(view) == ["float", "negative", "positive", "string"]
    assert len(view) == 4

    booleans = cfg["Boolean"]
    assert booleans.value_as_bool("value2") is True
    assert booleans.value_or_zero_as_bool("missing") is False


def test_missing_section_view(parse, types_ini) -> None:
    cfg = parse(types_ini)
    with pytest.raises(NotFoundError):
        cfg.section("xxx")
    with pytest.raises(KeyError):
        cfg["xxx"]
    assert "xxx" not in cfg
    assert cfg.get("xxx") is None


def test_section_view_shares_store(parse) -> None:
    cfg = parse("[a]\nb=c\n")
    view = cfg["a"]
    view.add("d", "e")
    view["f"] = "g"
    assert cfg.value("a", "d") == "e"
    assert cfg.value("a", "f") == "g"
    cfg.add("a", "h", "i")
    assert view["h"] == "i"
    with pytest.raises(NotFoundError):
        view["missing"]


def test_mapping_over_sections(parse, types_ini) -> None:
    cfg = parse(types_ini)
    assert list(cfg) == ["float", "int", "uint", "Boolean"]
    assert len(cfg) == 4
    assert "int" in cfg
    assert cfg.options == IniOptions()
