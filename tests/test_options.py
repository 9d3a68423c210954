import io

import pytest

from pyinifile import DEFAULT_OPTIONS, ConfigValidationError, IniOptions, IniParser, from_stream


def test_defaults() -> None:
    opts = IniOptions()
    assert opts == DEFAULT_OPTIONS
    assert opts.case_sensitive
    assert opts.comment_start == ";"
    assert opts.trim_properties
    assert opts.tolerate_blank_lines
    assert opts.allow_global_section
    assert opts.discard_properties_with_no_value
    assert opts.use_go_bool_rules
    assert opts.strict_bool_true == "" and opts.strict_bool_false == ""
    assert opts.strict_bool_case_sensitive
    assert not opts.ignore_unparseable
    assert not opts.allow_inline_comments
    assert opts.comment_escape_prefix == "\\"
    assert not opts.strip_enclosing_quotes
    assert opts.enclosing_quote_symbols == ("'", '"')
    assert not opts.use_colon_assignment


def test_evolve_leaves_original_untouched() -> None:
    opts = DEFAULT_OPTIONS.evolve(comment_start="#", case_sensitive=False)
    assert opts.comment_start == "#"
    assert not opts.case_sensitive
    assert DEFAULT_OPTIONS.comment_start == ";"
    assert DEFAULT_OPTIONS.case_sensitive


def test_options_are_frozen() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_OPTIONS.comment_start = "#"  # type: ignore[misc]


@pytest.mark.parametrize("marker", ["", "   "])
def test_blank_comment_start_rejected(marker) -> None:
    with pytest.raises(ConfigValidationError):
        IniOptions(comment_start=marker)
    with pytest.raises(ConfigValidationError):
        DEFAULT_OPTIONS.evolve(comment_start=marker)


def test_quote_symbols_must_be_single_characters() -> None:
    with pytest.raises(ConfigValidationError):
        IniOptions(enclosing_quote_symbols=("''",))


def test_quote_symbols_list_becomes_tuple() -> None:
    opts = IniOptions(enclosing_quote_symbols=["`"])
    assert opts.enclosing_quote_symbols == ("`",)
    hash(opts)


def test_validation_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        IniOptions(comment_start="")


def test_missing_options_rejected() -> None:
    with pytest.raises(ConfigValidationError):
        from_stream(io.StringIO("[a]\nb=c\n"), None)
    with pytest.raises(ConfigValidationError):
        IniParser.readstream(["[a]"], None)
    with pytest.raises(ConfigValidationError):
        IniParser("whatever.ini", None)


def test_missing_handle_rejected() -> None:
    with pytest.raises(ConfigValidationError):
        from_stream(None)
