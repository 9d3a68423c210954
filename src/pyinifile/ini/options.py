# -*- encoding: utf-8 -*-
# @File   : options.py
# @Time   : 2024/10/12 22:31:45
# @Author : Kariko Lin

"""Parsing and access behaviour of an `IniConfig`.

INI files follow no agreed standard, so every variation this package
understands is switched by one field of `IniOptions`.
Start from the defaults and override what your files need:

    ```python
    opts = IniOptions().evolve(comment_start='#', case_sensitive=False)
    ```
"""

from dataclasses import dataclass, replace
from typing import Any

from .errors import ConfigValidationError


@dataclass(frozen=True, kw_only=True)
class IniOptions:
    # section/property look-ups fold case when False.
    case_sensitive: bool = True
    # a line starting with this is a comment.
    comment_start: str = ';'
    # strip whitespace around property names and values.
    trim_properties: bool = True
    tolerate_blank_lines: bool = True
    # properties before the first `[section]`.
    allow_global_section: bool = True
    # `key=` is dropped when True, stored as "" otherwise.
    discard_properties_with_no_value: bool = True
    # `1/t/T/TRUE/true/True` and `0/f/F/FALSE/false/False`.
    use_go_bool_rules: bool = True
    # only used with use_go_bool_rules=False.
    strict_bool_true: str = ''
    strict_bool_false: str = ''
    strict_bool_case_sensitive: bool = True
    ignore_unparseable: bool = False
    allow_inline_comments: bool = False
    # escapes a literal comment_start when inline comments are allowed.
    comment_escape_prefix: str = '\\'
    strip_enclosing_quotes: bool = False
    enclosing_quote_symbols: tuple[str, ...] = ("'", '"')
    # `key: value` instead of `key = value`, never both.
    use_colon_assignment: bool = False

    def __post_init__(self) -> None:
        # accept any iterable of symbols, but keep the instance hashable.
        if not isinstance(self.enclosing_quote_symbols, tuple):
            object.__setattr__(
                self, 'enclosing_quote_symbols',
                tuple(self.enclosing_quote_symbols))
        self.validate()

    def validate(self) -> None:
        """Raise `ConfigValidationError` if these options cannot be used."""
        if not isinstance(self.comment_start, str) \
                or not self.comment_start.strip():
            raise ConfigValidationError(
                'comment_start in IniOptions cannot be empty')
        for i in self.enclosing_quote_symbols:
            if not isinstance(i, str) or len(i) != 1:
                raise ConfigValidationError(
                    f'enclosing quote symbol {i!r} is not a single character')

    def evolve(self, **changes: Any) -> 'IniOptions':
        """Copy with some fields overridden (validated again)."""
        return replace(self, **changes)


DEFAULT_OPTIONS = IniOptions()
