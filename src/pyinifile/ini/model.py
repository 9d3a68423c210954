# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 23:05:32
# @Author : Kariko Lin

"""
INI structure with typed access.

Values are always stored as strings and only converted on access, under
the rules of the `IniOptions` the config was parsed with.
"""

from collections.abc import Mapping
from math import isinf
from typing import Callable, Iterator, TypeVar

from .consts import (
    DECIMAL_FLOAT_PATTERN,
    GLOBAL_SECTION,
    HEX_FLOAT_PATTERN,
    INT64_MAX,
    INT64_MIN,
    PERMISSIVE_FALSE,
    PERMISSIVE_TRUE,
    SIGNED_INT_PATTERN,
    SPECIAL_FLOAT_PATTERN,
    UINT64_MAX,
    UNSIGNED_INT_PATTERN,
)
from .errors import ConfigValidationError, ConversionError, NotFoundError

T = TypeVar('T')
from .options import DEFAULT_OPTIONS, IniOptions


class NilableStr:
    """A string telling an explicit `""` apart from "never set"."""

    __slots__ = ('_value', '_set')

    def __init__(self, value: str | None = None) -> None:
        self._value = ''
        self._set = False
        if value is not None:
            self.set(value)

    def set(self, value: str) -> None:
        self._value = value
        self._set = True

    @property
    def is_set(self) -> bool:
        return self._set

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return (f'NilableStr({self._value!r})' if self._set
                else 'NilableStr(<unset>)')

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NilableStr):
            return NotImplemented
        return self._set == other._set and self._value == other._value

    __hash__ = None  # type: ignore[assignment]


def _parse_float(raw: str) -> float:
    if HEX_FLOAT_PATTERN.fullmatch(raw):
        try:
            ret = float.fromhex(raw)
        except OverflowError:
            raise ValueError(raw) from None
    elif DECIMAL_FLOAT_PATTERN.fullmatch(raw):
        ret = float(raw)
    elif SPECIAL_FLOAT_PATTERN.fullmatch(raw):
        return float(raw)
    else:
        raise ValueError(raw)
    # a finite literal too large for a double.
    if isinf(ret):
        raise ValueError(raw)
    return ret


def _parse_int(raw: str) -> int:
    if not SIGNED_INT_PATTERN.fullmatch(raw):
        raise ValueError(raw)
    ret = int(raw)
    if not INT64_MIN <= ret <= INT64_MAX:
        raise ValueError(raw)
    return ret


def _parse_uint(raw: str) -> int:
    if not UNSIGNED_INT_PATTERN.fullmatch(raw):
        raise ValueError(raw)
    ret = int(raw)
    if ret > UINT64_MAX:
        raise ValueError(raw)
    return ret


class IniConfig(Mapping[str, 'IniSectionProxy']):
    """A parsed INI file (see `ini.parser` for how to get one).

    Sections map to `IniSectionProxy` views, so

        ```python
        cfg['database'].value('host')
        cfg.value('database', 'host')
        ```

    are the same look-up. Properties declared before any `[section]`
    belong to `GLOBAL_SECTION` (the empty string).

    All `value_as_*` accessors raise `NotFoundError` for a missing
    section/property and `ConversionError` when the string cannot be
    interpreted; the `value_or_zero*` family returns the type's zero
    value instead.
    """

    def __init__(self, options: IniOptions = DEFAULT_OPTIONS) -> None:
        if options is None:
            raise ConfigValidationError('No IniOptions provided')
        self._options = options
        self._sections: dict[str, dict[str, NilableStr]] = {}

    @property
    def options(self) -> IniOptions:
        return self._options

    def _normalise(self, name: str) -> str:
        return name if self._options.case_sensitive else name.lower()

    def _find_section(self, name: str) -> dict[str, NilableStr] | None:
        return self._sections.get(self._normalise(name))

    # Mapping protocol, over sections.
    def __getitem__(self, key: str) -> 'IniSectionProxy':
        return self.section(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.section_exists(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return '<IniConfig { .sections = %d }>' % len(self._sections)

    def section_exists(self, section: str) -> bool:
        return self._find_section(section) is not None

    def section(self, section: str) -> 'IniSectionProxy':
        """A view bound to `section`. The section has to exist."""
        if not self.section_exists(section):
            raise NotFoundError(section)
        return IniSectionProxy(section, self)

    def property_exists(self, section: str, prop: str) -> bool:
        found = self._find_section(section)
        return found is not None and self._normalise(prop) in found

    def value(self, section: str, prop: str) -> str:
        found = self._find_section(section)
        if found is None:
            raise NotFoundError(section)
        stored = found.get(self._normalise(prop))
        if stored is None:
            raise NotFoundError(section, prop)
        return str(stored)

    def _convert(
        self, section: str, prop: str,
        converter: Callable[[str], T], typename: str
    ) -> T:
        raw = self.value(section, prop)
        try:
            return converter(raw)
        except ValueError:
            raise ConversionError(
                f'Unable to interpret [{section}].{prop} ({raw}) '
                f'as {typename}.', section, prop, raw) from None

    def value_as_float(self, section: str, prop: str) -> float:
        return self._convert(section, prop, _parse_float, 'a float64')

    def value_as_int(self, section: str, prop: str) -> int:
        return self._convert(section, prop, _parse_int, 'an int64')

    def value_as_uint(self, section: str, prop: str) -> int:
        return self._convert(section, prop, _parse_uint, 'a uint64')

    def value_as_bool(self, section: str, prop: str) -> bool:
        """Interpret a property as a bool.

        With `use_go_bool_rules` only the permissive table is accepted.
        Otherwise the value has to equal `strict_bool_true` or
        `strict_bool_false`, compared upper-cased if
        `strict_bool_case_sensitive` is off.
        """
        raw = self.value(section, prop)
        opts = self._options

        if opts.use_go_bool_rules:
            if raw in PERMISSIVE_TRUE:
                return True
            if raw in PERMISSIVE_FALSE:
                return False
            raise ConversionError(
                f'Unable to interpret [{section}].{prop} ({raw}) as a bool.',
                section, prop, raw)

        sv, strict_true, strict_false = (
            raw, opts.strict_bool_true, opts.strict_bool_false)
        if not opts.strict_bool_case_sensitive:
            sv = sv.upper()
            strict_true = strict_true.upper()
            strict_false = strict_false.upper()

        if sv == strict_true:
            return True
        if sv == strict_false:
            return False
        raise ConversionError(
            f'Value of [{section}].{prop} ({raw}) could not be matched to '
            f'{opts.strict_bool_true} or {opts.strict_bool_false}',
            section, prop, raw)

    def value_or_zero(self, section: str, prop: str) -> str:
        try:
            return self.value(section, prop)
        except NotFoundError:
            return ''

    def value_or_zero_as_float(self, section: str, prop: str) -> float:
        try:
            return self.value_as_float(section, prop)
        except (NotFoundError, ConversionError):
            return 0.0

    def value_or_zero_as_int(self, section: str, prop: str) -> int:
        try:
            return self.value_as_int(section, prop)
        except (NotFoundError, ConversionError):
            return 0

    def value_or_zero_as_uint(self, section: str, prop: str) -> int:
        try:
            return self.value_as_uint(section, prop)
        except (NotFoundError, ConversionError):
            return 0

    def value_or_zero_as_bool(self, section: str, prop: str) -> bool:
        try:
            return self.value_as_bool(section, prop)
        except (NotFoundError, ConversionError):
            return False

    def add(self, section: str, prop: str, value: str) -> None:
        """Store a property, overwriting it if present.

        The section is created when it does not exist yet.
        """
        stored = self._sections.setdefault(self._normalise(section), {})
        stored[self._normalise(prop)] = NilableStr(value)

    def _properties(self, section: str) -> dict[str, NilableStr]:
        """for IniSectionProxy iteration."""
        return self._find_section(section) or {}


class IniSectionProxy(Mapping[str, str]):
    """`IniConfig` access within a single section.

    Holds the section name and a reference to the config, nothing else,
    so properties added through either side are visible to both.
    """

    def __init__(self, name: str, config: IniConfig) -> None:
        self._name = name
        self._config = config

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._config.value(self._name, key)

    def __setitem__(self, key: str, value: str) -> None:
        self._config.add(self._name, key, value)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.property_exists(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._config._properties(self._name))

    def __len__(self) -> int:
        return len(self._config._properties(self._name))

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self))

    def property_exists(self, prop: str) -> bool:
        return self._config.property_exists(self._name, prop)

    def value(self, prop: str) -> str:
        return self._config.value(self._name, prop)

    def value_as_float(self, prop: str) -> float:
        return self._config.value_as_float(self._name, prop)

    def value_as_int(self, prop: str) -> int:
        return self._config.value_as_int(self._name, prop)

    def value_as_uint(self, prop: str) -> int:
        return self._config.value_as_uint(self._name, prop)

    def value_as_bool(self, prop: str) -> bool:
        return self._config.value_as_bool(self._name, prop)

    def value_or_zero(self, prop: str) -> str:
        return self._config.value_or_zero(self._name, prop)

    def value_or_zero_as_float(self, prop: str) -> float:
        return self._config.value_or_zero_as_float(self._name, prop)

    def value_or_zero_as_int(self, prop: str) -> int:
        return self._config.value_or_zero_as_int(self._name, prop)

    def value_or_zero_as_uint(self, prop: str) -> int:
        return self._config.value_or_zero_as_uint(self._name, prop)

    def value_or_zero_as_bool(self, prop: str) -> bool:
        return self._config.value_or_zero_as_bool(self._name, prop)

    def add(self, prop: str, value: str) -> None:
        self._config.add(self._name, prop, value)


__all__ = ['GLOBAL_SECTION', 'NilableStr', 'IniConfig', 'IniSectionProxy']
