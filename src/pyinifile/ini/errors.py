# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 22:10:07
# @Author : Kariko Lin

"""Exceptions raised while loading or querying INI configuration."""


class IniError(Exception):
    """Base of everything this package raises."""
    pass


class ResourceError(IniError, OSError):
    """The backing file could not be opened, read or decoded."""
    pass


class ConfigValidationError(IniError, ValueError):
    """`IniOptions` (or a required argument) is not usable."""
    pass


class IniSyntaxError(IniError):
    """A line could not be classified. Aborts the whole parse."""

    def __init__(self, message: str, lineno: int) -> None:
        super().__init__(message)
        self.lineno = lineno


class BlankLineError(IniSyntaxError):
    def __init__(self, lineno: int) -> None:
        super().__init__(
            f'Blank line on line {lineno} '
            '(forbidden by tolerate_blank_lines=False)', lineno)


class SectionSyntaxError(IniSyntaxError):
    def __init__(self, lineno: int) -> None:
        super().__init__(f'Unparseable section line at line {lineno}', lineno)


class GlobalPropertyError(IniSyntaxError):
    def __init__(self, lineno: int) -> None:
        super().__init__(
            f'Property on line {lineno} is outside of a named section '
            '(forbidden by allow_global_section=False)', lineno)


class UnparseableLineError(IniSyntaxError):
    def __init__(self, lineno: int) -> None:
        super().__init__(f'Unparseable line at line {lineno}', lineno)


class NotFoundError(IniError, KeyError):
    """Section or property absent."""

    def __init__(self, section: str, prop: str | None = None) -> None:
        super().__init__(section if prop is None else (section, prop))
        self.section = section
        self.prop = prop

    # KeyError would repr() the args.
    def __str__(self) -> str:
        if self.prop is None:
            return f'No such section [{self.section}]'
        return f'No such property [{self.section}].{self.prop}'


class ConversionError(IniError, ValueError):
    """A stored string could not be interpreted as the requested type."""

    def __init__(self, message: str, section: str, prop: str, raw: str):
        super().__init__(message)
        self.section = section
        self.prop = prop
        self.raw = raw
