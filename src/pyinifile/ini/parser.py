# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/13 00:12:40
# @Author : Kariko Lin

"""Turns INI text into an `IniConfig`.

Every line gets exactly one outcome, tried in this order:

    blank -> comment -> [section] -> key=value -> rejected

There is no second pass: the first line that cannot be classified aborts
the parse with an `IniSyntaxError` subclass (unless `ignore_unparseable`
says otherwise) and no half-filled config is handed out.
"""

import logging
from io import TextIOBase
from os import PathLike
from typing import BinaryIO, Iterable, TextIO

from chardet import detect as guess_codec

from ..abstract import FileHandler
from .consts import (
    COLON_PROPERTY_PATTERN,
    EQUALS_PROPERTY_PATTERN,
    ESCAPE_PLACEHOLDER,
    GLOBAL_SECTION,
    MIN_DETECT_CONFIDENCE,
    SECTION_PATTERN,
)
from .errors import (
    BlankLineError,
    ConfigValidationError,
    GlobalPropertyError,
    ResourceError,
    SectionSyntaxError,
    UnparseableLineError,
)
from .model import IniConfig
from .options import DEFAULT_OPTIONS, IniOptions


def _split_lines(text: str) -> list[str]:
    # only '\n' ends a line; a trailing one does not start a new line.
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


class IniParser(FileHandler[IniConfig]):
    def __init__(
        self, rootfile: str | PathLike[str],
        options: IniOptions = DEFAULT_OPTIONS,
        encoding: str | None = None
    ) -> None:
        if rootfile is None:
            raise ConfigValidationError('No INI file path provided')
        super().__init__(rootfile)
        if options is None:
            raise ConfigValidationError('No IniOptions provided')
        self._options = options
        self._codec = encoding

    @staticmethod
    def strip_inline_comment(line: str, options: IniOptions) -> str:
        """Drop everything from the first unescaped `comment_start` on.

        Escaped markers (`\\;` by default) survive as the bare marker.
        """
        if not options.allow_inline_comments:
            return line
        escaped = options.comment_escape_prefix + options.comment_start
        line = line.replace(escaped, ESCAPE_PLACEHOLDER)
        line = line.split(options.comment_start, 1)[0]
        return line.replace(ESCAPE_PLACEHOLDER, options.comment_start)

    @staticmethod
    def strip_quotes(value: str, options: IniOptions) -> str:
        """Remove one layer of matching enclosing quotes, if enabled."""
        if not options.strip_enclosing_quotes or len(value) < 2:
            return value
        if value[0] == value[-1] \
                and value[0] in options.enclosing_quote_symbols:
            return value[1:-1]
        return value

    @staticmethod
    def readstream(
        lines: Iterable[str],
        options: IniOptions = DEFAULT_OPTIONS
    ) -> IniConfig:
        """Parse already decoded lines.

        Most callers want `from_path()` / `from_stream()` instead.
        """
        if options is None:
            raise ConfigValidationError('No IniOptions provided')
        options.validate()

        ret = IniConfig(options)
        section = GLOBAL_SECTION
        prop_rx = (COLON_PROPERTY_PATTERN if options.use_colon_assignment
                   else EQUALS_PROPERTY_PATTERN)

        for lineno, raw in enumerate(lines, 1):
            line = raw.strip()
            if not line:
                if not options.tolerate_blank_lines:
                    raise BlankLineError(lineno)
                continue
            if line.startswith(options.comment_start):
                continue

            line = IniParser.strip_inline_comment(line, options)

            if (matched := SECTION_PATTERN.search(line)) is not None:
                section = matched.group(1)
                continue

            if (matched := prop_rx.fullmatch(line)) is not None:
                if section == GLOBAL_SECTION \
                        and not options.allow_global_section:
                    raise GlobalPropertyError(lineno)
                key, value = matched.groups()
                if options.trim_properties:
                    key, value = key.strip(), value.strip()
                value = IniParser.strip_quotes(value, options)
                if value or not options.discard_properties_with_no_value:
                    ret.add(section, key, value)
                continue

            if not options.ignore_unparseable:
                # an unclosed `[header` is reported as a bad section.
                if line.startswith('['):
                    raise SectionSyntaxError(lineno)
                raise UnparseableLineError(lineno)
            logging.debug('Ignored unparseable line %d: %r', lineno, raw)
        return ret

    @staticmethod
    def _decode(raw: bytes, encoding: str | None = None) -> str:
        if encoding is not None:
            try:
                return raw.decode(encoding)
            except (UnicodeDecodeError, LookupError) as e:
                raise ResourceError(
                    f'Unable to decode INI text as {encoding}: {e}') from e

        try:
            return raw.decode('utf-8-sig')
        except UnicodeDecodeError:
            pass

        codec = guess_codec(raw)
        if codec['encoding'] is None \
                or codec['confidence'] < MIN_DETECT_CONFIDENCE:
            logging.warning(
                'Unsure about INI encoding (%s, confidence %.2f), '
                'falling back to latin-1.',
                codec['encoding'], codec['confidence'])
            return raw.decode('latin-1')
        logging.debug('Detected INI encoding %s (confidence %.2f)',
                      codec['encoding'], codec['confidence'])
        try:
            return raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            logging.warning('Detected encoding %s failed, '
                            'falling back to latin-1.', codec['encoding'])
            return raw.decode('latin-1')

    @staticmethod
    def readhandle(
        fp: TextIO | BinaryIO,
        options: IniOptions = DEFAULT_OPTIONS,
        encoding: str | None = None
    ) -> IniConfig:
        """Parse an open file. Closing it is up to the caller."""
        if fp is None:
            raise ConfigValidationError('No file handle provided')
        if options is None:
            raise ConfigValidationError('No IniOptions provided')
        options.validate()

        try:
            data = fp.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceError(f'Unable to read INI text: {e}') from e
        if isinstance(data, (bytes, bytearray)):
            text = IniParser._decode(bytes(data), encoding)
        else:
            text = data.removeprefix('\ufeff')
        return IniParser.readstream(_split_lines(text), options)

    def read(self) -> IniConfig:
        """Read the file this parser is bound to."""
        self._options.validate()
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise ResourceError(
                f'Unable to read INI file {self._fn}: {e}') from e
        return self.readstream(
            _split_lines(self._decode(raw, self._codec)), self._options)

    def __str__(self) -> str:
        return f'INI file: {super().__str__()} ({self._codec or "auto"})'


def from_path(
    path: str | PathLike[str],
    options: IniOptions = DEFAULT_OPTIONS, *,
    encoding: str | None = None
) -> IniConfig:
    """Load the INI file at `path`.

    Without `encoding`, UTF-8 is tried first and `chardet` guesses the
    rest.
    """
    return IniParser(path, options, encoding).read()


def from_stream(
    fp: TextIO | BinaryIO | TextIOBase,
    options: IniOptions = DEFAULT_OPTIONS, *,
    encoding: str | None = None
) -> IniConfig:
    """Load INI text from an open handle, which stays open."""
    return IniParser.readhandle(fp, options, encoding)
