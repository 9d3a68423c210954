# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 22:03:51
# @Author : Kariko Lin

from re import compile as regex

# properties declared before the first `[section]` live here.
GLOBAL_SECTION = ''

# same table as Go's strconv.ParseBool, no further case folding.
PERMISSIVE_TRUE = frozenset(('1', 't', 'T', 'TRUE', 'true', 'True'))
PERMISSIVE_FALSE = frozenset(('0', 'f', 'F', 'FALSE', 'false', 'False'))

# searched anywhere in the line: leftmost '[' to the last ']'.
SECTION_PATTERN = regex(r'\[(.*)\]')
EQUALS_PROPERTY_PATTERN = regex(r'([^=]*)=(.*)')
COLON_PROPERTY_PATTERN = regex(r'([^:]*):(.*)')

# must never appear in real INI text.
ESCAPE_PLACEHOLDER = '\x00PyINI_ESC\x00'

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

SIGNED_INT_PATTERN = regex(r'[+-]?[0-9]+')
UNSIGNED_INT_PATTERN = regex(r'[0-9]+')
DECIMAL_FLOAT_PATTERN = regex(
    r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
HEX_FLOAT_PATTERN = regex(
    r'[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+')
SPECIAL_FLOAT_PATTERN = regex(r'(?i:[+-]?inf(?:inity)?|nan)')

# below this `chardet` confidence, decode as latin-1 instead.
MIN_DETECT_CONFIDENCE = 0.8
