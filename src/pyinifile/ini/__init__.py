# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:52:06
# @Author : Kariko Lin

from .consts import GLOBAL_SECTION
from .errors import (
    IniError,
    ResourceError,
    ConfigValidationError,
    IniSyntaxError,
    BlankLineError,
    SectionSyntaxError,
    GlobalPropertyError,
    UnparseableLineError,
    NotFoundError,
    ConversionError
)
from .model import NilableStr, IniConfig, IniSectionProxy
from .options import IniOptions, DEFAULT_OPTIONS
from .parser import IniParser, from_path, from_stream
