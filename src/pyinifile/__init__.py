# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:35:44
# @Author : Kariko Lin

import logging

from .ini import (
    GLOBAL_SECTION,
    DEFAULT_OPTIONS,
    IniOptions,
    IniConfig,
    IniSectionProxy,
    IniParser,
    from_path,
    from_stream,
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

__all__ = [
    'GLOBAL_SECTION', 'DEFAULT_OPTIONS', 'IniOptions',
    'IniConfig', 'IniSectionProxy', 'IniParser', 'from_path', 'from_stream',
    'IniError', 'ResourceError', 'ConfigValidationError',
    'IniSyntaxError', 'BlankLineError', 'SectionSyntaxError',
    'GlobalPropertyError', 'UnparseableLineError',
    'NotFoundError', 'ConversionError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
