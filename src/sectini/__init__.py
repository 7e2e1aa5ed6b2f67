# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:18:36
# @Author : Chloride

import logging

from .ini import Ini, IniDocument, IniParser, IniSection
from .ini.convert import to_bool, to_float, to_int, to_str, to_uint

__all__ = [
    'Ini', 'IniDocument', 'IniSection', 'IniParser',
    'to_int', 'to_uint', 'to_float', 'to_bool', 'to_str'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
