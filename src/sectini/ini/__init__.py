# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:55:10
# @Author : Chloride

from .access import Ini
from .model import IniDocument, IniSection
from .parser import IniParser
