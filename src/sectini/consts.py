# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 21:40:18
# @Author : Chloride

COMMENT_PREFIXES = ('#', ';')
SECTION_OPEN = '['
SECTION_CLOSE = ']'
ASSIGNMENT = '='

# name of the section holding pairs declared before any header.
HEADER_SECTION = ''

# chardet guesses below this are not trusted.
CODEC_CONFIDENCE = 0.8
FALLBACK_CODEC = 'utf-8'
