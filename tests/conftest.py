# -*- encoding: utf-8 -*-
# @File   : conftest.py
# @Time   : 2024/10/13 20:11:04
# @Author : Chloride

import pytest

from sectini import Ini

SAMPLE = """
# This is a common comment
; This is a not so common comment

info text=This is a key/value inside [] empty section

[gui settings]
width = 1920
height=720
scale factor=1.33
scale factor2=THIS IS NOT A FLOAT VALUE
valid themes=dark,light,awaita,classic,aqua

[theme]
# You can use 0/1, true/false
use system theme=0
accent color= 0xff00ff
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE


@pytest.fixture
def sample_ini() -> Ini:
    ini = Ini()
    ini.load_from_bytes(SAMPLE.encode('utf-8'))
    return ini


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / 'test.ini'
    path.write_text(SAMPLE, encoding='utf-8')
    return path
