# -*- encoding: utf-8 -*-
# @File   : test_convert.py
# @Time   : 2024/10/13 21:02:37
# @Author : Chloride

import math

import pytest

from sectini.ini.convert import to_bool, to_float, to_int, to_str, to_uint


@pytest.mark.parametrize('text, expected', [
    ('0', 0),
    ('42', 42),
    ('-42', -42),
    ('+7', 7),
    ('0xff00ff', 16_711_935),
    ('0XFF', 255),
    ('017', 15),
    ('0o17', 15),
    ('0b101', 5),
    ('1_000_000', 1_000_000),
    ('0x_ff', 255),
    ('2147483647', 2**31 - 1),
    ('-2147483648', -2**31),
])
def test_to_int(text, expected):
    assert to_int(text) == expected


@pytest.mark.parametrize('text', [
    '', '08', '1.5', 'abc', ' 12', '1 2', '_1', '1_', '1__0',
    '0x', '2147483648', '-2147483649', '١٢',
])
def test_to_int_rejects(text):
    with pytest.raises(ValueError):
        to_int(text)


def test_to_uint():
    assert to_uint('4294967295') == 2**32 - 1
    assert to_uint('0x10') == 16


@pytest.mark.parametrize('text', ['-1', '+1', '-0', '4294967296', ''])
def test_to_uint_rejects(text):
    with pytest.raises(ValueError):
        to_uint(text)


@pytest.mark.parametrize('text, expected', [
    ('2.5', 2.5),
    ('.5', 0.5),
    ('3.', 3.0),
    ('-1e3', -1000.0),
    ('1_000.5', 1000.5),
    ('0x1p-2', 0.25),
    ('0x1.8p1', 3.0),
])
def test_to_float_exact(text, expected):
    assert to_float(text) == expected


def test_to_float_is_rounded_to_32_bits():
    value = to_float('1.33')
    assert value == pytest.approx(1.33, rel=1e-6)
    assert value != 1.33


def test_to_float_special_values():
    assert to_float('inf') == math.inf
    assert to_float('-Infinity') == -math.inf
    assert math.isnan(to_float('NaN'))


def test_to_float_beyond_float32_becomes_inf():
    assert to_float('1e39') == math.inf
    assert to_float('-1e39') == -math.inf


@pytest.mark.parametrize('text', [
    '', 'abc', '1e400', '0x1.8', '1._5', '1_.5', '+nan', 'infin', '1,5',
    'THIS IS NOT A FLOAT VALUE',
])
def test_to_float_rejects(text):
    with pytest.raises(ValueError):
        to_float(text)


@pytest.mark.parametrize('text', ['1', 't', 'T', 'true', 'True', 'TRUE'])
def test_to_bool_truthy(text):
    assert to_bool(text) is True


@pytest.mark.parametrize('text', ['0', 'f', 'F', 'false', 'False', 'FALSE'])
def test_to_bool_falsy(text):
    assert to_bool(text) is False


@pytest.mark.parametrize('text', ['', 'yes', 'no', '2', 'on'])
def test_to_bool_rejects(text):
    with pytest.raises(ValueError):
        to_bool(text)


def test_to_str():
    assert to_str(' kept as is ') == ' kept as is '
    with pytest.raises(ValueError):
        to_str('')
