# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 21:57:43
# @Author : Chloride

"""
Plain INI structure: named sections of `key = value` string pairs.

Both containers are *read only* to users.
Only `ini.parser` fills them while a load is going on.
"""

from collections.abc import Mapping
from typing import Iterator

from ..consts import HEADER_SECTION


class IniSection(Mapping[str, str]):
    """INI section dict.

    All pairs are `str: str` (an empty value is still an empty string),
    keys are unique and the last assignment wins.
    """

    def __init__(self, section_name: str, /) -> None:
        self._name = section_name
        self._data: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    # parser only.
    def _set(self, key: str, value: str) -> None:
        self._data[key] = value

    def to_dict(self) -> dict[str, str]:
        """A detached copy of the pairs."""
        return self._data.copy()


class IniDocument(Mapping[str, IniSection]):
    """INI file representation, i.e. the result of one load:

        ```ini
        key = val  ; free pairs go to the "" section, see self.header.

        [section]
        key233 = val666
        [section]   ; reopened, merges into the one above.
        key233 = val114514
        ```

    The `""` section always exists, even for empty text.
    """

    def __init__(self) -> None:
        self.__sections: dict[str, IniSection] = {
            HEADER_SECTION: IniSection(HEADER_SECTION)
        }

    @property
    def header(self) -> IniSection:
        """Pairs not belonging to any declared section."""
        return self.__sections[HEADER_SECTION]

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return '<IniDocument %r>' % list(self.__sections)

    def _open(self, section: str) -> IniSection:
        """for IniParser: reuse an existing section or declare a new one."""
        if section not in self.__sections:
            self.__sections[section] = IniSection(section)
        return self.__sections[section]

    def lookup(self, section: str, key: str) -> str:
        """Raw value of `key` in `section`, `''` if either is missing."""
        sect = self.__sections.get(section)
        if sect is None:
            return ''
        return sect.get(key, '')

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {name: sect.to_dict() for name, sect in self.__sections.items()}
