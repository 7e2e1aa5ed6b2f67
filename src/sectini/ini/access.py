# -*- encoding: utf-8 -*-
# @File   : access.py
# @Time   : 2024/10/13 16:47:30
# @Author : Chloride

"""Typed access to a loaded INI document."""

from collections.abc import Callable
from os import PathLike
from typing import TypeVar

from .convert import to_bool, to_float, to_int, to_str, to_uint
from .model import IniDocument
from .parser import IniParser

T = TypeVar("T")


class Ini:
    """One INI source, loaded in memory.

    Every load *replaces* the whole document. Getters never raise:
    a missing section, a missing key or a bad literal gives back `default`.

        ```python
        ini = Ini()
        ini.load_from_file('settings.ini')
        width = ini.get_int('gui settings', 'width', 800)
        ```

    Not thread safe. Don't read from another thread while loading.
    """

    def __init__(self) -> None:
        self.__doc = IniDocument()
        self.__source = '<empty>'

    @property
    def document(self) -> IniDocument:
        """The current document (read only)."""
        return self.__doc

    def load_from_file(
        self, path: str | PathLike[str], encoding: str | None = None
    ) -> None:
        """Load an INI file.

        Raises `OSError` if the file can't be read,
        in which case the current document is kept.
        """
        parser = IniParser(path, encoding)
        self.__doc = parser.read()
        self.__source = parser.filename

    def load_from_bytes(
        self, buffer: bytes | bytearray, encoding: str | None = None
    ) -> None:
        self.__doc = IniParser.readbytes(buffer, encoding)
        self.__source = '<bytes>'

    def load_from_string(self, text: str) -> None:
        self.__doc = IniParser.readstring(text)
        self.__source = '<string>'

    def key_exists(self, section: str, key: str) -> bool:
        """True if `key` is declared in `section`, even with an empty value."""
        return section in self.__doc and key in self.__doc[section]

    def section_exists(self, section: str) -> bool:
        """True if `section` is declared, even with no pairs in it.

        Note: `""` always exists.
        """
        return section in self.__doc

    def get_section_values(self) -> list[str]:
        """All section names, `""` first, then in declaration order."""
        return list(self.__doc)

    def get_section(self, section: str) -> dict[str, str]:
        if section not in self.__doc:
            return {}
        return self.__doc[section].to_dict()

    def get(
        self, section: str, key: str,
        converter: Callable[[str], T], default: T
    ) -> T:
        """Convert a raw value with one of `ini.convert` converters.

        `converter` decides the type, `default` is returned whenever
        it raises `ValueError`. A missing key is converted as `''`.
        """
        raw = self.__doc.lookup(section, key)
        try:
            return converter(raw)
        except ValueError:
            return default

    def get_int(self, section: str, key: str, default: int) -> int:
        return self.get(section, key, to_int, default)

    def get_uint(self, section: str, key: str, default: int) -> int:
        return self.get(section, key, to_uint, default)

    def get_float(self, section: str, key: str, default: float) -> float:
        return self.get(section, key, to_float, default)

    def get_bool(self, section: str, key: str, default: bool) -> bool:
        return self.get(section, key, to_bool, default)

    def get_string(self, section: str, key: str, default: str) -> str:
        """Raw value, or `default` if it is empty (or missing)."""
        return self.get(section, key, to_str, default)

    def get_string_list(
        self, section: str, key: str, default: str, sep: str
    ) -> list[str]:
        """Split the raw value by `sep` (a substring, not only a char).

        Empty items are replaced with `default`, e.g. `a,,c` -> `a,<default>,c`.
        If `sep` is empty, the raw value comes back as a one-item list,
        untouched, even if it is empty.
        """
        raw = self.__doc.lookup(section, key)
        if not sep:
            return [raw]
        return [i if i else default for i in raw.split(sep)]

    def __contains__(self, section: object) -> bool:
        return section in self.__doc

    def __str__(self) -> str:
        return self.__source

    def __repr__(self) -> str:
        return '<Ini %s: %d section(s)>' % (self.__source, len(self.__doc))
