# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 22:31:05
# @Author : Chloride

"""Note: the format is *forgiving*, nothing in a text can make the parser fail.

We parse based on the following rules:
1. Line by line, each one stripped first. Blank lines and lines starting
with `#` or `;` are comments.

2. `[name]` opens (or reopens) a section. A line starting with `[` but
not ending with `]` is skipped.

3. Anything else must contain *exactly one* `=`, otherwise it is skipped.
Key and value are stripped, the later assignment wins.
"""

import logging
from collections.abc import Iterable
from os import PathLike

import chardet

from ..abstract import FileHandler
from ..consts import (
    ASSIGNMENT,
    CODEC_CONFIDENCE,
    COMMENT_PREFIXES,
    FALLBACK_CODEC,
    SECTION_CLOSE,
    SECTION_OPEN,
)
from .model import IniDocument

logger = logging.getLogger(__name__)


def decode(raw: bytes, encoding: str | None = None) -> str:
    """Decode INI bytes. Never raises on content.

    Tries `encoding` first (if given), then a `chardet` guess,
    and finally UTF-8 with replacement characters.
    """
    if not raw:
        return ''
    if encoding is not None:
        try:
            return raw.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug('codec %s rejected, guessing: %s', encoding, e)

    codec = chardet.detect(raw)
    if codec['encoding'] is None or codec['confidence'] < CODEC_CONFIDENCE:
        codec = {'encoding': FALLBACK_CODEC, 'confidence': 0.0}
    logger.debug('decoding as %s (confidence %.2f)',
                 codec['encoding'], codec['confidence'])

    # fallbacks
    try:
        return raw.decode(codec['encoding'])
    except (UnicodeDecodeError, LookupError):
        logger.warning('undecodable bytes replaced while decoding as %s',
                       FALLBACK_CODEC)
        return raw.decode(FALLBACK_CODEC, errors='replace')


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @property
    def encoding(self) -> str | None:
        return self._codec

    @staticmethod
    def readstream(
        lines: Iterable[str], ins: IniDocument | None = None
    ) -> IniDocument:
        """Parse decoded lines (a text stream works as well).

        Pairs go into `ins` if given, otherwise into a new document.
        """
        if ins is None:
            ins = IniDocument()
        this_sect = ins.header
        for lineno, i in enumerate(lines, 1):
            line = i.strip()
            if not line or line[0] in COMMENT_PREFIXES:
                continue

            if line[0] == SECTION_OPEN:
                if line[-1] != SECTION_CLOSE:
                    logger.debug('line %d: unterminated header %r skipped',
                                 lineno, line)
                    continue
                this_sect = ins._open(line[1:-1])
                continue

            pairs = line.split(ASSIGNMENT)
            if len(pairs) != 2:
                logger.debug('line %d: %d %r found, %r skipped',
                             lineno, len(pairs) - 1, ASSIGNMENT, line)
                continue
            this_sect._set(pairs[0].strip(), pairs[1].strip())
        return ins

    @classmethod
    def readstring(cls, text: str) -> IniDocument:
        # only \n, \r\n and \r end a line, NEL or \u2028 stay in the value.
        return cls.readstream(
            text.replace('\r\n', '\n').replace('\r', '\n').split('\n'))

    @classmethod
    def readbytes(
        cls, raw: bytes | bytearray, encoding: str | None = None
    ) -> IniDocument:
        return cls.readstring(decode(bytes(raw), encoding))

    def read(self) -> IniDocument:
        """Read the file given to this `IniParser`.

        Note: `OSError` (missing file, no access...) is logged and re-raised.
        """
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            logger.warning('unable to read %s: %s', self._fn, e)
            raise
        ret = self.readbytes(raw, self.encoding)
        logger.info('loaded %s: %d section(s)', self._fn, len(ret))
        return ret

    def __str__(self) -> str:
        codec = self.encoding or 'auto'
        return "INI file: " + super().__str__() + f"({codec})"
