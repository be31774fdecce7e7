# objectfile/parsers/base.py
"""
Parser contract shared by every format.

A parser turns text into a value (``parse``) and back (``stringify``). File
operations are derived from those two by default: the whole file is read or
written as UTF-8 text. Subclasses may override the file operations for formats
that need custom I/O.

``parse``/``stringify`` are synchronous on purpose so the same implementation
backs both the blocking and the ``a``-prefixed async file APIs.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Union

from asgiref.sync import sync_to_async

from ..exceptions import FormatSyntaxError

__all__ = ("ObjectFileParser", "PathLike")

PathLike = Union[str, os.PathLike]

ENCODING = "utf-8"


def _read_text(path: PathLike) -> str:
    with open(path, "r", encoding=ENCODING) as fh:
        return fh.read()


def _write_text(path: PathLike, raw: str) -> None:
    with open(path, "w", encoding=ENCODING) as fh:
        fh.write(raw)


class ObjectFileParser(ABC):
    """
    Base class for format parsers.

    :ivar format_name: Short grammar name used in error messages, e.g. ``"json"``.
    """

    format_name: ClassVar[str] = ""

    # --- text ------------------------------------------------------------
    @abstractmethod
    def parse(self, raw: str) -> Any:
        """
        Deserialize *raw* text.

        :param raw: The text to parse.
        :return: The decoded value.
        :raises FormatSyntaxError: If the text is not valid for this grammar.
        """

    @abstractmethod
    def stringify(self, value: Any) -> str:
        """
        Serialize *value* to text.

        :param value: The value to serialize.
        :return: The serialized text.
        :raises FormatSyntaxError: If the value cannot be represented in this grammar.
        """

    # --- files -----------------------------------------------------------
    def read_file(self, path: PathLike) -> Any:
        """Read *path* as UTF-8 text and parse it."""
        return self.parse(_read_text(path))

    async def aread_file(self, path: PathLike) -> Any:
        """Async variant of :meth:`read_file`; only the read leaves the event loop."""
        raw = await sync_to_async(_read_text)(path)
        return self.parse(raw)

    def write_file(self, path: PathLike, value: Any) -> Any:
        """Stringify *value*, write it to *path* and return *value* unchanged."""
        _write_text(path, self.stringify(value))
        return value

    async def awrite_file(self, path: PathLike, value: Any) -> Any:
        """Async variant of :meth:`write_file`."""
        raw = self.stringify(value)
        await sync_to_async(_write_text)(path, raw)
        return value

    # --- availability ----------------------------------------------------
    @classmethod
    def available(cls) -> bool:
        """Return True when the library backing this parser can be used."""
        return True

    # --- helpers ---------------------------------------------------------
    def _syntax_error(self, action: str, err: BaseException) -> FormatSyntaxError:
        return FormatSyntaxError(
            f"Unable to {action} {self.format_name or type(self).__name__}: {err}",
            format_key=self.format_name,
            original=err,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
