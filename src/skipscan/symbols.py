"""Text <-> fixed-width symbol sequences for the CLI.

The searchers never encode or decode anything; they compare symbols. This
module turns text into the symbol sequence a given encoding produces and
renders slices of such sequences back into printable text.

Supported encodings:
- ``utf-8``: bytes (one symbol per byte)
- ``utf-16-le``: 16-bit code units
- ``utf-32-le``: 32-bit code units (one symbol per code point)
- ``text``: Python ``str`` (one symbol per code point, no encoding step)
"""

from __future__ import annotations

import sys
from array import array
from collections.abc import Sequence
from typing import Any, Literal, get_args

Encoding = Literal["utf-8", "utf-16-le", "utf-32-le", "text"]
ENCODINGS: tuple[str, ...] = get_args(Encoding)

# array typecodes by code unit width
_UNIT_WIDTH = {"utf-16-le": 2, "utf-32-le": 4}


def _typecode_for(width: int) -> str:
    for code in ("H", "I", "L"):
        if array(code).itemsize == width:
            return code
    raise ValueError(f"no array typecode with item size {width}")


def _check_encoding(encoding: str) -> None:
    if encoding not in ENCODINGS:
        raise ValueError(
            f"unsupported encoding {encoding!r} "
            f"(expected one of: {', '.join(ENCODINGS)})"
        )


def encode_symbols(text: str, encoding: str = "utf-8") -> Sequence[Any]:
    """Encode text into the symbol sequence searched by the engine.

    Raises:
        ValueError: unknown encoding, or text not encodable with it.
    """
    _check_encoding(encoding)
    if encoding == "text":
        return text

    try:
        raw = text.encode(encoding)
    except UnicodeEncodeError as e:
        raise ValueError(f"cannot encode input as {encoding}: {e}") from e

    if encoding == "utf-8":
        return raw

    units = array(_typecode_for(_UNIT_WIDTH[encoding]))
    units.frombytes(raw)
    if sys.byteorder == "big":
        units.byteswap()
    return units


def decode_symbols(symbols: Sequence[Any], encoding: str = "utf-8") -> str:
    """Render a symbol slice as text, replacing partial characters."""
    _check_encoding(encoding)
    if encoding == "text":
        return "".join(symbols)
    if encoding == "utf-8":
        return bytes(symbols).decode("utf-8", errors="replace")

    units = array(_typecode_for(_UNIT_WIDTH[encoding]), symbols)
    if sys.byteorder == "big":
        units.byteswap()
    return units.tobytes().decode(encoding, errors="replace")
