"""Opaque cursor codecs.

A cursor is the canonical string form of an ordering key, base64-encoded with
no type tag. Callers must know which codec a connection uses; the token alone
does not say.

Instant cursors may carry up to nine fraction digits; decoding keeps the
first six, so keys that differ only below a microsecond compare equal.
"""

from __future__ import annotations

import base64
import binascii
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from relay_pagination.core.errors import InvalidCursorError

K = TypeVar("K")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INSTANT_PATTERN = re.compile(
    r"(?P<seconds>[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]{1,9}))?"
    r"(?P<offset>Z|[+-][0-9]{2}:[0-9]{2})"
)


@dataclass(frozen=True)
class CursorCodec(Generic[K]):
    """Maps a key of type K to an opaque cursor and back."""

    name: str
    encoder: Callable[[K], str]
    decoder: Callable[[str], K]

    def encode(self, value: K) -> str:
        """Encode a key into a cursor.

        Raises:
            InvalidCursorError: If the codec does not support the value
        """
        try:
            text = self.encoder(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidCursorError(
                details={"codec": self.name, "reason": str(e)},
            ) from e
        return base64.b64encode(text.encode("utf-8")).decode("ascii")

    def decode(self, cursor: str) -> K:
        """Decode a cursor back into its key.

        Raises:
            InvalidCursorError: If the cursor is malformed or is not a key of this type
        """
        try:
            text = base64.b64decode(cursor, validate=True).decode("utf-8")
            return self.decoder(text)
        except (binascii.Error, UnicodeError, TypeError, ValueError, OverflowError) as e:
            raise InvalidCursorError(
                details={"codec": self.name, "cursor": cursor, "reason": str(e)},
            ) from e


def _format_int(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return str(value)


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    return int(text)


def _format_instant(value: datetime) -> str:
    """Render an aware datetime as ISO-8601 UTC, e.g. ``2024-01-15T12:30:45.120Z``."""
    if not isinstance(value, datetime):
        raise TypeError(f"expected datetime, got {type(value).__name__}")
    if value.utcoffset() is None:
        raise ValueError("naive datetimes have no absolute position in time")
    utc = value.astimezone(UTC)
    text = (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
    )
    if utc.microsecond:
        fraction = f"{utc.microsecond:06d}"
        text += "." + (fraction[:3] if fraction.endswith("000") else fraction)
    return text + "Z"


def _parse_instant(text: str) -> datetime:
    match = _INSTANT_PATTERN.fullmatch(text)
    if not match:
        raise ValueError(f"not an ISO-8601 instant: {text!r}")
    # Nanosecond fractions are truncated to microseconds
    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    normalized = f"{match['seconds']}.{fraction}{match['offset']}"
    return datetime.fromisoformat(normalized).astimezone(UTC)


# ============================================================================
# Registry
# ============================================================================

_codecs: dict[str, CursorCodec[Any]] = {}


def register_codec(codec: CursorCodec[K], *, replace: bool = False) -> CursorCodec[K]:
    """Register a codec under its name and return it.

    Raises:
        ValueError: If a codec with the same name exists and replace is False
    """
    if codec.name in _codecs and not replace:
        raise ValueError(f"Cursor codec '{codec.name}' is already registered")
    _codecs[codec.name] = codec
    return codec


def get_codec(name: str) -> CursorCodec[Any]:
    """Look up a registered codec by name.

    Raises:
        KeyError: If no codec is registered under the name
    """
    try:
        return _codecs[name]
    except KeyError:
        raise KeyError(f"No cursor codec registered as '{name}'") from None


def registered_codecs() -> list[str]:
    return sorted(_codecs)


INT: CursorCodec[int] = register_codec(CursorCodec("int", _format_int, _parse_int))
INSTANT: CursorCodec[datetime] = register_codec(
    CursorCodec("instant", _format_instant, _parse_instant)
)
