"""RFC 4122 UUID values: layout, text and binary codecs, SQL-style scanning."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Union

SIZE = 16

_URN_PREFIX = b"urn:uuid:"
_BYTE_GROUPS = (8, 4, 4, 4, 12)
_HEX_RE = re.compile(rb"[0-9a-fA-F]*")

BytesLike = Union[bytes, bytearray, memoryview]
TextLike = Union[str, bytes, bytearray, memoryview]


class Version(IntEnum):
    """UUID generation algorithm versions."""

    V1 = 1
    V2 = 2
    V3 = 3
    V4 = 4
    V5 = 5


class Variant(IntEnum):
    """UUID layout variants."""

    NCS = 0
    RFC4122 = 1
    MICROSOFT = 2
    FUTURE = 3


class Domain(IntEnum):
    """DCE security domains."""

    PERSON = 0
    GROUP = 1
    ORG = 2


def _decode_hex(chunk: bytes) -> bytes:
    if len(chunk) % 2 or not _HEX_RE.fullmatch(chunk):
        raise ValueError(f"uuid: invalid hex in {chunk!r}")
    return bytes.fromhex(chunk.decode("ascii"))


def _decode_hash_like(text: bytes) -> bytes:
    return _decode_hex(text)


def _decode_canonical(text: bytes) -> bytes:
    if any(text[pos] != ord("-") for pos in (8, 13, 18, 23)):
        raise ValueError(f"uuid: incorrect UUID format {text!r}")
    groups = text.split(b"-")
    if tuple(len(g) for g in groups) != _BYTE_GROUPS:
        raise ValueError(f"uuid: incorrect UUID format {text!r}")
    return b"".join(_decode_hex(g) for g in groups)


def _decode_plain(text: bytes) -> bytes:
    if len(text) == 32:
        return _decode_hash_like(text)
    if len(text) == 36:
        return _decode_canonical(text)
    raise ValueError(f"uuid: incorrect UUID length: {text!r}")


def _decode_braced(text: bytes) -> bytes:
    if not (text.startswith(b"{") and text.endswith(b"}")):
        raise ValueError(f"uuid: incorrect UUID format {text!r}")
    return _decode_plain(text[1:-1])


def _decode_urn(text: bytes) -> bytes:
    if text[:9] != _URN_PREFIX:
        raise ValueError(f"uuid: incorrect UUID format: {text!r}")
    return _decode_plain(text[9:])


def _decode_text(text: TextLike) -> bytes:
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    length = len(raw)
    if length == 32:
        return _decode_hash_like(raw)
    if length == 36:
        return _decode_canonical(raw)
    if length == 38:
        return _decode_braced(raw)
    if length in (41, 45):
        return _decode_urn(raw)
    raise ValueError(f"uuid: incorrect UUID length: {raw!r}")


class UUID:
    """A mutable 16-byte UUID; the all-zero value when built without data."""

    __slots__ = ("_data",)

    def __init__(self, data: Optional[BytesLike] = None) -> None:
        self._data = bytearray(SIZE)
        if data is not None:
            self.unmarshal_binary(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        h = self._data.hex()
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"

    def __repr__(self) -> str:
        return f"UUID('{self}')"

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def copy(self) -> UUID:
        """Return an independent copy of this UUID."""
        return UUID(self._data)

    def version(self) -> int:
        """Return the algorithm version stored in the UUID."""
        return self._data[6] >> 4

    def variant(self) -> Variant:
        """Return the layout variant of the UUID."""
        b = self._data[8]
        if b >> 7 == 0x00:
            return Variant.NCS
        if b >> 6 == 0x02:
            return Variant.RFC4122
        if b >> 5 == 0x06:
            return Variant.MICROSOFT
        return Variant.FUTURE

    def set_version(self, v: int) -> None:
        """Set the version bits."""
        self._data[6] = (self._data[6] & 0x0F) | ((v << 4) & 0xFF)

    def set_variant(self, v: int) -> None:
        """Set the variant bits."""
        b = self._data[8]
        if v == Variant.NCS:
            self._data[8] = b & (0xFF >> 1)
        elif v == Variant.RFC4122:
            self._data[8] = (b & (0xFF >> 2)) | (0x02 << 6)
        elif v == Variant.MICROSOFT:
            self._data[8] = (b & (0xFF >> 3)) | (0x06 << 5)
        else:
            self._data[8] = ((b & (0xFF >> 3)) | (0x07 << 5)) & 0xFF

    def marshal_text(self) -> bytes:
        """Return the canonical text form as bytes."""
        return str(self).encode("ascii")

    def unmarshal_text(self, text: TextLike) -> None:
        """Parse canonical, hash-like, braced or URN text into this UUID."""
        self._data[:] = _decode_text(text)

    def marshal_binary(self) -> bytes:
        """Return the raw 16 bytes."""
        return bytes(self._data)

    def unmarshal_binary(self, data: BytesLike) -> None:
        """Load exactly 16 raw bytes into this UUID."""
        raw = bytes(data)
        if len(raw) != SIZE:
            raise ValueError(
                f"uuid: UUID must be exactly 16 bytes long, got {len(raw)} bytes"
            )
        self._data[:] = raw

    def value(self) -> str:
        """Return the database value: the canonical string."""
        return str(self)

    def scan(self, src: object) -> None:
        """Load a database value: 16 raw bytes, or text in bytes or str."""
        if isinstance(src, (bytes, bytearray, memoryview)):
            if len(src) == SIZE:
                self.unmarshal_binary(src)
            else:
                self.unmarshal_text(src)
            return
        if isinstance(src, str):
            self.unmarshal_text(src)
            return
        raise TypeError(f"uuid: cannot convert {type(src).__name__} to UUID")

    def bytes(self) -> bytes:
        """Return the raw 16 bytes."""
        return bytes(self._data)


@dataclass
class NullUUID:
    """A UUID that may be NULL in a database."""

    uuid: UUID = field(default_factory=UUID)
    valid: bool = False

    def value(self) -> Optional[str]:
        """Return None when not valid, otherwise the canonical string."""
        if not self.valid:
            return None
        return self.uuid.value()

    def scan(self, src: object) -> None:
        """Load a database value; None marks the value as NULL."""
        if src is None:
            self.uuid = UUID()
            self.valid = False
            return
        self.valid = True
        self.uuid.scan(src)


NIL = UUID()

NAMESPACE_DNS = UUID(bytes.fromhex("6ba7b8109dad11d180b400c04fd430c8"))
NAMESPACE_URL = UUID(bytes.fromhex("6ba7b8119dad11d180b400c04fd430c8"))
NAMESPACE_OID = UUID(bytes.fromhex("6ba7b8129dad11d180b400c04fd430c8"))
NAMESPACE_X500 = UUID(bytes.fromhex("6ba7b8149dad11d180b400c04fd430c8"))


def equal(u1: UUID, u2: UUID) -> bool:
    """Return True if both UUIDs hold the same bytes."""
    return u1.marshal_binary() == u2.marshal_binary()


def from_bytes(data: BytesLike) -> UUID:
    """Build a UUID from exactly 16 raw bytes."""
    u = UUID()
    u.unmarshal_binary(data)
    return u


def from_bytes_or_nil(data: BytesLike) -> UUID:
    """Like from_bytes, but return the nil UUID on error."""
    try:
        return from_bytes(data)
    except ValueError:
        return UUID()


def from_string(text: TextLike) -> UUID:
    """Parse a UUID from any supported text form."""
    u = UUID()
    u.unmarshal_text(text)
    return u


def from_string_or_nil(text: TextLike) -> UUID:
    """Like from_string, but return the nil UUID on error."""
    try:
        return from_string(text)
    except ValueError:
        return UUID()