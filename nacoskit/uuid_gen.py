"""Generation of version 1 to 5 UUIDs."""

from __future__ import annotations

import hashlib
import os
import threading
import time
from pathlib import Path
from typing import Callable

from nacoskit.uuids import UUID, Domain, Variant, Version

# Difference in 100-nanosecond intervals between the UUID epoch
# (October 15, 1582) and the Unix epoch (January 1, 1970).
EPOCH_START = 122192928000000000

_UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF
_SYS_NET = Path("/sys/class/net")

_POSIX_UID = os.getuid() & 0xFFFFFFFF if hasattr(os, "getuid") else 0
_POSIX_GID = os.getgid() & 0xFFFFFFFF if hasattr(os, "getgid") else 0


def default_hw_addr() -> bytes:
    """Return the hardware address of the first network interface that has one.

    Raises OSError when no interface with a hardware address is found.
    """
    try:
        entries = sorted(_SYS_NET.iterdir())
    except OSError as exc:
        raise OSError("uuid: no HW address found") from exc
    for entry in entries:
        try:
            text = (entry / "address").read_text(encoding="ascii").strip()
        except (OSError, UnicodeDecodeError):
            continue
        try:
            addr = bytes.fromhex(text.replace(":", ""))
        except ValueError:
            continue
        if len(addr) >= 6 and any(addr):
            return addr
    raise OSError("uuid: no HW address found")


class Generator:
    """RFC 4122 UUID generator.

    ``epoch_func`` returns the current time in nanoseconds since the Unix
    epoch, ``hw_addr_func`` returns a hardware address or raises OSError, and
    ``rand`` returns up to the requested number of random bytes.
    """

    def __init__(
        self,
        epoch_func: Callable[[], int] = time.time_ns,
        hw_addr_func: Callable[[], bytes] = default_hw_addr,
        rand: Callable[[int], bytes] = os.urandom,
    ) -> None:
        self._epoch_func = epoch_func
        self._hw_addr_func = hw_addr_func
        self._rand = rand
        self._lock = threading.Lock()
        self._clock_sequence_ready = False
        self._hardware_addr_ready = False
        self._last_time = 0
        self._clock_sequence = 0
        self._hardware_addr = bytes(6)

    def _read_full(self, size: int) -> bytes:
        buf = bytearray()
        while len(buf) < size:
            chunk = self._rand(size - len(buf))
            if not chunk:
                raise OSError("uuid: unexpected end of random data")
            buf += chunk
        return bytes(buf[:size])

    def _epoch(self) -> int:
        return (EPOCH_START + self._epoch_func() // 100) & _UINT64_MASK

    def _time_and_clock_sequence(self) -> tuple[int, int]:
        with self._lock:
            if not self._clock_sequence_ready:
                self._clock_sequence_ready = True
                self._clock_sequence = int.from_bytes(self._read_full(2), "big")
            now = self._epoch()
            # Clock didn't advance since the last UUID: bump the sequence.
            if now <= self._last_time:
                self._clock_sequence = (self._clock_sequence + 1) & 0xFFFF
            self._last_time = now
            return now, self._clock_sequence

    def _hardware(self) -> bytes:
        with self._lock:
            if not self._hardware_addr_ready:
                self._hardware_addr_ready = True
                try:
                    addr = bytes(self._hw_addr_func())
                except OSError:
                    random_addr = bytearray(self._read_full(6))
                    # Multicast bit, as RFC 4122 recommends for random nodes.
                    random_addr[0] |= 0x01
                    self._hardware_addr = bytes(random_addr)
                else:
                    self._hardware_addr = (addr[:6] + bytes(6))[:6]
            return self._hardware_addr

    def new_v1(self) -> UUID:
        """Return a UUID built from the current time and the hardware address."""
        now, clock_seq = self._time_and_clock_sequence()
        hardware = self._hardware()
        buf = bytearray(16)
        buf[0:4] = (now & 0xFFFFFFFF).to_bytes(4, "big")
        buf[4:6] = ((now >> 32) & 0xFFFF).to_bytes(2, "big")
        buf[6:8] = ((now >> 48) & 0xFFFF).to_bytes(2, "big")
        buf[8:10] = clock_seq.to_bytes(2, "big")
        buf[10:16] = hardware
        u = UUID(buf)
        u.set_version(Version.V1)
        u.set_variant(Variant.RFC4122)
        return u

    def new_v2(self, domain: int) -> UUID:
        """Return a DCE security UUID based on the POSIX UID or GID."""
        data = bytearray(self.new_v1().bytes())
        if domain == Domain.PERSON:
            data[0:4] = _POSIX_UID.to_bytes(4, "big")
        elif domain == Domain.GROUP:
            data[0:4] = _POSIX_GID.to_bytes(4, "big")
        data[9] = domain & 0xFF
        u = UUID(data)
        u.set_version(Version.V2)
        u.set_variant(Variant.RFC4122)
        return u

    def new_v3(self, ns: UUID, name: str) -> UUID:
        """Return a UUID from the MD5 hash of a namespace and a name."""
        u = _from_hash(hashlib.md5(), ns, name)
        u.set_version(Version.V3)
        u.set_variant(Variant.RFC4122)
        return u

    def new_v4(self) -> UUID:
        """Return a random UUID."""
        u = UUID(self._read_full(16))
        u.set_version(Version.V4)
        u.set_variant(Variant.RFC4122)
        return u

    def new_v5(self, ns: UUID, name: str) -> UUID:
        """Return a UUID from the SHA-1 hash of a namespace and a name."""
        u = _from_hash(hashlib.sha1(), ns, name)
        u.set_version(Version.V5)
        u.set_variant(Variant.RFC4122)
        return u


def _from_hash(hasher: "hashlib._Hash", ns: UUID, name: str) -> UUID:
    hasher.update(ns.bytes())
    hasher.update(name.encode("utf-8"))
    return UUID(hasher.digest()[:16])


_GLOBAL = Generator()


def new_v1() -> UUID:
    """Return a time and hardware address based UUID."""
    return _GLOBAL.new_v1()


def new_v2(domain: int) -> UUID:
    """Return a DCE security UUID."""
    return _GLOBAL.new_v2(domain)


def new_v3(ns: UUID, name: str) -> UUID:
    """Return an MD5 name based UUID."""
    return _GLOBAL.new_v3(ns, name)


def new_v4() -> UUID:
    """Return a random UUID."""
    return _GLOBAL.new_v4()


def new_v5(ns: UUID, name: str) -> UUID:
    """Return a SHA-1 name based UUID."""
    return _GLOBAL.new_v5(ns, name)