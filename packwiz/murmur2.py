"""MurmurHash2 with the whitespace stripping used for CurseForge fingerprints."""

from __future__ import annotations

_M = 0x5BD1E995
_MASK = 0xFFFFFFFF
_WHITESPACE = bytes([9, 10, 13, 32])


def murmur_hash2(data: bytes, seed: int) -> int:
    """32-bit MurmurHash2 of ``data`` with the given seed."""
    length = len(data)
    h = (seed ^ length) & _MASK
    full = length - length % 4
    for offset in range(0, full, 4):
        k = int.from_bytes(data[offset:offset + 4], "little")
        k = (k * _M) & _MASK
        k ^= k >> 24
        k = (k * _M) & _MASK
        h = (h * _M) & _MASK
        h ^= k
    tail = data[full:]
    if tail:
        if len(tail) >= 3:
            h ^= tail[2] << 16
        if len(tail) >= 2:
            h ^= tail[1] << 8
        h ^= tail[0]
        h = (h * _M) & _MASK
    h ^= h >> 13
    h = (h * _M) & _MASK
    h ^= h >> 15
    return h


def normalize(data: bytes) -> bytes:
    """Remove tab, newline, carriage return and space bytes."""
    return bytes(data).translate(None, _WHITESPACE)


def fingerprint(data: bytes) -> int:
    """CurseForge file fingerprint: MurmurHash2 of the normalized bytes, seed 1."""
    return murmur_hash2(normalize(data), 1)


class Murmur2CF:
    """Hash object computing CurseForge fingerprints.

    The input is buffered, since the hash is seeded with the input length.
    """

    name = "murmur2"
    digest_size = 4
    block_size = 4

    def __init__(self, data: bytes = b"") -> None:
        self._buf = bytearray()
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        self._buf += normalize(data)

    def intdigest(self) -> int:
        return murmur_hash2(bytes(self._buf), 1)

    def digest(self) -> bytes:
        return self.intdigest().to_bytes(4, "big")

    def hexdigest(self) -> str:
        return self.digest().hex()

    def reset(self) -> None:
        self._buf = bytearray()