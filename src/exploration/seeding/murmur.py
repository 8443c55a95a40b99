"""MurmurHash3 (x86, 32-bit) over byte strings.

Byte-string seeds are mixed through this hash before they reach the
uniform stream. The implementation is bit-exact with the reference
``MurmurHash3_x86_32`` so the same textual seed yields the same draws in
every port of the library.
"""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF

_C1 = 0xCC9E2D51
_C2 = 0x1B873593
_R1 = 15
_R2 = 13
_M = 5
_N = 0xE6546B64

_FMIX_C1 = 0x85EBCA6B
_FMIX_C2 = 0xC2B2AE35


def _rotl32(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def _scramble(k: int) -> int:
    k = (k * _C1) & _MASK32
    k = _rotl32(k, _R1)
    return (k * _C2) & _MASK32


def _fmix32(h: int) -> int:
    """Final avalanche step forcing all bits of *h* to mix."""
    h ^= h >> 16
    h = (h * _FMIX_C1) & _MASK32
    h ^= h >> 13
    h = (h * _FMIX_C2) & _MASK32
    h ^= h >> 16
    return h


def murmurhash3_32(data: bytes | bytearray | memoryview, seed: int = 0) -> int:
    """Hash *data* with MurmurHash3 x86_32.

    Args:
        data: Bytes to hash.
        seed: 32-bit hash seed. The exploration library always uses 0.

    Returns:
        Unsigned 32-bit hash value.
    """
    buf = bytes(data)
    length = len(buf)
    h = seed & _MASK32

    block_end = length - (length & 3)
    for offset in range(0, block_end, 4):
        k = int.from_bytes(buf[offset : offset + 4], "little")
        h ^= _scramble(k)
        h = _rotl32(h, _R2)
        h = (h * _M + _N) & _MASK32

    tail = buf[block_end:]
    if tail:
        # Same little-endian packing as the reference switch fallthrough.
        h ^= _scramble(int.from_bytes(tail, "little"))

    h ^= length
    return _fmix32(h)
