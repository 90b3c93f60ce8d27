"""Blowfish block cipher as used to protect the game's data archives."""

from __future__ import annotations

import functools
import itertools
import struct

_MASK = 0xFFFFFFFF
_ROUNDS = 16
_P_WORDS = _ROUNDS + 2
_S_BOXES = 4
_S_WORDS = 256
_BLOCK = struct.Struct("<II")


def _arctan_inverse(x: int, one: int) -> int:
    """Fixed-point arctan(1/x) scaled by ``one``."""
    total = term = one // x
    x_squared = x * x
    divisor = 1
    sign = -1
    while True:
        term //= x_squared
        divisor += 2
        step = term // divisor
        if step == 0:
            return total
        total += sign * step
        sign = -sign


@functools.lru_cache(maxsize=1)
def _initial_tables() -> tuple[tuple[int, ...], tuple[tuple[int, ...], ...]]:
    """The standard initial P-array and S-boxes: the hex digits of pi's fraction."""
    count = _P_WORDS + _S_BOXES * _S_WORDS
    guard = 64
    bits = count * 32 + guard
    one = 1 << bits
    pi = 16 * _arctan_inverse(5, one) - 4 * _arctan_inverse(239, one)
    fraction = (pi - 3 * one) >> guard
    words = [(fraction >> (32 * (count - 1 - i))) & _MASK for i in range(count)]
    p_array = tuple(words[:_P_WORDS])
    boxes = tuple(
        tuple(words[_P_WORDS + box * _S_WORDS:_P_WORDS + (box + 1) * _S_WORDS])
        for box in range(_S_BOXES)
    )
    return p_array, boxes


def _key_values(key: str | bytes) -> list[int]:
    """Key bytes as 32-bit words, sign-extending bytes above 0x7F like a signed char."""
    raw = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    if not raw:
        return [0]
    return [(byte - 256 if byte >= 0x80 else byte) & _MASK for byte in raw]


def _check_word(value: int) -> int:
    if not 0 <= value <= _MASK:
        raise ValueError(f"block half {value!r} is not an unsigned 32-bit value")
    return value


class BlowFish:
    """Blowfish cipher keyed once and applied to 64-bit blocks."""

    def __init__(self, key: str | bytes) -> None:
        initial_p, initial_s = _initial_tables()
        self._s = [list(box) for box in initial_s]

        key_stream = itertools.cycle(_key_values(key))
        self._p = []
        for word in initial_p:
            data = 0
            for _ in range(4):
                data = ((data << 8) | next(key_stream)) & _MASK
            self._p.append(word ^ data)

        left = right = 0
        for index in range(0, _P_WORDS, 2):
            left, right = self.encrypt_block(left, right)
            self._p[index], self._p[index + 1] = left, right

        for box in self._s:
            for index in range(0, _S_WORDS, 2):
                left, right = self.encrypt_block(left, right)
                box[index], box[index + 1] = left, right

    def _feistel(self, x: int) -> int:
        s0, s1, s2, s3 = self._s
        y = (s0[(x >> 24) & 0xFF] + s1[(x >> 16) & 0xFF]) & _MASK
        y ^= s2[(x >> 8) & 0xFF]
        return (y + s3[x & 0xFF]) & _MASK

    def encrypt_block(self, left: int, right: int) -> tuple[int, int]:
        """Encrypt one block given as two 32-bit halves."""
        xl, xr = _check_word(left), _check_word(right)
        for subkey in self._p[:_ROUNDS]:
            xl ^= subkey
            xr ^= self._feistel(xl)
            xl, xr = xr, xl
        xl, xr = xr, xl
        xr ^= self._p[_ROUNDS]
        xl ^= self._p[_ROUNDS + 1]
        return xl, xr

    def decrypt_block(self, left: int, right: int) -> tuple[int, int]:
        """Decrypt one block given as two 32-bit halves."""
        xl, xr = _check_word(left), _check_word(right)
        for subkey in reversed(self._p[2:]):
            xl ^= subkey
            xr ^= self._feistel(xl)
            xl, xr = xr, xl
        xl, xr = xr, xl
        xr ^= self._p[1]
        xl ^= self._p[0]
        return xl, xr

    def _apply(self, data: bytes, block_function) -> bytes:
        data = bytes(data)
        whole = len(data) - len(data) % _BLOCK.size
        out = bytearray()
        for left, right in _BLOCK.iter_unpack(data[:whole]):
            out += _BLOCK.pack(*block_function(left, right))
        out += data[whole:]
        return bytes(out)

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt every whole 8-byte block (little-endian halves); a trailing partial block is kept."""
        return self._apply(data, self.encrypt_block)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt every whole 8-byte block (little-endian halves); a trailing partial block is kept."""
        return self._apply(data, self.decrypt_block)