from typing import Callable, TypeVar

T = TypeVar("T")

Hasher = Callable[[T], int]

HASH_MASK = 0xFFFFFFFFFFFFFFFF
U32_MASK = 0xFFFFFFFF

_STRING_SEED = 352654597
_STRING_MULTIPLIER = 1566083941


def hash_u8(value: int) -> int:
    return value


def hash_u64(value: int) -> int:
    """One-at-a-time mix of the 8 bytes of value, low byte first."""
    hash = 0
    for _ in range(8):
        hash = (hash + (value & 0xFF)) & HASH_MASK
        hash = (hash + (hash << 10)) & HASH_MASK
        hash ^= hash >> 6
        value >>= 8

    hash = (hash + (hash << 3)) & HASH_MASK
    hash ^= hash >> 11
    hash = (hash + (hash << 15)) & HASH_MASK
    return hash


def _signed_char(b: int) -> int:
    return b - 256 if b >= 128 else b


def hash_string(value: str) -> int:
    """Two interleaved 32-bit streams, each fed two bytes per step.

    The text is hashed as UTF-8 with every byte read as a signed char, so
    bytes from 0x80 up are negative and sign-extend into the mix. Bytes 0-1
    of every group of four go to the first stream and bytes 2-3 to the
    second. The final combine wraps at 32 bits.
    """
    data = [_signed_char(b) for b in value.encode("utf-8")]
    num = _STRING_SEED
    num2 = _STRING_SEED
    length = len(data)

    for i in range(0, length, 4):
        ptr0 = data[i] << 16
        if i + 1 < length:
            ptr0 |= data[i + 1]

        num = (((num << 5) + num + (num >> 27)) ^ ptr0) & U32_MASK

        if i + 2 < length:
            ptr1 = data[i + 2] << 16
            if i + 3 < length:
                ptr1 |= data[i + 3]

            num2 = (((num2 << 5) + num2 + (num2 >> 27)) ^ ptr1) & U32_MASK

    return (num + num2 * _STRING_MULTIPLIER) & U32_MASK
