"""Random strings and time-ordered unique identifiers."""

import os
import random
import threading
import time

ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

_rng = random.Random()
_id_lock = threading.Lock()


def random_string(length: int) -> str:
    """Return a random string of ``length`` alphanumeric characters."""
    return random_string_with_charset(length, ALPHABET)


def random_string_with_charset(length: int, charset: str) -> str:
    """Return a random string of ``length`` characters drawn from ``charset``."""
    if not charset:
        raise ValueError("charset must not be empty")
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(_rng.choice(charset) for _ in range(length))


def put_uint48(value: int) -> bytes:
    """Pack bits 8..55 of ``value`` into six bytes, lowest byte first."""
    return bytes((value >> shift) & 0xFF for shift in (8, 16, 24, 32, 40, 48))


def base58_encode(data: bytes) -> str:
    """Encode ``data`` with the Bitcoin base58 alphabet."""
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(BASE58_ALPHABET[remainder])
    return BASE58_ALPHABET[0] * leading_zeros + "".join(reversed(digits))


def generate_unique_id() -> str:
    """Return a base58 identifier built from the current time and random bytes."""
    with _id_lock:
        tail = os.urandom(4)
        millis = time.time_ns() // 1_000_000
    return base58_encode(put_uint48(millis) + tail)