"""The 64-bit xxHash function."""

_MASK = (1 << 64) - 1
_P1 = 11400714785074694791
_P2 = 14029467366897019727
_P3 = 1609587929392839161
_P4 = 9650029242287828579
_P5 = 2870177450012600261


def _rotl(value: int, count: int) -> int:
    return ((value << count) | (value >> (64 - count))) & _MASK


def _round(acc: int, lane: int) -> int:
    acc = (acc + lane * _P2) & _MASK
    return (_rotl(acc, 31) * _P1) & _MASK


def _merge(acc: int, value: int) -> int:
    acc ^= _round(0, value)
    return (acc * _P1 + _P4) & _MASK


def xxhash64(data: bytes | str, seed: int = 0) -> int:
    """Return the XXH64 digest of ``data`` as an unsigned integer."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    seed &= _MASK
    length = len(data)
    offset = 0

    if length >= 32:
        accs = [
            (seed + _P1 + _P2) & _MASK,
            (seed + _P2) & _MASK,
            seed,
            (seed - _P1) & _MASK,
        ]
        stop = length - 32
        while offset <= stop:
            accs = [
                _round(acc, int.from_bytes(data[offset + 8 * i : offset + 8 * i + 8], "little"))
                for i, acc in enumerate(accs)
            ]
            offset += 32
        h = (_rotl(accs[0], 1) + _rotl(accs[1], 7) + _rotl(accs[2], 12) + _rotl(accs[3], 18)) & _MASK
        for acc in accs:
            h = _merge(h, acc)
    else:
        h = (seed + _P5) & _MASK

    h = (h + length) & _MASK

    while offset + 8 <= length:
        h ^= _round(0, int.from_bytes(data[offset : offset + 8], "little"))
        h = (_rotl(h, 27) * _P1 + _P4) & _MASK
        offset += 8

    if offset + 4 <= length:
        h ^= (int.from_bytes(data[offset : offset + 4], "little") * _P1) & _MASK
        h = (_rotl(h, 23) * _P2 + _P3) & _MASK
        offset += 4

    for byte in data[offset:]:
        h ^= (byte * _P5) & _MASK
        h = (_rotl(h, 11) * _P1) & _MASK

    h ^= h >> 33
    h = (h * _P2) & _MASK
    h ^= h >> 29
    h = (h * _P3) & _MASK
    h ^= h >> 32
    return h