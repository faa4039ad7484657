"""CRC-32C (Castagnoli) checksum, the polynomial used by iSCSI."""

from __future__ import annotations

_POLY = 0x82F63B78
_MASK = 0xFFFFFFFF


def _build_table() -> tuple[int, ...]:
    table = []
    for n in range(256):
        crc = n
        for _ in range(8):
            crc = (crc >> 1) ^ _POLY if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def crc32c(data, crc: int = 0) -> int:
    """Return the CRC-32C of ``data``.

    ``crc`` is the value returned for the preceding part of the input, so a
    checksum can be computed piece by piece; pass 0 to start a new one.
    """
    if not 0 <= crc <= _MASK:
        raise ValueError("crc must be an unsigned 32-bit value")
    table = _TABLE
    value = crc ^ _MASK
    for byte in bytes(data):
        value = table[(value ^ byte) & 0xFF] ^ (value >> 8)
    return value ^ _MASK