"""Byte reduction for bucket hashing.

Folds an arbitrary-length byte sequence into a fixed-width unsigned
integer by treating it as a big-endian base-256 number.
"""

UINT32_MODULUS = 1 << 32


def fold_bytes(data: bytes, modulus: int) -> int:
    """Fold data into [0, modulus) using Horner's method.

    Each byte is folded left to right as ``acc = (acc * 256 + b) % modulus``,
    which is ``int.from_bytes(data, "big") % modulus`` without materializing
    the full integer.

    Args:
        data: Bytes to fold (may be empty)
        modulus: Positive modulus

    Returns:
        Folded value in the range [0, modulus)

    Raises:
        ValueError: If modulus is not positive
    """
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got {modulus}")

    acc = 0
    for b in data:
        acc = (acc * 256 + b) % modulus
    return acc


def reduce_bytes(data: bytes) -> int:
    """Reduce data to an unsigned 32-bit integer.

    Since 256**4 is congruent to 0 modulo 2**32, the result equals the last
    four bytes of data read as a big-endian uint32. Empty input yields 0.

    Examples:
        reduce_bytes(b"") -> 0
        reduce_bytes(b"\\x01\\x02") -> 258
        reduce_bytes(b"\\xff" * 17) -> 4294967295
    """
    return fold_bytes(data, UINT32_MODULUS)


__all__ = ["UINT32_MODULUS", "fold_bytes", "reduce_bytes"]
