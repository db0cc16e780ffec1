"""Hexadecimal bucket formatting.

Maps a 32-bit value onto one of ``max_bucket + 1`` buckets and renders the
bucket as zero-padded lowercase hex, e.g. ``max_bucket=4095`` gives the three
digit codes ``000`` through ``fff``.
"""


def bucket_count(max_bucket: int) -> int:
    """Number of distinct buckets for an inclusive upper bound."""
    return max_bucket + 1


def bucket_width(max_bucket: int) -> int:
    """Get the number of hex digits used to render buckets for max_bucket.

    The width is found by repeatedly folding the bucket count into its base-16
    quotient plus remainder until it fits in a single digit. This matches the
    minimal hex width for most bounds, including powers of 16 (15, 255, 4095,
    ...), but can be wider for others, e.g. ``max_bucket=254`` renders ``0fe``.
    Existing keys depend on these widths, so the rule must not change.

    Args:
        max_bucket: Inclusive upper bound of the bucket index

    Returns:
        Digit width, at least 1
    """
    width = 1
    remaining = bucket_count(max_bucket)
    while remaining > 16:
        width += 1
        remaining = remaining // 16 + remaining % 16
    return width


def format_bucket(value: int, max_bucket: int) -> str:
    """Render value as a zero-padded lowercase hex bucket code.

    Examples:
        format_bucket(15, 4095) -> "00f"
        format_bucket(4096, 4095) -> "000"
        format_bucket(10, 4096) -> "000a"
        format_bucket(7, 0) -> "0"

    Args:
        value: Unsigned 32-bit value, typically from reduce_bytes
        max_bucket: Inclusive upper bound of the bucket index

    Returns:
        Hex string of exactly bucket_width(max_bucket) characters
    """
    bucket = value % bucket_count(max_bucket)
    return format(bucket, "x").rjust(bucket_width(max_bucket), "0")


__all__ = ["bucket_count", "bucket_width", "format_bucket"]
