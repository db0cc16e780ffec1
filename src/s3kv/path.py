"""Key construction from path segments.

A key is built from an ordered list of segments joined by the configured
separator. Raw segments are written as-is; hashed segments are replaced by a
bucket code, which spreads keys sharing a lexical prefix (sequential ids,
timestamps) across object-storage partitions.

Examples:
    >>> hash_path([Segment.raw("some"), Segment.raw("key")])
    b'some/key'
    >>> hash_path([Segment.hashed("value"), Segment.raw("value")])
    b'804/value'
"""

import io
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .bucket import format_bucket
from .config import HashConfig, HashOption, default_config
from .reduce import reduce_bytes

logger = logging.getLogger(__name__)


def _to_bytes(key: bytes | str) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


@dataclass(frozen=True)
class Segment:
    """One element of a key path.

    Raw keys are written verbatim; separators inside a key are neither
    escaped nor rejected.
    """

    key: bytes
    hash: bool = False

    @classmethod
    def raw(cls, key: bytes | str) -> "Segment":
        """Segment written verbatim (str keys are UTF-8 encoded)."""
        return cls(key=_to_bytes(key), hash=False)

    @classmethod
    def hashed(cls, key: bytes | str) -> "Segment":
        """Segment replaced by its bucket code (str keys are UTF-8 encoded)."""
        return cls(key=_to_bytes(key), hash=True)


def bucket_for(key: bytes, config: HashConfig) -> str:
    """Get the bucket code for a single key under config."""
    return format_bucket(reduce_bytes(config.digest(key)), config.max_bucket)


def hash_path(
    path: Iterable[Segment],
    *opts: Optional[HashOption],
    config: HashConfig | None = None,
) -> bytes:
    """Join path segments into a storage key.

    Args:
        path: Segments in key order
        *opts: Options applied in order to a copy of the base config;
            None entries are skipped
        config: Base config, defaults to default_config().hash

    Returns:
        Key bytes; empty when path is empty
    """
    base = config if config is not None else default_config().hash
    effective = base.apply(*opts)
    if effective is not base:
        logger.debug(
            f"Hashing with overrides: separator={effective.separator!r}, "
            f"max_bucket={effective.max_bucket}"
        )

    buffer = io.BytesIO()
    for i, segment in enumerate(path):
        if i:
            buffer.write(effective.separator)
        if not segment.hash:
            buffer.write(segment.key)
            continue
        buffer.write(bucket_for(segment.key, effective).encode("ascii"))
    return buffer.getvalue()


__all__ = ["Segment", "bucket_for", "hash_path"]
