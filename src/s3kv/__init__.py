"""s3kv - well-distributed object storage keys from path segments."""

from ._version import __version__
from .bucket import bucket_count, bucket_width, format_bucket
from .config import (
    Config,
    HashConfig,
    HashOption,
    apply_options,
    default_config,
    with_digest,
    with_max_bucket,
    with_separator,
)
from .digest import DigestFunction, available_digests, get_digest, md5_digest
from .errors import ConfigError, S3KVError
from .path import Segment, hash_path
from .reduce import fold_bytes, reduce_bytes


__all__ = [
    "Config",
    "ConfigError",
    "DigestFunction",
    "HashConfig",
    "HashOption",
    "S3KVError",
    "Segment",
    "__version__",
    "apply_options",
    "available_digests",
    "bucket_count",
    "bucket_width",
    "default_config",
    "fold_bytes",
    "format_bucket",
    "get_digest",
    "hash_path",
    "md5_digest",
    "reduce_bytes",
    "with_digest",
    "with_max_bucket",
    "with_separator",
]
