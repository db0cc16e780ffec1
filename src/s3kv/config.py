"""Hashing configuration and per-call options.

``HashConfig`` is immutable. Overrides are expressed as ``HashOption``
callables that take a config and return a modified copy, so the shared
default can be used from any thread without locking.

Examples:
    >>> config = default_config().hash
    >>> small = config.apply(with_max_bucket(15))
    >>> small.max_bucket, config.max_bucket
    (15, 4095)
"""

import logging
import os
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Callable, Iterable, Optional, TYPE_CHECKING

from .digest import DigestFunction, get_digest, md5_digest
from .errors import ConfigError

if TYPE_CHECKING:
    from .path import Segment

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = b"/"
DEFAULT_MAX_BUCKET = 4095
MAX_UINT32 = 0xFFFFFFFF


@dataclass(frozen=True)
class HashConfig:
    """Configuration for hashing path segments."""

    separator: bytes = DEFAULT_SEPARATOR
    """Bytes written between consecutive segments."""

    max_bucket: int = DEFAULT_MAX_BUCKET
    """Inclusive upper bound of the bucket index; max_bucket + 1 buckets."""

    digest: DigestFunction = md5_digest
    """Function that scrambles a segment's bytes before reduction."""

    @classmethod
    def from_env(cls) -> "HashConfig":
        """Load configuration from environment variables.

        Variables are prefixed with S3KV_; unset variables keep defaults:
        - S3KV_SEPARATOR -> separator (UTF-8 encoded)
        - S3KV_MAX_BUCKET -> max_bucket
        - S3KV_DIGEST -> digest, by registered name (e.g. "sha256")

        Raises:
            ConfigError: If a variable cannot be parsed
        """
        config = cls()

        separator = os.environ.get("S3KV_SEPARATOR")
        if separator is not None:
            config = replace(config, separator=separator.encode("utf-8"))

        max_bucket = os.environ.get("S3KV_MAX_BUCKET")
        if max_bucket is not None:
            try:
                value = int(max_bucket)
            except ValueError:
                raise ConfigError(f"Invalid S3KV_MAX_BUCKET: {max_bucket!r}") from None
            config = replace(config, max_bucket=check_max_bucket(value))

        digest = os.environ.get("S3KV_DIGEST")
        if digest:
            config = replace(config, digest=get_digest(digest))

        logger.debug(
            f"Loaded hash config from environment: separator={config.separator!r}, "
            f"max_bucket={config.max_bucket}"
        )
        return config

    def apply(self, *opts: Optional["HashOption"]) -> "HashConfig":
        """Return a copy of this config with opts applied in order."""
        return apply_options(self, *opts)

    def hash(self, path: Iterable["Segment"], *opts: Optional["HashOption"]) -> bytes:
        """Join path into a key using this config; see s3kv.path.hash_path."""
        from .path import hash_path

        return hash_path(path, *opts, config=self)


HashOption = Callable[[HashConfig], HashConfig]


@dataclass(frozen=True)
class Config:
    """Full set of configuration for s3kv."""

    hash: HashConfig = field(default_factory=HashConfig)


@lru_cache(maxsize=1)
def default_config() -> Config:
    """Get the process-wide default configuration.

    Built once on first use. The returned value is immutable; use options
    to derive overrides from it.
    """
    return Config()


def apply_options(config: HashConfig, *opts: Optional[HashOption]) -> HashConfig:
    """Apply options to config in order, skipping None entries.

    Later options win over earlier ones that set the same field. config
    itself is never modified.
    """
    for opt in opts:
        if opt is None:
            continue
        config = opt(config)
    return config


def check_max_bucket(max_bucket: int) -> int:
    """Ensure max_bucket fits an unsigned 32-bit integer.

    Raises:
        ConfigError: If max_bucket is out of range
    """
    if not 0 <= max_bucket <= MAX_UINT32:
        raise ConfigError(f"max_bucket must be between 0 and {MAX_UINT32}, got {max_bucket}")
    return max_bucket


def with_separator(separator: bytes | str) -> HashOption:
    """Option that sets the segment separator."""
    if isinstance(separator, str):
        separator = separator.encode("utf-8")

    def option(config: HashConfig) -> HashConfig:
        return replace(config, separator=separator)

    return option


def with_max_bucket(max_bucket: int) -> HashOption:
    """Option that sets the inclusive bucket upper bound.

    Raises:
        ConfigError: If max_bucket is not a valid unsigned 32-bit integer
    """
    check_max_bucket(max_bucket)

    def option(config: HashConfig) -> HashConfig:
        return replace(config, max_bucket=max_bucket)

    return option


def with_digest(digest: DigestFunction | str) -> HashOption:
    """Option that sets the digest, given as a function or registered name."""
    if isinstance(digest, str):
        digest = get_digest(digest)

    def option(config: HashConfig) -> HashConfig:
        return replace(config, digest=digest)

    return option


__all__ = [
    "DEFAULT_MAX_BUCKET",
    "DEFAULT_SEPARATOR",
    "MAX_UINT32",
    "Config",
    "HashConfig",
    "HashOption",
    "apply_options",
    "check_max_bucket",
    "default_config",
    "with_digest",
    "with_max_bucket",
    "with_separator",
]
