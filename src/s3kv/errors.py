"""Error types for s3kv."""


class S3KVError(Exception):
    """Base exception for s3kv errors."""
    pass


class ConfigError(S3KVError):
    """Configuration error."""
    pass
