"""Digest functions applied to segment keys before reduction.

Any deterministic ``bytes -> bytes`` callable can be used as a digest. The
named registry below backs configuration files, environment variables and
the CLI, where a function cannot be passed directly.

A non-deterministic digest is a programming error: keys are still produced,
but identical segments will no longer map to identical keys.
"""

import hashlib
from typing import Protocol

from .errors import ConfigError


class DigestFunction(Protocol):
    """One-way hash over raw segment bytes."""

    def __call__(self, data: bytes) -> bytes:
        ...


def md5_digest(data: bytes) -> bytes:
    """Return the 16 byte MD5 digest of data (the default digest)."""
    # Used for key distribution only
    return hashlib.md5(data, usedforsecurity=False).digest()


def _hashlib_digest(name: str) -> DigestFunction:
    def digest(data: bytes) -> bytes:
        return hashlib.new(name, data).digest()

    digest.__name__ = f"{name}_digest"
    digest.__qualname__ = digest.__name__
    return digest


_DIGESTS: dict[str, DigestFunction] = {
    "md5": md5_digest,
    **{
        name: _hashlib_digest(name)
        for name in (
            "sha1",
            "sha224",
            "sha256",
            "sha384",
            "sha512",
            "blake2b",
            "blake2s",
            "sha3_256",
        )
    },
}


def available_digests() -> list[str]:
    """Get the names of all registered digests, sorted."""
    return sorted(_DIGESTS)


def get_digest(name: str) -> DigestFunction:
    """Look up a registered digest by name.

    Args:
        name: Digest name such as "md5" or "sha256" (case-insensitive)

    Returns:
        The digest function

    Raises:
        ConfigError: If no digest is registered under name
    """
    try:
        return _DIGESTS[name.strip().lower()]
    except KeyError:
        raise ConfigError(
            f"Unknown digest: {name!r} (available: {', '.join(available_digests())})"
        ) from None


def digest_name(digest: DigestFunction) -> str | None:
    """Reverse lookup of a registered digest's name, None if unregistered."""
    for name, registered in _DIGESTS.items():
        if registered is digest:
            return name
    return None


__all__ = [
    "DigestFunction",
    "md5_digest",
    "available_digests",
    "get_digest",
    "digest_name",
]
