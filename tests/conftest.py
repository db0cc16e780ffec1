"""Shared fixtures for s3kv tests."""

import pytest

from s3kv import HashConfig, Segment, with_max_bucket


@pytest.fixture
def one_char():
    """Option limiting buckets to a single hex digit."""
    return with_max_bucket(15)


@pytest.fixture
def two_hashes():
    """Path with two hashed segments, each followed by its raw form."""
    return [
        Segment.hashed("this/is/some/path"),
        Segment.raw("this/is/some/path"),
        Segment.hashed("with/two/hashes"),
        Segment.raw("with/two/hashes"),
    ]


@pytest.fixture
def hash_env(monkeypatch):
    """Clear S3KV_* variables so tests start from defaults."""
    for name in ("S3KV_SEPARATOR", "S3KV_MAX_BUCKET", "S3KV_DIGEST"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def default_hash_config():
    return HashConfig()
