"""s3kv CLI entry point."""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..bucket import bucket_width, format_bucket
from ..config import DEFAULT_MAX_BUCKET, MAX_UINT32, HashConfig, default_config, with_digest, with_max_bucket, with_separator
from ..digest import available_digests, digest_name, get_digest
from ..errors import S3KVError
from ..path import Segment, hash_path
from ..settings import HashSettings
from .display import error, info_dict, section, table

HASH_PREFIX = "#"

app = typer.Typer(
    name="s3kv",
    help="Build well-distributed object storage keys from path segments",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _base_config(config_file: Optional[Path], from_env: bool) -> HashConfig:
    """Resolve the base config from a settings file, the environment, or defaults."""
    if config_file is not None:
        return HashSettings.from_yaml(config_file).to_hash_config()
    if from_env:
        return HashConfig.from_env()
    return default_config().hash


def _parse_segments(
    values: List[str], hash_index: List[int], all_hashed: bool, literal: bool
) -> list[Segment]:
    for index in hash_index:
        if not 0 <= index < len(values):
            raise typer.BadParameter(
                f"segment index {index} out of range (0-{len(values) - 1})",
                param_hint="--hash",
            )

    segments = []
    for i, value in enumerate(values):
        hashed = all_hashed or i in hash_index
        if not literal and value.startswith(HASH_PREFIX):
            value = value[len(HASH_PREFIX):]
            hashed = True
        segments.append(Segment(key=value.encode("utf-8"), hash=hashed))
    return segments


@app.command()
def key(
    segments: List[str] = typer.Argument(
        ...,
        help=f"Path segments in order; a leading '{HASH_PREFIX}' marks a segment for hashing",
    ),
    hash_index: Optional[List[int]] = typer.Option(
        None, "--hash", "-H", help="0-based index of a segment to hash (repeatable)"
    ),
    all_hashed: bool = typer.Option(False, "--all-hashed", help="Hash every segment"),
    literal: bool = typer.Option(
        False, "--literal", help=f"Treat a leading '{HASH_PREFIX}' as part of the segment"
    ),
    separator: Optional[str] = typer.Option(None, "--separator", "-s", help="Segment separator"),
    max_bucket: Optional[int] = typer.Option(
        None, "--max-bucket", "-m", min=0, max=MAX_UINT32, help="Inclusive bucket upper bound"
    ),
    digest: Optional[str] = typer.Option(None, "--digest", "-d", help="Digest name (see 's3kv digests')"),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Hash settings file (YAML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    from_env: bool = typer.Option(False, "--env", help="Read S3KV_* environment variables"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show effective settings and debug logs"),
):
    """Print the key for a list of path segments.

    Example:
        s3kv key '#user-1234' photos 2024/01/01.jpg
        s3kv key user-1234 photos --hash 0 --max-bucket 255
    """
    _configure_logging(verbose)

    try:
        config = _base_config(config_file, from_env).apply(
            with_separator(separator) if separator is not None else None,
            with_max_bucket(max_bucket) if max_bucket is not None else None,
            with_digest(digest) if digest else None,
        )
        path = _parse_segments(segments, hash_index or [], all_hashed, literal)
    except S3KVError as e:
        error(str(e))
        raise typer.Exit(1)

    if verbose:
        section("Effective settings")
        info_dict({
            "separator": config.separator,
            "max_bucket": config.max_bucket,
            "digest": digest_name(config.digest) or config.digest,
            "hashed segments": [i for i, s in enumerate(path) if s.hash],
        })

    typer.echo(hash_path(path, config=config))


@app.command()
def bucket(
    value: int = typer.Argument(..., min=0, max=MAX_UINT32, help="Unsigned 32-bit value"),
    max_bucket: int = typer.Option(
        DEFAULT_MAX_BUCKET, "--max-bucket", "-m", min=0, max=MAX_UINT32, help="Inclusive bucket upper bound"
    ),
):
    """Print the bucket code for a 32-bit value."""
    typer.echo(format_bucket(value, max_bucket))


@app.command()
def width(
    max_bucket: int = typer.Argument(..., min=0, max=MAX_UINT32, help="Inclusive bucket upper bound"),
):
    """Print the number of hex digits used for buckets up to max_bucket."""
    typer.echo(bucket_width(max_bucket))


@app.command()
def digests():
    """List the available digest functions."""
    rows = [(name, len(get_digest(name)(b""))) for name in available_digests()]
    table("Digests", ["Name", "Size (bytes)"], rows)


@app.command()
def version():
    """Show s3kv version."""
    from .. import __version__

    typer.echo(f"s3kv version: {__version__}")


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
