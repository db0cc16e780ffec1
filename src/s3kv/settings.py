"""YAML-backed hashing settings.

``HashSettings`` is the serializable form of ``HashConfig``: the digest is
stored by registered name rather than as a function.

Example settings.yaml:
    separator: "/"
    max_bucket: 255
    digest: sha256
"""

import logging
from pathlib import Path
from typing import TypeVar

import typer
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from rich.console import Console

from .config import DEFAULT_MAX_BUCKET, MAX_UINT32, HashConfig
from .digest import available_digests, get_digest

T = TypeVar("T", bound="ConfigModel")
console = Console(stderr=True)
logger = logging.getLogger(__name__)


class ConfigModel(BaseModel):
    """Base model with YAML loading/saving capabilities."""

    @classmethod
    def from_yaml(cls: type[T], path: Path) -> T:
        """
        Load and validate configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Validated configuration model instance

        Raises:
            typer.Exit: On file not found, invalid YAML, or validation errors
        """
        if not path.exists():
            console.print(f"[red]Configuration file not found:[/red] {path}")
            raise typer.Exit(1)

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            cls._handle_yaml_error(e, path)
        except OSError as e:
            console.print(f"[red]Error reading configuration file:[/red] {path}")
            console.print(f"[dim]{e}[/dim]")
            raise typer.Exit(1)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            console.print(f"[red]Invalid {cls.__name__} configuration:[/red] {path.name}")
            console.print(f"  [yellow]Expected a mapping of settings, got {type(data).__name__}[/yellow]")
            raise typer.Exit(1)

        try:
            model = cls(**data)
        except ValidationError as e:
            cls._handle_validation_error(e, path)

        logger.debug(f"Loaded {cls.__name__} from {path}")
        return model

    def to_yaml(self, path: Path):
        """
        Write configuration to YAML file.

        Args:
            path: Path to write YAML file
        """
        with open(path, "w") as f:
            f.write(self.to_yaml_string())

    def to_yaml_string(self) -> str:
        """
        Convert configuration to YAML string.

        Returns:
            YAML formatted string of the configuration
        """
        return yaml.safe_dump(
            self.model_dump(by_alias=True, exclude_unset=False),
            default_flow_style=False,
            sort_keys=False,
        )

    @classmethod
    def _handle_validation_error(cls, error: ValidationError, path: Path):
        """Pretty-print validation errors."""
        console.print(f"[red]Invalid {cls.__name__} configuration:[/red] {path.name}\n")

        for err in error.errors():
            field_path = " → ".join(str(loc) for loc in err["loc"])
            if "missing" in err["type"]:
                console.print(f"  [yellow]Missing required field:[/yellow] {field_path}")
            else:
                console.print(f"  [yellow]{field_path}:[/yellow] {err['msg']}")

        console.print("\n[dim]Check the configuration file format and required fields[/dim]")
        raise typer.Exit(1)

    @classmethod
    def _handle_yaml_error(cls, error: yaml.YAMLError, path: Path):
        """Handle YAML parsing errors."""
        console.print(f"[red]Invalid YAML syntax in:[/red] {path.name}")

        if hasattr(error, "problem_mark"):
            mark = error.problem_mark
            console.print(f"  Line {mark.line + 1}, Column {mark.column + 1}")

        console.print(f"\n[dim]{error}[/dim]")
        raise typer.Exit(1)


class HashSettings(ConfigModel):
    """Serializable hashing settings."""

    model_config = ConfigDict(extra="forbid")

    separator: str = "/"
    max_bucket: int = Field(DEFAULT_MAX_BUCKET, ge=0, le=MAX_UINT32)
    digest: str = "md5"

    @field_validator("digest")
    @classmethod
    def validate_digest(cls, v: str) -> str:
        """Ensure the digest is registered."""
        name = v.strip().lower()
        if name not in available_digests():
            raise ValueError(
                f"Unknown digest '{v}', expected one of: {', '.join(available_digests())}"
            )
        return name

    def to_hash_config(self) -> HashConfig:
        """Build the runtime HashConfig for these settings."""
        return HashConfig(
            separator=self.separator.encode("utf-8"),
            max_bucket=self.max_bucket,
            digest=get_digest(self.digest),
        )


__all__ = ["ConfigModel", "HashSettings"]
