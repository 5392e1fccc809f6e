"""Configuration loading and validation."""

import argparse
import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from spellfuge.core.errors import ResourceLoadError
from spellfuge.utils.constants import Constants
from spellfuge.utils.helpers import expand_file_path


class Config(BaseModel):
    """Runtime configuration of the speller and the command-line front end."""

    model_config = ConfigDict(extra="forbid")

    # Language
    variant: str = "de-DE"

    # Resources
    dictionary: str | None = None
    ignore: str | None = None
    prohibit: str | None = None
    overrides: str | None = None
    lexicon: str | None = None
    use_language_model: bool = False

    # Limits
    max_token_length: int = Field(default=Constants.MAX_TOKEN_LENGTH, gt=0)
    max_split_length: int = Field(default=Constants.MAX_SPLIT_INPUT_LENGTH, gt=0)

    # Input / output
    input: str | None = None
    output: str | None = None
    output_format: str = "yaml"

    # Diagnostics
    verbose: bool = False
    debug: bool = False
    debug_words: frozenset[str] = frozenset()

    @field_validator("debug_words", mode="before")
    @classmethod
    def parse_string_set(cls, value: Any) -> frozenset[str]:
        """Accept a comma-separated string or any iterable of words."""
        if value is None:
            return frozenset()
        if isinstance(value, str):
            return frozenset(w.strip() for w in value.split(",") if w.strip())
        return frozenset(value)

    @field_validator("variant")
    @classmethod
    def check_variant(cls, value: str) -> str:
        if value not in Constants.VARIANTS:
            raise ValueError(f"variant must be one of {', '.join(Constants.VARIANTS)}")
        return value

    @field_validator("output_format")
    @classmethod
    def check_output_format(cls, value: str) -> str:
        if value not in ("yaml", "text"):
            raise ValueError("output_format must be 'yaml' or 'text'")
        return value

    @field_validator("dictionary", "ignore", "prohibit", "overrides", "lexicon", "input", "output")
    @classmethod
    def expand_paths(cls, value: str | None) -> str | None:
        return expand_file_path(value)

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        if self.debug_words and not self.debug:
            raise ValueError("debug_words requires debug to be enabled")
        if self.debug:
            self.verbose = True
        return self


def _read_json_config(config_path: str) -> dict[str, Any]:
    path = expand_file_path(config_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ResourceLoadError(f"config file {path}", str(e)) from e
    except json.JSONDecodeError as e:
        raise ResourceLoadError(f"config file {path}", f"invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise ResourceLoadError(f"config file {path}", "top level must be a JSON object")
    return data


def load_config(
    config_path: str | None,
    args: argparse.Namespace | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> Config:
    """Build a Config from a JSON file and command-line arguments.

    CLI arguments override JSON values; arguments left at None do not.

    Args:
        config_path: Optional JSON configuration file
        args: Parsed command-line arguments
        parser: Parser used to report validation errors (exits the process)

    Returns:
        Validated Config
    """
    values: dict[str, Any] = _read_json_config(config_path) if config_path else {}

    if args is not None:
        for key, value in vars(args).items():
            if key == "config" or value is None:
                continue
            if value is False and key in values:
                # store_true flags that were not given must not clear JSON values
                continue
            values[key] = value

    try:
        return Config(**values)
    except ValidationError as e:
        if parser is not None:
            parser.error(str(e))
        raise
