"""YAML/JSON file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ocsf_to_proto.models.config import GeneratorConfig
from ocsf_to_proto.models.schema import OcsfSchema


class LoaderError(Exception):
    """Error during YAML/JSON file loading."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize LoaderError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.

        """
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON file and return the raw dictionary.

    JSON is parsed with the YAML loader, which accepts it as a subset.

    Args:
    ----
        path: Path to the YAML or JSON file.

    Returns:
    -------
        Parsed dictionary from the file.

    Raises:
    ------
        LoaderError: If the file cannot be loaded or parsed.

    """
    path = Path(path)

    if not path.exists():
        raise LoaderError(f"File not found: {path}", path)

    if not path.is_file():
        raise LoaderError(f"Not a file: {path}", path)

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise LoaderError(
            f"Unsupported file extension: {suffix}. Use .yaml, .yml, or .json",
            path,
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LoaderError(f"YAML parsing error: {e}", path) from e
    except OSError as e:
        raise LoaderError(f"File read error: {e}", path) from e

    if data is None:
        raise LoaderError("File is empty", path)

    if not isinstance(data, dict):
        raise LoaderError(
            f"Expected dictionary at root level, got {type(data).__name__}",
            path,
        )

    return data


def load_ocsf_schema(path: Path) -> OcsfSchema:
    """Load and validate an exported OCSF schema.

    Args:
    ----
        path: Path to the schema export (as served by /export/schema).

    Returns:
    -------
        Validated OcsfSchema model instance.

    Raises:
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If the file content is invalid.

    """
    data = load_yaml_file(path)
    return OcsfSchema.model_validate(data)


def load_generator_config(path: Path | None) -> GeneratorConfig:
    """Load generator configuration, falling back to defaults without a file.

    Raises:
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If the file content is invalid.

    """
    if path is None:
        return GeneratorConfig()

    data = load_yaml_file(path)
    return GeneratorConfig.model_validate(data)


def validate_ocsf_schema(path: Path) -> list[str]:
    """Validate a schema file and return list of errors.

    This is a non-throwing version of load_ocsf_schema.

    Args:
    ----
        path: Path to the schema file.

    Returns:
    -------
        List of error messages (empty if valid).

    """
    errors: list[str] = []

    try:
        data = load_yaml_file(path)
    except LoaderError as e:
        return [str(e)]

    try:
        OcsfSchema.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            msg = error["msg"]
            errors.append(f"{loc}: {msg}")

    return errors
