"""Validation of YAML files: extension, existence, content and syntax."""

from __future__ import annotations

import os
from typing import Any

import yaml

_YAML_EXTENSIONS = (".yaml", ".yml")


def _extension(filename: str | os.PathLike[str]) -> str:
    name = os.path.basename(os.fspath(filename))
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def validate_yaml_extension(filename: str | os.PathLike[str]) -> bool:
    """Return ``True`` if the file name ends in ``.yaml`` or ``.yml``."""
    return _extension(filename) in _YAML_EXTENSIONS


def validate_yaml_exists(filename: str | os.PathLike[str]) -> bool:
    """Return ``True`` if the file exists."""
    try:
        os.stat(filename)
    except (OSError, ValueError):
        return False
    return True


def validate_yaml_has_content(filename: str | os.PathLike[str]) -> bool:
    """Return ``True`` if the file is not empty; reading errors propagate."""
    with open(filename, "rb") as handle:
        return bool(handle.read(1))


def validate_yaml_structure(filename: str | os.PathLike[str]) -> Any:
    """Parse the file as YAML and return the result.

    Raises ``OSError`` if the file cannot be read and ``yaml.YAMLError`` if
    it is not valid YAML.
    """
    with open(filename, "rb") as handle:
        return yaml.safe_load(handle.read())


def validate_yaml(filename: str | os.PathLike[str]) -> Any:
    """Run every check on the file and return its parsed content."""
    if not validate_yaml_extension(filename):
        raise ValueError("invalid YAML file extension")
    if not validate_yaml_exists(filename):
        raise FileNotFoundError("YAML file does not exist")
    if not validate_yaml_has_content(filename):
        raise ValueError("YAML file is empty")
    return validate_yaml_structure(filename)