"""
Patch loader.

Loads patches from YAML or JSON files with validation.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from modulator_core import PatchError

from .patch_models import Patch

logger = logging.getLogger(__name__)


def load_patch(config_data: Any) -> Patch:
    """
    Validate a patch from an already-parsed document.

    Args:
        config_data: Dictionary with at least "name" and "source" keys

    Returns:
        Validated Patch

    Raises:
        PatchError: If the document is not a mapping or fails validation

    Example:
        >>> patch = load_patch({
        ...     "name": "Clock Signal",
        ...     "source": {"type": "digital_square", "rate": 10, "amplitude": 3.3},
        ... })
        >>> patch.build().evaluate(0.0)
        3.3
    """
    if not isinstance(config_data, dict):
        raise PatchError(
            f"Patch must be a mapping, got {type(config_data).__name__}"
        )

    try:
        patch = Patch.model_validate(config_data)
    except ValidationError as e:
        raise PatchError(f"Invalid patch: {e}") from e

    logger.debug(f"Validated patch '{patch.name}'")
    return patch


def load_patch_from_file(file_path: Path | str) -> Patch:
    """
    Load a patch from a YAML or JSON file.

    Args:
        file_path: Path to .yaml, .yml or .json file

    Returns:
        Validated Patch

    Raises:
        PatchError: If the file is missing, has an unsupported extension,
            can't be parsed, or fails validation
    """
    path = Path(file_path)

    if not path.exists():
        raise PatchError(f"Patch file not found: {path}")

    suffix = path.suffix.lower()
    try:
        with open(path, encoding="utf-8") as f:
            if suffix in (".yaml", ".yml"):
                config_data = yaml.safe_load(f)
            elif suffix == ".json":
                config_data = json.load(f)
            else:
                raise PatchError(
                    f"Unsupported file format: {path.suffix}. "
                    f"Use .yaml, .yml, or .json"
                )
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise PatchError(f"Could not parse {path}: {e}") from e

    patch = load_patch(config_data)
    logger.info(f"Loaded patch '{patch.name}' from {path}")
    return patch
