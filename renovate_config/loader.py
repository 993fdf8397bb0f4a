"""Load configuration definitions from YAML files."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from renovate_config.models.definition import ConfigDefinition

log = logging.getLogger(__name__)


def load_config_definition(path: Path) -> ConfigDefinition:
    """Load and validate a configuration definition.

    Args:
        path: Path to the YAML definition file

    Returns:
        The validated definition, with secrets still unresolved

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, is not valid YAML or does not
            match the definition schema

    """
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    log.info("Loading config definition from %s", path)
    content = path.read_text()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty config file: {path}")

    try:
        return ConfigDefinition.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid config schema in {path}: {e}") from e
