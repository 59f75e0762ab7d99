"""Settings loading for UI tree path queries."""

import os
from typing import Optional, Dict, Any

from dotenv import load_dotenv
from pydantic import ValidationError

from ..core.errors import ConfigurationError
from ..types.models import EngineSettings

ENV_PREFIX = "UI_TREE_PATHS_"

# Environment variable -> settings field
ENV_FIELDS = {
    f"{ENV_PREFIX}VERBOSE": "verbose",
    f"{ENV_PREFIX}MAX_DESCENDANTS": "max_descendants",
}


def load_settings(
    dotenv_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> EngineSettings:
    """
    Load engine settings from the environment.

    A ``.env`` file is read first (existing environment variables win),
    then ``UI_TREE_PATHS_*`` variables, then explicit overrides.

    Args:
        dotenv_path: Optional path to a ``.env`` file
        overrides: Field values that take precedence over the environment

    Returns:
        Validated EngineSettings

    Raises:
        ConfigurationError: If a value does not validate
    """
    load_dotenv(dotenv_path=dotenv_path, override=False)

    values: Dict[str, Any] = {}
    for env_var, field_name in ENV_FIELDS.items():
        raw = os.getenv(env_var)
        if raw is not None and raw.strip() != "":
            values[field_name] = raw.strip()

    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return EngineSettings(**values)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(errors) from e
