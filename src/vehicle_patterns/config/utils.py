"""Environment variable expansion for configuration values."""

import os
import re
from typing import Any

# ${VAR}, ${VAR:default} or $VAR
_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def _replace(match: "re.Match[str]") -> str:
    braced, default, bare = match.group(1), match.group(2), match.group(3)
    name = braced or bare
    value = os.environ.get(name)
    if value is not None:
        return value
    if default is not None:
        return default
    return match.group(0)


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variable references in configuration values.

    Strings are expanded in place; dicts and lists are walked recursively.
    Unknown variables are left verbatim unless a ``${VAR:default}`` default
    is supplied.

    Args:
        value: String, dict, list or any other value

    Returns:
        The value with references expanded
    """
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value
