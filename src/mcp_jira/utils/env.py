"""Environment variable utility functions for MCP Jira."""

import os


def getenv(*names: str, default: str | None = None) -> str | None:
    """Return the first non-empty value among several environment variables.

    Args:
        *names: Variable names, in order of preference
        default: Value returned when none of them is set

    Returns:
        The first non-empty value found, otherwise ``default``
    """
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")
