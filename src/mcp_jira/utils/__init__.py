"""
Utility functions for the MCP Jira server.
"""

from .auth import build_basic_auth_headers
from .env import is_env_ssl_verify
from .logging import log_config_param, mask_sensitive

__all__ = [
    "build_basic_auth_headers",
    "is_env_ssl_verify",
    "log_config_param",
    "mask_sensitive",
]
