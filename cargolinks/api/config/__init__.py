"""Configuration for cargo-links."""

from .CheckConfig import CheckConfig
from .ConfigError import ConfigError
from .get_package_version import get_package_version

__all__ = ["CheckConfig", "ConfigError", "get_package_version"]
