"""Source tree traversal."""

from .IgnoreRules import IgnoreRules
from .matches_glob import matches_glob
from .walk_files import DEFAULT_INCLUDE_GLOBS, walk_files

__all__ = ["DEFAULT_INCLUDE_GLOBS", "IgnoreRules", "matches_glob", "walk_files"]
