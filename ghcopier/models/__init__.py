"""
Core data models API surface for ghcopier.

This file re-exports model classes from domain-specific modules so callers
can write `from ghcopier.models import X`.
"""

from .github import (
    ContentKind,
    GitHubReference,
    ContentEntry,
)
from .download import MaterializeResult
from .config import CopierConfig

__all__ = [
    # GitHub models
    "ContentKind",
    "GitHubReference",
    "ContentEntry",
    # Download models
    "MaterializeResult",
    # Config models
    "CopierConfig",
]
