"""
User-facing entry points: the Python API and the command line.
"""

from .api import GitHubCopier

__all__ = ["GitHubCopier"]
