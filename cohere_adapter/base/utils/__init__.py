"""Small pure helpers shared by adapters."""

from .json_utils import merge

__all__ = ["merge"]
