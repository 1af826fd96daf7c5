"""Data Transfer Objects for the application layer.

The composition output is defined in ``framing.contracts.dtos`` so the
infrastructure layer can consume it without importing the application layer.
"""

from framing.contracts.dtos import CompositionOutput

__all__ = ["CompositionOutput"]
