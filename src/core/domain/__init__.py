"""
Domain models and value objects.

Contains immutable Pydantic models for text-channel formatting flags.
"""

from src.core.domain.format_options import FormatOptions

__all__ = [
    "FormatOptions",
]
