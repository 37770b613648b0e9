"""
Pydantic schemas for response serialization.
"""

from pydantic import ValidationError

from .responses import (
    ActionResponse,
    ErrorBody,
    SourceDescription,
)

__all__ = [
    # Exceptions
    "ValidationError",
    # Response schemas
    "ActionResponse",
    "ErrorBody",
    "SourceDescription",
]
