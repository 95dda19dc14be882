"""Exceptions raised around the xAL records.

The records never raise on their own; these cover decoding input into a
record and looking up serialization metadata.
"""
from typing import Any, Dict, List, Optional


class XALError(Exception):
    """Base class for xAL errors."""


class AddressDecodeError(XALError, ValueError):
    """Raised when input cannot be decoded into an xAL record.

    Attributes:
        model_name: Name of the record type that was requested
        errors: Error list reported by pydantic
    """

    def __init__(self, model_name: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.model_name = model_name
        self.errors = errors or []
        super().__init__(f"Invalid {model_name} data: {len(self.errors)} error(s)")


class SchemaFieldError(XALError, KeyError):
    """Raised when a record does not declare the requested field."""

    def __init__(self, model_name: str, field_name: str):
        self.model_name = model_name
        self.field_name = field_name
        super().__init__(f"{model_name} has no field '{field_name}'")

    def __str__(self) -> str:
        return self.args[0]
