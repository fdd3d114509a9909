"""
Domain models and value objects.

Contains the immutable wire models for UBI and SBI.
"""

from src.core.domain.wire import SBIWire, SignByte, UBIWire, Word

__all__ = [
    "SBIWire",
    "SignByte",
    "UBIWire",
    "Word",
]
