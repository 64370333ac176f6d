"""Exceptions raised by the progress engines.

Engines never raise for numeric inputs inside their documented ranges; "no
result" is returned as None. These exceptions cover inputs that cannot be
interpreted at all.
"""

from __future__ import annotations


class InvalidTimestampError(ValueError):
    """Raised when a timestamp or date input cannot be parsed.

    Attributes:
        field: Name of the input that failed (e.g., "due_at", "ends_at")
        value: The raw value that was supplied
    """

    def __init__(self, field: str, value: object) -> None:
        """Initialize InvalidTimestampError.

        Args:
            field: Name of the input that failed
            value: The raw value that was supplied
        """
        self.field = field
        self.value = value
        super().__init__(f"Invalid timestamp for {field}: {value!r}")
