from __future__ import annotations


class InvalidToleranceError(ValueError):
    """Raised when a tolerance parameter is negative or NaN."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a non-negative number, got {value!r}")
