from __future__ import annotations


class InvalidInputError(ValueError):
    default_message = "invalid input"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def reason(self) -> str:
        return str(self)
