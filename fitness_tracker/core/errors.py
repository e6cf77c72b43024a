"""Domain error types.

Raised by the validation and persistence layers; the API layer translates
them into HTTP responses.
"""


class WorkoutValidationError(ValueError):
    """Raised when workout input violates a field or cross-field constraint."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class RecordNotFoundError(LookupError):
    """Raised when a stored record does not exist."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found: {record_id}")


class ProfileExistsError(RuntimeError):
    """Raised when creating a profile while one is already stored.

    The tracker keeps at most one live profile.
    """
