class RegistrationError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RegistrationValidationError(RegistrationError):
    """Record does not match the registration shape."""


class StoreError(RegistrationError):
    """The database rejected or could not perform the insert."""


class SubmissionError(RegistrationError):
    """The request body cannot be turned into registration fields."""

    def __init__(self, message: str, error: str) -> None:
        self.error = error
        super().__init__(message)
