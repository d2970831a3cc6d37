class InputError(Exception):
    """Bad request data: missing fields, duplicate email, unknown user."""


class AuthError(InputError):
    """Login failed. The message never says which credential was wrong."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class StoreError(Exception):
    """The datastore file could not be read, parsed or written."""
