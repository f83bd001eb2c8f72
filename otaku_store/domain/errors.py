"""Error taxonomy for the account and activity store."""


class AccountStoreError(Exception):
    """Base class for all account store errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AccountStoreError):
    """Registration input is malformed (too short username or secret)."""


class DuplicateUsernameError(AccountStoreError):
    """An account with the same username already exists."""

    def __init__(self, message: str = "Username already exists"):
        super().__init__(message)


class DuplicateEmailError(AccountStoreError):
    """An account with the same email already exists."""

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message)


class AuthenticationError(AccountStoreError):
    """Login failed. The message never says which credential was wrong."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


class NotFoundError(AccountStoreError):
    """The targeted account or record does not exist."""


class StorageCorruptionError(AccountStoreError):
    """A persisted value could not be parsed."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Stored value for key '{key}' is unreadable: {reason}")
        self.key = key
