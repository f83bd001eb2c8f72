"""bcrypt implementation of the SecretHasher protocol."""

import bcrypt

from ..domain.interfaces.secret_hasher import SecretHasher


class BcryptSecretHasher(SecretHasher):
    """Salted bcrypt hashing of account secrets."""

    def __init__(self, rounds: int = 12):
        """Initialize the hasher.

        Args:
            rounds: bcrypt cost factor (4-31). Lower values are only meant for tests.
        """
        if not 4 <= rounds <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self.rounds = rounds

    def hash(self, secret: str) -> str:
        """Hash a secret with a fresh salt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(secret), salt).decode("utf-8")

    def verify(self, secret: str, hashed: str) -> bool:
        """Check a secret against a stored bcrypt hash."""
        try:
            return bcrypt.checkpw(self._encode(secret), hashed.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False

    @staticmethod
    def _encode(secret: str) -> bytes:
        # bcrypt only looks at the first 72 bytes and recent releases reject longer input
        return secret.encode("utf-8")[:72]
