# survey_backend/encryption/password_hashing.py

from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError

# Salted one-way password hashing and verification using Argon2id


class PasswordHashingService:
    def __init__(self, time_cost=3, memory_cost=65536, parallelism=4):
        self.ph = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            hash_len=32,
            salt_len=16,
        )
        self._dummy_hash = None

    def hash_password(self, password: str) -> str:
        try:
            return self.ph.hash(password)
        except HashingError as e:
            raise ValueError(f"Password hashing failed: {str(e)}")

    def verify_password(self, password: str, hash_value: str) -> bool:
        try:
            return self.ph.verify(hash_value, password)
        except (VerificationError, InvalidHashError, UnicodeEncodeError):
            return False

    def burn_verification(self, password: str) -> bool:
        """Verify against a throwaway hash so unknown accounts cost as much as known ones."""
        if self._dummy_hash is None:
            self._dummy_hash = self.ph.hash('survey-intake-dummy-password')
        self.verify_password(password, self._dummy_hash)
        return False
