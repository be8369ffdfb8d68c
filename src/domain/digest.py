"""
Credential digest - Deterministic one-way transform of a plaintext password.

The same plaintext always yields the same digest, so a stored digest is
verified by digesting the attempt and comparing the two strings. bcrypt
is used with a fixed, configured salt to keep the output stable across
processes.
"""

import secrets
from dataclasses import dataclass

import bcrypt

# bcrypt only reads the first 72 bytes of input
_BCRYPT_MAX_INPUT_BYTES = 72

DEFAULT_DIGEST_SALT = "$2b$10$accountcoredigestsaltu"


@dataclass(frozen=True)
class PasswordDigest:
    """
    bcrypt digest bound to a single salt.

    The salt is a full bcrypt salt prefix: "$2b$<cost>$<22 chars>".
    """

    salt: str = DEFAULT_DIGEST_SALT

    def digest(self, plaintext: str) -> str:
        """
        Digest a plaintext credential.

        Raises:
            ValueError: If the plaintext exceeds bcrypt's 72-byte input limit
        """
        raw = plaintext.encode()
        if len(raw) > _BCRYPT_MAX_INPUT_BYTES:
            raise ValueError("plaintext exceeds 72 bytes")
        return bcrypt.hashpw(raw, self.salt.encode()).decode()

    def matches(self, plaintext: str, stored_digest: str) -> bool:
        """
        Re-digest the attempt and compare in constant time.

        Attempts that are not encodable as UTF-8 or exceed 72 bytes never match.
        """
        try:
            raw = plaintext.encode()
        except UnicodeEncodeError:
            return False
        if len(raw) > _BCRYPT_MAX_INPUT_BYTES:
            return False
        return secrets.compare_digest(self.digest(plaintext).encode(), stored_digest.encode())


_default_digest = PasswordDigest()


def digest(plaintext: str) -> str:
    """Digest with the default salt."""
    return _default_digest.digest(plaintext)
