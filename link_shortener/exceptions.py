"""
Exception types raised by the shortening engine.

The HTTP layer maps these onto status codes (see ``main.py``).
"""


class ShortenerError(Exception):
    """Base class for all link shortener errors"""


class StorageError(ShortenerError):
    """A storage backend failed to complete an operation (network, protocol)"""


class HashNotFoundError(ShortenerError):
    """No mapping exists for the requested hash"""

    def __init__(self, hash_: str):
        self.hash = hash_
        super().__init__(f"No URL found for hash '{hash_}'")


class HashCollisionError(ShortenerError):
    """Every generated hash was already taken"""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Could not generate unique hash after {attempts} attempts"
        )
