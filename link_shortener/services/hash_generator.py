"""
Hash generation for shortened links.
"""

import secrets
import string

BASE36_ALPHABET = string.digits + string.ascii_lowercase


class HashGenerator:
    """
    Random fixed-length hash generator.

    Draws every character independently from the alphabet with ``secrets``,
    so hashes are not predictable from earlier ones.

    The generator does not look at the store: two calls can return the
    same hash. URLService checks the store before writing.
    """

    def __init__(self, length: int = 7, alphabet: str = BASE36_ALPHABET):
        if length < 1:
            raise ValueError(f"Hash length must be positive, got {length}")
        if not alphabet:
            raise ValueError("Hash alphabet must not be empty")
        self.length = length
        self.alphabet = alphabet

    def generate(self) -> str:
        """Generate a random hash of ``self.length`` characters"""
        return ''.join(secrets.choice(self.alphabet) for _ in range(self.length))
