"""
Business logic for the link shortener: hash generation and the
shortening service.
"""

from .hash_generator import HashGenerator, BASE36_ALPHABET
from .url_service import URLService

__all__ = [
    "HashGenerator",
    "BASE36_ALPHABET",
    "URLService",
]
