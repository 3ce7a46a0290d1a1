"""
Monoalphabetic Substitution Cipher

The key is a full permutation of A-Z laid against the plain alphabet:
plain letter i becomes key[i]. Keys are normalized the way user input is
(upper-cased, non-letters dropped) and must then hold every
letter exactly once.

Random keys come from ``generate_key``, which takes its randomness source as
an argument so callers and tests can make it deterministic.
"""

import random
import string
from dataclasses import dataclass
from typing import Optional

from ..engine import CipherStrategy, ValidationError, register_cipher

PLAIN_ALPHABET = string.ascii_uppercase
DEFAULT_KEY = "QWERTYUIOPASDFGHJKLZXCVBNM"


def normalize_key(key: str) -> str:
    return ''.join(c for c in key.upper() if c in PLAIN_ALPHABET)


def is_valid_key(key: str) -> bool:
    """True if ``key`` (after normalization) is a permutation of A-Z."""
    clean = normalize_key(key)
    return len(clean) == 26 and len(set(clean)) == 26


def generate_key(rng: Optional[random.Random] = None) -> str:
    """
    Return a uniformly random permutation of A-Z.

    Uses a Fisher-Yates shuffle driven by ``rng`` (any object with
    ``randrange``); a fresh ``random.Random`` is used when none is given.
    """
    if rng is None:
        rng = random.Random()
    letters = list(PLAIN_ALPHABET)
    for i in range(len(letters) - 1, 0, -1):
        j = rng.randrange(i + 1)
        letters[i], letters[j] = letters[j], letters[i]
    return ''.join(letters)


@dataclass(frozen=True)
class MonoKey:
    key: str = DEFAULT_KEY

    def __post_init__(self):
        if not isinstance(self.key, str):
            raise ValidationError(f"Substitution key must be a string, got {type(self.key).__name__}")
        object.__setattr__(self, "key", normalize_key(self.key))

    def validate(self):
        if not is_valid_key(self.key):
            raise ValidationError(
                "Key must contain all 26 letters of the alphabet with no duplicates"
            )


@register_cipher
class MonoalphabeticCipher(CipherStrategy):
    name = "mono"
    description = "Substitutes letters through a 26-letter permutation key."
    params_type = MonoKey

    def default_params(self) -> MonoKey:
        return MonoKey()

    def make_params(self, key: Optional[str] = None, **options) -> MonoKey:
        if key is None:
            return MonoKey()
        return MonoKey(key)

    def _substitute(self, text: str, source: str, target: str) -> str:
        result = []
        for char in text:
            upper = char.upper()
            index = source.find(upper) if len(upper) == 1 else -1
            if index == -1:
                result.append(char)
                continue
            replacement = target[index]
            result.append(replacement if char.isupper() else replacement.lower())
        return ''.join(result)

    def encode(self, text: str, params: MonoKey) -> str:
        return self._substitute(text, PLAIN_ALPHABET, params.key)

    def decode(self, text: str, params: MonoKey) -> str:
        return self._substitute(text, params.key, PLAIN_ALPHABET)
