"""
Vigenere Cipher - a running key of Caesar shifts.

The keyword is reduced to its letters and upper-cased. The key index follows
the position in the *input* text, so punctuation and spaces pass through
unchanged but still consume a key letter. An empty effective key leaves the
text as it is.
"""

import string
from dataclasses import dataclass
from typing import Optional

from ..engine import CipherStrategy, ValidationError, log_warn, register_cipher

DEFAULT_KEYWORD = "KEY"


@dataclass(frozen=True)
class VigenereKey:
    keyword: str = DEFAULT_KEYWORD

    def validate(self):
        if not isinstance(self.keyword, str):
            raise ValidationError(f"Vigenere keyword must be a string, got {type(self.keyword).__name__}")

    @property
    def effective(self) -> str:
        return ''.join(c for c in self.keyword if c in string.ascii_letters).upper()


@register_cipher
class VigenereCipher(CipherStrategy):
    name = "vigenere"
    description = "Polyalphabetic shift driven by a repeating keyword (default KEY)."
    params_type = VigenereKey

    def default_params(self) -> VigenereKey:
        return VigenereKey()

    def make_params(self, key: Optional[str] = None, **options) -> VigenereKey:
        return VigenereKey() if key is None else VigenereKey(key)

    def _process(self, text: str, params: VigenereKey, sign: int) -> str:
        key = params.effective
        if not key:
            log_warn("Vigenere keyword has no letters; returning text unchanged.")
            return text

        result = []
        for index, char in enumerate(text):
            if 'a' <= char <= 'z':
                base = ord('a')
            elif 'A' <= char <= 'Z':
                base = ord('A')
            else:
                result.append(char)
                continue
            key_shift = ord(key[index % len(key)]) - ord('A')
            position = (ord(char) - base + sign * key_shift + 26) % 26
            result.append(chr(position + base))
        return ''.join(result)

    def encode(self, text: str, params: VigenereKey) -> str:
        return self._process(text, params, 1)

    def decode(self, text: str, params: VigenereKey) -> str:
        return self._process(text, params, -1)
