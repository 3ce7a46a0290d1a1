"""
Caesar Cipher - shifts every letter a fixed number of places.

The shift may be any integer; it is normalized into [0, 26) before use and
negated for decoding. Case is preserved and anything outside A-Z / a-z
(digits, punctuation, whitespace, other Unicode) passes through untouched.
"""

from dataclasses import dataclass
from typing import Optional

from ..engine import CipherStrategy, ValidationError, register_cipher

DEFAULT_SHIFT = 3


@dataclass(frozen=True)
class CaesarParams:
    shift: int = DEFAULT_SHIFT

    def validate(self):
        if not isinstance(self.shift, int) or isinstance(self.shift, bool):
            raise ValidationError(f"Caesar shift must be an integer, got {self.shift!r}")

    @property
    def normalized(self) -> int:
        return ((self.shift % 26) + 26) % 26


def shift_char(char: str, amount: int) -> str:
    if 'a' <= char <= 'z':
        return chr((ord(char) - ord('a') + amount + 26) % 26 + ord('a'))
    if 'A' <= char <= 'Z':
        return chr((ord(char) - ord('A') + amount + 26) % 26 + ord('A'))
    return char


@register_cipher
class CaesarCipher(CipherStrategy):
    """Classic shift cipher (ROT13 is shift 13)."""

    name = "caesar"
    description = "Shifts each letter by a fixed amount (key: integer shift, default 3)."
    params_type = CaesarParams

    def default_params(self) -> CaesarParams:
        return CaesarParams()

    def make_params(self, key: Optional[str] = None, **options) -> CaesarParams:
        if key is None or not key.strip():
            return CaesarParams()
        try:
            return CaesarParams(int(key.strip()))
        except ValueError:
            raise ValidationError(f"Caesar shift must be an integer, got '{key}'") from None

    def _shift(self, text: str, amount: int) -> str:
        return ''.join(shift_char(char, amount) for char in text)

    def encode(self, text: str, params: CaesarParams) -> str:
        return self._shift(text, params.normalized)

    def decode(self, text: str, params: CaesarParams) -> str:
        return self._shift(text, -params.normalized)
