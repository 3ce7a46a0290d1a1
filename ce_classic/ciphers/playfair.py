"""
Playfair Cipher - digraph substitution over a 5x5 key square.

The square is built from the keyword (upper-cased, J folded into I,
non-letters and repeats dropped) followed by the rest of the 25-letter
alphabet. Plaintext is prepared by the same folding, with an X splitting
doubled letters inside a pair and padding an odd tail.

Each pair is then substituted:

* same row: take the letter to the right (left when decoding)
* same column: take the letter below (above when decoding)
* otherwise: swap columns, keeping each letter's row

Decoding pads odd-length ciphertext with X as a best effort; such input
never came out of the encoder, so the result is not guaranteed to match
any original plaintext.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..engine import CipherStrategy, ValidationError, log_warn, register_cipher

# J is merged with I
ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"
SIZE = 5
FILLER = "X"
DEFAULT_KEYWORD = "CRYPTOGRAPHY"


def _fold(text: str) -> str:
    return ''.join('I' if c == 'J' else c for c in text.upper() if 'A' <= c <= 'Z')


def matrix_letters(keyword: str) -> str:
    """The 25 square letters in row-major order."""
    letters = []
    for char in _fold(keyword) + ALPHABET:
        if char not in letters:
            letters.append(char)
    return ''.join(letters)


def prepare_text(text: str) -> str:
    """Fold ``text`` and split it into an even-length run of valid digraphs."""
    prepared = _fold(text)
    result = []
    i = 0
    while i < len(prepared):
        current = prepared[i]
        following = prepared[i + 1] if i + 1 < len(prepared) else None
        result.append(current)
        if following is None:
            result.append(FILLER)
            i += 1
        elif following == current:
            result.append(FILLER)
            i += 1
        else:
            result.append(following)
            i += 2
    return ''.join(result)


@dataclass(frozen=True)
class PlayfairKey:
    keyword: str = DEFAULT_KEYWORD
    letters: str = field(init=False, repr=False, compare=False)
    positions: Dict[str, Tuple[int, int]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.keyword, str):
            raise ValidationError(f"Playfair keyword must be a string, got {type(self.keyword).__name__}")
        letters = matrix_letters(self.keyword)
        object.__setattr__(self, "letters", letters)
        object.__setattr__(self, "positions",
                           {c: divmod(i, SIZE) for i, c in enumerate(letters)})

    @property
    def rows(self) -> List[List[str]]:
        return [list(self.letters[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)]

    def at(self, row: int, col: int) -> str:
        return self.letters[(row % SIZE) * SIZE + (col % SIZE)]

    def find(self, letter: str) -> Tuple[int, int]:
        return self.positions['I' if letter == 'J' else letter]


def build_matrix(keyword: str) -> List[List[str]]:
    """5x5 key square for ``keyword``."""
    return PlayfairKey(keyword).rows


@register_cipher
class PlayfairCipher(CipherStrategy):
    name = "playfair"
    description = "5x5 digraph substitution built from a keyword (default CRYPTOGRAPHY)."
    params_type = PlayfairKey

    def default_params(self) -> PlayfairKey:
        return PlayfairKey()

    def make_params(self, key: Optional[str] = None, **options) -> PlayfairKey:
        return PlayfairKey() if key is None else PlayfairKey(key)

    def _substitute(self, text: str, square: PlayfairKey, step: int) -> str:
        result = []
        for i in range(0, len(text), 2):
            r1, c1 = square.find(text[i])
            r2, c2 = square.find(text[i + 1])
            if r1 == r2:
                result.append(square.at(r1, c1 + step) + square.at(r2, c2 + step))
            elif c1 == c2:
                result.append(square.at(r1 + step, c1) + square.at(r2 + step, c2))
            else:
                result.append(square.at(r1, c2) + square.at(r2, c1))
        return ''.join(result)

    def encode(self, text: str, params: PlayfairKey) -> str:
        return self._substitute(prepare_text(text), params, 1)

    def decode(self, text: str, params: PlayfairKey) -> str:
        cleaned = _fold(text)
        if len(cleaned) % 2:
            log_warn("Odd-length Playfair ciphertext; padding with X (best effort).")
            cleaned += FILLER
        return self._substitute(cleaned, params, -1)
