"""
Row (Columnar) Transposition Cipher

The cleaned plaintext (whitespace removed) is written row by row into a grid
as wide as the key. Columns are then read top to bottom in the order given
by the key digits: the column labelled 1 first, then 2, and so on.

The key is a string of digits forming a permutation of 1..k. When the text
length is not a multiple of k the last row is short, so on decode the
columns whose read position falls beyond the last row's fill count hold one
character less than the others.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from ..engine import CipherStrategy, ValidationError, register_cipher

DEFAULT_KEY = "3142"

KEY_ERROR = "Key must contain unique numbers from 1 to key length"


@dataclass(frozen=True)
class RowTranspositionKey:
    key: str = DEFAULT_KEY

    def validate(self):
        if not isinstance(self.key, str):
            raise ValidationError(KEY_ERROR)
        k = len(self.key)
        if k == 0:
            raise ValidationError(KEY_ERROR)
        if not all(c in "0123456789" for c in self.key):
            raise ValidationError(KEY_ERROR)
        digits = [int(c) for c in self.key]
        if any(d < 1 or d > k for d in digits) or len(set(digits)) != k:
            raise ValidationError(KEY_ERROR)

    @property
    def column_order(self) -> List[int]:
        """Grid column indices in the order they are read out."""
        digits = [int(c) for c in self.key]
        return [digits.index(position) for position in range(1, len(digits) + 1)]


def clean_text(text: str) -> str:
    return ''.join(text.split())


def build_grid(text: str, params: RowTranspositionKey) -> List[List[str]]:
    """Row-major grid of the cleaned text; cells past the end are empty strings."""
    params.validate()
    text = clean_text(text)
    width = len(params.key)
    rows = math.ceil(len(text) / width)
    return [[text[r * width + c] if r * width + c < len(text) else ''
             for c in range(width)] for r in range(rows)]


@register_cipher
class RowTranspositionCipher(CipherStrategy):
    name = "rowtransposition"
    description = "Columnar transposition keyed by a digit permutation (default 3142)."
    params_type = RowTranspositionKey

    def default_params(self) -> RowTranspositionKey:
        return RowTranspositionKey()

    def make_params(self, key: Optional[str] = None, **options) -> RowTranspositionKey:
        if key is None:
            return RowTranspositionKey()
        return RowTranspositionKey(key.strip())

    def encode(self, text: str, params: RowTranspositionKey) -> str:
        grid = build_grid(text, params)
        return ''.join(row[column]
                       for column in params.column_order
                       for row in grid)

    def decode(self, text: str, params: RowTranspositionKey) -> str:
        if not text:
            return ""
        width = len(params.key)
        rows = math.ceil(len(text) / width)
        filled = len(text) % width or width

        # The last row only reaches the first `filled` grid columns.
        lengths = [rows if column < filled else rows - 1 for column in range(width)]

        columns: List[str] = [''] * width
        start = 0
        for column in params.column_order:
            columns[column] = text[start:start + lengths[column]]
            start += lengths[column]

        return ''.join(columns[c][r]
                       for r in range(rows)
                       for c in range(width)
                       if r < len(columns[c]))
