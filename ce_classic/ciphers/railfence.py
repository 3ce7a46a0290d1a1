"""
Rail Fence Cipher - zigzag transposition across a number of rails.

The zigzag starts on rail ``offset % rails`` and bounces between the top and
bottom rails. Encoding appends each character to the rail it lands on and
reads the rails top to bottom. Decoding replays the same pattern to find out
how many characters each rail holds, slices the ciphertext accordingly and
walks the pattern again.

Every character, spaces included, takes a slot on the fence and moves the
zigzag on. This departs from the older web tool, which parked spaces on the
current rail without advancing and so could not decode its own output. Text
that is only whitespace encodes to an empty string, and fewer than two rails leave
the text unchanged. Wrong rails/offset on decode silently yields garbage.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..engine import CipherStrategy, ValidationError, log_warn, register_cipher

DEFAULT_RAILS = 3
DEFAULT_OFFSET = 0
# Upper bound offered by interactive front ends; the algorithm has none.
MAX_RAILS = 10


@dataclass(frozen=True)
class RailFenceParams:
    rails: int = DEFAULT_RAILS
    offset: int = DEFAULT_OFFSET

    def validate(self):
        if any(not isinstance(v, int) or isinstance(v, bool) for v in (self.rails, self.offset)):
            raise ValidationError("Rails and offset must be integers")


def rail_pattern(length: int, rails: int, offset: int = 0) -> List[int]:
    """Rail index visited by each of ``length`` consecutive characters."""
    rail = offset % rails
    direction = -1 if rail == rails - 1 else 1
    pattern = []
    for _ in range(length):
        pattern.append(rail)
        if rail == 0:
            direction = 1
        elif rail == rails - 1:
            direction = -1
        rail += direction
    return pattern


def zigzag_grid(text: str, rails: int, offset: int = 0) -> List[List[str]]:
    """
    Lay ``text`` out as a rails x len(text) grid, one character per column,
    with spaces in the unused cells. Handy for showing how the fence looks.
    """
    if rails < 2:
        return [list(text)]
    grid = [[' '] * len(text) for _ in range(rails)]
    for column, rail in enumerate(rail_pattern(len(text), rails, offset)):
        grid[rail][column] = text[column]
    return grid


@register_cipher
class RailFenceCipher(CipherStrategy):
    name = "railfence"
    description = "Zigzag transposition (options: --rails, default 3; --offset, default 0)."
    params_type = RailFenceParams

    def default_params(self) -> RailFenceParams:
        return RailFenceParams()

    def make_params(self, key: Optional[str] = None, **options) -> RailFenceParams:
        rails = options.get("rails")
        if rails is None and key is not None and key.strip():
            try:
                rails = int(key.strip())
            except ValueError:
                raise ValidationError(f"Rail count must be an integer, got '{key}'") from None
        if rails is None:
            rails = DEFAULT_RAILS
        offset = options.get("offset")
        if offset is None:
            offset = DEFAULT_OFFSET
        return RailFenceParams(rails, offset)

    def encode(self, text: str, params: RailFenceParams) -> str:
        rails = params.rails
        if rails < 2:
            log_warn(f"Rail fence needs at least 2 rails (got {rails}); text unchanged.")
            return text
        if not text.strip():
            return ""

        fence: List[List[str]] = [[] for _ in range(rails)]
        for char, rail in zip(text, rail_pattern(len(text), rails, params.offset)):
            fence[rail].append(char)
        return ''.join(''.join(row) for row in fence)

    def decode(self, text: str, params: RailFenceParams) -> str:
        rails = params.rails
        if rails < 2:
            log_warn(f"Rail fence needs at least 2 rails (got {rails}); text unchanged.")
            return text
        if not text:
            return text

        pattern = rail_pattern(len(text), rails, params.offset)
        lengths = [0] * rails
        for rail in pattern:
            lengths[rail] += 1

        chunks = []
        start = 0
        for length in lengths:
            chunks.append(iter(text[start:start + length]))
            start += length

        return ''.join(next(chunks[rail]) for rail in pattern)
