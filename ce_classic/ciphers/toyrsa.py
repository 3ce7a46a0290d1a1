"""
Toy RSA - textbook modular exponentiation over fixed demo key pairs.

Each character is encrypted on its own as ``code_point ** e mod n`` and the
results are written as space-separated decimal numbers. Decryption reverses
this with the private exponent.

NOT SECURE. The key pairs below are public teaching values; there is no key
generation, padding or primality checking here. Only the ``small`` preset is
a consistent pair; the other two are kept as the demo table listed them.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..engine import CipherStrategy, FormatError, ValidationError, log_warn, register_cipher

KEY_SIZES: Dict[str, Dict[str, Tuple[int, int]]] = {
    "small": {"public": (3233, 17), "private": (3233, 2753)},
    "medium": {"public": (33667, 7), "private": (33667, 19183)},
    "large": {"public": (1073741789, 65537), "private": (1073741789, 16947011)},
}
DEFAULT_KEY_SIZE = "small"

# Messages used to sanity check a pair; any consistent pair maps them back.
_PROBES = (2, 3, 65, 97)


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """
    Compute ``base ** exponent % modulus`` by square-and-multiply.

    Runs in time logarithmic in ``exponent``. A modulus of 1 yields 0.
    """
    if modulus == 1:
        return 0
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


@dataclass(frozen=True)
class ToyRsaKeyPair:
    n: int
    e: int
    d: int

    @classmethod
    def from_preset(cls, size: str = DEFAULT_KEY_SIZE) -> "ToyRsaKeyPair":
        try:
            preset = KEY_SIZES[size]
        except KeyError:
            raise ValidationError(
                f"Unknown key size '{size}' (choose from {', '.join(KEY_SIZES)})"
            ) from None
        n, e = preset["public"]
        _, d = preset["private"]
        return cls(n, e, d)

    @property
    def public(self) -> Tuple[int, int]:
        return self.n, self.e

    @property
    def private(self) -> Tuple[int, int]:
        return self.n, self.d

    def validate(self):
        if any(not isinstance(v, int) or isinstance(v, bool) for v in (self.n, self.e, self.d)):
            raise ValidationError("Modulus and exponents must be integers")
        if self.n < 1 or self.e < 0 or self.d < 0:
            raise ValidationError("Modulus must be positive and exponents non-negative")

    def is_consistent(self) -> bool:
        """True if decrypting with d undoes encrypting with e on a few probes."""
        return all(mod_pow(mod_pow(m % self.n, self.e, self.n), self.d, self.n) == m % self.n
                   for m in _PROBES)


@register_cipher
class ToyRsaCipher(CipherStrategy):
    name = "toyrsa"
    description = "Textbook RSA per character with fixed demo keys (--key-size). Not secure."
    params_type = ToyRsaKeyPair

    def default_params(self) -> ToyRsaKeyPair:
        return ToyRsaKeyPair.from_preset()

    def make_params(self, key: Optional[str] = None, **options) -> ToyRsaKeyPair:
        size = options.get("key_size") or key or DEFAULT_KEY_SIZE
        return ToyRsaKeyPair.from_preset(size.strip().lower())

    def validate(self, params: ToyRsaKeyPair) -> None:
        super().validate(params)
        if not params.is_consistent():
            log_warn(f"Key pair n={params.n} does not invert itself; output will not round-trip.")

    def encode(self, text: str, params: ToyRsaKeyPair) -> str:
        return ' '.join(str(mod_pow(ord(char), params.e, params.n)) for char in text)

    def decode(self, text: str, params: ToyRsaKeyPair) -> str:
        chars = []
        for token in text.split():
            try:
                value = int(token)
            except ValueError:
                raise FormatError(
                    f"Invalid ciphertext token '{token}'. Please use space-separated numbers."
                ) from None
            plain = mod_pow(value, params.d, params.n)
            try:
                chars.append(chr(plain))
            except (ValueError, OverflowError):
                raise FormatError(f"Token '{token}' decrypts to {plain}, not a character") from None
        return ''.join(chars)
