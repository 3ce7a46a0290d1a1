"""Classical cipher engine: Caesar, substitution, Vigenere, Rail Fence,
columnar transposition, Playfair and a toy textbook RSA."""

from .engine import (
    CIPHER_REGISTRY,
    CipherError,
    CipherStrategy,
    Direction,
    FormatError,
    UnknownCipherError,
    ValidationError,
    get_cipher,
    register_cipher,
    transform,
)
from . import ciphers  # noqa: F401  (registers the built-in ciphers)
from .ciphers.caesar import CaesarParams
from .ciphers.monoalphabetic import MonoKey, generate_key
from .ciphers.playfair import PlayfairKey, build_matrix
from .ciphers.railfence import RailFenceParams
from .ciphers.rowtransposition import RowTranspositionKey
from .ciphers.toyrsa import ToyRsaKeyPair, mod_pow

__version__ = "1.0.0"
