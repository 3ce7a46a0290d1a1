"""
Cipher engine framework: the strategy base class, the registry and the
single ``transform`` entry point every front end calls into.

All strategies are stateless. Parameters travel with each call as a frozen
params object owned by the caller.
"""

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)

def set_verbose(enabled: bool):
    global VERBOSE
    VERBOSE = enabled

# ==========================================
#  ERRORS
# ==========================================

class CipherError(Exception):
    """Base class for everything the engine reports to a caller."""


class ValidationError(CipherError, ValueError):
    """A key or parameter violates its structural invariant."""


class FormatError(CipherError, ValueError):
    """Input text does not parse under the encoding the cipher expects."""


class UnknownCipherError(CipherError, KeyError):
    """No cipher is registered under the requested name."""

    def __str__(self):
        return self.args[0] if self.args else "unknown cipher"


class Direction(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================

class CipherStrategy(ABC):
    """Abstract base class that all ciphers must implement."""

    #: Frozen dataclass describing this cipher's key material.
    params_type: type = object

    @property
    @abstractmethod
    def name(self) -> str:
        """The command-line name for this cipher."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @abstractmethod
    def default_params(self) -> Any:
        pass

    @abstractmethod
    def make_params(self, key: Optional[str] = None, **options) -> Any:
        """
        Build a params object from a textual key (as typed on the command
        line) plus cipher-specific options. Missing pieces fall back to the
        defaults. Raises ValidationError for keys that cannot be parsed.
        """
        pass

    @abstractmethod
    def encode(self, text: str, params: Any) -> str:
        pass

    @abstractmethod
    def decode(self, text: str, params: Any) -> str:
        pass

    def validate(self, params: Any) -> None:
        """Raise ValidationError unless ``params`` is usable by this cipher."""
        if not isinstance(params, self.params_type):
            raise ValidationError(
                f"Cipher '{self.name}' expects {self.params_type.__name__}, "
                f"got {type(params).__name__}"
            )
        check = getattr(params, "validate", None)
        if check is not None:
            check()

    def apply(self, text: str, params: Any, direction: Direction) -> str:
        if not isinstance(direction, Direction):
            raise ValidationError(f"Unknown direction {direction!r}")
        self.validate(params)
        if direction is Direction.ENCRYPT:
            return self.encode(text, params)
        return self.decode(text, params)


CIPHER_REGISTRY: Dict[str, CipherStrategy] = {}

def register_cipher(cls):
    """Decorator to auto-register ciphers."""
    cipher = cls()
    CIPHER_REGISTRY[cipher.name] = cipher
    return cls

def get_cipher(kind: str) -> CipherStrategy:
    try:
        return CIPHER_REGISTRY[kind]
    except KeyError:
        known = ", ".join(sorted(CIPHER_REGISTRY))
        raise UnknownCipherError(f"Unknown cipher '{kind}' (available: {known})") from None

def transform(kind: str, text: str, params: Any = None,
              direction: Direction = Direction.ENCRYPT) -> str:
    """
    Run one cipher over ``text``.

    Args:
        kind: Registered cipher name (``caesar``, ``mono``, ``vigenere``, ...)
        text: Plaintext or ciphertext depending on ``direction``
        params: The cipher's params object; ``None`` uses its defaults
        direction: Direction.ENCRYPT or Direction.DECRYPT

    Raises:
        UnknownCipherError, ValidationError, FormatError
    """
    cipher = get_cipher(kind)
    if params is None:
        params = cipher.default_params()
    if isinstance(direction, str):
        try:
            direction = Direction(direction.lower())
        except ValueError:
            raise ValidationError(f"Unknown direction '{direction}'") from None
    if not isinstance(direction, Direction):
        raise ValidationError(f"Unknown direction {direction!r}")
    log_info(f"{cipher.name}: {direction.value} {len(text)} character(s)")
    return cipher.apply(text, params, direction)
