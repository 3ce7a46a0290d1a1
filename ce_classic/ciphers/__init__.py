"""
Built-in ciphers. Importing this package registers every one of them in
``CIPHER_REGISTRY`` through the ``@register_cipher`` decorator.
"""

from . import caesar, monoalphabetic, vigenere, railfence, rowtransposition, playfair, toyrsa  # noqa: F401
