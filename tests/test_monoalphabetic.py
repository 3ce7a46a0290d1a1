import random
import string

import pytest

from ce_classic import Direction, MonoKey, ValidationError, generate_key, transform
from ce_classic.ciphers.monoalphabetic import is_valid_key

KEY = "QWERTYUIOPASDFGHJKLZXCVBNM"


class IdentityRandom:
    """Always picks the current index, so the shuffle swaps nothing."""

    def randrange(self, stop):
        return stop - 1


def test_encrypt_maps_by_position():
    assert transform("mono", "A", MonoKey(KEY)) == "Q"


def test_case_is_preserved():
    assert transform("mono", "Hello, World", MonoKey(KEY)) == "Itssg, Vgksr"


def test_decrypt_reverses_encrypt():
    text = "Pack my box with five dozen liquor jugs! 42"
    encrypted = transform("mono", text, MonoKey(KEY))
    assert transform("mono", encrypted, MonoKey(KEY), Direction.DECRYPT) == text


@pytest.mark.parametrize("key", [
    "QQERTYUIOPASDFGHJKLZXCVBNM",
    "QWERTYUIOPASDFGHJKLZXCVBN",
    "",
])
def test_invalid_keys_fail_validation(key):
    assert not is_valid_key(key)
    with pytest.raises(ValidationError):
        transform("mono", "abc", MonoKey(key))


def test_key_is_normalized():
    params = MonoKey("qwerty-uiop asdfghjklzxcvbnm")
    assert params.key == KEY
    params.validate()


def test_generated_key_is_permutation():
    key = generate_key(random.Random(1234))
    assert sorted(key) == list(string.ascii_uppercase)
    assert is_valid_key(key)


def test_generated_key_is_deterministic_for_seed():
    assert generate_key(random.Random(7)) == generate_key(random.Random(7))


def test_generated_key_uses_given_source():
    assert generate_key(IdentityRandom()) == string.ascii_uppercase


def test_non_string_key_is_validation_error():
    with pytest.raises(ValidationError):
        MonoKey(None)
