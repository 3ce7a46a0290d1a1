import pytest

from ce_classic import Direction, RowTranspositionKey, ValidationError, transform
from ce_classic.ciphers.rowtransposition import build_grid

KEY = RowTranspositionKey("3142")


def test_encrypt_reads_columns_in_key_order():
    assert transform("rowtransposition", "HELLOWORLD", KEY) == "EWDLRHOLLO"


def test_decrypt_short_last_row():
    assert transform("rowtransposition", "EWDLRHOLLO", KEY, Direction.DECRYPT) == "HELLOWORLD"


def test_whitespace_is_stripped():
    assert transform("rowtransposition", "HELLO WORLD", KEY) == "EWDLRHOLLO"


@pytest.mark.parametrize("length", range(1, 14))
def test_round_trip_every_length(length):
    text = "ABCDEFGHIJKLM"[:length]
    encrypted = transform("rowtransposition", text, KEY)
    assert transform("rowtransposition", encrypted, KEY, Direction.DECRYPT) == text


@pytest.mark.parametrize("key", ["31425", "1", "21", "987654321"])
def test_round_trip_other_keys(key):
    params = RowTranspositionKey(key)
    text = "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"
    encrypted = transform("rowtransposition", text, params)
    assert transform("rowtransposition", encrypted, params, Direction.DECRYPT) == text


@pytest.mark.parametrize("key", ["3143", "1235", "12a", "0123", "", None, 3142])
def test_invalid_key(key):
    with pytest.raises(ValidationError):
        transform("rowtransposition", "HELLO", RowTranspositionKey(key))


def test_build_grid():
    assert build_grid("HELLOWORLD", KEY) == [
        ['H', 'E', 'L', 'L'],
        ['O', 'W', 'O', 'R'],
        ['L', 'D', '', ''],
    ]


def test_empty_text():
    assert transform("rowtransposition", "", KEY) == ""
    assert transform("rowtransposition", "", KEY, Direction.DECRYPT) == ""
