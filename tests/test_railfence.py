import pytest

from ce_classic import Direction, RailFenceParams, ValidationError, transform
from ce_classic.ciphers.railfence import rail_pattern, zigzag_grid

PLAIN = "WEAREDISCOVEREDFLEEATONCE"
CIPHER = "WECRLTEERDSOEEFEAOCAIVDEN"


def test_reference_vector():
    assert transform("railfence", PLAIN, RailFenceParams(3, 0)) == CIPHER


def test_reference_vector_decrypt():
    assert transform("railfence", CIPHER, RailFenceParams(3, 0), Direction.DECRYPT) == PLAIN


def test_offset_starts_on_given_rail():
    assert rail_pattern(5, 3, 2) == [2, 1, 0, 1, 2]
    assert transform("railfence", "ABCDE", RailFenceParams(3, 2)) == "CBDAE"


def test_pattern_bounces():
    assert rail_pattern(6, 3, 0) == [0, 1, 2, 1, 0, 1]


@pytest.mark.parametrize("rails,offset", [(2, 0), (3, 1), (4, 3), (5, 2), (10, 9)])
def test_round_trip_with_spaces(rails, offset):
    text = "Hello World, this is a fence!"
    params = RailFenceParams(rails, offset)
    encrypted = transform("railfence", text, params)
    assert len(encrypted) == len(text)
    assert transform("railfence", encrypted, params, Direction.DECRYPT) == text


def test_too_few_rails_passes_through():
    assert transform("railfence", "HELLO", RailFenceParams(1, 0)) == "HELLO"
    assert transform("railfence", "HELLO", RailFenceParams(0, 0), Direction.DECRYPT) == "HELLO"


def test_whitespace_only_encrypts_to_empty():
    assert transform("railfence", "   ", RailFenceParams(3, 0)) == ""


def test_zigzag_grid():
    assert zigzag_grid("ABC", 2) == [['A', ' ', 'C'], [' ', 'B', ' ']]


@pytest.mark.parametrize("rails,offset", [(True, 0), (3, False), (3.0, 0), (3, "1")])
def test_non_integer_params_are_validation_error(rails, offset):
    with pytest.raises(ValidationError):
        transform("railfence", "HELLO", RailFenceParams(rails, offset))
