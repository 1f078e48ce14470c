import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from kcgdeck.deckcode import DeckCodeError, InvalidFormatError, decode, decode_entries
from kcgdeck.deckcode import policies
from kcgdeck.deckcode.decoder import (
    DecodedEntry,
    assemble_bits,
    bits_to_digits,
    decode_group,
    expand_chunk,
    normalize_digits,
    padding_bits,
    validate,
)
from kcgdeck.deckcode.policies import PLACEHOLDER

# One chunk "11111": payload bits 0110000101 0110000110 + 4 padding bits
SINGLE_CARD_CODE = "KCG-YDqME"
# Chunks "03127" and "04502": tokens X31 270 450 200, 2 padding bits
TWO_CARD_CODE = "KCG-oriPEWSG"


# --- format validation ---

@pytest.mark.parametrize(
    "code,fragment",
    [
        ("XYZZ", None),
        ("", None),
        ("kcg-YDqME", None),
        ("KCG-", None),
        ("KCG-@", "@"),
        ("KCG-YDq ME", " "),
        ("KCG-YD-qME", "-"),
    ],
)
def test_invalid_format(code, fragment):
    with pytest.raises(InvalidFormatError) as excinfo:
        decode(code)
    assert excinfo.value.fragment == fragment
    assert excinfo.value.message


def test_invalid_character_is_named_in_message():
    with pytest.raises(InvalidFormatError, match="@"):
        decode("KCG-@")


def test_invalid_format_is_a_deck_code_error():
    with pytest.raises(DeckCodeError):
        decode("XYZZ")


def test_validate_returns_payload():
    assert validate(SINGLE_CARD_CODE) == "YDqME"


# --- padding and bit assembly ---

def test_padding_bits_uses_one_based_position():
    # 'Y' is position 4
    assert padding_bits("Y") == 4
    assert padding_bits("Y", "octet-floor") == 7
    # '/' is position 64
    assert padding_bits("/") == 0


def test_assemble_bits_trims_padding():
    assert assemble_bits("DqME", 4) == "01100001010110000110"
    assert assemble_bits("DqME", 0) == "011000010101100001100000"


def test_assemble_bits_trim_longer_than_payload():
    assert assemble_bits("A", 7) == ""
    assert assemble_bits("", 3) == ""


# --- ten-bit groups ---

@pytest.mark.parametrize(
    "group,token",
    [
        # 500 -> n = 0
        ("0111110100", PLACEHOLDER * 2 + "0"),
        # 488 -> n = 12
        ("0111101000", PLACEHOLDER + "12"),
        # 389 -> n = 111
        ("0110000101", "111"),
        # -512 -> n = 1012
        ("1000000000", "1012"),
        # -1 -> n = 501
        ("1111111111", "501"),
        # 0 -> n = 500
        ("0000000000", "500"),
        # 511 -> n = -11
        ("0111111111", "-11"),
    ],
)
def test_decode_group(group, token):
    assert decode_group(group) == token


def test_bits_to_digits_discards_short_tail():
    assert bits_to_digits("0110000101" "0110000110" "0101") == "111110"
    assert bits_to_digits("011000010") == ""


# --- digit string trimming ---

def test_normalize_digits_resolves_placeholders_after_trim():
    assert normalize_digits("X31270450200") == "0312704502"
    assert normalize_digits("X31270450200", "placeholder-first") == "3127045020"


def test_normalize_digits_keeps_multiples_of_five():
    assert normalize_digits("XX0123456") == "00012"
    assert normalize_digits("") == ""


def test_normalize_digits_rejects_bad_length(monkeypatch):
    monkeypatch.setitem(policies.DIGIT_TRIM_POLICIES, "keep", lambda digits, count: digits)
    with pytest.raises(InvalidFormatError, match="multiple of 5"):
        normalize_digits("1234", "keep")


# --- chunk expansion ---

@pytest.mark.parametrize(
    "chunk,card_id,count",
    [
        ("11111", "AA-11", 1),
        ("41371", "DA-37", 1),
        ("03127", "prmM-12", 2),
        ("04502", "exD-50", 2),
        ("92019", "RS-1", 4),
        ("52504", "ES-50", 4),
        ("14106", "JD-10", 1),
    ],
)
def test_expand_chunk(chunk, card_id, count):
    entry = expand_chunk(chunk)
    assert entry is not None
    assert entry.card_id == card_id
    assert entry.count == count


@pytest.mark.parametrize(
    "chunk",
    [
        "26097",   # type 6
        "20097",   # type 0
        "11110",   # selector 0
        "11115",   # selector 5
        "11001",   # number 0
        "11511",   # number 51
        "11991",   # number 99
        "1-111",   # negative token leaked into the chunk
    ],
)
def test_expand_chunk_drops_bad_data(chunk):
    assert expand_chunk(chunk) is None


@pytest.mark.parametrize("selector", range(10))
def test_surviving_counts_are_one_to_four(selector):
    entry = expand_chunk(f"1111{selector}")
    if selector in (0, 5):
        assert entry is None
    else:
        assert entry.selector in {1, 2, 3, 4, 6, 7, 8, 9}
        assert 1 <= entry.count <= 4


# --- full decode ---

def test_decode_single_card():
    assert decode(SINGLE_CARD_CODE) == ["AA-11"]


def test_decode_repeats_by_count():
    assert decode(TWO_CARD_CODE) == ["prmM-12", "prmM-12", "exD-50", "exD-50"]


def test_decode_entries():
    assert decode_entries(TWO_CARD_CODE) == [
        DecodedEntry("prmM-12", 7),
        DecodedEntry("exD-50", 2),
    ]


def test_decode_is_deterministic():
    assert decode(TWO_CARD_CODE) == decode(TWO_CARD_CODE)


def test_decode_with_octet_floor_padding():
    # 7 bits trimmed leaves three groups: X31 270 450 -> "03127"
    assert decode(TWO_CARD_CODE, padding="octet-floor") == ["prmM-12", "prmM-12"]
    assert decode(SINGLE_CARD_CODE, padding="octet-floor") == []


def test_decode_with_placeholder_first_trim():
    # dropping the leading placeholder shifts every chunk onto a 0 selector
    assert decode(TWO_CARD_CODE, digit_trim="placeholder-first") == []
    assert decode(SINGLE_CARD_CODE, digit_trim="placeholder-first") == ["AA-11"]


@pytest.mark.parametrize("code", ["KCG-A", "KCG-AA", "KCG-/"])
def test_decode_without_data_is_empty(code):
    assert decode(code) == []


def test_decode_unknown_policy():
    with pytest.raises(ValueError):
        decode(SINGLE_CARD_CODE, padding="bogus")
    with pytest.raises(ValueError):
        decode(SINGLE_CARD_CODE, digit_trim="bogus")


def test_decoded_ids_never_have_invalid_numbers():
    for card_id in decode(TWO_CARD_CODE) + decode(SINGLE_CARD_CODE):
        number = int(card_id.split("-")[1])
        assert 1 <= number <= 50
