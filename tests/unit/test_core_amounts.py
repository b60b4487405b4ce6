import pytest

from zcash_parser.core.amounts import AmountCodec, amount_to_big_int
from zcash_parser.core.fmt import amount_to_decimal_string
from zcash_parser.core.constants import MAX_DECIMAL_POINT, MAX_SHIFT_DIGITS
from zcash_parser.core.exc import AmountDomainError, MalformedAmountError, MalformedScientific


# (amount, string, decimal_point, canonical form when formatting differs from the input string)
AMOUNTS = [
    (123456789, "1.23456789", 8, None),
    (2, "0.00000002", 8, None),
    (300000000, "3", 8, None),
    (498700000, "4.987", 8, None),
    (567890, "0.00000000000056789", 18, None),
    (-100000000, "-1", 8, None),
    (-8, "-0.00000008", 8, None),
    (-89012345678, "-890.12345678", 8, None),
    (-12345, "-0.00012345", 8, None),
    (12345678, "0.123456789012", 8, "0.12345678"),  # truncation of too many decimal places
    (12345678, "0.0000000000000000000000000000000012345678", 1234, None),  # too big decimal point
    (987, "9.87e-6", 8, "0.00000987"),
    (123400000, "1.234e0", 8, "1.234"),
    (1234000000, "1.234e1", 8, "12.34"),
    (12, "1.234e-7", 8, "0.00000012"),  # 12.34 truncated to 12
]


# -----------------------------
# Parsing
# -----------------------------

@pytest.mark.parametrize("amount,s,dp,_canonical", AMOUNTS)
def test_amount_to_big_int_table(amount, s, dp, _canonical):
    print(f"[amount_to_big_int] {s!r} at decimal_point={dp}, expect {amount}")
    assert amount_to_big_int(s, dp) == amount


@pytest.mark.parametrize("amount,s,dp,canonical", AMOUNTS)
def test_amount_to_decimal_string_table(amount, s, dp, canonical):
    expected = canonical if canonical is not None else s
    got = amount_to_decimal_string(amount, dp)
    print(f"[amount_to_decimal_string] {amount} at decimal_point={dp} ->", got)
    assert got == expected


def test_truncation_never_rounds():
    print("[truncation] 0.123456789 at 8 -> 12345678, -0.999999999 at 8 -> -99999999")
    assert amount_to_big_int("0.123456789", 8) == 12345678
    assert amount_to_big_int("-0.999999999", 8) == -99999999
    assert amount_to_big_int("0.000000009", 8) == 0


@pytest.mark.parametrize(
    "s,expected",
    [
        ("1E2", 10000000000),
        ("1e+2", 10000000000),
        ("-2.5e-1", -25000000),
        ("5e-9", 0),
        ("12345e-30", 0),
        ("+7", 700000000),
        ("1.", 100000000),
        (".5", 50000000),
        ("0", 0),
        ("-0.0", 0),
        ("000123", 12300000000),
    ],
)
def test_accepted_syntax(s, expected):
    print(f"[syntax-ok] {s!r} at 8 -> expect {expected}")
    assert amount_to_big_int(s, 8) == expected


@pytest.mark.parametrize(
    "s",
    ["", "-", "+", ".", "e5", "1e", "1e+", "1.2.3", "abc", "12a", " 1", "1 ", "1_000", "0x10", "1e2.5", "--1", "١٢"],
)
def test_malformed_strings_raise(s):
    print(f"[syntax-bad] {s!r} -> expect MalformedScientific")
    with pytest.raises(MalformedScientific):
        amount_to_big_int(s, 8)


def test_malformed_scientific_is_value_error_with_raw():
    with pytest.raises(MalformedAmountError) as ei:
        amount_to_big_int("1e", 8)
    assert isinstance(ei.value, ValueError)
    assert ei.value.raw == "1e"


def test_non_string_input_raises():
    with pytest.raises(MalformedScientific):
        amount_to_big_int(12, 8)  # type: ignore[arg-type]


# -----------------------------
# Decimal point domain
# -----------------------------

@pytest.mark.parametrize("dp", [-1, -8])
def test_negative_decimal_point_rejected(dp):
    print(f"[decimal-point] {dp} -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        amount_to_big_int("1", dp)
    with pytest.raises(AmountDomainError):
        amount_to_decimal_string(1, dp)


def test_decimal_point_zero():
    print("[decimal-point=0] whole units only")
    assert amount_to_big_int("42.9", 0) == 42
    assert amount_to_decimal_string(-42, 0) == "-42"


def test_large_decimal_point_clamps():
    print(f"[decimal-point clamp] values above {MAX_DECIMAL_POINT} behave like {MAX_DECIMAL_POINT}")
    assert amount_to_big_int("1", 1234) == 10 ** MAX_DECIMAL_POINT
    assert amount_to_big_int("1", 1234) == amount_to_big_int("1", MAX_DECIMAL_POINT)
    assert amount_to_decimal_string(1, 1234) == "0." + "0" * (MAX_DECIMAL_POINT - 1) + "1"


# -----------------------------
# Round-trip law
# -----------------------------

@pytest.mark.parametrize("dp", [0, 1, 8, 18, 40, 1234])
@pytest.mark.parametrize(
    "amount",
    [0, 1, -1, 7, 100000000, -89012345678, 10 ** 60 + 3, -(10 ** 45) - 10 ** 20],
)
def test_round_trip(amount, dp):
    s = amount_to_decimal_string(amount, dp)
    print(f"[round-trip] {amount} at {dp} -> {s!r}")
    assert amount_to_big_int(s, dp) == amount


# -----------------------------
# AmountCodec
# -----------------------------

def test_codec_binds_decimal_point():
    print("[AmountCodec] decimal_point=8 by default")
    codec = AmountCodec()
    assert codec.to_decimal_string(498700000) == "4.987"
    assert codec.to_big_int("4.987") == 498700000
    assert AmountCodec(2).to_big_int("1.239") == 123


def test_codec_rejects_negative_decimal_point():
    with pytest.raises(AmountDomainError):
        AmountCodec(-1)


# -----------------------------
# Very long amounts and exponents
# -----------------------------

def test_amounts_beyond_int_str_digit_limit():
    print("[long amounts] values with more than 4300 digits parse and format exactly")
    assert amount_to_big_int("1e4400", 8) == 10 ** 4408
    assert amount_to_big_int("7" * 5000, 0) == 7 * (10 ** 5000 - 1) // 9
    amount = 10 ** 4400 + 1
    s = amount_to_decimal_string(amount, 8)
    assert s == "1" + "0" * 4392 + ".00000001"
    assert amount_to_big_int(s, 8) == amount
    assert amount_to_big_int("-" + s, 8) == -amount


def test_shift_bound():
    print(f"[shift bound] decimal point may move at most {MAX_SHIFT_DIGITS} places right")
    assert amount_to_big_int(f"1e{MAX_SHIFT_DIGITS - 8}", 8) == 10 ** MAX_SHIFT_DIGITS
    with pytest.raises(MalformedScientific):
        amount_to_big_int(f"1e{MAX_SHIFT_DIGITS - 7}", 8)


@pytest.mark.parametrize("s", ["1e20000000", "1e99999999999", "1e+" + "9" * 5000])
def test_huge_positive_exponent_rejected(s):
    print(f"[huge exponent] {s[:16]}... -> expect MalformedScientific")
    with pytest.raises(MalformedScientific):
        amount_to_big_int(s, 8)


@pytest.mark.parametrize("s", ["1e-20000000", "1e-99999999999", "1e-" + "9" * 5000, "0e99999999999"])
def test_huge_negative_exponent_truncates_to_zero(s):
    assert amount_to_big_int(s, 8) == 0


def test_leading_zero_exponent():
    assert amount_to_big_int("1e-00000000000000000007", 8) == 10
