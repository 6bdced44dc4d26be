from dexa_convert.parsing.numbers import extract_field_numbers, extract_numbers


def test_thousands_separator_and_units():
    assert extract_field_numbers("1,234.56 kg") == [1234.56]


def test_signed_tokens():
    assert extract_field_numbers("-3 +4") == [-3.0, 4.0]


def test_no_digits():
    assert extract_field_numbers("n/a") == []
    assert extract_numbers(["", "--", "lbs"]) == []


def test_trailing_decimal_point():
    assert extract_field_numbers("12.") == [12.0]


def test_non_ascii_digits_ignored():
    assert extract_field_numbers("١٢") == []


def test_fields_concatenated_in_order():
    assert extract_numbers(["1.5", "2 / 3", "x", "4,000"]) == [1.5, 2.0, 3.0, 4000.0]


def test_overflowing_token_dropped():
    assert extract_field_numbers("9" * 400) == []
    assert extract_numbers(["9" * 400, "1.5"]) == [1.5]
