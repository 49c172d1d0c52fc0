import math
import unittest

import pytest

from helperkit.numbers import bool_to_int, ordinal, to_degrees, to_radians, to_words, toggle


class ToWordsTests(unittest.TestCase):
    def test_known_values(self) -> None:
        self.assertEqual(to_words(0), "zero")
        self.assertEqual(to_words(21), "twenty-one")
        self.assertEqual(to_words(999), "nine hundred and ninety-nine")
        self.assertEqual(to_words(23000000), "twenty-three million")
        self.assertEqual(to_words(-1234), "minus one thousand two hundred and thirty-four")

    def test_groups_skip_zero_chunks(self) -> None:
        self.assertEqual(to_words(100), "one hundred")
        self.assertEqual(to_words(1001), "one thousand one")
        self.assertEqual(to_words(1000000), "one million")
        self.assertEqual(to_words(2000000005), "two billion five")
        self.assertEqual(to_words(40), "forty")

    def test_int32_bounds(self) -> None:
        self.assertEqual(
            to_words(2**31 - 1),
            "two billion one hundred and forty-seven million four hundred and eighty-three thousand "
            "six hundred and forty-seven",
        )
        self.assertEqual(
            to_words(-(2**31)),
            "minus two billion one hundred and forty-seven million four hundred and eighty-three thousand "
            "six hundred and forty-eight",
        )

    def test_negative_is_minus_prefix(self) -> None:
        for n in (1, 7, 19, 20, 99, 101, 999, 1000, 123456, 2**31 - 1):
            self.assertEqual(to_words(-n), "minus " + to_words(n))

    def test_beyond_scale_table_rejected(self) -> None:
        self.assertTrue(to_words(10**21 - 1).startswith("nine hundred and ninety-nine quintillion"))
        with self.assertRaises(ValueError):
            to_words(10**21)


def test_teens_have_no_hyphen_or_and() -> None:
    for n in range(1, 20):
        words = to_words(n)
        assert "-" not in words
        assert "and" not in words.split()


def test_compound_tens_have_exactly_one_hyphen() -> None:
    for n in range(20, 100):
        if n % 10:
            assert to_words(n).count("-") == 1, n
        else:
            assert "-" not in to_words(n), n


def test_ordinal_suffixes() -> None:
    assert ordinal(1) == "1st"
    assert ordinal(2) == "2nd"
    assert ordinal(3) == "3rd"
    assert ordinal(10) == "10th"
    assert ordinal(21) == "21st"
    assert ordinal(22) == "22nd"
    assert ordinal(103) == "103rd"
    assert [ordinal(n) for n in (11, 12, 13, 111, 112)] == ["11th", "12th", "13th", "111th", "112th"]


def test_ordinal_non_positive_is_plain_digits() -> None:
    assert ordinal(0) == "0"
    assert ordinal(-3) == "-3"


def test_bool_helpers() -> None:
    assert bool_to_int(True) == 1
    assert bool_to_int(False) == 0
    assert toggle(True) is False
    assert toggle(False) is True


def test_angle_conversion() -> None:
    assert math.trunc(to_degrees(10.5)) == 601
    assert math.trunc(to_radians(600.5)) == 10
    assert to_radians(to_degrees(1.25)) == pytest.approx(1.25)
    assert to_degrees(math.pi) == pytest.approx(180.0)


if __name__ == "__main__":
    unittest.main()
