import unittest

from rpncalc import (
    CapacityExceededError,
    Limits,
    NullOrMissingInputError,
    UnrecognizedCharacterError,
    tokenize,
)


class TestTokenize(unittest.TestCase):
    def test_operators_and_numbers(self):
        self.assertEqual(tokenize("3 + 4 * 2"), ["3", "+", "4", "*", "2"])
        self.assertEqual(tokenize("3+4*2"), ["3", "+", "4", "*", "2"])

    def test_whitespace_is_skipped(self):
        self.assertEqual(tokenize("  12\t-\n 7  "), ["12", "-", "7"])
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   "), [])

    def test_only_ascii_whitespace_separates(self):
        self.assertEqual(tokenize("3\f+\v4\r"), ["3", "+", "4"])
        for expression in ("3\xa0+\xa04", "3\u2003+4"):
            with self.assertRaises(UnrecognizedCharacterError) as cm:
                tokenize(expression)
            self.assertEqual(cm.exception.position, 1, msg=f"Failed on: {expression!r}")

    def test_decimal_numbers(self):
        self.assertEqual(tokenize("2.5 * .5"), ["2.5", "*", ".5"])
        # validated only when parsed
        self.assertEqual(tokenize("1.2.3"), ["1.2.3"])

    def test_functions_and_brackets(self):
        self.assertEqual(tokenize("sqrt(16)"), ["sqrt", "(", "16", ")"])
        self.assertEqual(
            tokenize("{[arcsin(1)]}"),
            ["{", "[", "arcsin", "(", "1", ")", "]", "}"],
        )

    def test_identifiers_hold_letters_only(self):
        self.assertEqual(tokenize("abc123"), ["abc", "123"])
        self.assertEqual(tokenize("2x"), ["2", "x"])

    def test_factorial_and_power(self):
        self.assertEqual(tokenize("5!^2"), ["5", "!", "^", "2"])

    def test_unrecognized_character(self):
        with self.assertRaises(UnrecognizedCharacterError) as ctx:
            tokenize("3 # 4")
        self.assertEqual(ctx.exception.position, 2)
        for expression in ["3 % 2", "a_b", "1,5", "2 = 2"]:
            with self.assertRaises(UnrecognizedCharacterError):
                tokenize(expression)

    def test_missing_input(self):
        with self.assertRaises(NullOrMissingInputError):
            tokenize(None)

    def test_expression_too_long(self):
        with self.assertRaises(CapacityExceededError):
            tokenize("1" * 1001)
        self.assertEqual(tokenize("1" * 64), ["1" * 64])

    def test_long_runs_are_truncated(self):
        self.assertEqual(tokenize("1" * 70), ["1" * 64])
        limits = Limits(max_token_length=3)
        self.assertEqual(tokenize("12345+abcdef", limits), ["123", "+", "abc"])

    def test_too_many_tokens(self):
        limits = Limits(max_tokens=3)
        self.assertEqual(tokenize("1+2", limits), ["1", "+", "2"])
        with self.assertRaises(CapacityExceededError):
            tokenize("1+2+3", limits)


if __name__ == "__main__":
    unittest.main()
