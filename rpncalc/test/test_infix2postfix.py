import unittest

from rpncalc import (
    CapacityExceededError,
    Limits,
    MismatchedBracketsError,
    NullOrMissingInputError,
    UnrecognizedTokenError,
    infix2postfix,
    to_postfix,
    tokenize,
)


class TestInfix2Postfix(unittest.TestCase):
    def _convert(self, expression, limits=Limits()):
        return infix2postfix(tokenize(expression, limits), limits)

    def test_precedence(self):
        self.assertEqual(self._convert("3 + 4 * 2"), ["3", "4", "2", "*", "+"])
        self.assertEqual(self._convert("3 * 4 + 2"), ["3", "4", "*", "2", "+"])
        self.assertEqual(self._convert("2 * 3 ^ 2"), ["2", "3", "2", "^", "*"])

    def test_brackets_group(self):
        self.assertEqual(self._convert("(3+4)*2"), ["3", "4", "+", "2", "*"])
        self.assertEqual(
            self._convert("[1+2]*{3-1}"), ["1", "2", "+", "3", "1", "-", "*"]
        )

    def test_left_associativity(self):
        self.assertEqual(self._convert("10 - 4 - 3"), ["10", "4", "-", "3", "-"])
        self.assertEqual(self._convert("8 / 4 / 2"), ["8", "4", "/", "2", "/"])

    def test_right_associativity(self):
        self.assertEqual(self._convert("2^3^2"), ["2", "3", "2", "^", "^"])
        self.assertEqual(self._convert("2^3!"), ["2", "3", "!", "^"])

    def test_factorial(self):
        self.assertEqual(self._convert("5!"), ["5", "!"])
        self.assertEqual(self._convert("3! + 1"), ["3", "!", "1", "+"])

    def test_functions(self):
        self.assertEqual(self._convert("sqrt(16)"), ["16", "sqrt"])
        self.assertEqual(self._convert("2*sqrt(9)"), ["2", "9", "sqrt", "*"])
        self.assertEqual(
            self._convert("sin(0)+cos(0)"), ["0", "sin", "0", "cos", "+"]
        )
        self.assertEqual(
            self._convert("ln(sqrt(4+5))"), ["4", "5", "+", "sqrt", "ln"]
        )

    def test_alias(self):
        self.assertEqual(to_postfix(["1", "+", "2"]), ["1", "2", "+"])

    def test_sign_folding(self):
        self.assertEqual(self._convert("(-3)!"), ["-3", "!"])
        self.assertEqual(self._convert("-3 + 5"), ["-3", "5", "+"])
        self.assertEqual(self._convert("2*-4"), ["2", "-4", "*"])
        self.assertEqual(self._convert("3 - -2"), ["3", "-2", "-"])
        self.assertEqual(self._convert("2^+1"), ["2", "1", "^"])
        # a binary minus is never folded
        self.assertEqual(self._convert("3-2"), ["3", "2", "-"])
        self.assertEqual(self._convert("5!-2"), ["5", "!", "2", "-"])

    def test_sign_folding_disabled(self):
        limits = Limits(fold_signs=False)
        self.assertEqual(self._convert("(-3)!", limits), ["3", "-", "!"])

    def test_folded_literal_keeps_token_capacity(self):
        postfix = self._convert("-" + "1" * 70)
        self.assertEqual(postfix, ["-" + "1" * 63])
        limits = Limits(max_token_length=3)
        self.assertEqual(self._convert("2*-123", limits), ["2", "-12", "*"])
        self.assertEqual(self._convert("+123", limits), ["123"])

    def test_unclosed_bracket(self):
        with self.assertRaises(MismatchedBracketsError):
            self._convert("(3+4")
        with self.assertRaises(MismatchedBracketsError):
            self._convert("sqrt(16")

    def test_unopened_bracket(self):
        with self.assertRaises(MismatchedBracketsError) as ctx:
            self._convert("3+4)")
        self.assertEqual(ctx.exception.position, 3)

    def test_bracket_kinds_are_interchangeable(self):
        self.assertEqual(self._convert("(3+4]"), ["3", "4", "+"])

    def test_strict_brackets(self):
        limits = Limits(strict_brackets=True)
        with self.assertRaises(MismatchedBracketsError):
            self._convert("(3+4]", limits)
        self.assertEqual(self._convert("{(3+4)*[2]}", limits), ["3", "4", "+", "2", "*"])

    def test_unrecognized_token(self):
        with self.assertRaises(UnrecognizedTokenError):
            self._convert("foo(2)")
        with self.assertRaises(UnrecognizedTokenError):
            infix2postfix(["3", "%", "2"])

    def test_missing_input(self):
        with self.assertRaises(NullOrMissingInputError):
            infix2postfix(None)

    def test_too_many_tokens(self):
        limits = Limits(max_tokens=2)
        with self.assertRaises(CapacityExceededError):
            infix2postfix(["1", "+", "2"], limits)

    def test_nesting_too_deep(self):
        limits = Limits(max_stack_depth=2)
        with self.assertRaises(CapacityExceededError):
            self._convert("(((1)))", limits)


if __name__ == "__main__":
    unittest.main()
