"""64位整数语义"""
import unittest

from core import DivisionByZero, Operators
from core.operators import BINARY_OPERATORS, UNARY_OPERATORS
from core.token_system import INT64_MAX, INT64_MIN


class TestOperators(unittest.TestCase):

    def test_tables(self):
        self.assertEqual(set(UNARY_OPERATORS), {'+', '-', '!'})
        self.assertEqual(set(BINARY_OPERATORS), {'+', '-', '*', '/'})

    def test_arithmetic(self):
        self.assertEqual(Operators.add(2, 3), 5)
        self.assertEqual(Operators.sub(2, 3), -1)
        self.assertEqual(Operators.mul(-4, 3), -12)
        self.assertEqual(Operators.div(9, 3), 3)

    def test_results_are_python_ints(self):
        self.assertIs(type(Operators.add(1, 1)), int)
        self.assertIs(type(Operators.neg(1)), int)
        self.assertIs(type(Operators.div(7, 2)), int)

    def test_truncating_division(self):
        self.assertEqual(Operators.div(7, 2), 3)
        self.assertEqual(Operators.div(-7, 2), -3)
        self.assertEqual(Operators.div(7, -2), -3)
        self.assertEqual(Operators.div(-7, -2), 3)
        self.assertEqual(Operators.div(1, 2), 0)

    def test_division_by_zero(self):
        with self.assertRaises(DivisionByZero):
            Operators.div(5, 0)

    def test_overflow_wraps(self):
        self.assertEqual(Operators.add(INT64_MAX, 1), INT64_MIN)
        self.assertEqual(Operators.sub(INT64_MIN, 1), INT64_MAX)
        self.assertEqual(Operators.mul(INT64_MAX, 2), -2)
        self.assertEqual(Operators.neg(INT64_MIN), INT64_MIN)
        self.assertEqual(Operators.div(INT64_MIN, -1), INT64_MIN)

    def test_unary(self):
        self.assertEqual(Operators.pos(-3), -3)
        self.assertEqual(Operators.neg(-3), 3)
        self.assertEqual(Operators.not_(0), 1)
        self.assertEqual(Operators.not_(-9), 0)


if __name__ == '__main__':
    unittest.main()
