"""后缀求值：元数、操作数顺序和错误类型"""
import unittest

from core import (
    DivisionByZero, MalformedPostfix, RPNEvaluator, UnevaluableToken, evaluate
)
from tests.helpers import N, S, op

NEG = op("-", 1, False, True)
POS = op("+", 1, False, True)
NOT = op("!", 3, False, True)


class TestRPNEvaluator(unittest.TestCase):

    def test_single_number(self):
        self.assertEqual(RPNEvaluator.evaluate([N("42")]), 42)

    def test_binary_operand_order(self):
        self.assertEqual(RPNEvaluator.evaluate([N("10"), N("4"), op("-")]), 6)
        self.assertEqual(RPNEvaluator.evaluate([N("12"), N("4"), op("/", 2)]), 3)

    def test_unary_operators(self):
        self.assertEqual(RPNEvaluator.evaluate([N("5"), NEG]), -5)
        self.assertEqual(RPNEvaluator.evaluate([N("5"), POS]), 5)
        self.assertEqual(RPNEvaluator.evaluate([N("0"), NOT]), 1)
        self.assertEqual(RPNEvaluator.evaluate([N("5"), NOT]), 0)

    def test_division_truncates_toward_zero(self):
        self.assertEqual(RPNEvaluator.evaluate([N("7"), NEG, N("2"), op("/", 2)]), -3)
        self.assertEqual(RPNEvaluator.evaluate([N("7"), N("2"), NEG, op("/", 2)]), -3)
        self.assertEqual(RPNEvaluator.evaluate([N("7"), NEG, N("2"), NEG, op("/", 2)]), 3)

    def test_evaluation_consumes_the_stack(self):
        postfix = [N("1"), N("2"), op("+")]
        RPNEvaluator.evaluate(postfix)
        self.assertEqual(postfix, [])

    def test_module_alias(self):
        self.assertEqual(evaluate([N("2"), N("3"), op("*", 2)]), 6)

    def test_division_by_zero(self):
        with self.assertRaises(DivisionByZero):
            RPNEvaluator.evaluate([N("1"), N("0"), op("/", 2)])

    def test_empty_stack(self):
        with self.assertRaises(MalformedPostfix):
            RPNEvaluator.evaluate([])

    def test_missing_operand(self):
        with self.assertRaises(MalformedPostfix):
            RPNEvaluator.evaluate([N("1"), op("+")])
        with self.assertRaises(MalformedPostfix):
            RPNEvaluator.evaluate([NEG])

    def test_leftover_tokens_are_an_error(self):
        with self.assertRaises(MalformedPostfix):
            RPNEvaluator.evaluate([N("1"), N("2")])

    def test_leftover_tokens_allowed_when_partial(self):
        postfix = [N("1"), N("2")]
        self.assertEqual(RPNEvaluator.evaluate(postfix, allow_partial=True), 2)
        self.assertEqual(len(postfix), 1)

    def test_symbol_is_unevaluable(self):
        paren = S("(")
        with self.assertRaises(UnevaluableToken) as ctx:
            RPNEvaluator.evaluate([N("1"), paren])
        self.assertIs(ctx.exception.token, paren)

    def test_unknown_operator_text(self):
        with self.assertRaises(UnevaluableToken):
            RPNEvaluator.evaluate([N("1"), N("2"), op("%", 2)])
        with self.assertRaises(UnevaluableToken):
            RPNEvaluator.evaluate([N("1"), op("*", 2, False, True)])

    def test_long_left_nested_chain(self):
        # 2000个二元操作符，左操作数一层套一层
        postfix = [N("10000")]
        for _ in range(2000):
            postfix += [N("1"), op("-")]
        self.assertEqual(RPNEvaluator.evaluate(postfix), 8000)
        self.assertEqual(postfix, [])

    def test_long_unary_chain(self):
        postfix = [N("5")] + [NEG] * 2001
        self.assertEqual(RPNEvaluator.evaluate(postfix), -5)

    def test_long_chain_keeps_typed_errors(self):
        postfix = [N("1"), N("0"), op("/", 2)] + [N("1"), op("+")] * 2000
        with self.assertRaises(DivisionByZero):
            RPNEvaluator.evaluate(postfix)

    def test_binary_not_is_unevaluable(self):
        with self.assertRaises(UnevaluableToken):
            RPNEvaluator.evaluate([N("1"), N("2"), op("!", 3)])


if __name__ == '__main__':
    unittest.main()
