"""测试用的Token构造工具"""
from core import NumberToken, OperatorToken, SymbolToken

N = NumberToken
S = SymbolToken


def op(text, precedence=1, left_associative=True, unary=False):
    return OperatorToken(text, precedence, left_associative, unary)


def texts(tokens):
    return [t.text for t in tokens]
