"""核心模块 - Token系统、调度场重排、RPN评估器和操作符"""
from .errors import (
    ExpressionError, MismatchedParenthesis, UnbalancedParenthesis,
    InvalidLiteral, UnevaluableToken, DivisionByZero, MalformedPostfix
)
from .token_system import (
    TokenType, Token, NumberToken, OperatorToken, SymbolToken, PostfixValidator
)
from .shunting_yard import ShuntingYard, classify, reorder
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

evaluate = RPNEvaluator.evaluate

__all__ = [
    'ExpressionError', 'MismatchedParenthesis', 'UnbalancedParenthesis',
    'InvalidLiteral', 'UnevaluableToken', 'DivisionByZero', 'MalformedPostfix',
    'TokenType', 'Token', 'NumberToken', 'OperatorToken', 'SymbolToken',
    'PostfixValidator', 'ShuntingYard', 'classify', 'reorder',
    'RPNEvaluator', 'evaluate', 'Operators'
]
