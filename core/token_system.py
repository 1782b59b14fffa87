"""core/token_system.py"""
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

import numpy as np

from core.errors import InvalidLiteral

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)

# 词法层面的数字不带符号，正负号是独立的操作符Token（"-1" 会被拒绝，负数写成 "- 1"）
_LITERAL_PATTERN = re.compile(r"[0-9]+")

LEFT_PAREN = "("
RIGHT_PAREN = ")"


class TokenType(Enum):
    NUMBER = "Number"
    OPERATOR = "Operator"
    SYMBOL = "Symbol"


@dataclass(frozen=True)
class NumberToken:
    text: str

    def __post_init__(self):
        if not _LITERAL_PATTERN.fullmatch(self.text):
            raise InvalidLiteral(self.text)
        if int(self.text) > INT64_MAX:
            raise InvalidLiteral(self.text)

    @property
    def kind(self):
        return TokenType.NUMBER

    @property
    def value(self):
        """十进制整数值"""
        return int(self.text)

    def __str__(self):
        return f"(Number: '{self.text}')"


@dataclass(frozen=True)
class OperatorToken:
    text: str
    precedence: int = 1
    left_associative: bool = True
    unary: bool = False

    @property
    def kind(self):
        return TokenType.OPERATOR

    @property
    def arity(self):
        return 1 if self.unary else 2

    def with_resolution(self, unary, left_associative):
        """返回带有新的元数/结合性的副本，原Token保持不变"""
        if unary == self.unary and left_associative == self.left_associative:
            return self
        return replace(self, unary=unary, left_associative=left_associative)

    def __str__(self):
        return f"(Operator: '{self.text}', {'unary' if self.unary else 'binary'})"


@dataclass(frozen=True)
class SymbolToken:
    text: str

    @property
    def kind(self):
        return TokenType.SYMBOL

    @property
    def is_left_paren(self):
        return self.text == LEFT_PAREN

    @property
    def is_right_paren(self):
        return self.text == RIGHT_PAREN

    def __str__(self):
        return f"(Symbol: '{self.text}')"


Token = Union[NumberToken, OperatorToken, SymbolToken]


def is_left_paren(token):
    return isinstance(token, SymbolToken) and token.is_left_paren


class PostfixValidator:
    """只根据元数模拟栈深度，不做数值计算"""

    @staticmethod
    def calculate_stack_size(postfix):
        """
        从栈底到栈顶模拟求值，返回最终栈深度。
        出现下溢或不可求值的Token时返回 None。
        """
        stack_size = 0
        for token in postfix:
            if isinstance(token, NumberToken):
                stack_size += 1
            elif isinstance(token, OperatorToken):
                if stack_size < token.arity:
                    return None
                stack_size = stack_size - token.arity + 1
            else:
                # 括号不应出现在后缀序列中
                return None
        return stack_size

    @staticmethod
    def is_complete(postfix):
        """恰好归约为一个值时才算完整"""
        return PostfixValidator.calculate_stack_size(postfix) == 1
