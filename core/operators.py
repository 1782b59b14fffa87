"""core/operators.py"""
import logging

import numpy as np

from core.errors import DivisionByZero

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合，统一使用64位整数（溢出时回绕）"""

    @staticmethod
    def _to_int(value):
        return int(np.int64(value))

    # 一元操作符====================

    @staticmethod
    def pos(operand):
        """一元加：原样返回"""
        return Operators._to_int(operand)

    @staticmethod
    def neg(operand):
        """一元减：取相反数"""
        with np.errstate(over='ignore'):
            return Operators._to_int(-np.int64(operand))

    @staticmethod
    def not_(operand):
        """逻辑非：0 -> 1，其他 -> 0"""
        return 1 if operand == 0 else 0

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        with np.errstate(over='ignore'):
            return Operators._to_int(np.int64(operand1) + np.int64(operand2))

    @staticmethod
    def sub(operand1, operand2):
        with np.errstate(over='ignore'):
            return Operators._to_int(np.int64(operand1) - np.int64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(over='ignore'):
            return Operators._to_int(np.int64(operand1) * np.int64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """向零截断的整数除法"""
        if operand2 == 0:
            logger.error(f"Division by zero: {operand1} / {operand2}")
            raise DivisionByZero(f"Division by zero: {operand1} / 0")
        # 先对绝对值整除，再按符号取反，得到向零截断的结果
        quotient = abs(operand1) // abs(operand2)
        if (operand1 < 0) != (operand2 < 0):
            quotient = -quotient
        # 只有 INT64_MIN / -1 会越界
        return Operators._wrap(quotient)

    @staticmethod
    def _wrap(value):
        """把超出int64范围的Python整数按二进制补码回绕"""
        value &= (1 << 64) - 1
        if value >= 1 << 63:
            value -= 1 << 64
        return value


UNARY_OPERATORS = {
    '+': Operators.pos,
    '-': Operators.neg,
    '!': Operators.not_,
}

BINARY_OPERATORS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
}
