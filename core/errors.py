"""core/errors.py - 表达式处理过程中的错误类型"""


class ExpressionError(Exception):
    """所有表达式错误的基类，每个错误对本次调用都是终止性的"""
    kind = "expression_error"


class MismatchedParenthesis(ExpressionError):
    """右括号找不到对应的左括号"""
    kind = "mismatched_parenthesis"

    def __init__(self, message, partial_output=None):
        super().__init__(message)
        # 出错前已经产出的后缀序列，仅供诊断，不可当作结果使用
        self.partial_output = list(partial_output or [])


class UnbalancedParenthesis(ExpressionError):
    """输入结束时仍有未闭合的左括号"""
    kind = "unbalanced_parenthesis"


class InvalidLiteral(ExpressionError):
    """数字Token的文本不是合法的十进制整数"""
    kind = "invalid_literal"

    def __init__(self, text):
        super().__init__(f"Invalid integer literal: {text!r}")
        self.text = text


class UnevaluableToken(ExpressionError):
    """求值阶段遇到无法处理的Token"""
    kind = "unevaluable_token"

    def __init__(self, token):
        super().__init__(f"Cannot evaluate token: {token}")
        self.token = token


class DivisionByZero(ExpressionError):
    kind = "division_by_zero"


class MalformedPostfix(ExpressionError):
    """后缀序列结构错误：需要操作数时栈为空，或求值后栈中仍有剩余"""
    kind = "malformed_postfix"
