"""core/shunting_yard.py - 调度场算法：中缀Token序列 -> 后缀（RPN）序列"""
import logging
from collections import deque

from core.errors import MismatchedParenthesis, UnbalancedParenthesis
from core.token_system import NumberToken, OperatorToken, SymbolToken, is_left_paren

logger = logging.getLogger(__name__)

# 可以作为前缀一元运算符使用的符号
SIGN_OPERATORS = ('+', '-')


def classify(operator, previous_token):
    """
    根据前一个Token判断 +/- 是一元还是二元。

    Args:
        operator: 当前的OperatorToken
        previous_token: 前一个已读入的Token，序列开头时为 None
    Returns:
        (unary, left_associative)
    """
    if operator.text in SIGN_OPERATORS:
        if previous_token is None or isinstance(previous_token, OperatorToken):
            return True, False
        # 右括号之后是一个完整的操作数
        if isinstance(previous_token, SymbolToken) and not previous_token.is_right_paren:
            return True, False
    return operator.unary, operator.left_associative


def _should_pop(top, current):
    """栈顶 top 是否应在 current 入栈前弹出到输出"""
    if top.precedence < current.precedence:
        return False
    if top.precedence == current.precedence and not current.left_associative:
        return False
    return True


class ShuntingYard:
    """把中缀Token序列重排为后缀顺序"""

    @staticmethod
    def reorder(tokens):
        """
        Args:
            tokens: 按源码顺序排列的Token序列（不会被修改）
        Returns:
            后缀顺序的列表，列表末尾为栈顶
        Raises:
            MismatchedParenthesis: 右括号没有匹配的左括号
            UnbalancedParenthesis: 输入结束时仍有未闭合的左括号
        """
        input_queue = deque(tokens)
        output_stack = []
        operator_stack = []
        previous_token = None

        while input_queue:
            token = input_queue.popleft()

            if isinstance(token, NumberToken):
                output_stack.append(token)

            elif isinstance(token, SymbolToken) and token.is_left_paren:
                operator_stack.append(token)

            elif isinstance(token, OperatorToken):
                unary, left_associative = classify(token, previous_token)
                current = token.with_resolution(unary, left_associative)

                while operator_stack and not is_left_paren(operator_stack[-1]):
                    if not _should_pop(operator_stack[-1], current):
                        break
                    output_stack.append(operator_stack.pop())

                operator_stack.append(current)
                token = current

            elif isinstance(token, SymbolToken) and token.is_right_paren:
                while operator_stack and not is_left_paren(operator_stack[-1]):
                    output_stack.append(operator_stack.pop())

                if not operator_stack:
                    logger.error(f"Mismatched parenthesis error! {len(input_queue)} tokens left unread")
                    raise MismatchedParenthesis("Mismatched parenthesis error!", partial_output=output_stack)

                # 丢弃左括号
                operator_stack.pop()

            elif isinstance(token, SymbolToken):
                logger.debug(f"Ignoring unrecognized symbol {token}")

            else:
                raise TypeError(f"Unsupported token type: {type(token).__name__}")

            previous_token = token

        while operator_stack:
            top = operator_stack.pop()
            if is_left_paren(top):
                logger.error("Unbalanced parenthesis: '(' was never closed")
                raise UnbalancedParenthesis("Unbalanced parenthesis: '(' was never closed")
            output_stack.append(top)

        logger.debug(f"Postfix: {' '.join(t.text for t in output_stack)}")
        return output_stack


reorder = ShuntingYard.reorder
