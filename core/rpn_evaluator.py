"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import MalformedPostfix, UnevaluableToken
from core.operators import BINARY_OPERATORS, UNARY_OPERATORS
from core.token_system import NumberToken, OperatorToken

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值（列表末尾为栈顶）"""

    @staticmethod
    def evaluate(postfix, allow_partial=False):
        """
        从栈顶开始递归归约，会消耗传入的列表。
        Args:
            postfix: 后缀Token列表
            allow_partial: 为 True 时不检查归约后栈中是否还有剩余Token
        Returns:
            整数结果
        """
        result = RPNEvaluator._reduce(postfix)

        if postfix:
            if allow_partial:
                logger.debug(f"Partial expression with {len(postfix)} tokens left on the stack")
            else:
                leftover = ' '.join(t.text for t in postfix)
                logger.error(f"Stack has {len(postfix)} tokens after evaluation, expected 0: {leftover}")
                raise MalformedPostfix(f"{len(postfix)} tokens left after evaluation: {leftover}")
        return result

    @staticmethod
    def _pop(postfix):
        if not postfix:
            logger.error("Insufficient operands: postfix stack is empty")
            raise MalformedPostfix("Operand expected but the postfix stack is empty")
        return postfix.pop()

    @staticmethod
    def _lookup(token):
        """按元数查找操作符实现，未知时抛出 UnevaluableToken"""
        if token.unary:
            op_method = UNARY_OPERATORS.get(token.text)
            if op_method is None:
                logger.error(f"Unknown unary operator: {token.text}")
                raise UnevaluableToken(token)
            return op_method

        op_method = BINARY_OPERATORS.get(token.text)
        if op_method is None:
            logger.error(f"Unknown binary operator: {token.text}")
            raise UnevaluableToken(token)
        return op_method

    @staticmethod
    def _reduce(postfix):
        """
        从栈顶归约出一个完整的值。
        用显式的待处理操作符栈代替递归，表达式再长也不会受递归深度限制。
        """
        pending = []  # [(操作符, 实现, 已收集的操作数)]

        while True:
            token = RPNEvaluator._pop(postfix)

            if isinstance(token, NumberToken):
                value = token.value
            elif isinstance(token, OperatorToken):
                pending.append((token, RPNEvaluator._lookup(token), []))
                continue
            else:
                logger.error(f"Error evaluating token: {token}")
                raise UnevaluableToken(token)

            # 把值交给最近的待处理操作符，操作数凑齐就立即求值并继续向上传递
            while pending:
                token, op_method, operands = pending[-1]
                operands.append(value)
                if len(operands) < token.arity:
                    break
                pending.pop()
                # 先弹出的是右操作数
                value = op_method(*reversed(operands))

            if not pending:
                return value
