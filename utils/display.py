"""utils/display.py - Token和后缀栈的可读输出"""
import pandas as pd

from core import OperatorToken, PostfixValidator


def format_tokens(tokens):
    return '\n'.join(str(token) for token in tokens)


def format_postfix(postfix):
    """按栈顶在前的顺序输出后缀栈"""
    lines = ["----- Expression Output Stack -----"]
    lines.extend(str(token) for token in reversed(postfix))
    return '\n'.join(lines)


def postfix_to_frame(postfix):
    """
    后缀栈 -> DataFrame，每行一个Token（栈底在前），
    depth 列为求值到该Token时的操作数栈深度
    """
    rows = []
    for position in range(len(postfix)):
        token = postfix[position]
        is_operator = isinstance(token, OperatorToken)
        rows.append({
            'kind': token.kind.value,
            'text': token.text,
            'arity': token.arity if is_operator else 0,
            'precedence': token.precedence if is_operator else None,
            'left_associative': token.left_associative if is_operator else None,
            'depth': PostfixValidator.calculate_stack_size(postfix[:position + 1]),
        })
    return pd.DataFrame(rows, columns=['kind', 'text', 'arity', 'precedence', 'left_associative', 'depth'])
