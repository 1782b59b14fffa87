"""数据加载模块 - 把空格分隔的词法单元构造成Token序列"""
import logging

import pandas as pd

from config.config import DATA_CONFIG, OPERATOR_CONFIG, SYMBOL_CONFIG
from core import InvalidLiteral, NumberToken, OperatorToken, SymbolToken

logger = logging.getLogger(__name__)

# 内置示例表达式
SAMPLE_EXPRESSIONS = [
    "4 + 2 * ( 3 - 1 )",
    "4 - ! 1",
    "- 6 + 2 * ( - 3 - 1 )",
]


def build_token(lexeme, operator_config=None):
    """单个词法单元 -> Token"""
    operator_config = OPERATOR_CONFIG if operator_config is None else operator_config

    if lexeme in operator_config:
        entry = operator_config[lexeme]
        return OperatorToken(
            lexeme,
            precedence=entry.get('precedence', 1),
            left_associative=entry.get('left_associative', True),
            unary=entry.get('unary', False),
        )
    if lexeme in (SYMBOL_CONFIG['left_paren'], SYMBOL_CONFIG['right_paren']):
        return SymbolToken(lexeme)
    # NumberToken 自己校验字面量，非法时抛出 InvalidLiteral
    return NumberToken(lexeme)


def build_tokens(lexemes, operator_config=None):
    """
    Args:
        lexemes: 词法单元列表，或用空格分隔的字符串
    Returns:
        Token列表
    """
    if isinstance(lexemes, str):
        lexemes = lexemes.split()
    return [build_token(lexeme, operator_config) for lexeme in lexemes]


def load_expression_file(file_path):
    """
    每行一个表达式，空行和注释行跳过。

    Returns:
        [(原始文本, Token列表或InvalidLiteral), ...]
    """
    logger.info(f"Loading expressions from {file_path}")
    comment_prefix = DATA_CONFIG["comment_prefix"]
    expressions = []

    with open(file_path, 'r', encoding='utf-8') as f:
        for line_number, line in enumerate(f, 1):
            expression = line.strip()
            if not expression or expression.startswith(comment_prefix):
                continue
            try:
                expressions.append((expression, build_tokens(expression)))
            except InvalidLiteral as e:
                logger.warning(f"Line {line_number}: {e}")
                expressions.append((expression, e))

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def results_to_frame(expressions, results):
    """把表达式和 EvaluationResult 汇总成 DataFrame"""
    rows = []
    for expression, result in zip(expressions, results):
        if isinstance(result, InvalidLiteral):
            rows.append({'expression': expression, 'postfix': '', 'value': None,
                         'error': result.kind, 'message': str(result)})
            continue
        rows.append({
            'expression': expression,
            'postfix': ' '.join(t.text for t in result.postfix),
            'value': result.value,
            'error': result.error_kind,
            'message': '' if result.ok else str(result.error),
        })

    frame = pd.DataFrame(rows, columns=['expression', 'postfix', 'value', 'error', 'message'])
    frame['value'] = frame['value'].astype('Int64')
    return frame
