"""配置文件"""

# 操作符表：词法单元 -> 优先级/结合性/元数
# +/- 在这里按二元登记，重排时会根据上下文识别出一元用法
OPERATOR_CONFIG = {
    '+': {'precedence': 1, 'left_associative': True, 'unary': False},
    '-': {'precedence': 1, 'left_associative': True, 'unary': False},
    '*': {'precedence': 2, 'left_associative': True, 'unary': False},
    '/': {'precedence': 2, 'left_associative': True, 'unary': False},
    '!': {'precedence': 3, 'left_associative': False, 'unary': True},  # 右结合的前缀一元运算
}

# 括号
SYMBOL_CONFIG = {
    "left_paren": "(",
    "right_paren": ")",
}

# 求值配置
EVALUATOR_CONFIG = {
    "strict": True,  # 归约结束后栈中有剩余Token时报错
    "cache_size": 1000,  # 结果缓存的最大条目数
}

# 日志配置
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 输入输出
DATA_CONFIG = {
    "comment_prefix": "#",
    "default_output_path": "expression_results.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert set(OPERATOR_CONFIG) == {'+', '-', '*', '/', '!'}, "只支持 + - * / ! 五种操作符"
    for lexeme, entry in OPERATOR_CONFIG.items():
        assert entry['precedence'] >= 1, f"{lexeme} 的优先级必须是正整数"
    assert OPERATOR_CONFIG['!']['unary'], "! 必须是一元操作符"
    assert OPERATOR_CONFIG['*']['precedence'] > OPERATOR_CONFIG['+']['precedence'], "乘除必须比加减结合得更紧"
    assert EVALUATOR_CONFIG["cache_size"] >= 0, "缓存大小不能为负"
    print("Configuration validated successfully!")
