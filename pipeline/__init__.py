"""表达式流水线 - 重排 + 求值 + 结果缓存"""
from .evaluator import ExpressionEvaluator, EvaluationResult

__all__ = ['ExpressionEvaluator', 'EvaluationResult']
