import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from config.config import EVALUATOR_CONFIG
from core import ExpressionError, MalformedPostfix, PostfixValidator, RPNEvaluator, ShuntingYard, Token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """一次求值的结果：要么有 value，要么有 error"""
    value: Optional[int] = None
    error: Optional[ExpressionError] = None
    postfix: Tuple[Token, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        return None if self.error is None else self.error.kind


class ExpressionEvaluator:

    def __init__(self, cache_size=None, strict=None):
        self.cache_size = EVALUATOR_CONFIG["cache_size"] if cache_size is None else cache_size
        self.strict = EVALUATOR_CONFIG["strict"] if strict is None else strict
        # 使用有限大小的OrderedDict实现LRU缓存
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_stats(self):
        return {'hits': self._cache_hits, 'misses': self._cache_misses, 'size': len(self._result_cache)}

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def evaluate(self, tokens: Iterable[Token]) -> EvaluationResult:
        """
        Args:
            tokens: 中缀顺序的Token序列
        Returns:
            EvaluationResult，失败时 error 为具体的 ExpressionError
        """
        cache_key = (tuple(tokens), self.strict)

        if cache_key in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(cache_key)
            self._cache_hits += 1
            return self._result_cache[cache_key]

        self._cache_misses += 1
        result = self._evaluate_impl(cache_key[0])

        if self.cache_size > 0:
            self._result_cache[cache_key] = result
            self._manage_cache()
        return result

    def evaluate_many(self, token_streams: Iterable[Iterable[Token]]) -> List[EvaluationResult]:
        return [self.evaluate(tokens) for tokens in token_streams]

    def _evaluate_impl(self, tokens: Tuple[Token, ...]) -> EvaluationResult:
        postfix = ()
        try:
            output_stack = ShuntingYard.reorder(tokens)
            postfix = tuple(output_stack)

            # 严格模式下先按元数校验栈深度，不能归约为单个值的直接失败
            if self.strict and not PostfixValidator.is_complete(postfix):
                raise MalformedPostfix(f"Postfix does not reduce to a single value: {' '.join(t.text for t in postfix)}")

            value = RPNEvaluator.evaluate(output_stack, allow_partial=not self.strict)
            return EvaluationResult(value=value, postfix=postfix)

        except ExpressionError as e:
            logger.error(f"Expression evaluation failed: {type(e).__name__}: {e}")
            return EvaluationResult(error=e, postfix=postfix)
