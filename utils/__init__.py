"""工具模块"""
from .display import format_tokens, format_postfix, postfix_to_frame

__all__ = ['format_tokens', 'format_postfix', 'postfix_to_frame']
