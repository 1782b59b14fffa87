"""主程序入口 - 对中缀Token序列做调度场重排并求值"""
import argparse
import logging
import sys

from config.config import *
from core import InvalidLiteral
from data.data_loader import SAMPLE_EXPRESSIONS, build_tokens, load_expression_file, results_to_frame
from pipeline import ExpressionEvaluator
from utils import format_postfix, format_tokens, postfix_to_frame

logger = logging.getLogger(__name__)


def _collect_expressions(args):
    """根据命令行参数收集 [(文本, Token列表或InvalidLiteral), ...]"""
    if args.input_file:
        return load_expression_file(args.input_file)

    sources = [args.expression] if args.expression else SAMPLE_EXPRESSIONS
    expressions = []
    for text in sources:
        try:
            expressions.append((text, build_tokens(text)))
        except InvalidLiteral as e:
            logger.error(f"{text!r}: {e}")
            expressions.append((text, e))
    return expressions


def main(args):
    logging.basicConfig(level=args.log_level, format=LOGGING_CONFIG["format"])
    logger.info("Starting expression evaluation")

    if args.validate_config:
        validate_config()

    evaluator = ExpressionEvaluator(strict=not args.allow_partial)
    expressions = _collect_expressions(args)

    texts, results = [], []
    for text, tokens in expressions:
        texts.append(text)
        if isinstance(tokens, InvalidLiteral):
            results.append(tokens)
            continue

        if args.show_tokens:
            print(format_tokens(tokens) + "\n")

        result = evaluator.evaluate(tokens)
        results.append(result)

        if args.show_postfix and result.postfix:
            print(format_postfix(result.postfix) + "\n")
            print(postfix_to_frame(result.postfix).to_string(index=False) + "\n")

        if result.ok:
            print(f"{text} = {result.value}")
        else:
            print(f"{text} -> {result.error_kind}: {result.error}")

    frame = results_to_frame(texts, results)
    failed = int(frame['error'].notna().sum())
    logger.info(f"Evaluated {len(frame)} expressions, {failed} failed")
    logger.debug(f"Cache stats: {evaluator.cache_stats}")

    if args.output_path:
        logger.info(f"Saving results to {args.output_path}")
        frame.to_csv(args.output_path, index=False)

    return 1 if failed else 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Shunting-yard expression evaluator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Whitespace separated tokens, e.g. \"4 + 2 * ( 3 - 1 )\""
    )
    parser.add_argument(
        "--input_file",
        type=str,
        default=None,
        help="File with one whitespace separated expression per line"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help=f"Save results as CSV (e.g. {DATA_CONFIG['default_output_path']})"
    )
    parser.add_argument(
        "--show_tokens",
        action="store_true",
        help="Print the input tokens"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the postfix stack of each expression"
    )
    parser.add_argument(
        "--allow_partial",
        action="store_true",
        help="Do not fail when tokens are left on the stack after evaluation"
    )
    parser.add_argument(
        "--validate_config",
        action="store_true",
        help="Check the operator table before evaluating"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    args = parser.parse_args()
    sys.exit(main(args))
