"""Evaluation of four-function arithmetic expressions given as text.

Expressions are parsed with the standard ast module and walked by a small
evaluator that only understands numeric literals, parentheses, unary
plus/minus and the binary operators + - * / %. Nothing is ever passed to
eval(). Arithmetic runs in decimal.Decimal with 28 significant digits,
so results keep the scale of their operands ("1.0+1" gives "2.0") and
exact quotients print without binary rounding noise ("5/2" gives "2.5").
"""
import ast
import logging
import operator
from collections.abc import Callable
from decimal import Decimal, DecimalException, localcontext
from typing import Final

from ..exceptions import EvaluationError, InvalidArgumentError, NullInputError
from .primitive_parser import DECIMAL_CONTEXT

__all__ = ["calculate", "evaluate"]

logger = logging.getLogger(__name__)

_BINARY_OPERATORS: Final[dict[type[ast.operator], Callable[[Decimal, Decimal], Decimal]]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.Mod: operator.mod,
}

_UNARY_OPERATORS: Final[dict[type[ast.unaryop], Callable[[Decimal], Decimal]]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}


def _literal_to_decimal(node: ast.Constant, source: str) -> Decimal:
    """Convert a numeric literal node to Decimal using its source text.

    Reading the source text instead of node.value avoids the binary float
    rounding that Python applies to literals such as 0.1.
    """
    if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
        raise EvaluationError(f"Unsupported literal {node.value!r}")
    segment = ast.get_source_segment(source, node)
    if segment is None or "_" in segment:
        raise EvaluationError(f"Unsupported numeric literal {segment!r}")
    try:
        return Decimal(segment)
    except DecimalException as e:
        raise EvaluationError(f"Unsupported numeric literal {segment!r}") from e


def _evaluate_node(node: ast.AST, source: str) -> Decimal:
    if isinstance(node, ast.Expression):
        return _evaluate_node(node.body, source)
    if isinstance(node, ast.Constant):
        return _literal_to_decimal(node, source)
    if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPERATORS:
        return _UNARY_OPERATORS[type(node.op)](_evaluate_node(node.operand, source))
    if isinstance(node, ast.BinOp) and type(node.op) in _BINARY_OPERATORS:
        left = _evaluate_node(node.left, source)
        right = _evaluate_node(node.right, source)
        return _BINARY_OPERATORS[type(node.op)](left, right)
    raise EvaluationError(f"Unsupported expression element: {type(node).__name__}")


def _format_result(result: Decimal) -> str:
    """Render result in positional notation, never with an exponent."""
    if result.is_zero():
        result = result.copy_abs()
    return format(result, "f")


def evaluate(expression: str) -> Decimal:
    """Evaluate an arithmetic expression and return the exact Decimal result.

    Supported syntax: integer and decimal literals (with optional exponent),
    parentheses, unary + and -, and binary + - * / %.

    Args:
        expression: The expression text.

    Returns:
        The value of the expression.

    Raises:
        NullInputError: If expression is None.
        TypeError: If expression is not a string.
        EvaluationError: If the expression is malformed, uses unsupported
            syntax, divides by zero, or is nested too deeply to evaluate.
    """
    if expression is None:
        raise NullInputError("The expression must not be None")
    if not isinstance(expression, str):
        raise TypeError(
            f"The expression must be a string, got {type(expression).__name__} instead")

    source = expression.strip()
    try:
        tree = ast.parse(source, mode="eval")
    except (SyntaxError, ValueError, RecursionError, MemoryError) as e:
        raise EvaluationError(f"Cannot parse expression {expression!r}: {e}") from e

    with localcontext(DECIMAL_CONTEXT):
        try:
            result = _evaluate_node(tree, source)
        except (DecimalException, RecursionError) as e:
            raise EvaluationError(
                f"Cannot evaluate expression {expression!r}: {type(e).__name__}") from e

    logger.debug("Evaluated %r to %s", expression, result)
    return result


def calculate(value: str) -> str:
    """Evaluate the arithmetic formula in value and return the result as text.

    Spaces are removed before evaluation. The result is written in plain
    positional notation, so "1e3" gives "1000".

    Example:
        >>> calculate("(2 + 3) * 4")
        '20'

    Raises:
        NullInputError: If value is None.
        InvalidArgumentError: If value is empty or contains only spaces.
        EvaluationError: If the formula cannot be evaluated.
    """
    if value is None:
        raise NullInputError("The input string must not be None")
    if not isinstance(value, str):
        raise TypeError(f"The input must be a string, got {type(value).__name__} instead")
    formula = value.replace(" ", "")
    if not formula:
        raise InvalidArgumentError("The input string must contain a formula")
    return _format_result(evaluate(formula))
