"""
Expression evaluator for intcalc.

Folds an expression tree into a single signed 64-bit integer.
Pure evaluation: no I/O, no side effects, no partial results. Every
intermediate value is range checked, so nothing ever wraps around.
"""

from __future__ import annotations

from intcalc.core.errors import EvaluationError
from intcalc.core.ir.expressions import (
    Add,
    BinaryExpr,
    Divide,
    Expr,
    Literal,
    Multiply,
    Negate,
    Subtract,
    in_int64_range,
)


def evaluate(expr: Expr) -> int:
    """Evaluate an expression tree.

    Args:
        expr: Parsed expression AST.

    Returns:
        The integer result.

    Raises:
        EvaluationError: On division by zero or when a result leaves the
            signed 64-bit range.
    """
    return _interpret(expr)


def _interpret(expr: Expr) -> int:
    """Post-order walk with an explicit stack.

    Left-deep chains such as a 5000-term sum are deeper than the
    interpreter's recursion limit, so nodes are visited iteratively.
    """
    values: list[int] = []
    stack: list[tuple[Expr, bool]] = [(expr, False)]

    while stack:
        node, children_done = stack.pop()

        if isinstance(node, Literal):
            values.append(_checked(node.value))
        elif isinstance(node, Negate):
            if children_done:
                values.append(_checked(-values.pop()))
            else:
                stack.append((node, True))
                stack.append((node.operand, False))
        elif isinstance(node, BinaryExpr):
            if children_done:
                right = values.pop()
                left = values.pop()
                values.append(_checked(_apply(node, left, right)))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        else:
            raise EvaluationError(f"Unknown expression type: {type(node).__name__}")

    return values.pop()


def _apply(node: BinaryExpr, left: int, right: int) -> int:
    if isinstance(node, Add):
        return left + right
    if isinstance(node, Subtract):
        return left - right
    if isinstance(node, Multiply):
        return left * right
    if isinstance(node, Divide):
        return _divide(left, right)
    raise EvaluationError(f"Unknown binary op: {type(node).__name__}")


def _divide(left: int, right: int) -> int:
    """Integer division truncating toward zero."""
    if right == 0:
        raise EvaluationError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _checked(value: int) -> int:
    if not in_int64_range(value):
        raise EvaluationError("integer overflow")
    return value
