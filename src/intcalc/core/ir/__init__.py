"""
intcalc Intermediate Representation (IR) types.

The expression AST produced by the parser and consumed by the evaluator.
"""

from .expressions import (
    INT64_MAX,
    INT64_MIN,
    Add,
    BinaryExpr,
    Divide,
    Expr,
    Literal,
    Multiply,
    Negate,
    Subtract,
    in_int64_range,
    render,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "Add",
    "BinaryExpr",
    "Divide",
    "Expr",
    "Literal",
    "Multiply",
    "Negate",
    "Subtract",
    "in_int64_range",
    "render",
]
