"""
Expression AST for intcalc.

Integer arithmetic only:
- Literals: signed 64-bit integers
- Binary: +, -, *, /
- Unary negation, applied directly to a literal

Nodes are frozen pydantic models. Each node owns its children, so a
parsed expression is an immutable tree with no sharing.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Integer range
# ---------------------------------------------------------------------------

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def in_int64_range(value: int) -> bool:
    """True if value fits in a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """An integer literal."""

    value: int = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class BinaryExpr(BaseModel):
    """Binary operation: left op right.

    Concrete operators subclass this and set ``symbol``.
    """

    symbol: ClassVar[str] = "?"

    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class Add(BinaryExpr):
    """left + right"""

    symbol: ClassVar[str] = "+"


class Subtract(BinaryExpr):
    """left - right"""

    symbol: ClassVar[str] = "-"


class Multiply(BinaryExpr):
    """left * right"""

    symbol: ClassVar[str] = "*"


class Divide(BinaryExpr):
    """left / right, truncating toward zero."""

    symbol: ClassVar[str] = "/"


class Negate(BaseModel):
    """Unary negation: -operand."""

    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | Add | Subtract | Multiply | Divide | Negate

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
Add.model_rebuild()
Subtract.model_rebuild()
Multiply.model_rebuild()
Divide.model_rebuild()
Negate.model_rebuild()


def render(expr: Expr) -> str:
    """Render an expression as infix text for display.

    No grouping parentheses are emitted, so ``(1 + 2) * 3`` renders as
    ``1 + 2 * 3``. The output is for humans and is not guaranteed to parse
    back into the same tree.
    """
    # Explicit stack: left-deep chains can be far deeper than the recursion limit
    out: list[str] = []
    stack: list[Expr | str] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, Literal):
            out.append(str(item.value))
        elif isinstance(item, Negate):
            stack.append(item.operand)
            stack.append("-")
        else:
            stack.append(item.right)
            stack.append(f" {item.symbol} ")
            stack.append(item.left)
    return "".join(out)
