"""Evaluation of integer expressions in reverse Polish notation."""

from __future__ import annotations

from collections.abc import Callable, Iterable


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _trunc_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate an RPN expression of integers and ``+ - * /``.

    Division truncates toward zero. The value on top of the stack at the end is returned.
    """
    stack: list[int] = []
    for token in tokens:
        operator = _OPERATORS.get(token)
        if operator is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(operator(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]