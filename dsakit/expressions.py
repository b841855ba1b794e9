"""Infix-to-postfix conversion and bracket checking."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

_OPERATORS = frozenset("+-*/%^")
_OPENERS = {")": "(", "}": "{", "]": "["}
# An opener may only appear inside openers of lower rank: [ { ( outside-in.
_RANK = {"[": 0, "{": 1, "(": 2}


class ExpressionError(ValueError):
    """Raised for a malformed infix expression."""


def precedence(operator: str) -> int:
    """Return the binding strength of ``operator``; -1 when it is not one."""
    if operator == "^":
        return 3
    if operator in ("*", "/", "%"):
        return 2
    if operator in ("+", "-"):
        return 1
    return -1


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix notation.

    Operands are single letters or digits, whitespace is ignored and all
    operators associate to the left.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if char.isalnum():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unmatched ')' in expression")
            stack.pop()
        elif char in _OPERATORS:
            while (
                stack
                and stack[-1] != "("
                and precedence(char) <= precedence(stack[-1])
            ):
                output.append(stack.pop())
            stack.append(char)
        else:
            raise ExpressionError(f"unexpected character {char!r} in expression")
    while stack:
        top = stack.pop()
        if top == "(":
            raise ExpressionError("unmatched '(' in expression")
        output.append(top)
    return "".join(output)


def brackets_valid(text: str) -> bool:
    """Return True when the brackets in ``text`` match and nest properly.

    Besides matching, brackets must nest as ``[ { ( ... ) } ]``: a ``{`` or
    ``[`` may not open inside ``(``, nor ``[`` inside ``{``.
    """
    stack: list[str] = []
    for char in text:
        if char in _RANK:
            if stack and _RANK[char] < _RANK[stack[-1]]:
                return False
            stack.append(char)
        elif char in _OPENERS:
            if not stack or stack.pop() != _OPENERS[char]:
                return False
    return not stack


def bracket_verdict(text: str) -> str:
    """Return ``"valid"`` or ``"invalid"`` for the brackets in ``text``."""
    if brackets_valid(text):
        return "valid"
    return "invalid"


def main(argv: Sequence[str] | None = None) -> int:
    """Check brackets in, or convert to postfix, each given expression."""
    parser = argparse.ArgumentParser(
        description="Check bracket validity or convert infix to postfix."
    )
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="print the postfix form instead of the bracket verdict",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expressions to process; read from standard input when absent",
    )
    args = parser.parse_args(argv)

    expressions = args.expressions or [line.rstrip("\n") for line in sys.stdin]
    status = 0
    for expression in expressions:
        if args.postfix:
            try:
                print(infix_to_postfix(expression))
            except ExpressionError as error:
                print(f"incorrect expression: {error}", file=sys.stderr)
                status = 1
        else:
            print(bracket_verdict(expression))
    return status