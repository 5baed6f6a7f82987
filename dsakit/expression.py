"""Infix to postfix and prefix conversion with an operator stack."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}
_MAX_INPUT = 100


def precedence(operator: str) -> int:
    """Return the binding strength of ``operator``; -1 for anything else."""
    return _PRECEDENCE.get(operator, -1)


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _convert(expression: str, pops_on_equal: Callable[[str], bool]) -> str:
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char == " ":
            continue
        if _is_operand(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        else:
            rank = precedence(char)
            while stack and (
                rank < precedence(stack[-1])
                or (rank == precedence(stack[-1]) and pops_on_equal(char))
            ):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    return _convert(expression, lambda operator: True)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression of single-character operands to prefix."""
    mirrored = expression[::-1].translate(str.maketrans("()", ")("))
    return _convert(mirrored, lambda operator: operator != "^")[::-1]


def main(argv: list[str] | None = None) -> int:
    """Read one expression from stdin and print its postfix and prefix forms."""
    parser = argparse.ArgumentParser(
        prog="dsakit-expression",
        description="Convert an infix expression read from standard input.",
    )
    parser.parse_args(argv)

    print("Enter expression: ", end="")
    expression = sys.stdin.readline()[:_MAX_INPUT].split("\n", 1)[0]
    try:
        postfix = infix_to_postfix(expression)
        prefix = infix_to_prefix(expression)
    except ValueError as error:
        print()
        print(f"error: {error}", file=sys.stderr)
        return 1
    print("Postfix:")
    print(postfix)
    print("Prefix:")
    print(prefix)
    return 0