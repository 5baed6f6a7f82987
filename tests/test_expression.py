import io
from math import prod

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.expression import infix_to_postfix, infix_to_prefix, main, precedence


@st.composite
def expressions(draw, operands="abcdef", operators="+-*/^"):
    names = draw(st.lists(st.sampled_from(operands), min_size=1, max_size=8))
    ops = draw(
        st.lists(
            st.sampled_from(operators),
            min_size=len(names) - 1,
            max_size=len(names) - 1,
        )
    )
    parts = [names[0]]
    for op, name in zip(ops, names[1:]):
        parts += [op, name]
    return "".join(parts)


def eval_postfix(text):
    stack = []
    for char in text:
        if char.isdigit():
            stack.append(int(char))
        else:
            right, left = stack.pop(), stack.pop()
            stack.append(left + right if char == "+" else left * right)
    assert len(stack) == 1
    return stack[0]


def eval_prefix(text):
    stack = []
    for char in reversed(text):
        if char.isdigit():
            stack.append(int(char))
        else:
            left, right = stack.pop(), stack.pop()
            stack.append(left + right if char == "+" else left * right)
    assert len(stack) == 1
    return stack[0]


def operands_of(text):
    return [c for c in text if c.isalnum()]


def test_precedence_ordering():
    assert precedence("^") > precedence("*") == precedence("/")
    assert precedence("/") > precedence("+") == precedence("-")
    assert precedence("x") < precedence("+")
    assert precedence("(") == precedence("%")


def test_worked_examples():
    assert infix_to_postfix("a+b*c") == "abc*+"
    assert infix_to_prefix("a+b*c") == "+a*bc"
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


@given(expression=expressions())
def test_output_is_permutation_keeping_operand_order(expression):
    postfix = infix_to_postfix(expression)
    prefix = infix_to_prefix(expression)
    assert sorted(postfix) == sorted(expression)
    assert sorted(prefix) == sorted(expression)
    assert operands_of(postfix) == operands_of(expression)
    assert operands_of(prefix) == operands_of(expression)


@given(expression=expressions())
def test_spaces_are_ignored(expression):
    spaced = " ".join(expression)
    assert infix_to_postfix(spaced) == infix_to_postfix(expression)
    assert infix_to_prefix(spaced) == infix_to_prefix(expression)


@given(expression=expressions())
def test_outer_parentheses_change_nothing(expression):
    wrapped = "(" + expression + ")"
    assert infix_to_postfix(wrapped) == infix_to_postfix(expression)
    assert infix_to_prefix(wrapped) == infix_to_prefix(expression)


@given(expression=expressions(operands="123456789", operators="+*"))
def test_postfix_and_prefix_evaluate_like_infix(expression):
    expected = sum(prod(int(d) for d in term.split("*")) for term in expression.split("+"))
    assert eval_postfix(infix_to_postfix(expression)) == expected
    assert eval_prefix(infix_to_prefix(expression)) == expected


def test_single_operand():
    assert infix_to_postfix("z") == "z"
    assert infix_to_prefix("z") == "z"


def test_unmatched_closing_parenthesis():
    with pytest.raises(ValueError):
        infix_to_postfix("a+b)")
    with pytest.raises(ValueError):
        infix_to_prefix("(a+b")


def test_main_prints_both_forms(monkeypatch, capsys):
    expression = "a+b*(c^d-e)"
    monkeypatch.setattr("sys.stdin", io.StringIO(expression + "\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Enter expression: Postfix:\n"
        + infix_to_postfix(expression)
        + "\nPrefix:\n"
        + infix_to_prefix(expression)
        + "\n"
    )


def test_main_rejects_unbalanced(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a)\n"))
    assert main([]) == 1