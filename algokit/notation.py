"""Conversions between infix, postfix and prefix expression notation.

Operands are single ASCII letters or digits; every other character is an
operator.
"""

import string

_OPERANDS = frozenset(string.ascii_letters + string.digits)
_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}
_MIRROR = {"(": ")", ")": "("}


def _is_operand(ch):
    return ch in _OPERANDS


def precedence(op):
    """Return the binding strength of an operator, -1 for anything else."""
    return _PRECEDENCE.get(op, -1)


def reverse_expression(expr):
    """Reverse an expression, swapping opening and closing parentheses."""
    return "".join(_MIRROR.get(ch, ch) for ch in reversed(expr))


def infix_to_postfix(expr):
    """Convert an infix expression to postfix."""
    pending = []
    output = []
    for ch in expr:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            pending.append(ch)
        elif ch == ")":
            while pending and pending[-1] != "(":
                output.append(pending.pop())
            if not pending:
                raise ValueError(f"unbalanced ')' in {expr!r}")
            pending.pop()
        else:
            while pending and precedence(ch) <= precedence(pending[-1]):
                output.append(pending.pop())
            pending.append(ch)
    output.extend(reversed(pending))
    return "".join(output)


def infix_to_prefix(expr):
    """Convert an infix expression to prefix."""
    return reverse_expression(infix_to_postfix(reverse_expression(expr)))


def _pop_pair(stack, expr):
    if len(stack) < 2:
        raise ValueError(f"operator without two operands in {expr!r}")
    last = stack.pop()
    before = stack.pop()
    return last, before


def _result(stack, expr):
    if not stack:
        raise ValueError(f"empty expression {expr!r}")
    return stack[-1]


def postfix_to_infix(expr):
    """Convert a postfix expression to fully parenthesised infix."""
    stack = []
    for ch in expr:
        if _is_operand(ch):
            stack.append(ch)
        else:
            right, left = _pop_pair(stack, expr)
            stack.append(f"({left}{ch}{right})")
    return _result(stack, expr)


def postfix_to_prefix(expr):
    """Convert a postfix expression to prefix."""
    stack = []
    for ch in expr:
        if _is_operand(ch):
            stack.append(ch)
        else:
            right, left = _pop_pair(stack, expr)
            stack.append(ch + left + right)
    return _result(stack, expr)


def prefix_to_postfix(expr):
    """Convert a prefix expression to postfix."""
    stack = []
    for ch in reversed(expr):
        if _is_operand(ch):
            stack.append(ch)
        else:
            left, right = _pop_pair(stack, expr)
            stack.append(left + right + ch)
    return _result(stack, expr)