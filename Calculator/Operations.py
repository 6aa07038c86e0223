# Operations.py
"""""
Operation registry.

Binary operators and scientific functions are enums; their behavior is looked
up in read-only mappings built once at import. Nothing in here holds state, so
the registry can be shared between threads.
"""""

import math
from enum import Enum
from types import MappingProxyType

from . import ScientificEngine
from . import error as E

FACTORIAL_LIMIT = 10


class BinaryOperator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"


class UnaryOperator(Enum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LOG = "log"
    EXP = "exp"
    SQRT = "sqrt"
    FACTORIAL = "!"


# -----------------------------
# Binary behavior
# -----------------------------

def add(left, right):
    return left + right


def subtract(left, right):
    return left - right


def multiply(left, right):
    return left * right


def divide(left, right):
    if right == 0:
        raise E.DivisionByZero()
    return left / right


def power(base, exponent):
    try:
        return math.pow(base, exponent)
    except ValueError:
        # math.pow refuses (-8)^(1/3) and 0^-1 instead of returning complex / inf
        raise E.DomainError(f"{base}^{exponent} is not a real number.", code="2009")


# -----------------------------
# Unary behavior
# -----------------------------

def logarithm(operand):
    """Natural logarithm. Non-positive input is rejected, not turned into nan/-inf."""
    if operand <= 0:
        raise E.DomainError(f"log({operand}) is undefined.", code="2002")
    return math.log(operand)


def exponential(operand):
    return math.exp(operand)


def square_root(operand):
    if operand < 0:
        raise E.DomainError(f"sqrt({operand}) is undefined.", code="2007")
    return math.sqrt(operand)


def factorial(operand):
    """Factorial as a calculator operation: only whole numbers from 0 to FACTORIAL_LIMIT."""
    if operand < 0:
        raise E.NegativeFactorial()
    if operand > FACTORIAL_LIMIT:
        raise E.FactorialTooLarge(f"{operand}! is too large (max. {FACTORIAL_LIMIT}!).")
    if not float(operand).is_integer():
        raise E.NonIntegralFactorial(f"{operand}! is not defined for non-integers.")
    return float(ScientificEngine.factorial(int(operand)))


BINARY_OPERATIONS = MappingProxyType({
    BinaryOperator.ADD: add,
    BinaryOperator.SUBTRACT: subtract,
    BinaryOperator.MULTIPLY: multiply,
    BinaryOperator.DIVIDE: divide,
    BinaryOperator.POWER: power,
})

UNARY_OPERATIONS = MappingProxyType({
    UnaryOperator.SIN: ScientificEngine.sin,
    UnaryOperator.COS: ScientificEngine.cos,
    UnaryOperator.TAN: ScientificEngine.tan,
    UnaryOperator.LOG: logarithm,
    UnaryOperator.EXP: exponential,
    UnaryOperator.SQRT: square_root,
    UnaryOperator.FACTORIAL: factorial,
})

# '^' binds tighter than '*' and '/', all three tighter than '+' and '-'
PRECEDENCE = MappingProxyType({
    BinaryOperator.ADD: 1,
    BinaryOperator.SUBTRACT: 1,
    BinaryOperator.MULTIPLY: 2,
    BinaryOperator.DIVIDE: 2,
    BinaryOperator.POWER: 3,
})

OPERATOR_SYMBOLS = frozenset(op.value for op in BinaryOperator)
FUNCTION_NAMES = frozenset(op.value for op in UnaryOperator if op is not UnaryOperator.FACTORIAL)


def is_operator(symbol):
    return symbol in OPERATOR_SYMBOLS


def is_scientific_function(name):
    """True for the named functions (sin, cos, ...); the factorial mark is not a name."""
    return name.lower() in FUNCTION_NAMES


def binary_operation(symbol):
    """Return the (left, right) -> float function for an operator symbol."""
    try:
        return BINARY_OPERATIONS[BinaryOperator(symbol)]
    except ValueError:
        raise E.UnknownOperator(symbol)


def unary_operation(name):
    """Return the operand -> float function for a function name or '!'."""
    try:
        return UNARY_OPERATIONS[UnaryOperator(name.lower())]
    except ValueError:
        raise E.UnknownFunction(name)


def precedence(symbol):
    try:
        return PRECEDENCE[BinaryOperator(symbol)]
    except ValueError:
        raise E.UnknownOperator(symbol)
