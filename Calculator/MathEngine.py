# MathEngine.py
"""""
Core calculation engine.

Pipeline
--------
1) Validator: rejects malformed input before any work is done.
2) Tokenizer: splits the raw string into numbers, operators, parentheses,
   function names and factorial marks.
3) Evaluator: two-stack (operands / pending operators) shunting-yard walk that
   applies operations from the registry as soon as precedence allows.
4) Formatter: renders a float for display and history.

The engine keeps no state between calls and never prints; errors are raised as
error.MathError subclasses with the source expression attached.
"""""

import math
import re
from collections import namedtuple
from enum import Enum

from . import Operations
from . import Validator
from . import error as E


class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    PARENTHESIS = "parenthesis"
    FUNCTION = "function"
    FACTORIAL = "factorial"


Token = namedtuple("Token", "kind text value")
Outcome = namedtuple("Outcome", "value error")

# Split points: whitespace, around every operator / parenthesis / '!',
# and between letters and digits ("sin30" -> "sin", "30").
_SPLIT = re.compile(
    r"\s+"
    r"|(?<=[-+*/()^!])|(?=[-+*/()^!])"
    r"|(?<=[a-zA-Z])(?=[0-9])|(?<=[0-9])(?=[a-zA-Z])"
)
_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")
_NAME = re.compile(r"[a-zA-Z]+")


# -----------------------------
# Tokenizer
# -----------------------------

def classify(fragment):
    """Turn one split fragment into a Token or raise InvalidToken."""
    if _NUMBER.fullmatch(fragment):
        value = float(fragment)
        if math.isinf(value):
            raise E.CalculationError("Number too large (Arithmetic overflow).", code="3026")
        return Token(TokenKind.NUMBER, fragment, value)
    elif Operations.is_operator(fragment):
        return Token(TokenKind.OPERATOR, fragment, None)
    elif fragment in ("(", ")"):
        return Token(TokenKind.PARENTHESIS, fragment, None)
    elif fragment == "!":
        return Token(TokenKind.FACTORIAL, fragment, None)
    elif _NAME.fullmatch(fragment) and Operations.is_scientific_function(fragment):
        return Token(TokenKind.FUNCTION, fragment.lower(), None)
    raise E.InvalidToken(fragment)


def tokenize(expression):
    """Split a raw expression into a list of Tokens, dropping empty fragments."""
    return [classify(fragment) for fragment in _SPLIT.split(expression) if fragment]


# -----------------------------
# Evaluator
# -----------------------------

def _is_function(token):
    return token.kind in (TokenKind.FUNCTION, TokenKind.FACTORIAL)


def _apply(operands, token):
    """Pop the operands `token` needs, apply it and push the result."""
    if _is_function(token):
        if not operands:
            raise E.MalformedExpression(f"Missing number for '{token.text}'.")
        operation = Operations.unary_operation(token.text)
        operands.append(operation(operands.pop()))
    else:
        operation = Operations.binary_operation(token.text)
        if len(operands) < 2:
            raise E.MalformedExpression(f"Missing number around '{token.text}'.")
        right = operands.pop()
        left = operands.pop()
        operands.append(operation(left, right))


def _apply_pending_functions(operands, operators):
    # A function on top of the stack takes the value that was just completed.
    while operators and operators[-1].kind == TokenKind.FUNCTION:
        _apply(operands, operators.pop())


def evaluate_tokens(tokens):
    """Evaluate a token list with an operand stack and an operator stack."""
    operands = []
    operators = []

    for token in tokens:
        if token.kind == TokenKind.NUMBER:
            operands.append(token.value)
            _apply_pending_functions(operands, operators)

        elif token.kind == TokenKind.OPERATOR:
            incoming = Operations.precedence(token.text)
            while (operators and operators[-1].kind == TokenKind.OPERATOR
                   and Operations.precedence(operators[-1].text) >= incoming):
                _apply(operands, operators.pop())
            operators.append(token)

        elif token.kind == TokenKind.PARENTHESIS and token.text == "(":
            operators.append(token)

        elif token.kind == TokenKind.PARENTHESIS:
            while operators and operators[-1].text != "(":
                _apply(operands, operators.pop())
            if not operators:
                raise E.MalformedExpression("Missing opening parenthesis '('.", code="3010")
            operators.pop()
            _apply_pending_functions(operands, operators)

        elif token.kind == TokenKind.FUNCTION:
            operators.append(token)

        elif token.kind == TokenKind.FACTORIAL:
            # postfix: binds to the value right before it
            _apply(operands, token)
            _apply_pending_functions(operands, operators)

        else:
            raise E.InvalidToken(token.text)

    while operators:
        token = operators.pop()
        if token.text == "(":
            raise E.MalformedExpression("Missing closing parenthesis ')'.", code="3009")
        _apply(operands, token)

    if len(operands) != 1:
        raise E.MalformedExpression(f"Expected one result, found {len(operands)} values.")

    return operands[0]


# -----------------------------
# Public entry points
# -----------------------------

def calculate(problem):
    """Main API: validate -> tokenize -> evaluate. Returns a float or raises MathError."""
    try:
        Validator.validate(problem)
        return evaluate_tokens(tokenize(problem))

    # Known numeric overflow (math.exp, math.pow)
    except OverflowError:
        raise E.CalculationError(
            message="Number too large (Arithmetic overflow).",
            code="3026",
            equation=problem
        )
    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        raise e
    # Anything else is a bug; keep the UI's error handling uniform
    except Exception as e:
        raise E.MathError(message=str(e).strip(), code="9999", equation=problem) from e


def evaluate(problem):
    """Like calculate(), but returns Outcome(value, error) instead of raising MathError."""
    try:
        return Outcome(calculate(problem), None)
    except E.MathError as e:
        return Outcome(None, e)


# -----------------------------
# Result formatting
# -----------------------------

def format_result(value, decimal_places=10):
    """Render a result for display.

    Returns:
        (text, rounded) where rounded tells whether digits were dropped.
    """
    value = float(value)
    if math.isnan(value):
        return "nan", False
    if math.isinf(value):
        return ("inf" if value > 0 else "-inf"), False

    if value.is_integer() and abs(value) < 1e16:
        return str(int(value)), False

    rounded_value = round(value, max(decimal_places, 0))
    text = f"{rounded_value:.{max(decimal_places, 0)}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text, rounded_value != value
