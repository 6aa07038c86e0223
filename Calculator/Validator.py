# Validator.py
"""""
Structural check run before tokenization.

Expressions mentioning a scientific function only have to show a plausible
call shape (sin(...), sin30 or a factorial mark); the tokenizer rejects the
rest. Plain arithmetic is checked character by character.
"""""

import re

from . import Operations
from . import error as E

FUNCTION_PATTERN = "(" + "|".join(sorted(Operations.FUNCTION_NAMES)) + ")"

_contains_function = re.compile(FUNCTION_PATTERN)
_function_call = re.compile(FUNCTION_PATTERN + r"\(.*\)", re.DOTALL)
_function_digits = re.compile(FUNCTION_PATTERN + r"[0-9]+")

ALLOWED_CHARACTERS = frozenset("0123456789.()!") | Operations.OPERATOR_SYMBOLS


def validate(expression):
    """Raise a ValidationError if `expression` cannot be evaluated; return None otherwise."""
    if expression is None or not expression.strip():
        raise E.EmptyInput()

    if _contains_function.search(expression):
        trimmed_expression = re.sub(r"\s+", "", expression)
        if (_function_call.search(trimmed_expression)
                or _function_digits.search(trimmed_expression)
                or "!" in trimmed_expression):
            return
        raise E.InvalidFunctionFormat(
            f"Function must be followed by '(...)' or a number: {expression}")

    for position, character in enumerate(expression):
        if character not in ALLOWED_CHARACTERS and not character.isspace():
            raise E.InvalidCharacter(position, character)


def is_valid(expression):
    try:
        validate(expression)
    except E.ValidationError:
        return False
    return True
