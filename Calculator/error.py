# error.py
"""""
Error types raised by the calculator core and its collaborators.

Every error carries a four digit code. The UI looks the code up in
ERROR_MESSAGES for the headline of the error box and shows `message` as details.
"""""


class MathError(Exception):
    default_code = "9999"

    def __init__(self, message, code=None, equation=None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.equation = equation

    def __str__(self):
        return f"{self.code} {self.message}"


# -----------------------------
# Input validation (before tokenization)
# -----------------------------

class ValidationError(MathError):
    pass


class EmptyInput(ValidationError):
    default_code = "3100"

    def __init__(self, message="Expression cannot be empty.", code=None, equation=None):
        super().__init__(message, code=code, equation=equation)


class InvalidCharacter(ValidationError):
    default_code = "3101"

    def __init__(self, position, character, code=None, equation=None):
        super().__init__(f"Invalid character '{character}' at position {position}.",
                         code=code, equation=equation)
        self.position = position
        self.character = character


class InvalidFunctionFormat(ValidationError):
    default_code = "3102"


# -----------------------------
# Tokenizer / evaluator
# -----------------------------

class ParseError(MathError):
    pass


class InvalidToken(ParseError):
    default_code = "3011"

    def __init__(self, token, code=None, equation=None):
        super().__init__(f"Unexpected token: {token!r}", code=code, equation=equation)
        self.token = token


class MalformedExpression(ParseError):
    default_code = "3012"


class CalculationError(MathError):
    pass


class UnknownOperator(CalculationError):
    default_code = "3004"

    def __init__(self, symbol, code=None, equation=None):
        super().__init__(f"Unknown operator: {symbol}", code=code, equation=equation)
        self.symbol = symbol


class DivisionByZero(CalculationError):
    default_code = "3003"

    def __init__(self, message="Division by zero", code=None, equation=None):
        super().__init__(message, code=code, equation=equation)


# -----------------------------
# Scientific functions
# -----------------------------

class ScientificError(MathError):
    pass


class UnknownFunction(ScientificError):
    default_code = "2004"

    def __init__(self, name, code=None, equation=None):
        super().__init__(f"Unknown scientific function: {name}", code=code, equation=equation)
        self.name = name


class DomainError(ScientificError):
    default_code = "2002"


class FactorialError(ScientificError):
    pass


class NegativeFactorial(FactorialError):
    default_code = "2005"

    def __init__(self, message="Factorial is defined only for non-negative integers.",
                 code=None, equation=None):
        super().__init__(message, code=code, equation=equation)


class FactorialTooLarge(FactorialError):
    default_code = "2006"


class NonIntegralFactorial(FactorialError):
    default_code = "2008"


# -----------------------------
# Storage (preferences / history)
# -----------------------------

class ConfigurationError(MathError):
    default_code = "5001"


class HistoryError(MathError):
    default_code = "5002"


Error_Dictionary = {

    "2": "Scientific Calculation Error",
    "3": "Calculator Error",
    "4": "UI Error",
    "5": "Storage Error",
    "9": "Runtime Error"

}

# Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number


ERROR_MESSAGES = {
    "2002": "Logarithm of a non-positive number.",
    "2004": "Unable to identify given function: ",  # + function name
    "2005": "Factorial of a negative number.",
    "2006": "Number too large for factorial (max. 10).",
    "2007": "Square root of a negative number.",
    "2008": "Factorial of a non-integer number.",
    "2009": "Result of the power is not a real number.",

    "3003": "Division by Zero",
    "3004": "Invalid Operator: ",  # + operator
    "3009": "Missing ')'. ",
    "3010": "Missing '('. ",
    "3011": "Unexpected Token: ",  # + Token
    "3012": "Invalid expression. ",
    "3026": "Number too big.",
    "3100": "Empty expression.",
    "3101": "Invalid character in expression.",
    "3102": "Invalid function format.",

    "4002": "Calculation already Running!",

    "5001": "Settings could not be saved: ",  # + path
    "5002": "History could not be saved.",
    "5003": "History could not be loaded.",

    "9999": "Unexpected Error: "  # +error
}
