NAME = "SimpleCalculator"
VERSION = "2.0"

# Longest expression the tokenizer buffers are sized for
MAX_EXPRESSION_LENGTH = 100

ALLOWED_CHARACTERS = "0123456789+-*/"

# Width of the signed integers the calculator works with
INT_BITS = 32
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


def is_allowed(expression: str) -> bool:
    return all(c in ALLOWED_CHARACTERS for c in expression)


def in_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def banner() -> str:
    return f"{NAME} v.{VERSION}"
