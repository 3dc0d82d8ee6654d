class CalcError(Exception):
    pass


class DivisionByZero(CalcError, ZeroDivisionError):
    pass


class CapacityExceeded(CalcError):
    pass


class InvalidBase(CalcError, ValueError):
    pass


class MalformedExpression(CalcError, ValueError):
    pass


class ArithmeticOverflow(CalcError, OverflowError):
    pass
