from typing import List

import Config
from CalcDebug import CalcDebug, traced
from Errors import ArithmeticOverflow, InvalidBase


def check_base(base: int, name: str = "base") -> None:
    if base < 2:
        raise InvalidBase(f"The {name} must be at least 2, got {base}")


def reinterpret(number: int, base: int) -> int:
    # The decimal digits of number, read as digits in base. Digits that are
    # not valid in base are used as they are.
    value = 0
    position = 0
    while number != 0:
        value += number % 10 * base ** position
        number //= 10
        position += 1
    return value


def render(value: int, base: int) -> List[int]:
    # Digits of value in base, most significant first
    if value == 0:
        return [0]

    rests = []
    while value != 0:
        rests.append(value % base)
        value //= base
    rests.reverse()
    return rests


class BaseConverter:
    def __init__(self, base: int, targetBase: int, debug: CalcDebug = None):
        check_base(base, "source base")
        check_base(targetBase, "target base")
        self.base = base
        self.targetBase = targetBase
        self.debug = debug

    @traced
    def digits(self, number: int) -> List[int]:
        if not Config.in_range(number):
            raise ArithmeticOverflow(f"Number {number} does not fit in "
                                     f"{Config.INT_BITS} bits")

        value = reinterpret(abs(number), self.base)
        # The sign comes back on the output, so INT_MIN stays convertible
        if not Config.in_range(-value if number < 0 else value):
            raise ArithmeticOverflow(f"Number {number} in base {self.base} "
                                     f"is {value}, which does not fit in "
                                     f"{Config.INT_BITS} bits")

        digits = render(value, self.targetBase)
        if self.debug:
            self.debug.log("BaseConverter", f"Converted number {number} from "
                           f"base {self.base} into target base "
                           f"{self.targetBase}: {digits}")
        return digits

    def convert(self, number: int) -> str:
        sign = "-" if number < 0 else ""
        return sign + "".join(str(d) for d in self.digits(number))


def convert_base_digits(number: int, base: int, targetBase: int,
                        debug: CalcDebug = None) -> List[int]:
    return BaseConverter(base, targetBase, debug=debug).digits(number)


def convert_base(number: int, base: int, targetBase: int,
                 debug: CalcDebug = None) -> str:
    return BaseConverter(base, targetBase, debug=debug).convert(number)
