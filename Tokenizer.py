from typing import Tuple

import Config
from CalcDebug import CalcDebug, traced
from Errors import ArithmeticOverflow, MalformedExpression
from Types import BoundedSeq


class ExprReader:
    EOF = 255

    def __init__(self, expression: str):
        self.code = expression
        self.idx = 0

        # For debugging
        self.col = 0

    def __str__(self) -> str:
        return f"<expression>:{self.col}"

    def end(self) -> bool:
        return self.idx >= len(self.code)

    def getNext(self) -> str:
        if self.end():
            return self.EOF
        self.col += 1
        sym = self.code[self.idx]
        self.idx += 1
        return sym


class Token:
    ERROR = 0
    TIMES = 1  # *
    DIV = 2  # /
    PLUS = 11  # +
    MINUS = 12  # -
    OTHER = 50  # anything else, read as + after a number
    NUMBER = 60  # number
    EOF = 255  # end of expression

    TokenName = {
        ERROR: "ERROR",
        TIMES: "TIMES",
        DIV: "DIV",
        PLUS: "PLUS",
        MINUS: "MINUS",
        OTHER: "OTHER",
        NUMBER: "NUMBER",
        EOF: "EOF",
    }

    SYMBOLS = {
        "*": TIMES,
        "/": DIV,
        "+": PLUS,
        "-": MINUS,
    }

    # Operator recorded for each token type when it follows an operand
    OPERATORS = {
        TIMES: "*",
        DIV: "/",
        MINUS: "-",
        PLUS: "+",
        OTHER: "+",
    }

    col: int
    sym: str
    type: int

    def __init__(self, col: int):
        self.col = col

        self.sym = ""
        self.type = self.ERROR  # Unset

    def __str__(self) -> str:
        return f'"{self.sym}" ({self.TokenName[self.type]}) col {self.col}'

    def __repr__(self) -> str:
        return self.__str__()


class Tokenizer:
    # What the previous token contributed to the buffers
    START = -1
    OPERATOR = 0
    OPERAND = 1

    operands: BoundedSeq
    operators: BoundedSeq

    def __init__(self, expression: str,
                 max_length: int = Config.MAX_EXPRESSION_LENGTH,
                 debug: CalcDebug = None):
        self.expression = expression
        self.reader = ExprReader(expression)
        self.debug = debug

        # Buffers, fresh for every expression
        self.operands = BoundedSeq(max_length + 1, "operand")
        self.operators = BoundedSeq(max_length + 1, "operator")

        # States
        self.inputSym = None
        self.num = None
        self.lastInput = self.START
        self.sign = 1
        self.signed = False

        self.next()  # Read the first char

    def next(self) -> None:
        self.inputSym = self.reader.getNext()

    def is_digit(self) -> bool:
        assert self.inputSym != None
        return ord(self.inputSym) >= ord("0") and ord(self.inputSym) <= ord("9")

    def create_token(self) -> Token:
        return Token(self.reader.col)

    def number(self) -> Token:
        token = self.create_token()
        result = 0
        sym = ""

        # Parse the number
        while self.inputSym != ExprReader.EOF and self.is_digit():
            result = result * 10 + int(self.inputSym)
            sym += self.inputSym
            self.next()

        self.num = result
        token.sym = sym
        token.type = Token.NUMBER
        return token

    def operator(self) -> Token:
        token = self.create_token()
        token.sym = self.inputSym
        token.type = Token.SYMBOLS.get(self.inputSym, Token.OTHER)
        self.next()
        return token

    def getNext(self) -> Token:
        if self.inputSym == ExprReader.EOF:
            token = self.create_token()
            token.type = Token.EOF
            return token
        elif self.is_digit():
            return self.number()
        else:
            return self.operator()

    def _operand(self, token: Token) -> None:
        value = self.sign * self.num
        if not Config.in_range(value):
            raise ArithmeticOverflow(f"Number {value} at column {token.col} "
                                     f"does not fit in {Config.INT_BITS} bits")
        self.operands.append(value)
        self.lastInput = self.OPERAND
        self.sign = 1
        self.signed = False

    def _symbol(self, token: Token) -> None:
        if self.lastInput == self.OPERAND:
            self.operators.append(Token.OPERATORS[token.type])
            self.lastInput = self.OPERATOR
        elif token.type == Token.MINUS:
            # Sign of the next number
            self.sign = -self.sign
            self.signed = True
        elif self.lastInput == self.OPERATOR:
            # Coalesced into the operator already recorded
            if self.debug:
                self.debug.log("Tokenizer", f"Ignoring {token} after an "
                               "operator")
        else:
            raise MalformedExpression(f"Expression starts with {token} and "
                                      "no number before it")

    @traced
    def tokenize(self) -> Tuple[BoundedSeq, BoundedSeq]:
        while True:
            token = self.getNext()
            if self.debug:
                self.debug.add(token)

            if token.type == Token.EOF:
                break
            elif token.type == Token.NUMBER:
                self._operand(token)
            else:
                self._symbol(token)

        if len(self.operands) == 0:
            raise MalformedExpression(f'No number in expression '
                                      f'"{self.expression}"')
        if self.signed:
            raise MalformedExpression(f'Expression "{self.expression}" ends '
                                      'with a sign and no number')
        if len(self.operators) != len(self.operands) - 1:
            raise MalformedExpression(f'Expression "{self.expression}" ends '
                                      'with an operator')

        if self.debug:
            self.debug.log("Tokenizer", f"Formatted {self.expression} to "
                           f"numbers: {self.operands} and operations to: "
                           f"{self.operators}")

        return self.operands, self.operators


def tokenize(expression: str,
             max_length: int = Config.MAX_EXPRESSION_LENGTH,
             debug: CalcDebug = None) -> Tuple[BoundedSeq, BoundedSeq]:
    return Tokenizer(expression, max_length=max_length, debug=debug).tokenize()
