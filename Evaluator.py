from __future__ import annotations
from collections import deque
from typing import List, NamedTuple, Tuple

import Config
from CalcDebug import CalcDebug, traced
from Errors import ArithmeticOverflow, DivisionByZero, MalformedExpression
from Tokenizer import Tokenizer
from Types import BoundedSeq


class Fold(NamedTuple):
    phase: str
    op: str
    lhs: int
    rhs: int
    result: int
    lhs_id: str
    rhs_id: str
    id: str

    def __str__(self) -> str:
        return f"{self.id} = {self.lhs} {self.op} {self.rhs} = {self.result}"


HIGH = "high"
LOW = "low"

HIGH_OPS = ["*", "/"]


def truncating_div(lhs: int, rhs: int) -> int:
    # Rounds toward zero, not toward negative infinity like //
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


class Evaluator:
    """Reduces the buffers produced by the tokenizer to a single integer.

    Multiplications and divisions are folded first, left to right, then
    additions and subtractions, again left to right. Every reduction is
    recorded in ``folds`` so the order can be inspected or drawn.
    """

    operands: BoundedSeq
    operators: BoundedSeq
    folds: List[Fold]
    result: int

    def __init__(self, operands: BoundedSeq, operators: BoundedSeq,
                 debug: CalcDebug = None):
        self.operands = operands
        self.operators = operators
        self.debug = debug
        self.folds = []
        self.result = None

    def leaf_id(self, idx: int) -> str:
        return f"n{idx}"

    def _apply(self, phase: str, op: str, lhs: int, rhs: int,
               lhs_id: str, rhs_id: str) -> Fold:
        if op == "*":
            result = lhs * rhs
        elif op == "/":
            if rhs == 0:
                raise DivisionByZero(f"Division of {lhs} by zero")
            result = truncating_div(lhs, rhs)
        elif op == "-":
            result = lhs - rhs
        else:
            result = lhs + rhs

        if not Config.in_range(result):
            raise ArithmeticOverflow(f"{lhs} {op} {rhs} does not fit in "
                                     f"{Config.INT_BITS} bits")

        fold = Fold(phase, op, lhs, rhs, result, lhs_id, rhs_id,
                    f"f{len(self.folds)}")
        self.folds.append(fold)
        if self.debug:
            self.debug.log("Evaluator", str(fold))
        return fold

    @traced
    def high_precedence(self) -> Tuple[List[int], List[str], List[str]]:
        # Operands and operators left once every * and / is folded, plus the
        # node id of each remaining operand
        values = [self.operands[0]]
        ids = [self.leaf_id(0)]
        ops = []

        for i, op in enumerate(self.operators):
            rhs = self.operands[i + 1]
            if op in HIGH_OPS:
                fold = self._apply(HIGH, op, values[-1], rhs, ids[-1],
                                   self.leaf_id(i + 1))
                values[-1] = fold.result
                ids[-1] = fold.id
            else:
                ops.append(op)
                values.append(rhs)
                ids.append(self.leaf_id(i + 1))

        return values, ids, ops

    @traced
    def low_precedence(self, values: List[int], ids: List[str],
                       ops: List[str]) -> int:
        values = deque(values)
        ids = deque(ids)
        ops = deque(ops)

        while ops:
            op = ops.popleft()
            lhs, rhs = values.popleft(), values.popleft()
            lhs_id, rhs_id = ids.popleft(), ids.popleft()
            fold = self._apply(LOW, op, lhs, rhs, lhs_id, rhs_id)
            values.appendleft(fold.result)
            ids.appendleft(fold.id)

        assert len(values) == 1
        return values[0]

    def evaluate(self) -> int:
        if len(self.operands) == 0 or \
                len(self.operators) != len(self.operands) - 1:
            raise MalformedExpression(f"{len(self.operands)} numbers do not "
                                      f"match {len(self.operators)} "
                                      "operations")

        self.folds = []
        self.result = self.low_precedence(*self.high_precedence())
        return self.result


def run(expression: str,
        max_length: int = Config.MAX_EXPRESSION_LENGTH,
        debug: CalcDebug = None) -> Evaluator:
    # Tokenizes and evaluates, keeping the evaluator for its folds
    operands, operators = Tokenizer(expression, max_length=max_length,
                                    debug=debug).tokenize()
    evaluator = Evaluator(operands, operators, debug=debug)
    evaluator.evaluate()
    if debug:
        debug.log("Evaluator", f"Evaluated expression {expression} to be "
                  f"{evaluator.result}")
    return evaluator


def evaluate(expression: str,
             max_length: int = Config.MAX_EXPRESSION_LENGTH,
             debug: CalcDebug = None) -> int:
    return run(expression, max_length=max_length, debug=debug).result
