import sys
import os

sys.path.append(os.path.dirname(os.path.realpath(__file__)) + "/..")

import unittest
from Evaluator import (Evaluator, Fold, HIGH, LOW, evaluate, run,
                       truncating_div)
from Tokenizer import tokenize
from Types import BoundedSeq
from CalcDebug import CalcDebug
from Errors import (ArithmeticOverflow, CapacityExceeded, DivisionByZero,
                    MalformedExpression)


def buffers(operands, operators):
    nums = BoundedSeq(len(operands) + 1, "operand")
    ops = BoundedSeq(len(operands) + 1, "operator")
    for n in operands:
        nums.append(n)
    for o in operators:
        ops.append(o)
    return nums, ops


class TestEvaluator(unittest.TestCase):
    def test_precedence(self):
        self.assertEqual(evaluate("2+3*4"), 14)
        self.assertEqual(evaluate("2*3+4"), 10)
        self.assertEqual(evaluate("2*3+4*5"), 26)
        self.assertEqual(evaluate("1+2*3*4-5"), 20)
        self.assertEqual(evaluate("8-6/2*3"), -1)

    def test_left_to_right(self):
        self.assertEqual(evaluate("10-2-3"), 5)
        self.assertEqual(evaluate("100/10/5"), 2)
        self.assertEqual(evaluate("2*9/4"), 4)
        self.assertEqual(evaluate("9/4*2"), 4)

    def test_single_number(self):
        self.assertEqual(evaluate("42"), 42)
        self.assertEqual(evaluate("0"), 0)
        self.assertEqual(evaluate("-7"), -7)

    def test_division(self):
        self.assertEqual(evaluate("7/2"), 3)
        self.assertEqual(evaluate("-7/2"), -3)
        self.assertEqual(evaluate("7/-2"), -3)
        self.assertEqual(evaluate("-7/-2"), 3)
        self.assertEqual(evaluate("0/5"), 0)
        self.assertEqual(truncating_div(-1, 3), 0)

    def test_division_by_zero(self):
        with self.assertRaises(DivisionByZero):
            evaluate("5/0")
        with self.assertRaises(DivisionByZero):
            evaluate("1+5/0*2")
        with self.assertRaises(ZeroDivisionError):
            evaluate("5/2/0")

    def test_sign(self):
        self.assertEqual(evaluate("-5+2"), -3)
        self.assertEqual(evaluate("5*-3"), -15)
        self.assertEqual(evaluate("5--3"), 8)
        self.assertEqual(evaluate("5---3"), 2)
        self.assertEqual(evaluate("5*/3"), 15)
        self.assertEqual(evaluate("2 3"), 5)

    def test_malformed(self):
        with self.assertRaises(MalformedExpression):
            evaluate("*3")
        with self.assertRaises(MalformedExpression):
            evaluate("3*")
        with self.assertRaises(MalformedExpression):
            evaluate("")

        nums, ops = buffers([1, 2], ["+", "+"])
        with self.assertRaises(MalformedExpression):
            Evaluator(nums, ops).evaluate()
        nums, ops = buffers([], [])
        with self.assertRaises(MalformedExpression):
            Evaluator(nums, ops).evaluate()

    def test_capacity(self):
        self.assertEqual(evaluate("1+1+1", max_length=2), 3)
        with self.assertRaises(CapacityExceeded):
            evaluate("1+1+1+1", max_length=2)
        self.assertEqual(evaluate("+".join(["1"] * 101)), 101)

    def test_overflow(self):
        self.assertEqual(evaluate("2147483646+1"), 2147483647)
        self.assertEqual(evaluate("-2147483647-1"), -2147483648)
        with self.assertRaises(ArithmeticOverflow):
            evaluate("2147483647+1")
        with self.assertRaises(ArithmeticOverflow):
            evaluate("65536*65536")
        with self.assertRaises(ArithmeticOverflow):
            evaluate("-2147483648/-1")
        with self.assertRaises(OverflowError):
            evaluate("0-2147483647-2")

    def test_folds(self):
        nums, ops = tokenize("1+2*3-8/4")
        evaluator = Evaluator(nums, ops)
        self.assertEqual(evaluator.evaluate(), 5)
        self.assertEqual(evaluator.folds, [
            Fold(HIGH, "*", 2, 3, 6, "n1", "n2", "f0"),
            Fold(HIGH, "/", 8, 4, 2, "n3", "n4", "f1"),
            Fold(LOW, "+", 1, 6, 7, "n0", "f0", "f2"),
            Fold(LOW, "-", 7, 2, 5, "f2", "f1", "f3"),
        ])
        self.assertEqual(str(evaluator.folds[0]), "f0 = 2 * 3 = 6")

    def test_chained_high_folds(self):
        nums, ops = tokenize("2*3*4/5")
        evaluator = Evaluator(nums, ops)
        self.assertEqual(evaluator.evaluate(), 4)
        self.assertEqual([(f.lhs_id, f.rhs_id) for f in evaluator.folds],
                         [("n0", "n1"), ("f0", "n2"), ("f1", "n3")])
        self.assertTrue(all(f.phase == HIGH for f in evaluator.folds))

    def test_buffers_untouched(self):
        nums, ops = tokenize("1+2*3")
        evaluator = Evaluator(nums, ops)
        self.assertEqual(evaluator.evaluate(), 7)
        self.assertEqual(evaluator.evaluate(), 7)
        self.assertEqual(nums, [1, 2, 3])
        self.assertEqual(ops, ["+", "*"])
        self.assertEqual(len(evaluator.folds), 2)

    def test_run(self):
        evaluator = run("1+2*3")
        self.assertEqual(evaluator.result, 7)
        self.assertEqual(evaluator.operands, [1, 2, 3])
        self.assertEqual(len(evaluator.folds), 2)
        self.assertIsNone(Evaluator(*tokenize("5")).result)

    def test_debug(self):
        debug = CalcDebug()
        self.assertEqual(evaluate("2+3*4", debug=debug), 14)
        self.assertEqual([nt.name for nt in debug.root[:3]],
                         ["tokenize", "high_precedence", "low_precedence"])
        self.assertTrue(isinstance(debug.root[3], CalcDebug.Entry))
        messages = [e.message for e in debug.entries()]
        self.assertIn("f0 = 3 * 4 = 12", messages)
        self.assertIn("f1 = 2 + 12 = 14", messages)
        self.assertEqual(messages[-1], "Evaluated expression 2+3*4 to be 14")

    def test_debug_error(self):
        debug = CalcDebug()
        with self.assertRaises(DivisionByZero):
            evaluate("1/0", debug=debug)
        entry = debug.entries()[-1]
        self.assertEqual(entry.source, "Evaluator")
        self.assertEqual(entry.message,
                         "ERROR: DivisionByZero: Division of 1 by zero")


if __name__ == "__main__":
    unittest.main()
