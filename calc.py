#! /bin/env python3

import argparse
import sys
from typing import List

import Config
from BaseConverter import BaseConverter
from CalcDebug import CalcDebug
from Errors import CalcError, MalformedExpression
from EvalVis import EvalVis
from Evaluator import run


def getArgs(argv: List[str] = None):
    parser = argparse.ArgumentParser(description=f"{Config.NAME} core")
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("-e", dest="expression", type=str,
                        help="expression to evaluate")
    action.add_argument("-i", dest="src", type=str,
                        help="file with one expression per line")
    action.add_argument("-c", dest="number", type=int,
                        help="number to convert between bases")
    parser.add_argument("-b", dest="base", type=int, default=10,
                        help="base the digits of the number are read in")
    parser.add_argument("-t", dest="target", type=int, default=2,
                        help="base to convert the number to")
    parser.add_argument("-m", dest="max_length", type=int,
                        default=Config.MAX_EXPRESSION_LENGTH,
                        help="maximum number of tokens in an expression")
    parser.add_argument("-s", action="store_true", dest="strict",
                        default=False,
                        help="reject characters other than digits and + - * /")
    parser.add_argument("-d", dest="debug", type=str,
                        help="file the evaluation log is appended to")
    parser.add_argument("-g", dest="graph", type=str,
                        help="dot file the fold order of expressions is "
                        "drawn to")
    parser.add_argument("-r", action="store_true", dest="render",
                        default=False,
                        help="also render the dot file (needs graphviz)")
    parser.add_argument("-v", action="store_true", dest="verbose",
                        default=False, help="print the evaluation log")
    parser.add_argument("--version", action="version",
                        version=Config.banner())
    return parser.parse_args(argv)


def run_expression(args, expression: str, debug: CalcDebug,
                   vis: EvalVis) -> int:
    if args.strict and not Config.is_allowed(expression):
        raise MalformedExpression(f'Expression "{expression}" has characters '
                                  f'outside of "{Config.ALLOWED_CHARACTERS}"')

    evaluator = run(expression, max_length=args.max_length, debug=debug)
    if vis:
        vis.evaluation(evaluator, expression)
    return evaluator.result


def error(e: Exception) -> None:
    print(f"calc error: {e}", file=sys.stderr)


def main(argv: List[str] = None) -> int:
    # Get args
    args = getArgs(argv)
    debug = CalcDebug(file=args.debug) if args.debug or args.verbose \
        else None
    vis = EvalVis(filename=args.graph, debug=args.verbose) if args.graph \
        else None
    status = 0

    try:
        if args.number is not None:
            converter = BaseConverter(args.base, args.target, debug=debug)
            print(converter.convert(args.number))

        elif args.expression is not None:
            print(run_expression(args, args.expression, debug, vis))

        else:
            try:
                with open(args.src) as f:
                    lines = [line.strip() for line in f]
            except OSError as e:
                error(e)
                lines = []
                status = 1
            for line in lines:
                if not line:
                    continue
                try:
                    print(run_expression(args, line, debug, vis))
                except CalcError as e:
                    error(e)
                    status = 1

    except CalcError as e:
        error(e)
        status = 1

    finally:
        if debug:
            debug.dump()
            if args.verbose and args.debug:
                print(debug.toStr(debug.root), end="")

    # Visualiation of the folds
    if vis:
        if args.render:
            vis.render()
        else:
            vis.save()

    return status


if __name__ == "__main__":
    sys.exit(main())
