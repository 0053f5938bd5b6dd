#!/usr/bin/env python3
"""
Demo: Parse, rewrite and run SUM block lines.

Shows the canonical form of each line and the context after running it.
"""

import logging

from blockline import BlockError, VariableContext, execute_statement, parse_line, serialize_statement


LINES = [
    'SUM "1" "2"',
    '#ADD   SUM "<X>"    "6" -> var "Y"',
    '!SUM "<Y>" "<L[1]>" -> CAP "TOTAL"',
    'SUM "<X>" "abc" -> VAR "BROKEN"',
    'SUM "1"',
]


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    context = VariableContext(variables={"X": "4", "L": ["10", "20"]})

    print("=" * 80)
    print("SUM BLOCK DEMO")
    print("=" * 80)

    for line in LINES:
        print(f"\nInput:     {line}")
        try:
            statement = parse_line(line)
            print(f"Canonical: {serialize_statement(statement)}")
            print(f"Result:    {execute_statement(statement, context)}")
        except BlockError as e:
            print(f"Error:     {type(e).__name__}: {e}")

    print("\n" + "=" * 80)
    print(f"Variables: {context.variables}")
    print(f"Captures:  {context.captures}")
    print("=" * 80)


if __name__ == "__main__":
    main()
