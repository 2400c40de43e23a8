#!/usr/bin/env python3
"""
Command line front end.

    bfcore '++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++.'
    bfcore --file hello.bf --tape-size 1000
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from .config import OUTPUT_CHOICES, InterpreterConfig
from .errors import BrainfuckError
from .interpreter import BrainfuckInterpreter
from .loader import load

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bfcore", description="Run a Brainfuck program")
    ap.add_argument("program", help="Program source text (or a path with --file)")
    ap.add_argument("-f", "--file", action="store_true", help="Treat PROGRAM as a path and read the source from it")
    ap.add_argument("--tape-size", type=int, default=None, help="Number of tape cells (default: $BF_TAPE_SIZE or 30000)")
    ap.add_argument("--output", choices=OUTPUT_CHOICES, default=None,
                    help="Stream receiving program output (default: $BF_OUTPUT or stdout)")
    ap.add_argument("--stderr", dest="output", action="store_const", const="stderr",
                    help="Shorthand for --output stderr")
    ap.add_argument("--check", action="store_true", help="Only load the program and report its size")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def read_source(args) -> str:
    if not args.file:
        return args.program
    with open(args.program, 'r') as f:
        return f.read()


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s: %(message)s", stream=sys.stderr)

    try:
        source = read_source(args)
        config = InterpreterConfig.from_env(tape_size=args.tape_size, output=args.output)
        if args.check:
            instructions = load(source)
            print(f"✅ {len(instructions)} instructions, brackets balanced")
            return 0
        itp = BrainfuckInterpreter.from_config(source, config)
        itp.run()
    except (BrainfuckError, ValueError, OSError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    logger.debug("Final tape pointer %d of %d cells", itp.pointer, itp.tape_size)
    return 0


if __name__ == "__main__":
    sys.exit(main())
