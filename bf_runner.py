#!/usr/bin/env python3
import sys
import argparse

from bf_engine import Engine
from bf_errors import EngineError
from bf_io import StreamIO
from bf_tape import Tape


class Colors:
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


def error(prog, msg):
    if sys.stderr.isatty():
        print(f"{Colors.BOLD}{prog}:{Colors.ENDC} {Colors.FAIL}error:{Colors.ENDC} {msg}", file=sys.stderr)
    else:
        print(f"{prog}: error: {msg}", file=sys.stderr)
    return 1


def load_program(filename):
    with open(filename, 'rb') as f:
        return f.read()


def build_parser():
    parser = argparse.ArgumentParser(
        prog='bf',
        description='Run a brainfuck program. Bytes other than the eight commands are ignored.',
    )
    parser.add_argument('sourcefile', help='program to run')
    return parser


def main(argv=None):
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # usage errors and --help
        return e.code
    prog = parser.prog

    try:
        code = load_program(args.sourcefile)
    except (FileNotFoundError, PermissionError, IsADirectoryError):
        return error(prog, "could not open file")
    except MemoryError:
        return error(prog, "bad memory allocation")
    except OSError:
        return error(prog, "cannot read file")

    try:
        with Tape() as tape:
            Engine(code, tape, StreamIO.from_std()).run()
    except EngineError as e:
        return error(prog, e.diagnostic)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
