#!/usr/bin/env python3
# query.py - print the files from stdin for which COMMAND succeeds
import os
import sys

import argparser
from dispatcher import Dispatcher
from errors import FatalError
from tokenizer import read_tokens

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_NONFATAL = 2


def run(args, stdin=None, stdout=None, stderr=None) -> int:
    stdin = stdin if stdin is not None else sys.stdin.buffer
    dispatcher = Dispatcher(
        args.command,
        policy=args.policy,
        discard_stderr=args.discard_stderr,
        output=stdout,
        errout=stderr,
    )
    state = dispatcher.run(read_tokens(stdin, args.delimitation))
    return EXIT_NONFATAL if state.had_nonfatal_error else EXIT_OK


def main(argv=None) -> int:
    prog = os.path.basename(sys.argv[0]) or "query"
    _, args = argparser.parse_invocation(sys.argv[1:] if argv is None else argv, prog)

    if not args.command:
        print("No command specified.", file=sys.stderr)
        return EXIT_FATAL

    try:
        return run(args)
    except FatalError as e:
        print(e, file=sys.stderr)
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
