# argparser.py
import argparse
import sys

from outcome import DisplayPolicy
from tokenizer import Delimitation

DESCRIPTION = """\
Reads a list of files from stdin, pipes the contents of each file into the
specified command and prints the name of the file if the command succeeds.
The name of the file is exposed to the command via the environment variable
QUERY_FILENAME.

Option parsing stops at the first non-option argument."""

EPILOG = """\
Exit statuses:
 1     Fatal error encountered.
 2     Non-fatal error encountered."""


class QueryArgumentParser(argparse.ArgumentParser):
    # every usage error is fatal: status 1 instead of argparse's 2
    def error(self, message):
        print(f"{self.prog}: {message}", file=sys.stderr)
        sys.exit(1)


def build_parser(prog=None):
    parser = QueryArgumentParser(
        prog=prog,
        usage="%(prog)s [OPTION] [!] COMMAND [ARGUMENT...]",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.set_defaults(delimitation=Delimitation.LINE)

    parser.add_argument("-!", dest="on_failure", action="store_true",
                        help="Only print filenames when the COMMAND fails.")
    parser.add_argument("-0", dest="delimitation", action="store_const",
                        const=Delimitation.NULL_BYTE,
                        help="File names are delimited by null bytes.")
    # exits as soon as it is seen, before later options are checked
    parser.add_argument("-h", action="help",
                        help="Show this text and exit.")
    parser.add_argument("-n", dest="delimitation", action="store_const",
                        const=Delimitation.LINE,
                        help="File names are line-delimited. This the default behavior.")
    parser.add_argument("-s", dest="discard_stderr", action="store_true",
                        help="Redirect stderr from the COMMAND to /dev/null.")
    parser.add_argument("-w", dest="delimitation", action="store_const",
                        const=Delimitation.WHITESPACE,
                        help="File names are delimited by ASCII whitespace.")

    parser.add_argument("command", nargs=argparse.REMAINDER,
                        help=argparse.SUPPRESS)
    return parser


def parse_invocation(argv, prog=None):
    """Parse the command line into options plus the COMMAND vector.

    A "--" ends the options and is dropped. A lone "!" in front of
    COMMAND is the same as passing -!.
    """
    parser = build_parser(prog)
    args = parser.parse_args(argv)
    if args.command[:1] == ["--"]:
        args.command = args.command[1:]
    if args.command and args.command[0] == "!":
        args.on_failure = True
        args.command = args.command[1:]
    args.policy = DisplayPolicy.ON_FAILURE if args.on_failure else DisplayPolicy.ON_SUCCESS
    return parser, args
