"""Command line front-end: tag stdin lines against a dictionary file.

Usage:
    nametagger [-w] [-i] [--skip {space,symbol}] [--debug] DICT < input.txt

DICT holds one ``label<TAB>name`` entry per line. For every input line the
tool prints one tab-separated record per match::

    start  end  matched-text  strict  type  label

followed by an empty line.
"""

import argparse
import signal
import sys

from .dictionary import DictionaryError, load_dictionary
from .engine import Tagger, TaggerOpts
from .serialize import format_line


def _reset_sigpipe():
    # If stdout is a pipe and the reader (e.g. `head`) closes early, exit
    # quietly instead of raising BrokenPipeError at shutdown.
    try:  # pragma: no cover - platform dependent
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)
    except (AttributeError, OSError, RuntimeError, ValueError):  # AttributeError on non-Unix
        pass


def build_parser():
    parser = argparse.ArgumentParser(
        prog="nametagger",
        description="Tag occurrences of dictionary names in lines read from stdin.",
    )
    parser.add_argument("dict", metavar="DICT", help="Dictionary file of label<TAB>name lines")
    parser.add_argument(
        "-w",
        "--whole-name",
        action="store_true",
        help="Also report names that stand as whole words (WholeWord match types)",
    )
    parser.add_argument(
        "-i",
        "--insensitive",
        action="store_true",
        help="Permit matches to differ from name in case and punctuation",
    )
    parser.add_argument(
        "--skip",
        choices=["space", "symbol"],
        default=None,
        help="With -i, also let matches pass over extra whitespace (space) or whitespace and punctuation (symbol)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print dictionary and per-line scan diagnostics to stderr",
    )
    return parser


def parse_args(argv=None) -> dict:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.skip and not args.insensitive:
        parser.error("--skip requires -i/--insensitive")
    return {
        "dict": args.dict,
        "whole_word": args.whole_name,
        "fuzzy": args.insensitive,
        "skip": args.skip,
        "debug": args.debug,
    }


def run(config, stdin, stdout):
    """Load the dictionary and tag every line of ``stdin`` onto ``stdout``."""
    opts = TaggerOpts(
        fuzzy=config["fuzzy"],
        whole_word=config["whole_word"],
        skip=config["skip"],
        debug=config["debug"],
    )
    dictionary = load_dictionary(config["dict"])
    tagger = Tagger(dictionary.entries, opts)
    for warning in dictionary.warnings:
        tagger.debug(f"skipped dictionary line {warning}")

    for _line, matches in tagger.tag_lines(stdin):
        stdout.write(format_line(matches))
    stdout.flush()


def main(argv=None):
    _reset_sigpipe()
    config = parse_args(argv)
    try:
        run(config, sys.stdin, sys.stdout)
    except (DictionaryError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
