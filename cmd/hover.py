#!/usr/bin/env python3

import argparse
import json
import logging
import os.path
import sys

try:
    # Cython provides PKGLIBDIR.
    sys.path.insert(0, PKGLIBDIR)
except NameError:
    # Extend sys.path to include the parent directory. This is necessary because this
    # script resides in a subdirectory, and we need to import shared modules located
    # in the project's top-level 'lib' directory.
    sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../lib'))

import _dockhover as _dockhover
import dockhover as dockhover


## Constants ##

logger = logging.getLogger(__name__)


## Functions ##

def position_parse(text):
    """Parse LINE:CHARACTER into a Position."""
    try:
        (line, character) = text.split(":")
        return dockhover.Position(int(line), int(character))
    except ValueError:
        raise argparse.ArgumentTypeError(f"not LINE:CHARACTER: {text}")


## Main ##

def main(argv=None):
    ap = argparse.ArgumentParser(
        description="Show hover information for a position in a Dockerfile.",
        epilog="""Prints the documentation of the instruction keyword or escape directive
                  at the position, or the value of the build variable there. Prints nothing
                  if there is nothing to show. Lines and characters count from zero.""")

    ap.add_argument("file", metavar="FILE",
                    help="Dockerfile to read, or - for standard input")
    ap.add_argument("position", metavar="LINE:CHARACTER", type=position_parse,
                    help="zero-based position to query")
    ap.add_argument("--docs", metavar="DIR",
                    help="directory of NAME.md files overriding built-in documentation")
    ap.add_argument("--json", action="store_true",
                    help="print {\"contents\": ...} or null")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="print extra chatter (can be repeated)")

    # Parse arguments.
    cli = ap.parse_args(argv)
    _dockhover.log_init(cli.verbose)

    # Read the Dockerfile.
    try:
        if cli.file == "-":
            # Bytes, so CR and CRLF line endings survive.
            text = sys.stdin.buffer.read().decode("utf-8")
        else:
            with open(cli.file, "rt", encoding="utf-8", newline="") as fp:
                text = fp.read()
    except OSError as e:
        logger.error(f"can't read {cli.file}: {e}")
        return 1

    documentation = dockhover.Markdown_Documentation(cli.docs)
    result = dockhover.hover(text, cli.position, documentation)
    logger.info(f"hover at {cli.position.line}:{cli.position.character}: {result}")

    if cli.json:
        print(json.dumps(None if result is None else result._asdict()))
    elif result is not None:
        print(result.contents)
    return 0


if __name__ == "__main__":
    sys.exit(main())
