#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI entrypoint for the srcbundle toolkit.

This module defines:

    srcbundle bundle      → concatenates matching source files
    srcbundle create-rsp  → interactive response file builder
    srcbundle @file.rsp   → replays arguments stored in a response file
"""

from __future__ import annotations

import argparse
import shlex
from typing import List, Optional

from srcbundle.bundler import BundleOptions, bundle
from srcbundle.rsp import create_rsp


# ============================================================
# Response file parsing
# ============================================================

def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def response_line_tokens(line: str) -> List[str]:
    """
    Split one response file line into argument tokens.

    Flag lines are split once into flag and value, so values may contain
    spaces or backslashes without quoting.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return []
    if line.startswith("-"):
        flag, _, value = line.partition(" ")
        value = value.strip()
        return [flag, _unquote(value)] if value else [flag]
    return shlex.split(line)


class BundleArgumentParser(argparse.ArgumentParser):

    def convert_arg_line_to_args(self, arg_line):
        return response_line_tokens(arg_line)


# ============================================================
# Handlers
# ============================================================

def run_bundle(args: argparse.Namespace) -> int:
    options = BundleOptions(
        language=args.language,
        output=args.output,
        note=args.note,
        sort=args.sort,
        remove_empty_lines=args.remove_empty_lines,
        author=args.author,
    )
    result = bundle(options)
    print(result.message())
    return 0


def run_create_rsp(args: argparse.Namespace) -> int:
    return create_rsp()


# ============================================================
# Parser
# ============================================================

def build_parser() -> argparse.ArgumentParser:
    p = BundleArgumentParser(
        prog="srcbundle",
        description="File Bundler CLI Tool",
        fromfile_prefix_chars="@",
    )
    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    b = sub.add_parser("bundle", help="Bundle code files into a single file")
    b.add_argument("-l", "--language", required=True,
                   help="Required: programming languages (e.g., 'cs', 'java', 'js') or 'all'")
    b.add_argument("-o", "--output", default=None,
                   help="File path and name for the bundled file")
    b.add_argument("-n", "--note", action="store_true",
                   help="Add a comment with the source file's relative path")
    b.add_argument("-s", "--sort", default="name",
                   help="Sort files by 'name' (alphabetical) or 'type' (extension)")
    b.add_argument("-r", "--remove-empty-lines", action="store_true",
                   help="Remove empty lines from the source code")
    b.add_argument("-a", "--author", default=None,
                   help="Add the name of the author at the top of the bundle")
    b.set_defaults(handler=run_bundle)

    r = sub.add_parser("create-rsp",
                       help="Interactive helper to create a response file")
    r.set_defaults(handler=run_create_rsp)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    """
    Dispatcher for the `srcbundle` command.
    """
    args = build_parser().parse_args(argv)
    return args.handler(args)


# Allow running: python -m srcbundle.cli
if __name__ == "__main__":
    raise SystemExit(main())
