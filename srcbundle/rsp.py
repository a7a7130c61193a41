#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Interactive helper that writes a response file for `srcbundle bundle`.

The answers are collected through small prompt state machines so the whole
flow can be driven by canned input.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Callable, List, Optional

from srcbundle.bundler import ENCODING, BundleOptions


RSP_NAME = "options.rsp"


# ============================================================
# Prompt state machine
# ============================================================

class PromptState(enum.Enum):
    AWAITING = "awaiting"
    VALID = "valid"
    INVALID = "invalid"


@dataclass
class Prompt:
    message: str
    retry: Optional[str] = None    # set => answer is required
    state: PromptState = PromptState.AWAITING
    value: str = ""

    @property
    def required(self) -> bool:
        return self.retry is not None

    def text(self) -> str:
        if self.state is PromptState.INVALID:
            return self.retry
        return self.message

    def feed(self, answer: Optional[str]) -> PromptState:
        answer = answer or ""
        if self.required and not answer.strip():
            self.state = PromptState.INVALID
        else:
            self.value = answer
            self.state = PromptState.VALID
        return self.state


def ask_prompt(prompt: Prompt, ask: Callable[[str], str]) -> str:
    while prompt.state is not PromptState.VALID:
        prompt.feed(ask(prompt.text()))
    return prompt.value


# ============================================================
# Collect & serialize
# ============================================================

def collect_options(ask: Callable[[str], str] = input) -> BundleOptions:
    language = ask_prompt(
        Prompt("Enter languages (e.g., 'cs, java' or 'all'): ",
               "Required! Languages: "), ask)
    output = ask_prompt(
        Prompt("Enter output file name/path: ", "Required! Output: "), ask)
    note = ask_prompt(Prompt("Add source notes? (y/n): "), ask)
    sort = ask_prompt(Prompt("Sort by [name/type]: "), ask)
    remove = ask_prompt(Prompt("Remove empty lines? (y/n): "), ask)
    author = ask_prompt(Prompt("Author name (optional): "), ask)

    return BundleOptions(
        language=language,
        output=output,
        note=note.lower() == "y",
        sort=sort or "name",
        remove_empty_lines=remove.lower() == "y",
        author=author or None,
    )


def rsp_lines(options: BundleOptions) -> List[str]:
    lines = [
        "bundle",
        f"--language {options.language}",
        f'--output "{options.output}"',
    ]
    if options.note:
        lines.append("--note")
    if options.remove_empty_lines:
        lines.append("--remove-empty-lines")
    lines.append(f"--sort {options.sort}")
    if options.author:
        lines.append(f'--author "{options.author}"')
    return lines


def write_rsp(options: BundleOptions, directory: Optional[str] = None) -> str:
    path = os.path.join(directory or os.getcwd(), RSP_NAME)
    with open(path, "w", encoding=ENCODING) as fh:
        fh.write("\n".join(rsp_lines(options)) + "\n")
    return path


def create_rsp(ask: Callable[[str], str] = input,
               directory: Optional[str] = None) -> int:
    print("=== Response File Creator ===")
    try:
        options = collect_options(ask)
    except EOFError:
        print()
        print("ERROR: Input ended before all required answers were given.")
        return 0

    write_rsp(options, directory)
    print(f"\nSUCCESS! '{RSP_NAME}' created.")
    print(f"To run: srcbundle @{RSP_NAME}")
    return 0
