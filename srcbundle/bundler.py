#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
srcbundle.bundler
=================

Concatenate source files from a directory tree into one bundle file.

- Language tokens resolved through a static extension table
- bin / obj / debug directories skipped
- Optional source notes, author header and blank-line removal
- Failures reported as result values, never raised to the caller
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional

from tqdm import tqdm


ENCODING = "utf-8"
SOURCE_ENCODING = "utf-8-sig"    # drops a leading BOM
EXCLUDED_DIRS = frozenset({"bin", "obj", "debug"})

EXTENSION_TABLE: Mapping[str, str] = MappingProxyType({
    "cs": ".cs", "csharp": ".cs",
    "java": ".java",
    "py": ".py", "python": ".py",
    "js": ".js", "javascript": ".js",
    "ts": ".ts", "typescript": ".ts",
    "html": ".html", "css": ".css",
    "cpp": ".cpp", "h": ".h",
    "sql": ".sql", "json": ".json",
})


# ============================================================
# Options & results
# ============================================================

@dataclass(frozen=True)
class BundleOptions:
    language: str
    output: Optional[str] = None
    note: bool = False
    sort: str = "name"
    remove_empty_lines: bool = False
    author: Optional[str] = None


class ResultKind(enum.Enum):
    SUCCESS = "success"
    NO_MATCHES = "no_matches"
    MISSING_OUTPUT = "missing_output"
    DIRECTORY_NOT_FOUND = "directory_not_found"
    PERMISSION_DENIED = "permission_denied"
    ERROR = "error"


@dataclass(frozen=True)
class BundleResult:
    kind: ResultKind
    count: int = 0
    output: Optional[str] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    def message(self) -> str:
        if self.kind is ResultKind.SUCCESS:
            return f"SUCCESS: {self.count} files bundled into {self.output}"
        if self.kind is ResultKind.ERROR:
            return f"ERROR: {self.detail}"
        return _MESSAGES[self.kind]


_MESSAGES = {
    ResultKind.NO_MATCHES: "No matching files found for the selected language(s).",
    ResultKind.MISSING_OUTPUT: "ERROR: Output file path is required.",
    ResultKind.DIRECTORY_NOT_FOUND: "ERROR: Invalid directory path.",
    ResultKind.PERMISSION_DENIED: "ERROR: No permission to write to this location.",
}


# ============================================================
# Enumeration & filtering
# ============================================================

def _raise(err: OSError) -> None:
    raise err


def iter_files(root: str) -> Iterator[str]:
    for folder, _, files in os.walk(root, onerror=_raise):
        for name in files:
            yield os.path.abspath(os.path.join(folder, name))


def is_excluded_dir(path: str, root: str) -> bool:
    """
    True when a directory segment of *path* (relative to *root*) is one of
    EXCLUDED_DIRS. Segments are matched whole, ignoring case.
    """
    rel = os.path.relpath(path, root)
    segments = rel.split(os.sep)[:-1]
    return any(seg.lower() in EXCLUDED_DIRS for seg in segments)


def resolve_extensions(language: str,
                       table: Mapping[str, str] = EXTENSION_TABLE) -> List[str]:
    if language.lower() == "all":
        return list(dict.fromkeys(table.values()))

    extensions = []
    for token in language.split(","):
        token = token.strip().lower()
        if token in table:
            extensions.append(table[token])
    return extensions


def select_files(root: str, output_name: str,
                 extensions: Iterable[str]) -> List[str]:
    wanted = set(extensions)
    selected = []
    for path in iter_files(root):
        if is_excluded_dir(path, root):
            continue
        # never bundle the bundle
        if path.endswith(output_name):
            continue
        if os.path.splitext(path)[1].lower() in wanted:
            selected.append(path)
    return selected


# ============================================================
# Sorting
# ============================================================

def sort_files(paths: Iterable[str], mode: str = "name") -> List[str]:
    if mode.lower() == "type":
        return sorted(paths, key=lambda p: (os.path.splitext(p)[1],
                                            os.path.basename(p)))
    return sorted(paths, key=os.path.basename)


# ============================================================
# Writing
# ============================================================

def read_lines(path: str) -> List[str]:
    with open(path, "r", encoding=SOURCE_ENCODING, errors="ignore") as fh:
        return [line.rstrip("\n") for line in fh]


def write_bundle(paths: List[str], output: str, root: str,
                 note: bool = False, remove_empty_lines: bool = False,
                 author: Optional[str] = None) -> None:
    with open(output, "w", encoding=ENCODING, newline="\n") as out:
        if author:
            out.write(f"// Author: {author}\n")
            out.write("\n")

        for path in tqdm(paths, desc="bundling", unit="file", disable=None):
            if note:
                rel = os.path.relpath(path, root)
                out.write(f"// --- Source: {rel} ---\n")

            for line in read_lines(path):
                if remove_empty_lines and not line.strip():
                    continue
                out.write(line + "\n")
            out.write("\n")


# ============================================================
# Pipeline
# ============================================================

def bundle(options: BundleOptions, root: Optional[str] = None,
           table: Mapping[str, str] = EXTENSION_TABLE) -> BundleResult:
    """
    Run the full bundle pipeline under *root* (default: cwd).

    A relative output path is taken relative to *root*. When nothing
    matches, the output file is left untouched.
    """
    if not options.output:
        return BundleResult(ResultKind.MISSING_OUTPUT)

    try:
        root = os.path.abspath(root or os.getcwd())
        output = os.path.abspath(os.path.join(root, options.output))

        extensions = resolve_extensions(options.language, table)
        files = select_files(root, os.path.basename(output), extensions)
        files = sort_files(files, options.sort)

        if not files:
            return BundleResult(ResultKind.NO_MATCHES, output=output)

        write_bundle(files, output, root,
                     note=options.note,
                     remove_empty_lines=options.remove_empty_lines,
                     author=options.author)
    except (FileNotFoundError, NotADirectoryError):
        return BundleResult(ResultKind.DIRECTORY_NOT_FOUND)
    except (PermissionError, IsADirectoryError):
        return BundleResult(ResultKind.PERMISSION_DENIED)
    except Exception as e:
        return BundleResult(ResultKind.ERROR, detail=str(e))

    return BundleResult(ResultKind.SUCCESS, count=len(files), output=output)
