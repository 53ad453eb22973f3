"""Interactive editing of an ArrayList followed by a dump."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from typing import TextIO

from arraylist.dump import dump
from arraylist.linkedlist import ArrayList, ListError

_COMMAND = re.compile(r"(.)\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)")

PROMPT = (
    "Type:\n"
    '\t"i", index and number to insert it\n'
    '\t"d", index and any number to delete it\n'
    '\t"q q" to quit.\n'
)


def parse_command(line: str) -> tuple[str, int, int] | None:
    """Split a line into (operation, index, value); None if it does not parse."""
    match = _COMMAND.match(line)
    if match is None:
        return None
    return match.group(1), int(match.group(2)), int(match.group(3))


def process(lst: ArrayList, lines: Iterable[str], out: TextIO) -> None:
    """Apply commands from ``lines`` until one fails to parse or is a quit."""
    out.write(PROMPT)
    for line in lines:
        command = parse_command(line)
        if command is None:
            break
        op, index, value = command
        if op == "q":
            break
        try:
            if op == "i":
                lst.insert(index, value)
                out.write("inserted\n")
            elif op == "d":
                lst.delete(index)
                out.write("deleted\n")
            else:
                out.write("Try again.\n")
        except ListError as exc:
            out.write(f"{exc}\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Edit a linked list and dump it.")
    parser.add_argument("--capacity", type=int, default=1)
    parser.add_argument("--graph", default="graph.txt")
    parser.add_argument("--html", default="my.html")
    parser.add_argument("--png", default=None, help="picture path; asked for if omitted")
    args = parser.parse_args(argv)

    lst = ArrayList(args.capacity)
    lines = iter(sys.stdin)
    process(lst, lines, sys.stdout)

    png_path = args.png
    if png_path is None:
        sys.stdout.write("Output file name: ")
        sys.stdout.flush()
        words = next(lines, "").split()
        name = words[0][:9] if words else ""
        png_path = f"pictures/{name}.png"

    dump(lst, args.graph, args.html, png_path)
    print("finish")
    return 0


if __name__ == "__main__":
    sys.exit(main())