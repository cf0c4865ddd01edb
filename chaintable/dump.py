from dataclasses import dataclass
import io
import re
from typing import Any, TextIO

from .shared import fprintf, printf
from .table import Table

_HEADER = re.compile(r"^Hash Table\. Chains:(\d+)\tElements: (\d+)$")
_CHAIN = re.compile(r"^(\d+):\t(.*)$")


class DumpFormatError(ValueError):
    pass


@dataclass
class ParsedDump:
    bucket_count: int
    used: int
    chains: list[list[str]]


def write_table(table: Table[Any], out: TextIO):
    fprintf(
        out,
        "Hash Table. Chains:{0:d}\tElements: {1:d}\n",
        table.bucket_count,
        table.used,
    )
    for index, chain in enumerate(table.buckets):
        fprintf(out, "{0:d}:\t", index)
        for value in chain:
            fprintf(out, "{0}\t", value)
        fprintf(out, "\n")


def dump_table(table: Table[Any]) -> str:
    out = io.StringIO()
    write_table(table, out)
    return out.getvalue()


def print_table(table: Table[Any]):
    printf("{0:s}", dump_table(table))


def parse_dump(text: str) -> ParsedDump:
    """Read back the text produced by `write_table`.

    Values come back as the strings they were rendered to; a value that
    itself contains a tab or a newline cannot be recovered.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise DumpFormatError("empty dump")

    header = _HEADER.match(lines[0])
    if header is None:
        raise DumpFormatError("wrong dump header", lines[0])
    bucket_count = int(header.group(1))
    used = int(header.group(2))

    chain_lines = lines[1:]
    if len(chain_lines) != bucket_count:
        raise DumpFormatError(
            "chain count mismatch", bucket_count, len(chain_lines)
        )

    chains: list[list[str]] = []
    for expected, line in enumerate(chain_lines):
        match = _CHAIN.match(line)
        if match is None or int(match.group(1)) != expected:
            raise DumpFormatError("wrong chain line", expected, line)

        body = match.group(2)
        if body and not body.endswith("\t"):
            raise DumpFormatError("chain line should end with a tab", line)
        chains.append(body.split("\t")[:-1] if body else [])

    if sum(len(chain) for chain in chains) != used:
        raise DumpFormatError("element count mismatch", used)

    return ParsedDump(bucket_count=bucket_count, used=used, chains=chains)
