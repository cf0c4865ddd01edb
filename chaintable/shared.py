import sys
from typing import Any, TextIO


def fprintf(out: TextIO, format: str, *args: Any):
    out.write(format.format(*args))


def printf(format: str, *args: Any):
    fprintf(sys.stdout, format, *args)


def printf_err(format: str, *args: Any):
    fprintf(sys.stderr, format, *args)
