# input.py
'''
Instance reader.

An instance is a stream of whitespace separated integers: the declared node
count first, then one pair per undirected edge until the end of the stream.

    4
    1 2
    2 3
    3 4
    4 1
'''
import re
from typing import Iterable, List, TextIO, Tuple

from eulerian.errors import InputFormatError


_INT_RE = re.compile(r"[+-]?[0-9]+\Z")


def _to_int(token: str, what: str) -> int:
    if not _INT_RE.match(token):
        raise InputFormatError(f"Invalid input file format. ({what}: {token!r} is not an integer)")
    return int(token)


def parse_tokens(tokens: Iterable[str]) -> Tuple[int, List[Tuple[int, int]]]:
    '''
    Parse an already tokenized instance.
    Returns (declared node count, list of (u, v) edges).
    '''
    it = iter(tokens)
    first = next(it, None)
    if first is None:
        raise InputFormatError("Invalid input file format. (missing node count)")
    declared = _to_int(first, "line 1")

    edges = []
    pending = None
    for token in it:
        # edge k sits on line k + 2 of a one-edge-per-line file
        value = _to_int(token, f"line {len(edges) + 2}")
        if pending is None:
            pending = value
        else:
            edges.append((pending, value))
            pending = None
    if pending is not None:
        raise InputFormatError(f"Invalid input file format. (line {len(edges) + 2}: edge has a single endpoint)")
    return declared, edges


def parse_text(text: str) -> Tuple[int, List[Tuple[int, int]]]:
    return parse_tokens(text.split())


def parse_stream(stream: TextIO) -> Tuple[int, List[Tuple[int, int]]]:
    return parse_tokens(token for line in stream for token in line.split())


def parse_file(path: str) -> Tuple[int, List[Tuple[int, int]]]:
    '''
    Read an instance file.
    Raises InputFormatError if the file cannot be opened or is malformed.
    '''
    try:
        with open(path, "r", encoding="utf-8") as f:
            return parse_stream(f)
    except OSError as exc:
        raise InputFormatError(f"Failed to open file \"{path}\". ({exc.strerror})") from exc
    except UnicodeDecodeError as exc:
        raise InputFormatError(f"Invalid input file format. (\"{path}\" is not a text file)") from exc
