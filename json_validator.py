# json_validator.py
# Structural validator and command-line entry point for JSON syntax checks.
#
# =============================================================================
#  VALIDATOR: FOUR-STATE MACHINE OVER A FLAT TOKEN LIST
# =============================================================================
#
# The validator answers one question - is this text a well-formed JSON
# object? - and never builds a value. It consumes the token list produced by
# json_tokenizer and walks the interior of the root object with four states:
#
#   EXPECT_KEY -> EXPECT_COLON -> EXPECT_VALUE -> EXPECT_COMMA_OR_END
#        ^                                              |
#        +-------------------- "," --------------------+
#
# A value that is itself an object span is re-tokenized and validated as a
# complete object, so recursion depth equals object nesting depth.
#
# Number rule: only unsigned integers without a leading zero. The literal 0
# is rejected too unless allow_zero=True.
#
# Every failure is reported as False. Nothing in this module raises for
# malformed input.
# =============================================================================

import argparse
import sys
from enum import Enum
from typing import List, Optional, Sequence

from json_tokenizer import Structural, is_quoted, structural_kind, tokenize

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
DEPTH_LIMIT_DEFAULT = 19       # Matches JSON_checker - bounds the recursion

_DIGITS   = frozenset("0123456789")
_LITERALS = frozenset(("true", "false", "null"))


class _State(Enum):
    EXPECT_KEY          = "key"
    EXPECT_COLON        = "colon"
    EXPECT_VALUE        = "value"
    EXPECT_COMMA_OR_END = "comma"

# ---------------------------------------------------------------------------
# TOKEN PREDICATES
# ---------------------------------------------------------------------------
def is_valid_key(token: str) -> bool:
    return structural_kind(token) is None and is_quoted(token)


def _is_integer(token: str, allow_zero: bool) -> bool:
    if token == "0":
        return allow_zero
    if token[0] == "0":
        return False
    return all(c in _DIGITS for c in token)


def _split_elements(interior: str) -> Optional[List[str]]:
    """
    Split an array interior on top-level commas.

    Commas inside quotes or inside nested brackets and braces stay with
    their element. Returns None when brackets and braces outside quotes do
    not balance.
    """
    parts: List[str] = []
    buf: List[str] = []
    depth = 0
    in_quote = False
    for ch in interior:
        if ch == '"':
            in_quote = not in_quote
        elif not in_quote:
            if ch in "[{":
                depth += 1
            elif ch in "]}":
                depth -= 1
                if depth < 0:
                    return None
            elif ch == "," and depth == 0:
                parts.append("".join(buf))
                buf = []
                continue
        buf.append(ch)
    if depth != 0 or in_quote:
        return None
    parts.append("".join(buf))
    return parts

# ---------------------------------------------------------------------------
# VALUE CHECK
# ---------------------------------------------------------------------------
def _check_value(token: str, depth: int, max_depth: int, allow_zero: bool,
                 track_depth: bool, objects_allowed: bool) -> bool:
    """
    Dispatch on the shape of the token.

    Object spans are only accepted where objects_allowed is set: always in
    an object's value position, and inside arrays only when depth tracking
    makes the captured span trustworthy.
    """
    if not token or structural_kind(token) is not None:
        return False
    first, last = token[0], token[-1]

    if first == Structural.OBJECT_START.value:
        if not objects_allowed:
            return False
        nested = tokenize(token, track_depth=track_depth)
        return _check_object(nested, depth + 1, max_depth, allow_zero, track_depth)
    if is_quoted(token):
        return True
    if first in _DIGITS:
        return _is_integer(token, allow_zero)
    if first == Structural.ARRAY_START.value and last == Structural.ARRAY_END.value:
        if depth + 1 > max_depth:
            return False
        elements = _split_elements(token[1:-1])
        if elements is None:
            return False
        for element in elements:
            element = element.strip()
            if element and not _check_value(element, depth + 1, max_depth, allow_zero,
                                            track_depth, objects_allowed=track_depth):
                return False
        return True
    return token in _LITERALS

# ---------------------------------------------------------------------------
# OBJECT CHECK
# ---------------------------------------------------------------------------
def _check_object(tokens: Sequence[str], depth: int, max_depth: int,
                  allow_zero: bool, track_depth: bool) -> bool:
    if depth > max_depth:
        return False
    if (len(tokens) < 2
            or structural_kind(tokens[0]) is not Structural.OBJECT_START
            or structural_kind(tokens[-1]) is not Structural.OBJECT_END):
        return False
    if len(tokens) == 2:
        return True

    state = _State.EXPECT_KEY
    for token in tokens[1:-1]:
        if state is _State.EXPECT_KEY:
            if not is_valid_key(token):
                return False
            state = _State.EXPECT_COLON
        elif state is _State.EXPECT_COLON:
            if structural_kind(token) is not Structural.COLON:
                return False
            state = _State.EXPECT_VALUE
        elif state is _State.EXPECT_VALUE:
            if not _check_value(token, depth, max_depth, allow_zero, track_depth,
                                objects_allowed=True):
                return False
            state = _State.EXPECT_COMMA_OR_END
        else:
            if structural_kind(token) is not Structural.COMMA:
                return False
            state = _State.EXPECT_KEY

    # A trailing comma leaves us in EXPECT_KEY, a dangling key in EXPECT_COLON
    # or EXPECT_VALUE.
    return state is _State.EXPECT_COMMA_OR_END

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def is_valid_value(token: str, *, max_depth: int = DEPTH_LIMIT_DEFAULT,
                   allow_zero: bool = False, track_depth: bool = False) -> bool:
    """Check a single value token: string, integer, array, true, false or null."""
    try:
        return _check_value(token, 0, max_depth, allow_zero, track_depth,
                            objects_allowed=track_depth)
    except RecursionError:
        # max_depth is above what the interpreter stack can hold
        return False


def is_valid_object(tokens: Sequence[str], *, max_depth: int = DEPTH_LIMIT_DEFAULT,
                    allow_zero: bool = False, track_depth: bool = False) -> bool:
    """
    Check a token list against the JSON object grammar.

    The list must open with '{' and close with '}'. Exactly those two tokens
    form the empty object.
    """
    try:
        return _check_object(tokens, 0, max_depth, allow_zero, track_depth)
    except RecursionError:
        # max_depth is above what the interpreter stack can hold
        return False


def validate(content: str, *, max_depth: int = DEPTH_LIMIT_DEFAULT,
             allow_zero: bool = False, track_depth: bool = False) -> bool:
    """
    Return True when content is a well-formed JSON object.

    Pure function: no state survives between calls, so the same text always
    gets the same verdict.
    """
    tokens = tokenize(content, track_depth=track_depth)
    return is_valid_object(tokens, max_depth=max_depth, allow_zero=allow_zero,
                           track_depth=track_depth)

# ---------------------------------------------------------------------------
# FILE LOADING
# ---------------------------------------------------------------------------
def read_content(path: str) -> str:
    """
    Read path line by line and join the lines without their terminators.

    An unreadable file is reported on stderr and read as the empty string,
    which validate() rejects.
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return "".join(line.rstrip("\r\n") for line in fh)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return ""


def validate_file(path: str, **options) -> bool:
    return validate(read_content(path), **options)

# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _cli(argv: List[str]) -> int:
    """
    Command-line interface for validation runs.

    Exit code 0 when the file holds a valid object, 1 otherwise. An
    unreadable file counts as invalid.
    """
    ap = argparse.ArgumentParser(description="JSON syntax validator")
    ap.add_argument("file", help="JSON file to verify")
    ap.add_argument("--debug", action="store_true", help="dump token stream and exit")
    ap.add_argument("--max-depth", type=int, default=DEPTH_LIMIT_DEFAULT,
                    help="reject objects and arrays nested deeper than this")
    ap.add_argument("--allow-zero", action="store_true",
                    help="accept the number literal 0")
    ap.add_argument("--track-depth", action="store_true",
                    help="match nested braces and brackets by depth")
    args = ap.parse_args(argv)

    data = read_content(args.file)

    if args.debug:
        for tok in tokenize(data, track_depth=args.track_depth):
            print(tok)
        return 0

    if validate(data, max_depth=args.max_depth, allow_zero=args.allow_zero,
                track_depth=args.track_depth):
        print("OK")
        return 0
    print(f"Invalid JSON: {args.file}", file=sys.stderr)
    return 1


def main() -> int:
    return _cli(sys.argv[1:])

# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(_cli(sys.argv[1:]))
