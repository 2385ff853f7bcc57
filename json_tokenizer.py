# json_tokenizer.py
# Character-level tokenizer for the JSON syntax validator.
#
# =============================================================================
#  TOKENIZER: SINGLE PASS, FOUR CAPTURE MODES
# =============================================================================
#
# The tokenizer does not classify tokens. It only cuts the input into spans
# and leaves classification to the validator, which infers the kind of each
# token from its first and last characters.
#
# Capture modes:
# 1. TOP     - whitespace is skipped, punctuation is emitted on its own and
#              anything else accumulates into a bare literal.
# 2. STRING  - everything up to the next double quote is kept verbatim.
#              Escapes are not interpreted, so \" ends the string.
# 3. OBJECT  - every "{" after the root one opens an opaque span that is
#              re-tokenized later by the validator.
# 4. ARRAY   - "[" opens an opaque span whose interior the validator splits
#              on top-level commas.
#
# By default a span closes on the first closer of its kind, which is only
# reliable for one level of nesting. track_depth=True counts openers and
# closers (outside quotes) so a span closes on its matching closer instead.
# =============================================================================

from enum import Enum
from typing import List, Optional

# ---------------------------------------------------------------------------
# STRUCTURAL TOKENS
# ---------------------------------------------------------------------------
class Structural(str, Enum):
    """Closed set of JSON punctuation marks."""
    OBJECT_START = "{"
    OBJECT_END   = "}"
    ARRAY_START  = "["
    ARRAY_END    = "]"
    COLON        = ":"
    COMMA        = ","


_STRUCTURAL_BY_TEXT = {member.value: member for member in Structural}

_QUOTE      = '"'
_WHITESPACE = frozenset(" \t\r\n")


def structural_kind(text: str) -> Optional[Structural]:
    """Return the Structural member spelled by text, or None."""
    return _STRUCTURAL_BY_TEXT.get(text)


def is_quoted(text: str) -> bool:
    # Escapes are not interpreted, so a string holds exactly two quotes
    return (len(text) >= 2 and text[0] == _QUOTE and text[-1] == _QUOTE
            and text.count(_QUOTE) == 2)

# ---------------------------------------------------------------------------
# TOKEN RECORD
# ---------------------------------------------------------------------------
class Token(str):
    """
    Immutable span of source text.

    Kinds are not tagged: a token starting with '{' is a nested object span,
    one wrapped in quotes is a string, and so on.
    """
    __slots__ = ()

    def __repr__(self):
        return f"Token({str.__repr__(self)})"


class _Mode(Enum):
    TOP    = "top"
    STRING = "string"
    OBJECT = "object"
    ARRAY  = "array"


_SPAN_DELIMITERS = {
    _Mode.OBJECT: (Structural.OBJECT_START.value, Structural.OBJECT_END.value),
    _Mode.ARRAY:  (Structural.ARRAY_START.value, Structural.ARRAY_END.value),
}


def _emit(tokens: List[Token], buf: List[str]) -> None:
    if buf:
        tokens.append(Token("".join(buf)))
        buf.clear()

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def tokenize(text: str, *, track_depth: bool = False) -> List[Token]:
    """
    Cut text into an ordered list of tokens.

    Never raises. Malformed input produces tokens the validator rejects, and
    whatever is still pending at end of input (an unterminated string or
    span, a trailing literal) is emitted as a final token.
    """
    tokens: List[Token] = []
    buf: List[str] = []
    mode = _Mode.TOP
    seen_root = False
    depth = 0
    in_quote = False

    for ch in text:
        if mode is _Mode.STRING:
            buf.append(ch)
            if ch == _QUOTE:
                _emit(tokens, buf)
                mode = _Mode.TOP
            continue

        if mode is not _Mode.TOP:
            buf.append(ch)
            opener, closer = _SPAN_DELIMITERS[mode]
            if not track_depth:
                closed = ch == closer
            else:
                closed = False
                if ch == _QUOTE:
                    in_quote = not in_quote
                elif in_quote:
                    pass
                elif ch == opener:
                    depth += 1
                elif ch == closer:
                    depth -= 1
                    closed = depth == 0
            if closed:
                _emit(tokens, buf)
                mode = _Mode.TOP
            continue

        if ch in _WHITESPACE:
            _emit(tokens, buf)
            continue

        if ch == _QUOTE:
            _emit(tokens, buf)
            buf.append(ch)
            mode = _Mode.STRING
            continue

        kind = structural_kind(ch)
        if kind is None:
            buf.append(ch)
            continue

        _emit(tokens, buf)
        if kind is Structural.OBJECT_START and not seen_root:
            seen_root = True
            tokens.append(Token(ch))
        elif kind is Structural.OBJECT_START or kind is Structural.ARRAY_START:
            mode = _Mode.OBJECT if kind is Structural.OBJECT_START else _Mode.ARRAY
            buf.append(ch)
            depth = 1
            in_quote = False
        else:
            tokens.append(Token(ch))

    _emit(tokens, buf)
    return tokens
