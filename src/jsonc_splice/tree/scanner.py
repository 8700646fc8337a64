"""Tokenizer for JSON-with-comments text.

Produces a flat list of ``Token`` objects with source offsets.  Whitespace,
``// line`` comments and ``/* block */`` comments are skipped; they never
become tokens, which is what lets the parser report spans that exclude them.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from jsonc_splice.errors import DocumentSyntaxError

# Compiled regex patterns (module-level, compiled once)

_WHITESPACE = re.compile(r"[ \t\r\n\ufeff]+")

# Line comments end at the first CR or LF
_LINE_COMMENT = re.compile(r"//[^\r\n]*")

# RFC 8259 number grammar
_NUMBER = re.compile(r"-?(?:0|[1-9]\d*)(\.\d+)?([eE][+-]?\d+)?")

# Bare words; only true/false/null are valid, the rest are reported as errors
_WORD = re.compile(r"[A-Za-z_$][\w$]*")

_PUNCTUATION = {
    "{": "open_brace",
    "}": "close_brace",
    "[": "open_bracket",
    "]": "close_bracket",
    ":": "colon",
    ",": "comma",
}

_KEYWORDS: dict[str, tuple[str, Any]] = {
    "true": ("true", True),
    "false": ("false", False),
    "null": ("null", None),
}


class TokenKind(StrEnum):
    OPEN_BRACE = auto()
    CLOSE_BRACE = auto()
    OPEN_BRACKET = auto()
    CLOSE_BRACKET = auto()
    COLON = auto()
    COMMA = auto()
    STRING = auto()
    NUMBER = auto()
    TRUE = auto()
    FALSE = auto()
    NULL = auto()
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical token.

    Attributes:
        kind:   Token kind.
        offset: Offset of the first character.
        length: Number of characters in the token.
        value:  Decoded value for STRING, NUMBER and keyword tokens.
    """

    kind: TokenKind
    offset: int
    length: int
    value: Any = None

    @property
    def end(self) -> int:
        return self.offset + self.length


def _skip_trivia(text: str, pos: int) -> int:
    """Return the offset of the next character that is not whitespace or comment."""
    size = len(text)
    while pos < size:
        match = _WHITESPACE.match(text, pos)
        if match:
            pos = match.end()
            continue
        comment = _LINE_COMMENT.match(text, pos)
        if comment:
            pos = comment.end()
            continue
        if text.startswith("/*", pos):
            close = text.find("*/", pos + 2)
            if close == -1:
                raise DocumentSyntaxError("unterminated block comment", pos)
            pos = close + 2
            continue
        break
    return pos


def _scan_string(text: str, pos: int) -> Token:
    size = len(text)
    cursor = pos + 1
    while cursor < size:
        ch = text[cursor]
        if ch == "\\":
            cursor += 2
            continue
        if ch == '"':
            raw = text[pos : cursor + 1]
            try:
                value = json.loads(raw, strict=False)
            except json.JSONDecodeError as exc:
                raise DocumentSyntaxError(f"invalid string literal ({exc.msg})", pos) from exc
            return Token(TokenKind.STRING, pos, len(raw), value)
        if ch == "\n":
            break
        cursor += 1
    raise DocumentSyntaxError("unterminated string", pos)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, ending with a single EOF token.

    Args:
        text: JSONC document text.

    Returns:
        Tokens in source order.  The final token always has kind EOF and
        offset ``len(text)``.

    Raises:
        DocumentSyntaxError: On unterminated strings or comments and on
            characters that cannot start any token.
    """
    tokens: list[Token] = []
    pos = _skip_trivia(text, 0)
    size = len(text)

    while pos < size:
        ch = text[pos]

        if ch in _PUNCTUATION:
            tokens.append(Token(TokenKind(_PUNCTUATION[ch]), pos, 1))
            pos += 1
        elif ch == '"':
            token = _scan_string(text, pos)
            tokens.append(token)
            pos = token.end
        elif ch == "-" or ch.isdigit():
            match = _NUMBER.match(text, pos)
            if not match:
                raise DocumentSyntaxError("invalid number", pos)
            literal = match.group(0)
            is_float = match.group(1) is not None or match.group(2) is not None
            value: Any = float(literal) if is_float else int(literal)
            tokens.append(Token(TokenKind.NUMBER, pos, len(literal), value))
            pos = match.end()
        else:
            match = _WORD.match(text, pos)
            if not match or match.group(0) not in _KEYWORDS:
                raise DocumentSyntaxError(f"unexpected character {ch!r}", pos)
            kind, value = _KEYWORDS[match.group(0)]
            tokens.append(Token(TokenKind(kind), pos, match.end() - pos, value))
            pos = match.end()

        pos = _skip_trivia(text, pos)

    tokens.append(Token(TokenKind.EOF, size, 0))
    return tokens
