from __future__ import annotations

import logging
import string
from typing import List, Optional

from .errors import ScanError
from .tokens import KEYWORDS, SINGLE_CHAR_TOKENS, Token, TokenType

logger = logging.getLogger(__name__)

IDENT_START = string.ascii_letters + "_"
IDENT_CHARS = IDENT_START + string.digits
WHITESPACE = " \t\r\n"
COMMENT_MARKER = "/_\\"


def tokenize(source: str) -> List[Token]:
    """Scan TriforceScript source into a token list ending with an EOF token.

    Line and column are the counters as they stand once a token has been
    consumed: the column keeps counting from the previous token instead of
    being reset at the start of each token.
    """
    tokens: List[Token] = []
    i = 0
    start = 0
    line = 1
    col = 1

    def advance() -> str:
        nonlocal i, line, col
        ch = source[i]
        i += 1
        if ch == "\n":
            line += 1
            col = 1
        else:
            col += 1
        return ch

    def match(expected: str) -> bool:
        if i < len(source) and source[i] == expected:
            advance()
            return True
        return False

    def peek(offset: int = 0) -> str:
        idx = i + offset
        return source[idx] if idx < len(source) else ""

    def add(type_: TokenType, value: Optional[str] = None) -> None:
        text = source[start:i] if value is None else value
        tokens.append(Token(type_, text, line, col))

    while i < len(source):
        start = i
        ch = advance()
        if ch in WHITESPACE:
            continue
        if ch in SINGLE_CHAR_TOKENS:
            add(SINGLE_CHAR_TOKENS[ch])
            continue
        if ch == ":":
            # a lone ':' is dropped
            if match(":"):
                add(TokenType.TYPE_DECL)
            continue
        if ch == "=":
            if match("="):
                add(TokenType.EQUALS_EQUALS)
            elif match(">"):
                add(TokenType.DOUBLE_ARROW)
            else:
                add(TokenType.EQUALS)
            continue
        if ch == "-":
            # a lone '-' is dropped
            if match(">"):
                add(TokenType.ARROW)
            continue
        if ch == "/":
            if match("_") and match("\\"):
                while i < len(source) and source[i] != "\n":
                    advance()
                add(TokenType.COMMENT, source[start + len(COMMENT_MARKER) : i].strip())
            continue
        if ch == '"':
            while i < len(source) and source[i] != '"':
                advance()
            if i >= len(source):
                raise ScanError(f"Unterminated string at line {line}", line)
            advance()  # closing quote
            add(TokenType.STRING, source[start + 1 : i - 1])
            continue
        if ch in string.digits:
            while peek() and peek() in string.digits:
                advance()
            if peek() == "." and peek(1) and peek(1) in string.digits:
                advance()
                while peek() and peek() in string.digits:
                    advance()
            add(TokenType.NUMBER)
            continue
        if ch in IDENT_START:
            while peek() and peek() in IDENT_CHARS:
                advance()
            add(KEYWORDS.get(source[start:i], TokenType.IDENTIFIER))
            continue
        raise ScanError(f"Unexpected character '{ch}' at line {line}", line, char=ch)

    tokens.append(Token(TokenType.EOF, "", line, col))
    logger.debug("Scanned %d tokens over %d lines", len(tokens), line)
    return tokens
