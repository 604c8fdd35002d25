from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    EOF = "EOF"
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"
    COMMENT = "COMMENT"  # /_\
    EQUALS = "EQUALS"
    EQUALS_EQUALS = "EQUALS_EQUALS"
    ARROW = "ARROW"  # ->
    DOUBLE_ARROW = "DOUBLE_ARROW"  # =>
    TYPE_DECL = "TYPE_DECL"  # ::
    TYPE_START = "TYPE_START"  # [
    TYPE_END = "TYPE_END"  # ]
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    COMMA = "COMMA"
    SEMICOLON = "SEMICOLON"
    IF = "IF"
    WRITE = "WRITE"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int
    column: int


KEYWORDS = {
    "if": TokenType.IF,
    "write": TokenType.WRITE,
}

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.TYPE_START,
    "]": TokenType.TYPE_END,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
}
