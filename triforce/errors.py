from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .tokens import Token, TokenType


class CompileError(Exception):
    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line


class ScanError(CompileError):
    def __init__(self, message: str, line: int, char: Optional[str] = None):
        super().__init__(message, line)
        self.char = char


class ParseError(CompileError):
    def __init__(
        self,
        message: str,
        token: Optional["Token"] = None,
        expected: Optional["TokenType"] = None,
    ):
        super().__init__(message, token.line if token is not None else None)
        self.token = token
        self.expected = expected


class UnsupportedNodeError(ParseError):
    def __init__(self, node_type: str):
        super().__init__(f"Unsupported node type: {node_type}")
        self.node_type = node_type
