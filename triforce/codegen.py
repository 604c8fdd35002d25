from __future__ import annotations

import logging
from typing import List

from . import ast
from .errors import UnsupportedNodeError

logger = logging.getLogger(__name__)

HEADER = "// Code generated by TriforceScript"
INDENT = "  "


class JSCodegen:
    """Renders TriforceScript statements as JavaScript source."""

    def __init__(self, statements: List[ast.Stmt]):
        self.statements = statements
        self.lines: List[str] = []

    def compile(self) -> str:
        self.lines = []
        self._emit(HEADER)
        self._emit("")
        for stmt in self.statements:
            self._emit(self._node(stmt, ""))
        logger.debug("Generated %d top-level statements", len(self.statements))
        return "".join(line + "\n" for line in self.lines)

    def _emit(self, line: str) -> None:
        self.lines.append(line)

    def _node(self, node: ast.Node, indent: str) -> str:
        if isinstance(node, ast.Comment):
            return f"{indent}// {node.text}"
        if isinstance(node, ast.TypeDeclaration):
            return f"{indent}let {node.name} = {self._node(node.value, '')};"
        if isinstance(node, ast.Assignment):
            return f"{indent}{node.name} = {self._node(node.value, '')};"
        if isinstance(node, ast.IfStatement):
            out = f"{indent}if ({self._node(node.condition, '')}) {self._block(node.then_block, indent)}"
            if node.else_block is not None:
                out += f" else {self._block(node.else_block, indent)}"
            return out
        if isinstance(node, ast.Block):
            return self._block(node, indent)
        if isinstance(node, ast.WriteStatement):
            args = ", ".join(self._node(arg, "") for arg in node.arguments)
            return f"{indent}console.log({args});"
        if isinstance(node, ast.BinaryExpression):
            return self._binary(node)
        if isinstance(node, ast.Identifier):
            return node.name
        if isinstance(node, ast.StringLiteral):
            return f'"{node.value}"'
        raise UnsupportedNodeError(type(node).__name__)

    def _block(self, block: ast.Block, indent: str) -> str:
        inner = "\n".join(self._node(stmt, indent + INDENT) for stmt in block.statements)
        return f"{{\n{inner}\n{indent}}}"

    def _binary(self, expr: ast.BinaryExpression) -> str:
        left = self._node(expr.left, "")
        right = self._node(expr.right, "")
        if expr.operator == "->":
            return f'{left} + " " + {right}'
        if expr.operator == "==":
            return f"{left} === {right}"
        return f"({left} {expr.operator} {right})"


def generate_javascript(statements: List[ast.Stmt]) -> str:
    return JSCodegen(statements).compile()
