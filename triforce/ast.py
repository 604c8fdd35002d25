from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union


class Stmt:
    pass


class Expr:
    pass


@dataclass
class Comment(Stmt):
    text: str


@dataclass
class TypeDeclaration(Stmt):
    name: str
    type_name: str  # documentation only, dropped by codegen
    value: "Expr"


@dataclass
class Assignment(Stmt):
    name: str
    value: "Expr"


@dataclass
class Block:
    statements: List[Stmt]


@dataclass
class IfStatement(Stmt):
    condition: "Expr"
    then_block: Block
    else_block: Optional[Block] = None  # never produced by the parser


@dataclass
class WriteStatement(Stmt):
    arguments: List["Expr"]


@dataclass
class ExpressionStatement(Stmt):
    expr: "Expr"


@dataclass
class BinaryExpression(Expr):
    operator: str
    left: Expr
    right: Expr


@dataclass
class Identifier(Expr):
    name: str


@dataclass
class StringLiteral(Expr):
    value: str


Node = Union[
    Comment,
    TypeDeclaration,
    Assignment,
    IfStatement,
    Block,
    WriteStatement,
    ExpressionStatement,
    BinaryExpression,
    Identifier,
    StringLiteral,
]
