from __future__ import annotations

import logging
from typing import List, Optional

from . import ast
from .errors import ParseError
from .tokens import Token, TokenType


class Parser:
    """Recursive-descent parser for TriforceScript statements.

    Decisions are traced at DEBUG level on ``logger``; tracing never affects
    which rule is taken.
    """

    def __init__(self, tokens: List[Token], logger: Optional[logging.Logger] = None):
        self.tokens = tokens
        self.pos = 0
        self.log = logger or logging.getLogger(__name__)

    def current(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def at_end(self) -> bool:
        return self.current().type == TokenType.EOF

    def advance(self) -> Token:
        if not self.at_end():
            self.pos += 1
        return self.previous()

    def check(self, type_: TokenType) -> bool:
        if self.at_end():
            return False
        return self.current().type == type_

    def match(self, *types: TokenType) -> Optional[Token]:
        for type_ in types:
            if self.check(type_):
                return self.advance()
        return None

    def consume(self, type_: TokenType, msg: str) -> Token:
        if self.check(type_):
            return self.advance()
        tok = self.current()
        raise ParseError(
            f"{msg} at line {tok.line}. Found token: {tok.type.value} ({tok.value})",
            token=tok,
            expected=type_,
        )

    def parse(self) -> List[ast.Stmt]:
        statements: List[ast.Stmt] = []
        while not self.at_end():
            statements.append(self.parse_declaration())
        return statements

    def parse_declaration(self) -> ast.Stmt:
        tok = self.match(TokenType.COMMENT)
        if tok:
            return ast.Comment(tok.value)

        if self.check(TokenType.IDENTIFIER):
            name = self.advance().value
            if self.match(TokenType.TYPE_DECL):
                if self.check(TokenType.IDENTIFIER):
                    self.log.debug("'%s ::' followed by an identifier, parsing as reassignment", name)
                    return ast.Assignment(name, self.parse_expression())
                self.log.debug("'%s ::' parsing type declaration", name)
                return self.parse_type_declaration(name)
            if self.match(TokenType.ARROW):
                self.log.debug("'%s ->' parsing assignment", name)
                return ast.Assignment(name, self.parse_expression())
            # the identifier stays consumed and parsing resumes at the next token
            self.log.debug("identifier '%s' dropped, falling through at %s", name, self.current().type.value)

        if self.match(TokenType.IF):
            return self.parse_if()

        if self.match(TokenType.WRITE):
            return self.parse_write()

        return ast.ExpressionStatement(self.parse_expression())

    def parse_type_declaration(self, name: str) -> ast.TypeDeclaration:
        self.consume(TokenType.TYPE_START, "Expected '[' after '::'")
        type_tok = self.consume(TokenType.IDENTIFIER, "Expected type name")
        self.consume(TokenType.TYPE_END, "Expected ']' after type name")
        self.consume(TokenType.ARROW, "Expected '->' after type")
        return ast.TypeDeclaration(name, type_tok.value, self.parse_expression())

    def parse_if(self) -> ast.IfStatement:
        self.log.debug("parsing if statement at line %d", self.previous().line)
        self.consume(TokenType.ARROW, "Expected '->' after 'if'")
        cond = self.parse_expression()
        self.consume(TokenType.DOUBLE_ARROW, "Expected '=>' after condition")
        return ast.IfStatement(cond, self.parse_block())

    def parse_write(self) -> ast.WriteStatement:
        self.log.debug("parsing write statement at line %d", self.previous().line)
        self.consume(TokenType.LPAREN, "Expected '(' after 'write'")
        args: List[ast.Expr] = []
        if not self.check(TokenType.RPAREN):
            args.append(self.parse_expression())
            while self.match(TokenType.COMMA):
                args.append(self.parse_expression())
        self.consume(TokenType.RPAREN, "Expected ')' after arguments")
        return ast.WriteStatement(args)

    def parse_block(self) -> ast.Block:
        self.consume(TokenType.LBRACE, "Expected '{'")
        statements: List[ast.Stmt] = []
        while not self.check(TokenType.RBRACE) and not self.at_end():
            statements.append(self.parse_declaration())
        self.consume(TokenType.RBRACE, "Expected '}'")
        return ast.Block(statements)

    def parse_expression(self) -> ast.Expr:
        return self.parse_equality()

    def parse_equality(self) -> ast.Expr:
        expr = self.parse_concatenation()
        while self.match(TokenType.EQUALS_EQUALS):
            right = self.parse_concatenation()
            expr = ast.BinaryExpression("==", expr, right)
        return expr

    def parse_concatenation(self) -> ast.Expr:
        expr = self.parse_primary()
        while self.match(TokenType.ARROW):
            right = self.parse_primary()
            expr = ast.BinaryExpression("->", expr, right)
        return expr

    def parse_primary(self) -> ast.Expr:
        tok = self.match(TokenType.STRING)
        if tok:
            return ast.StringLiteral(tok.value)
        tok = self.match(TokenType.IDENTIFIER)
        if tok:
            return ast.Identifier(tok.value)
        tok = self.current()
        raise ParseError(
            f"Expected expression at line {tok.line}. Found token: {tok.type.value} ({tok.value})",
            token=tok,
        )


def parse_tokens(tokens: List[Token], logger: Optional[logging.Logger] = None) -> List[ast.Stmt]:
    return Parser(tokens, logger).parse()
