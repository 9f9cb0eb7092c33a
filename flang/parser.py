"""Building a syntax tree from tokens."""

from __future__ import annotations

from collections.abc import Iterable

from flang.ast import (
    Argument,
    BoolLiteral,
    Expression,
    ExpressionStatement,
    Function,
    FunctionCall,
    Ident,
    InfixExpr,
    InfixOperator,
    IntLiteral,
    LabeledParam,
    Param,
    Precedence,
    Program,
    TypeName,
    UnitLiteral,
    UnlabeledParam,
    VariableDecl,
)
from flang.lexer import tokenize
from flang.tokens import Token, TokenKind

_PRECEDENCES = {
    TokenKind.PLUS: Precedence.SUM,
    TokenKind.MINUS: Precedence.SUM,
    TokenKind.SLASH: Precedence.PRODUCT,
    TokenKind.ASTERISK: Precedence.PRODUCT,
    TokenKind.LPAREN: Precedence.GROUP,
}

_INFIX_OPERATORS = {
    TokenKind.PLUS: InfixOperator.PLUS,
    TokenKind.MINUS: InfixOperator.MINUS,
    TokenKind.SLASH: InfixOperator.DIVIDE,
    TokenKind.ASTERISK: InfixOperator.MULTIPLY,
}


class ParseError(Exception):
    """Base class of every error raised while parsing."""


class NoTokenError(ParseError):
    """Raised when a token is needed and none is left."""


class NoPrefixParseError(ParseError):
    """Raised when no expression can start with the current token."""

    def __init__(self, kind: TokenKind) -> None:
        super().__init__(f"no expression starts with {kind}")
        self.kind = kind


class ExpectedTokenError(ParseError):
    """Raised when a particular kind of token was expected."""

    def __init__(self, expected: str) -> None:
        super().__init__(f"expected {expected}")
        self.expected = expected


class FlangSyntaxError(ParseError):
    """Raised on malformed syntax."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Syntax error: {detail}")
        self.detail = detail


class Parser:
    """Parses a sequence of tokens into a program."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._position = 0

    def parse(self) -> Program:
        """Parse every token into a program."""
        statements = []
        while self._kind() is not TokenKind.EOF:
            statements.append(self._parse_expr_statement())
        return Program(statements)

    # --- token access -------------------------------------------------

    def _token(self, offset: int = 0) -> Token | None:
        index = self._position + offset
        if index < len(self._tokens):
            return self._tokens[index]
        return None

    def _kind(self, offset: int = 0) -> TokenKind:
        token = self._token(offset)
        return TokenKind.EOF if token is None else token.kind

    def _advance(self) -> None:
        self._position += 1

    def _expect(self, kind: TokenKind) -> None:
        token = self._token()
        if self._kind() is not kind:
            shown = "EOF" if token is None else str(token)
            raise FlangSyntaxError(f"unexpected token: {shown}")
        self._advance()

    def _expect_ident(self) -> str:
        token = self._token()
        if token is None or token.kind is not TokenKind.IDENTIFIER:
            raise ExpectedTokenError("identifier")
        self._advance()
        return str(token.value)

    def _expect_int(self) -> int:
        token = self._token()
        if token is None or token.kind is not TokenKind.INT_LITERAL:
            raise ExpectedTokenError("int literal")
        self._advance()
        return int(token.value)  # type: ignore[arg-type]

    def _current_precedence(self) -> Precedence:
        return _PRECEDENCES.get(self._kind(), Precedence.LOWEST)

    # --- statements and expressions -----------------------------------

    def _parse_expr_statement(self) -> ExpressionStatement:
        expr = self._parse_expr(Precedence.LOWEST)
        discarded = self._kind() is TokenKind.SEMICOLON
        if discarded:
            self._advance()
        return ExpressionStatement(expr, discarded)

    def _parse_expr(self, precedence: Precedence) -> Expression:
        expr = self._parse_prefix()
        while self._current_precedence() > precedence:
            kind = self._kind()
            operator = _INFIX_OPERATORS.get(kind)
            if operator is None:
                raise FlangSyntaxError(f"invalid operator: {kind}")
            self._advance()
            right = self._parse_expr(_PRECEDENCES[kind])
            expr = InfixExpr(expr, operator, right)
        return expr

    def _parse_prefix(self) -> Expression:
        kind = self._kind()
        if kind is TokenKind.INT_LITERAL:
            return IntLiteral(self._expect_int())
        if kind in (TokenKind.TRUE, TokenKind.FALSE):
            self._advance()
            return BoolLiteral(kind is TokenKind.TRUE)
        if kind is TokenKind.UNIT:
            self._advance()
            return UnitLiteral()
        if kind is TokenKind.LPAREN:
            return self._parse_grouped_expr()
        if kind is TokenKind.IDENTIFIER:
            following = self._kind(1)
            if following is TokenKind.COLON:
                return self._parse_variable_decl()
            if following is TokenKind.LPAREN:
                return self._parse_function_call()
            return Ident(self._expect_ident())
        if kind is TokenKind.FUN:
            return self._parse_function()
        raise NoPrefixParseError(kind)

    def _parse_grouped_expr(self) -> Expression:
        self._advance()
        expr = self._parse_expr(Precedence.LOWEST)
        if self._kind() is not TokenKind.RPAREN:
            raise FlangSyntaxError("syntax error: expected )")
        self._advance()
        return expr

    def _parse_type(self) -> TypeName:
        return TypeName(self._expect_ident())

    def _parse_variable_decl(self) -> VariableDecl:
        name = self._expect_ident()
        self._expect(TokenKind.COLON)
        type_ = self._parse_type() if self._kind() is TokenKind.IDENTIFIER else None
        kind = self._kind()
        if kind is TokenKind.COLON:
            mutable = False
        elif kind is TokenKind.EQUAL:
            mutable = True
        else:
            raise ExpectedTokenError(": or =")
        self._advance()
        value = self._parse_expr(Precedence.LOWEST)
        return VariableDecl(name, value, mutable, type_)

    def _parse_function(self) -> Function:
        self._expect(TokenKind.FUN)
        self._expect(TokenKind.LPAREN)
        params: list[Param] = []
        while self._kind() is not TokenKind.RPAREN:
            params.append(self._parse_function_param())
            if self._kind() is not TokenKind.COMMA:
                break
            self._advance()
        self._expect(TokenKind.RPAREN)

        return_type = self._parse_type() if self._kind() is TokenKind.IDENTIFIER else None

        self._expect(TokenKind.LBRACE)
        body = []
        while self._kind() is not TokenKind.RBRACE:
            body.append(self._parse_expr_statement())
        self._expect(TokenKind.RBRACE)
        return Function(params, return_type, body)

    def _parse_function_param(self) -> Param:
        kind = self._kind()
        if kind is TokenKind.TILDE:
            self._advance()
            name = self._expect_ident()
            self._expect(TokenKind.COLON)
            return UnlabeledParam(name, self._parse_type())
        if kind is TokenKind.IDENTIFIER:
            first = self._expect_ident()
            second = self._expect_ident() if self._kind() is TokenKind.IDENTIFIER else None
            self._expect(TokenKind.COLON)
            type_ = self._parse_type()
            if second is None:
                return LabeledParam(first, type_)
            return LabeledParam(second, type_, label=first)
        raise ExpectedTokenError("parameter name")

    def _parse_function_call(self) -> FunctionCall:
        name = self._expect_ident()
        self._expect(TokenKind.LPAREN)
        args = []
        while self._kind() is not TokenKind.RPAREN:
            args.append(self._parse_function_arg())
            if self._kind() is not TokenKind.COMMA:
                break
            self._advance()
        self._expect(TokenKind.RPAREN)
        return FunctionCall(name, args)

    def _parse_function_arg(self) -> Argument:
        if self._kind() is not TokenKind.IDENTIFIER:
            return Argument(self._parse_expr(Precedence.LOWEST))
        name = self._expect_ident()
        if self._kind() is TokenKind.COLON:
            self._advance()
            return Argument(self._parse_expr(Precedence.LOWEST), label=name)
        return Argument(Ident(name))


def parse(source: str) -> Program:
    """Tokenize and parse ``source``."""
    return Parser(tokenize(source)).parse()