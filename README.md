# flang

The front end of a small expression-oriented language. It has a lexer, a
recursive-descent parser that builds a syntax tree, and a table of scopes
that resolves type names.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The language

```
foo :: 4;                 # constant declaration
bar : Int = 33;           # mutable declaration with a type
unit;

calc :: fun (~x: Int, ~y: Int) Int {
  z :: x / y;
  z
};

calc(foo, bar);
```

- `name :: value` declares a constant and `name := value` a mutable variable.
  A type may sit between the colons: `name : Int : value` or
  `name : Int = value`.
- `fun (params) ReturnType { body }` is a function expression, and the return
  type may be left out. A parameter written `x: Int` is passed with its label.
  In `outer inner: Int`, `outer` is the label and `inner` is the name used in
  the body. `~x: Int` takes no label.
- A call takes positional or labelled arguments: `print(3, and: 4)`.
- The literals are integers, `true`, `false` and `unit`.
- The parser builds expressions with `+`, `-`, `*` and `/`. `*` and `/` bind
  tighter than `+` and `-`, operators of equal strength group to the left,
  and parentheses group explicitly. The lexer also recognises `!`, `^`, `==`,
  `!=`, `<`, `>`, `<=` and `>=`, but the parser does not accept them in
  expressions.
- A statement that ends in `;` is discarded.
- `#` starts a comment that runs to the end of the line.

## Usage

### Tokenising

```python
from flang.lexer import tokenize

for token in tokenize("foo :: 4;"):
    print(token.kind, token, token.position.start)
```

`tokenize` returns every token of the text, not including the end-of-file
token. `flang.lexer.Lexer` yields the same tokens one at a time, either by
iteration or through `next_token()`, which returns a `TokenKind.EOF` token
once the text is used up.

Each `flang.tokens.Token` has these fields:

- `kind`, a `TokenKind`.
- `position`, a `flang.span.Span` whose one-based line and column are given
  by `flang.span.Position`.
- `value`, which holds the text of an identifier or the number of an integer
  literal.

### Parsing

```python
from flang.parser import parse
from flang.ast import InfixExpr, InfixOperator

program = parse("1 + (2 * 3)")
statement = program.statements[0]
assert isinstance(statement.expr, InfixExpr)
assert statement.expr.operator is InfixOperator.PLUS
assert statement.discarded is False
```

`flang.parser.Parser(tokens).parse()` does the same for tokens that have
already been produced. The node classes are dataclasses in `flang.ast`:

- Expressions: `IntLiteral`, `BoolLiteral`, `UnitLiteral`, `Ident`,
  `InfixExpr`, `PrefixExpr`, `VariableDecl`, `Function` and `FunctionCall`.
- Parts of functions and calls: `LabeledParam`, `UnlabeledParam`, `Argument`
  and `TypeName`.
- Statements and programs: `ExpressionStatement` and `Program`.

### Errors

Errors are raised as exceptions:

- `flang.lexer.LexError` for a character the lexer does not accept, or for
  an integer literal too large for a signed 64-bit value.
- A subclass of `flang.parser.ParseError` for a malformed program:
  `ExpectedTokenError`, `FlangSyntaxError` or `NoPrefixParseError`.

### Scopes and types

`flang.checker.Checker` keeps a tree of scopes. Scope 0 holds the built-in
types `Int`, `Bool` and `Unit`. A type name is looked up in the given scope
and then in each enclosing scope:

```python
from flang.checker import Checker

checker = Checker()
inner = checker.create_scope(0)
assert checker.lookup_type("Int", inner) == 0
```

`lookup_type` raises `flang.checker.TypeLookupError` for an unknown name or
an unknown scope.

## What it does not do

The package does not check a parsed program against types. `Checker` only
creates scopes and looks up type names. The `CheckedProgram`,
`CheckedExpressionStatement` and `CheckedExpression` classes exist as data
holders, but nothing produces them. Programs are never evaluated or compiled,
and the package has no command-line program.