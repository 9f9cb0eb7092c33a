"""Scopes and type lookup for checking programs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from flang.span import Span

ScopeId = int
TypeId = int

# Data carried by a checked expression: None for unit, or a bool, int or name.
CheckedExpressionData = Union[None, bool, int, str]

BUILTIN_TYPES = ("Int", "Bool", "Unit")


class TypeLookupError(LookupError):
    """Raised when a type name is not visible from a scope."""


@dataclass(frozen=True)
class Scope:
    parent_scope: ScopeId | None = None


@dataclass(frozen=True)
class ScopedType:
    """A named type declared in one scope."""

    name: str
    scope_id: ScopeId


@dataclass
class CheckedExpression:
    span: Span
    type_id: TypeId
    data: CheckedExpressionData = None


@dataclass
class CheckedExpressionStatement:
    span: Span
    expr: CheckedExpression


@dataclass
class CheckedProgram:
    span: Span
    statements: list[CheckedExpressionStatement] = field(default_factory=list)


class Checker:
    """Holds the scopes and types seen while checking a program."""

    def __init__(self) -> None:
        self.scopes: list[Scope] = [Scope(parent_scope=None)]
        self.types: list[ScopedType] = [ScopedType(name, 0) for name in BUILTIN_TYPES]

    def create_scope(self, parent_id: ScopeId | None) -> ScopeId:
        """Add a scope under ``parent_id`` and return its id."""
        self.scopes.append(Scope(parent_scope=parent_id))
        return len(self.scopes) - 1

    def lookup_type(self, name: str, scope_id: ScopeId) -> TypeId:
        """Find the type ``name`` in ``scope_id`` or the nearest enclosing scope."""
        current: ScopeId | None = scope_id
        while current is not None:
            if not 0 <= current < len(self.scopes):
                raise TypeLookupError(f"unknown scope: {current}")
            for type_id, scoped in enumerate(self.types):
                if scoped.scope_id == current and scoped.name == name:
                    return type_id
            current = self.scopes[current].parent_scope
        raise TypeLookupError(f"unknown type: {name}")