"""Directives that describe provider sets for injector generation.

Each directive records what it was given, so a provider set can be
inspected after it is built. ``build`` marks the body of an injector
template and returns a message that the template may raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

NOT_GENERATED_MESSAGE = "implementation not generated, run wire"


def _field_names(directive: str, names: tuple[Any, ...]) -> tuple[str, ...]:
    for n in names:
        if not isinstance(n, str):
            raise TypeError(f"{directive}: field names must be strings, got {n!r}")
    return tuple(names)


@dataclass(frozen=True)
class ProviderSet:
    """A group of providers; nested sets are flattened into their contents."""

    providers: tuple[Any, ...] = ()

    def __iter__(self):
        return iter(self.providers)

    def __len__(self) -> int:
        return len(self.providers)


@dataclass(frozen=True)
class Binding:
    """Maps an interface type to the concrete type that satisfies it."""

    iface: Any
    to: Any


@dataclass(frozen=True)
class ProvidedValue:
    """An expression copied into the injector; interface is set for interface values."""

    value: Any
    interface: Optional[Any] = None


@dataclass(frozen=True)
class StructProvider:
    """A struct type provided by filling in the named fields ("*" for all)."""

    struct_type: Any
    field_names: tuple[str, ...] = ()

    @property
    def all_fields(self) -> bool:
        return self.field_names == ("*",)


@dataclass(frozen=True)
class StructFields:
    """Fields of a struct type used as providers of their own types."""

    struct_type: Any
    field_names: tuple[str, ...] = ()


def new_set(*args: Any) -> ProviderSet:
    """Collect providers into a set; a ProviderSet argument contributes its contents."""
    providers: list[Any] = []
    for arg in args:
        if isinstance(arg, ProviderSet):
            providers.extend(arg.providers)
        else:
            providers.append(arg)
    return ProviderSet(tuple(providers))


def build(*args: Any) -> str:
    """Declare the providers of an injector template; returns the not-generated message."""
    return NOT_GENERATED_MESSAGE


def bind(iface: Any, to: Any) -> Binding:
    """Declare that a dependency on iface is satisfied by the type of to."""
    return Binding(iface, to)


def value(x: Any) -> ProvidedValue:
    """Provide the type of an expression by copying the expression."""
    return ProvidedValue(x)


def interface_value(typ: Any, x: Any) -> ProvidedValue:
    """Provide the interface type typ with the value x."""
    return ProvidedValue(x, typ)


def struct(struct_type: Any, *args: str) -> StructProvider:
    """Provide struct_type by filling in the named fields."""
    return StructProvider(struct_type, _field_names("struct", args))


def fields_of(struct_type: Any, *args: str) -> StructFields:
    """Use the named fields of struct_type to provide their types."""
    return StructFields(struct_type, _field_names("fields_of", args))