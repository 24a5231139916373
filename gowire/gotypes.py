"""A small model of Go types: enough to print them and spell their zero values."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional, Union


class BasicInfo(enum.Flag):
    """Properties of a predeclared basic type."""

    NONE = 0
    BOOLEAN = enum.auto()
    INTEGER = enum.auto()
    UNSIGNED = enum.auto()
    FLOAT = enum.auto()
    COMPLEX = enum.auto()
    STRING = enum.auto()
    UNTYPED = enum.auto()


@dataclass(frozen=True)
class Package:
    """A Go package, identified by its import path and declared name."""

    path: str
    name: str


@dataclass(frozen=True)
class Basic:
    """A predeclared type such as int, bool or string."""

    name: str
    info: BasicInfo = BasicInfo.NONE

    def underlying(self) -> "Type":
        return self


@dataclass(eq=False)
class Named:
    """A defined type. Named types compare by identity, as in Go."""

    name: str
    base: "Type"
    package: Optional[Package] = None

    def underlying(self) -> "Type":
        t = self.base
        while isinstance(t, Named):
            t = t.base
        return t


@dataclass(frozen=True)
class Pointer:
    elem: "Type"


@dataclass(frozen=True)
class Slice:
    elem: "Type"


@dataclass(frozen=True)
class Array:
    elem: "Type"
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"array length must not be negative: {self.length}")


@dataclass(frozen=True)
class Map:
    key: "Type"
    elem: "Type"


@dataclass(frozen=True)
class Chan:
    """A channel type; send and recv give the permitted directions."""

    elem: "Type"
    send: bool = True
    recv: bool = True

    def __post_init__(self) -> None:
        if not (self.send or self.recv):
            raise ValueError("a channel must allow sending, receiving or both")


@dataclass(frozen=True)
class Var:
    """A named, typed slot: a parameter, a result or a struct field."""

    name: str
    type: "Type"
    embedded: bool = False
    tag: str = ""


@dataclass(frozen=True)
class Struct:
    fields: tuple[Var, ...] = ()


@dataclass(frozen=True)
class Signature:
    params: tuple[Var, ...] = ()
    results: tuple[Var, ...] = ()
    variadic: bool = False

    def __post_init__(self) -> None:
        if self.variadic and not self.params:
            raise ValueError("a variadic signature needs at least one parameter")


@dataclass(frozen=True)
class Interface:
    """An interface type; methods are Vars whose types are Signatures."""

    methods: tuple[Var, ...] = field(default=())

    def __post_init__(self) -> None:
        for m in self.methods:
            if not isinstance(m.type, Signature):
                raise TypeError(f"interface method {m.name} must have a Signature type")


Type = Union[Basic, Named, Pointer, Slice, Array, Map, Chan, Struct, Signature, Interface]
Qualifier = Optional[Callable[[Package], str]]


BOOL = Basic("bool", BasicInfo.BOOLEAN)
INT = Basic("int", BasicInfo.INTEGER)
INT8 = Basic("int8", BasicInfo.INTEGER)
INT16 = Basic("int16", BasicInfo.INTEGER)
INT32 = Basic("int32", BasicInfo.INTEGER)
INT64 = Basic("int64", BasicInfo.INTEGER)
UINT = Basic("uint", BasicInfo.INTEGER | BasicInfo.UNSIGNED)
UINT8 = Basic("uint8", BasicInfo.INTEGER | BasicInfo.UNSIGNED)
UINT16 = Basic("uint16", BasicInfo.INTEGER | BasicInfo.UNSIGNED)
UINT32 = Basic("uint32", BasicInfo.INTEGER | BasicInfo.UNSIGNED)
UINT64 = Basic("uint64", BasicInfo.INTEGER | BasicInfo.UNSIGNED)
UINTPTR = Basic("uintptr", BasicInfo.INTEGER | BasicInfo.UNSIGNED)
BYTE = Basic("byte", BasicInfo.INTEGER | BasicInfo.UNSIGNED)
RUNE = Basic("rune", BasicInfo.INTEGER)
FLOAT32 = Basic("float32", BasicInfo.FLOAT)
FLOAT64 = Basic("float64", BasicInfo.FLOAT)
COMPLEX64 = Basic("complex64", BasicInfo.COMPLEX)
COMPLEX128 = Basic("complex128", BasicInfo.COMPLEX)
STRING = Basic("string", BasicInfo.STRING)
UNTYPED_NIL = Basic("untyped nil", BasicInfo.UNTYPED)

ERROR = Named(
    "error",
    Interface((Var("Error", Signature(results=(Var("", STRING),))),)),
)
CLEANUP = Signature()


def _underlying(t: Type) -> Type:
    return t.underlying() if isinstance(t, (Basic, Named)) else t


def _go_quote(s: str) -> str:
    escapes = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}
    out = []
    for ch in s:
        if ch in escapes:
            out.append(escapes[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\x{ord(ch):02x}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def _tuple_string(vars_: tuple[Var, ...], variadic: bool, qualifier: Qualifier) -> str:
    parts = []
    last = len(vars_) - 1
    for i, v in enumerate(vars_):
        prefix = f"{v.name} " if v.name else ""
        if variadic and i == last:
            if isinstance(v.type, Slice):
                parts.append(prefix + "..." + type_string(v.type.elem, qualifier))
            else:
                parts.append(prefix + type_string(v.type, qualifier) + "...")
        else:
            parts.append(prefix + type_string(v.type, qualifier))
    return "(" + ", ".join(parts) + ")"


def _signature_body(sig: Signature, qualifier: Qualifier) -> str:
    text = _tuple_string(sig.params, sig.variadic, qualifier)
    if not sig.results:
        return text
    if len(sig.results) == 1 and not sig.results[0].name:
        return text + " " + type_string(sig.results[0].type, qualifier)
    return text + " " + _tuple_string(sig.results, False, qualifier)


def type_string(t: Type, qualifier: Qualifier = None) -> str:
    """Render t as Go source; qualifier names packages (default: import path)."""
    if isinstance(t, Basic):
        return t.name
    if isinstance(t, Named):
        prefix = ""
        if t.package is not None:
            s = qualifier(t.package) if qualifier is not None else t.package.path
            if s:
                prefix = s + "."
        return prefix + t.name
    if isinstance(t, Pointer):
        return "*" + type_string(t.elem, qualifier)
    if isinstance(t, Slice):
        return "[]" + type_string(t.elem, qualifier)
    if isinstance(t, Array):
        return f"[{t.length}]" + type_string(t.elem, qualifier)
    if isinstance(t, Map):
        return f"map[{type_string(t.key, qualifier)}]{type_string(t.elem, qualifier)}"
    if isinstance(t, Chan):
        elem = type_string(t.elem, qualifier)
        if t.send and t.recv:
            inner = t.elem
            if isinstance(inner, Chan) and inner.recv and not inner.send:
                return f"chan ({elem})"
            return "chan " + elem
        if t.send:
            return "chan<- " + elem
        return "<-chan " + elem
    if isinstance(t, Struct):
        parts = []
        for f in t.fields:
            text = type_string(f.type, qualifier)
            if not f.embedded:
                text = f"{f.name} {text}"
            if f.tag:
                text += " " + _go_quote(f.tag)
            parts.append(text)
        return "struct{" + "; ".join(parts) + "}"
    if isinstance(t, Signature):
        return "func" + _signature_body(t, qualifier)
    if isinstance(t, Interface):
        methods = sorted(t.methods, key=lambda m: m.name)
        parts = [m.name + _signature_body(m.type, qualifier) for m in methods]
        return "interface{" + "; ".join(parts) + "}"
    raise TypeError(f"not a Go type: {t!r}")


def zero_value(t: Type, qualifier: Qualifier = None) -> str:
    """Return the shortest Go expression for the zero value of t."""
    u = _underlying(t)
    if isinstance(u, (Array, Struct)):
        return type_string(t, qualifier) + "{}"
    if isinstance(u, Basic):
        if u.info & BasicInfo.BOOLEAN:
            return "false"
        if u.info & (BasicInfo.INTEGER | BasicInfo.FLOAT | BasicInfo.COMPLEX):
            return "0"
        if u.info & BasicInfo.STRING:
            return '""'
        raise ValueError(f"type {u.name} has no zero value expression")
    if isinstance(u, (Chan, Interface, Map, Pointer, Signature, Slice)):
        return "nil"
    raise TypeError(f"not a Go type: {t!r}")