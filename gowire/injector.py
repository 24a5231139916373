"""Per-injector code emission: the body of one generated injector function."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from gowire.filegen import Generator
from gowire.gotypes import Package, Pointer, Signature, Slice, Type, type_string, zero_value
from gowire.naming import disambiguate, type_variable_name, unexport


class CallKind(enum.Enum):
    """How a step of an injector produces its value."""

    FUNC_PROVIDER = "funcProviderCall"
    STRUCT_PROVIDER = "structProvider"
    VALUE_EXPR = "valueExpr"
    SELECTOR_EXPR = "selectorExpr"


@dataclass(frozen=True)
class Call:
    """One step of a solved injector.

    args index into the injector's parameters followed by the values of the
    earlier calls, in order.
    """

    kind: CallKind
    out: Type
    pkg: Optional[Package] = None
    name: str = ""
    args: tuple[int, ...] = ()
    varargs: bool = False
    field_names: tuple[str, ...] = ()
    has_cleanup: bool = False
    has_err: bool = False
    value_expr: Optional[str] = None
    value_type: Optional[Type] = None
    ptr_to_field: bool = False

    def __post_init__(self) -> None:
        if self.kind in (CallKind.FUNC_PROVIDER, CallKind.STRUCT_PROVIDER):
            if self.pkg is None or not self.name:
                raise ValueError(f"{self.kind.value} needs a package and a name")
        if self.kind is CallKind.STRUCT_PROVIDER and len(self.field_names) != len(self.args):
            raise ValueError("a struct provider needs one field name per argument")
        if self.kind is CallKind.SELECTOR_EXPR and (not self.args or not self.name):
            raise ValueError("a field selector needs a source argument and a field name")
        if self.kind is CallKind.VALUE_EXPR and self.value_expr is None:
            raise ValueError("a value call needs an expression")


@dataclass(frozen=True)
class OutputSignature:
    """The results of an injector or provider: a value, maybe a cleanup, maybe an error."""

    out: Type
    cleanup: bool = False
    err: bool = False


class InjectorGen:
    """State for emitting one injector; with discard set, nothing is written."""

    def __init__(self, gen: Generator, err_var: Optional[str] = None, discard: bool = False) -> None:
        self.gen = gen
        self.err_var = err_var if err_var is not None else disambiguate("err", gen.name_in_file_scope)
        self.discard = discard
        self.param_names: list[str] = []
        self.local_names: list[str] = []
        self.cleanup_names: list[str] = []

    def name_in_injector(self, name: str) -> bool:
        """Report whether name collides with any identifier in this injector."""
        return (
            name == self.err_var
            or name in self.param_names
            or name in self.local_names
            or name in self.cleanup_names
            or self.gen.name_in_file_scope(name)
        )

    def p(self, text: str) -> None:
        if not self.discard:
            self.gen.p(text)

    def _arg_name(self, index: int) -> str:
        if index < len(self.param_names):
            return self.param_names[index]
        return self.local_names[index - len(self.param_names)]

    def func_provider_call(self, lname: str, c: Call, inject_sig: OutputSignature) -> None:
        self.p(f"\t{lname}")
        prev_cleanup = len(self.cleanup_names)
        if c.has_cleanup:
            cname = disambiguate("cleanup", self.name_in_injector)
            self.cleanup_names.append(cname)
            self.p(f", {cname}")
        if c.has_err:
            self.p(f", {self.err_var}")
        self.p(" := ")
        self.p(self.gen.qualified_id(c.pkg.name, c.pkg.path, c.name) + "(")
        self.p(", ".join(self._arg_name(a) for a in c.args))
        if c.varargs:
            self.p("...")
        self.p(")\n")
        if c.has_err:
            self.p(f"\tif {self.err_var} != nil {{\n")
            for cname in reversed(self.cleanup_names[:prev_cleanup]):
                self.p(f"\t\t{cname}()\n")
            self.p("\t\treturn " + zero_value(inject_sig.out, self.gen.qualify_pkg))
            if inject_sig.cleanup:
                self.p(", nil")
            self.p(", err\n")
            self.p("\t}\n")

    def struct_provider_call(self, lname: str, c: Call) -> None:
        self.p(f"\t{lname} := ")
        if isinstance(c.out, Pointer):
            self.p("&")
        self.p(self.gen.qualified_id(c.pkg.name, c.pkg.path, c.name) + "{\n")
        for field_name, a in zip(c.field_names, c.args):
            self.p(f"\t\t{field_name}: {self._arg_name(a)},\n")
        self.p("\t}\n")

    def value_expr(self, lname: str, c: Call) -> None:
        self.p(f"\t{lname} := {self.gen.values[c.value_expr]}\n")

    def field_expr(self, lname: str, c: Call) -> None:
        self.p(f"\t{lname} := ")
        if c.ptr_to_field:
            self.p("&")
        self.p(f"{self._arg_name(c.args[0])}.{c.name}\n")


def inject_pass(
    name: str,
    sig: Signature,
    inject_sig: OutputSignature,
    calls: Sequence[Call],
    doc: Optional[Iterable[str]],
    ig: InjectorGen,
    output_arg_index: Optional[int] = None,
) -> None:
    """Emit one injector function.

    When calls is empty the injector returns one of its own parameters,
    the one at output_arg_index.
    """
    if not calls and output_arg_index is None:
        raise ValueError(f"inject {name}: no calls and no argument provides the output")
    if doc is not None:
        for line in doc:
            ig.p(f"{line}\n")
    ig.p(f"func {name}(")
    last = len(sig.params) - 1
    for i, param in enumerate(sig.params):
        if i > 0:
            ig.p(", ")
        if param.name in ("", "_"):
            a = type_variable_name(param.type, "arg", unexport, ig.name_in_injector)
        else:
            a = disambiguate(param.name, ig.name_in_injector)
        ig.param_names.append(a)
        if sig.variadic and i == last:
            if not isinstance(param.type, Slice):
                raise TypeError(f"inject {name}: variadic parameter {a} is not a slice")
            ig.p(f"{a} ...{type_string(param.type.elem, ig.gen.qualify_pkg)}")
        else:
            ig.p(f"{a} {type_string(param.type, ig.gen.qualify_pkg)}")
    out_type = type_string(inject_sig.out, ig.gen.qualify_pkg)
    if inject_sig.cleanup and inject_sig.err:
        ig.p(f") ({out_type}, func(), error) {{\n")
    elif inject_sig.cleanup:
        ig.p(f") ({out_type}, func()) {{\n")
    elif inject_sig.err:
        ig.p(f") ({out_type}, error) {{\n")
    else:
        ig.p(f") {out_type} {{\n")
    for c in calls:
        lname = type_variable_name(c.out, "v", unexport, ig.name_in_injector)
        ig.local_names.append(lname)
        if c.kind is CallKind.STRUCT_PROVIDER:
            ig.struct_provider_call(lname, c)
        elif c.kind is CallKind.FUNC_PROVIDER:
            ig.func_provider_call(lname, c, inject_sig)
        elif c.kind is CallKind.VALUE_EXPR:
            ig.value_expr(lname, c)
        else:
            ig.field_expr(lname, c)
    if calls:
        ig.p(f"\treturn {ig.local_names[-1]}")
    else:
        ig.p(f"\treturn {ig.param_names[output_arg_index]}")
    if inject_sig.cleanup:
        ig.p(", func() {\n")
        for cname in reversed(ig.cleanup_names):
            ig.p(f"\t\t{cname}()\n")
        ig.p("\t}")
    if inject_sig.err:
        ig.p(", nil")
    ig.p("\n}\n\n")