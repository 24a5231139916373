"""Emitting a whole injector: checking its calls, then writing it and its values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from gowire.filegen import Generator
from gowire.gotypes import Signature, type_string
from gowire.injector import Call, CallKind, InjectorGen, OutputSignature, inject_pass
from gowire.naming import disambiguate, export, type_variable_name


class InjectError(Exception):
    """Raised when an injector cannot be generated; holds every problem found."""

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = list(errors)
        super().__init__("\n".join(self.errors))


@dataclass(frozen=True)
class _PendingVar:
    name: str
    expr: str


def _value_var_name(name: str) -> str:
    return "_wire" + export(name) + "Value"


def inject(
    gen: Generator,
    name: str,
    sig: Signature,
    inject_sig: OutputSignature,
    calls: Sequence[Call],
    doc: Optional[Iterable[str]] = None,
    output_arg_index: Optional[int] = None,
) -> None:
    """Write the injector called name into gen.

    Providers that return a cleanup or an error require the injector to
    return one too; every such mismatch is reported together in an
    InjectError, and nothing is written. Values used by the injector are
    written afterwards as package-level variables.
    """
    doc_lines = list(doc) if doc is not None else None
    errors: list[str] = []
    pending: list[_PendingVar] = []
    for c in calls:
        if c.has_cleanup and not inject_sig.cleanup:
            errors.append(
                f"inject {name}: provider for {type_string(c.out)} returns cleanup "
                "but injection does not return cleanup function"
            )
        if c.has_err and not inject_sig.err:
            errors.append(
                f"inject {name}: provider for {type_string(c.out)} returns error "
                "but injection not allowed to fail"
            )
        if c.kind is CallKind.VALUE_EXPR and not gen.values.get(c.value_expr):
            value_type = c.value_type if c.value_type is not None else c.out
            var_name = type_variable_name(
                value_type, "", _value_var_name, gen.name_in_file_scope
            )
            gen.values[c.value_expr] = var_name
            pending.append(_PendingVar(var_name, c.value_expr))
    if errors:
        raise InjectError(errors)

    # One pass to collect imports, then the real one.
    for discard in (True, False):
        ig = InjectorGen(
            gen,
            err_var=disambiguate("err", gen.name_in_file_scope),
            discard=discard,
        )
        inject_pass(name, sig, inject_sig, calls, doc_lines, ig, output_arg_index)

    if pending:
        gen.p("var (\n")
        for pv in pending:
            gen.p(f"\t{pv.name} = {pv.expr}\n")
        gen.p(")\n\n")