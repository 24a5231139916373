"""Identifier helpers: keyword checks, case changes and collision-free names."""

from __future__ import annotations

from itertools import count
from typing import Callable

from gowire.gotypes import Basic, Named, Pointer, Type

GO_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)


def is_keyword(name: str) -> bool:
    """Report whether name is a reserved Go keyword."""
    return name in GO_KEYWORDS


def _is_upper(ch: str) -> bool:
    return ch.isupper()


def _is_lower(ch: str) -> bool:
    return ch.islower()


def _to_lower(ch: str) -> str:
    lowered = ch.lower()
    return lowered if len(lowered) == 1 else ch


def _to_upper(ch: str) -> str:
    raised = ch.upper()
    return raised if len(raised) == 1 else ch


def unexport(name: str) -> str:
    """Turn a possibly exported name into an unexported one.

    A leading run of capitals is lowered as an acronym, stopping before the
    capital that starts the next word: HTTPClient becomes httpClient.
    """
    if not name:
        return ""
    if not _is_upper(name[0]):
        return name
    if len(name) < 2 or not _is_upper(name[1]):
        return _to_lower(name[0]) + name[1:]
    out = [_to_lower(name[0])]
    i = 1
    while i < len(name) and _is_upper(name[i]):
        if i + 1 < len(name) and _is_lower(name[i + 1]):
            break
        out.append(_to_lower(name[i]))
        i += 1
    return "".join(out) + name[i:]


def export(name: str) -> str:
    """Turn a possibly unexported name into an exported one."""
    if not name:
        return ""
    if _is_upper(name[0]):
        return name
    return _to_upper(name[0]) + name[1:]


def disambiguate(name: str, collides: Callable[[str], bool]) -> str:
    """Pick a unique name, preferring name itself, and never a keyword."""
    if not is_keyword(name) and not collides(name):
        return name
    base = name
    if base and base[-1] in "0123456789":
        base += "_"
    for n in count(2):
        candidate = f"{base}{n}"
        if not is_keyword(candidate) and not collides(candidate):
            return candidate
    raise AssertionError("unreachable")


def type_variable_name(
    t: Type,
    default_name: str,
    transform: Callable[[str], str],
    collides: Callable[[str], bool],
) -> str:
    """Invent a variable name for a value of type t.

    Candidate names come from the type (and, for a named type, its package
    name joined to it), or default_name if none can be derived. Each is
    passed through transform; the first that is free is used, otherwise the
    first candidate is disambiguated.
    """
    if isinstance(t, Pointer):
        t = t.elem
    names: list[str] = []
    if isinstance(t, Basic):
        if t.name:
            names.append(t.name)
    elif isinstance(t, Named):
        if t.name:
            names.append(t.name)
        if t.package is not None and t.package.name:
            names.append(t.package.name + export(t.name))
    if not names:
        names.append(default_name)
    names = [transform(n) for n in names]
    for candidate in names:
        if not is_keyword(candidate) and not collides(candidate):
            return candidate
    return disambiguate(names[0], collides)