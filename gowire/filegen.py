"""File-wide generator state: imports, emitted text and the final file frame."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from gowire.gotypes import Package
from gowire.naming import disambiguate

GO_UNIVERSE = frozenset(
    {
        "any",
        "append",
        "bool",
        "byte",
        "cap",
        "clear",
        "close",
        "comparable",
        "complex",
        "complex64",
        "complex128",
        "copy",
        "delete",
        "error",
        "false",
        "float32",
        "float64",
        "imag",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "iota",
        "len",
        "make",
        "max",
        "min",
        "new",
        "nil",
        "panic",
        "print",
        "println",
        "real",
        "recover",
        "rune",
        "string",
        "true",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
    }
)

_VENDOR_PART = "vendor/"


def _quote(s: str) -> str:
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


@dataclass
class GenerateResult:
    """The outcome of generating one package."""

    pkg_path: str
    output_path: str = ""
    content: bytes = b""
    errs: list[Exception] = field(default_factory=list)

    def commit(self) -> None:
        """Write the generated file to disk; does nothing if there is no content."""
        if not self.content:
            return
        Path(self.output_path).write_bytes(self.content)


def _clean_dir(path: str) -> str:
    return os.path.normpath(os.path.dirname(path) or ".")


def detect_output_dir(paths: Iterable[str]) -> str:
    """Return the one directory that holds all of paths."""
    paths = list(paths)
    if not paths:
        raise ValueError("no files to derive output directory from")
    first = _clean_dir(paths[0])
    for p in paths[1:]:
        other = _clean_dir(p)
        if other != first:
            raise ValueError(
                f"found conflicting directories {_quote(first)} and {_quote(other)}"
            )
    return first


@dataclass(frozen=True)
class ImportInfo:
    """How an import is referred to in the generated file."""

    name: str
    differs: bool


class Generator:
    """Accumulates the body of a generated file and the imports it needs."""

    def __init__(self, package: Package, scope_names: Iterable[str] = ()) -> None:
        self.package = package
        self.scope_names = frozenset(scope_names) | GO_UNIVERSE
        self.imports: dict[str, ImportInfo] = {}
        self.anon_imports: set[str] = set()
        self.values: dict[object, str] = {}
        self._parts: list[str] = []

    @property
    def body(self) -> str:
        return "".join(self._parts)

    def p(self, text: str) -> None:
        """Append text to the generated body."""
        self._parts.append(text)

    def frame(self, tags: str = "") -> bytes:
        """Wrap the body in a complete, unformatted Go source file.

        Returns empty bytes if nothing has been written to the body.
        """
        body = self.body
        if not body:
            return b""
        if tags:
            tags = f' gen -tags "{tags}"'
        out = [
            "// Code generated by Wire. DO NOT EDIT.\n\n",
            "//go:generate go run -mod=mod github.com/google/wire/cmd/wire" + tags + "\n",
            "//+build !wireinject\n\n",
            f"package {self.package.name}\n\n",
        ]
        if self.imports:
            out.append("import (\n")
            for path in sorted(self.imports):
                info = self.imports[path]
                if info.differs:
                    out.append(f"\t{info.name} {_quote(path)}\n")
                else:
                    out.append(f"\t{_quote(path)}\n")
            out.append(")\n\n")
        if self.anon_imports:
            out.append("import (\n")
            for path in sorted(self.anon_imports):
                out.append(f"\t_ {path}\n")
            out.append(")\n\n")
        out.append(body)
        return "".join(out).encode("utf-8")

    def qualified_id(self, pkg_name: str, pkg_path: str, sym: str) -> str:
        """Return sym as referenced from the generated file."""
        name = self.qualify_import(pkg_name, pkg_path)
        return f"{name}.{sym}" if name else sym

    def qualify_import(self, name: str, path: str) -> str:
        """Return the identifier for the package at path, importing it if needed.

        The generated package itself needs no qualifier and yields "".
        """
        if path == self.package.path:
            return ""
        unvendored = path
        i = path.rfind(_VENDOR_PART)
        if i != -1 and (i == 0 or path[i - 1] == "/"):
            unvendored = path[i + len(_VENDOR_PART):]
        existing = self.imports.get(unvendored)
        if existing is not None:
            return existing.name
        new_name = disambiguate(
            name, lambda n: n == "err" or self.name_in_file_scope(n)
        )
        self.imports[unvendored] = ImportInfo(new_name, new_name != name)
        return new_name

    def qualify_pkg(self, pkg: Package) -> str:
        return self.qualify_import(pkg.name, pkg.path)

    def name_in_file_scope(self, name: str) -> bool:
        """Report whether name is already taken at file scope."""
        if any(info.name == name for info in self.imports.values()):
            return True
        if name in self.values.values():
            return True
        return name in self.scope_names