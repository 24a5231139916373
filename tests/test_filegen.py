import os

import pytest

from gowire.filegen import GenerateResult, Generator, ImportInfo, detect_output_dir
from gowire.gotypes import Package

MAIN = Package("example.com/foo", "main")


def make_gen(*scope):
    return Generator(MAIN, scope)


def test_frame_empty_body_is_empty():
    assert make_gen().frame("") == b""


def test_frame_header_and_package():
    g = make_gen()
    g.p("func f() {}\n")
    text = g.frame("").decode()
    assert text.startswith("// Code generated by Wire. DO NOT EDIT.\n\n")
    assert "//go:generate go run -mod=mod github.com/google/wire/cmd/wire\n" in text
    assert "//+build !wireinject\n\npackage main\n\n" in text
    assert text.endswith("func f() {}\n")
    assert "import" not in text


def test_frame_with_tags():
    g = make_gen()
    g.p("x")
    text = g.frame("a b").decode()
    assert '//go:generate go run -mod=mod github.com/google/wire/cmd/wire gen -tags "a b"\n' in text


def test_frame_imports_sorted_with_aliases():
    g = make_gen("bar")
    assert g.qualify_import("zed", "example.com/zed") == "zed"
    assert g.qualify_import("bar", "example.com/bar") == "bar2"
    g.p("body\n")
    text = g.frame("").decode()
    block = text[text.index("import (\n"):text.index(")\n\n") + 3]
    assert block == 'import (\n\tbar2 "example.com/bar"\n\t"example.com/zed"\n)\n\n'


def test_frame_anon_imports():
    g = make_gen()
    g.anon_imports.update({'"b/x"', '"a/y"'})
    g.p("body\n")
    text = g.frame("").decode()
    assert 'import (\n\t_ "a/y"\n\t_ "b/x"\n)\n\n' in text


def test_qualify_own_package_is_empty():
    g = make_gen()
    assert g.qualify_import("main", MAIN.path) == ""
    assert g.imports == {}
    assert g.qualified_id("main", MAIN.path, "Foo") == "Foo"


def test_qualified_id_other_package():
    g = make_gen()
    assert g.qualified_id("bar", "example.com/bar", "New") == "bar.New"
    assert g.imports["example.com/bar"] == ImportInfo("bar", False)


def test_qualify_is_stable():
    g = make_gen()
    first = g.qualify_import("bar", "example.com/bar")
    assert g.qualify_import("other", "example.com/bar") == first
    assert len(g.imports) == 1


def test_vendor_prefix_stripped():
    g = make_gen()
    g.qualify_import("bar", "example.com/vendor/example.com/bar")
    assert list(g.imports) == ["example.com/bar"]
    g2 = make_gen()
    g2.qualify_import("bar", "vendor/lib/bar")
    assert list(g2.imports) == ["lib/bar"]
    g3 = make_gen()
    g3.qualify_import("bar", "myvendor/bar")
    assert list(g3.imports) == ["myvendor/bar"]


def test_import_never_named_err():
    g = make_gen()
    name = g.qualify_import("err", "example.com/err")
    assert name != "err"
    assert g.imports["example.com/err"].differs


def test_import_avoids_universe_names():
    g = make_gen()
    name = g.qualify_import("string", "example.com/string")
    assert name != "string"
    assert g.imports["example.com/string"].differs


def test_qualify_pkg():
    g = make_gen()
    assert g.qualify_pkg(Package("context", "context")) == "context"
    assert g.name_in_file_scope("context")


def test_name_in_file_scope_sources():
    g = make_gen("Foo")
    assert g.name_in_file_scope("Foo")
    assert g.name_in_file_scope("nil")
    assert not g.name_in_file_scope("unused")
    g.values[object()] = "_wireValue"
    assert g.name_in_file_scope("_wireValue")


def test_two_imports_same_name_disambiguated():
    g = make_gen()
    a = g.qualify_import("foo", "a/foo")
    b = g.qualify_import("foo", "b/foo")
    assert a == "foo"
    assert b != a
    assert g.imports["b/foo"].differs


def test_commit_writes(tmp_path):
    out = tmp_path / "wire_gen.go"
    GenerateResult("example.com/foo", str(out), b"package main\n").commit()
    assert out.read_bytes() == b"package main\n"


def test_commit_empty_writes_nothing(tmp_path):
    out = tmp_path / "wire_gen.go"
    GenerateResult("example.com/foo", str(out)).commit()
    assert not out.exists()


def test_detect_output_dir_same_dir():
    paths = [os.path.join("a", "b", "x.go"), os.path.join("a", "b", "y.go")]
    assert detect_output_dir(paths) == os.path.join("a", "b")


def test_detect_output_dir_bare_file():
    assert detect_output_dir(["x.go"]) == "."


def test_detect_output_dir_empty():
    with pytest.raises(ValueError, match="no files to derive output directory from"):
        detect_output_dir([])


def test_detect_output_dir_conflict():
    with pytest.raises(ValueError, match="found conflicting directories"):
        detect_output_dir([os.path.join("a", "x.go"), os.path.join("b", "y.go")])