import pytest

from gowire.gotypes import (
    BOOL,
    CLEANUP,
    ERROR,
    FLOAT64,
    INT,
    STRING,
    UNTYPED_NIL,
    Array,
    Basic,
    BasicInfo,
    Chan,
    Interface,
    Map,
    Named,
    Package,
    Pointer,
    Signature,
    Slice,
    Struct,
    Var,
    type_string,
    zero_value,
)

PKG = Package("example.com/foo", "foo")


def test_basic_underlying_is_itself():
    assert INT.underlying() is INT


def test_named_underlying_follows_chain():
    inner = Named("Foo", INT, PKG)
    outer = Named("Bar", inner, PKG)
    assert outer.underlying() is INT


def test_named_types_compare_by_identity():
    a = Named("Foo", INT, PKG)
    b = Named("Foo", INT, PKG)
    assert a != b
    assert a == a


def test_basic_and_error_strings():
    assert type_string(STRING) == "string"
    assert type_string(ERROR) == "error"
    assert type_string(CLEANUP) == "func()"


def test_named_without_qualifier_uses_path():
    t = Named("Foo", INT, PKG)
    assert type_string(t) == PKG.path + ".Foo"


def test_named_with_qualifier():
    t = Named("Foo", INT, PKG)
    assert type_string(t, lambda p: p.name) == "foo.Foo"
    assert type_string(t, lambda p: "") == "Foo"


def test_composite_strings_compose():
    named = Named("Foo", INT, PKG)
    qf = lambda p: p.name  # noqa: E731
    base = type_string(named, qf)
    assert type_string(Pointer(named), qf) == "*" + base
    assert type_string(Slice(named), qf) == "[]" + base
    assert type_string(Array(named, 3), qf) == "[3]" + base
    assert type_string(Map(STRING, named), qf) == "map[string]" + base


def test_chan_directions():
    assert type_string(Chan(INT)) == "chan int"
    assert type_string(Chan(INT, send=False)) == "<-chan int"
    assert type_string(Chan(INT, recv=False)) == "chan<- int"
    assert type_string(Chan(Chan(INT, send=False))) == "chan (<-chan int)"


def test_chan_without_direction_rejected():
    with pytest.raises(ValueError):
        Chan(INT, send=False, recv=False)


def test_negative_array_rejected():
    with pytest.raises(ValueError):
        Array(INT, -1)


def test_signature_strings():
    sig = Signature(
        params=(Var("a", INT), Var("words", Slice(STRING))),
        results=(Var("", INT), Var("", ERROR)),
        variadic=True,
    )
    assert type_string(sig) == "func(a int, words ...string) (int, error)"
    single = Signature(params=(Var("", INT),), results=(Var("", BOOL),))
    assert type_string(single) == "func(int) bool"


def test_struct_and_interface_strings():
    s = Struct((Var("A", INT), Var("", STRING, embedded=True)))
    assert type_string(s) == "struct{A int; string}"
    iface = Interface((Var("Foo", Signature(results=(Var("", STRING),))),))
    assert type_string(iface) == "interface{Foo() string}"
    assert type_string(ERROR.underlying()) == "interface{Error() string}"


def test_interface_method_must_be_signature():
    with pytest.raises(TypeError):
        Interface((Var("Foo", INT),))


def test_zero_value_basics():
    assert zero_value(BOOL) == "false"
    assert zero_value(INT) == "0"
    assert zero_value(FLOAT64) == "0"
    assert zero_value(STRING) == '""'
    assert zero_value(Basic("complex128", BasicInfo.COMPLEX)) == "0"


def test_zero_value_named_follows_underlying():
    assert zero_value(Named("Foo", INT, PKG)) == "0"
    assert zero_value(Named("Msg", STRING, PKG)) == '""'


def test_zero_value_nil_kinds():
    for t in (Pointer(INT), Slice(INT), Map(INT, INT), Chan(INT), CLEANUP, ERROR):
        assert zero_value(t) == "nil"


def test_zero_value_struct_and_array_use_type_string():
    named = Named("FooBar", Struct((Var("Foo", INT),)), PKG)
    qf = lambda p: p.name  # noqa: E731
    assert zero_value(named, qf) == type_string(named, qf) + "{}"
    arr = Array(INT, 2)
    assert zero_value(arr) == type_string(arr) + "{}"


def test_zero_value_untyped_rejected():
    with pytest.raises(ValueError):
        zero_value(UNTYPED_NIL)


def test_type_string_rejects_non_type():
    with pytest.raises(TypeError):
        type_string("int")
    with pytest.raises(TypeError):
        zero_value(42)