# gowire

`gowire` writes the Go source of dependency injectors. You describe an
injector's signature, the type it returns and the ordered list of provider
calls that build that value; `gowire` picks collision-free variable names,
qualifies and imports other packages, writes error checks and cleanup
chains, and wraps everything in a generated Go file with a header and
sorted import blocks.

## Install

```
pip install gowire
```

For running the tests:

```
pip install "gowire[test]"
pytest
```

## Modules

- `gowire.gotypes`: a small model of Go types: `Basic` (with `BasicInfo`
  flags), `Named`, `Pointer`, `Slice`, `Array`, `Map`, `Chan`, `Struct`,
  `Interface`, `Signature`, `Var` and `Package`, plus ready-made basic
  types such as `INT`, `STRING` and `BOOL`, and `ERROR`. `type_string(t,
  qualifier)` renders a type as Go source; `zero_value(t, qualifier)` gives
  the shortest Go expression for its zero value (`0`, `""`, `false`,
  `nil`, or `T{}` for arrays and structs).
- `gowire.naming`: identifier helpers. `is_keyword` checks Go keywords;
  `unexport("HTTPClient")` gives `"httpClient"`; `export("fooBar")` gives
  `"FooBar"`; `disambiguate("foo", collides)` gives `"foo2"` when `"foo"`
  is taken (and `"foo1_2"` for a name ending in a digit);
  `type_variable_name(t, default_name, transform, collides)` derives a
  variable name from a type, trying the package-prefixed name (such as
  `fooBar`) before numbering.
- `gowire.filegen`: `Generator` holds the body of one generated file and
  the imports it needs. `qualify_import`, `qualify_pkg` and `qualified_id`
  name other packages (importing them under a unique name when needed, and
  stripping a `vendor/` prefix); `name_in_file_scope` reports taken names;
  `frame(tags)` returns the complete, unformatted file as bytes, or empty
  bytes if nothing was written. `GenerateResult.commit()` writes a
  result's content to its output path (and does nothing for empty
  content); `detect_output_dir(paths)` returns the single directory of the
  given files and raises `ValueError` if there is none or they disagree.
- `gowire.injector`: `CallKind`, `Call` and `OutputSignature` describe the
  steps of an injector and what it returns; `InjectorGen` and
  `inject_pass` print one injector function.
- `gowire.emit`: `inject(gen, name, sig, inject_sig, calls, doc,
  output_arg_index)` checks that the injector returns a cleanup and an
  error wherever its providers do, raising `InjectError` with every
  mismatch found, then writes the injector and a `var (...)` block for any
  provided values.
- `gowire.markers`: directives for describing provider sets:
  `new_set` (flattening nested sets), `build`, `bind`, `value`,
  `interface_value`, `struct` and `fields_of`, returning `ProviderSet`,
  `Binding`, `ProvidedValue`, `StructProvider` and `StructFields`.

## Example

```python
from gowire.emit import inject
from gowire.filegen import Generator
from gowire.gotypes import INT, Named, Package, Signature
from gowire.injector import Call, CallKind, OutputSignature

pkg = Package("example.com/foo", "main")
foo = Named("Foo", INT, pkg)
foo_bar = Named("FooBar", INT, pkg)
gen = Generator(pkg, scope_names={"Foo", "FooBar", "provideFoo", "provideFooBar"})

calls = [
    Call(CallKind.FUNC_PROVIDER, foo, pkg=pkg, name="provideFoo"),
    Call(CallKind.FUNC_PROVIDER, foo_bar, pkg=pkg, name="provideFooBar", args=(0,)),
]
inject(gen, "injectFooBar", Signature(), OutputSignature(foo_bar), calls)
print(gen.body)
```

prints

```go
func injectFooBar() FooBar {
	foo := provideFoo()
	fooBar := provideFooBar(foo)
	return fooBar
}
```

`gen.frame()` wraps the same body in a complete file.

## What it does not do

`gowire` does not read, parse or type-check Go code, does not work out
which providers satisfy an injector, and does not detect cycles or missing
providers: the types and the ordered calls are given to it. It does not
check whether a provided value's expression may be used from the target
package. It does not format the output with a Go formatter, and it has no
command-line tool.