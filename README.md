# lexpath

Purely lexical path handling with POSIX rules. A path is split into
elements and taken apart (root name, root directory, parent, filename, stem,
extension), normalized, and expressed relative to another path, all without
looking at the file system. The package also checks file names for
portability, makes random unique path names, and reads and writes whole
files as bytes.

## Installation

```
pip install lexpath
```

## Paths

`lexpath.path.Path` is an immutable value. Every modifier (`append`,
`concat`, `remove_filename`, `remove_trailing_separator`,
`replace_extension`, `make_preferred`) returns a new `Path`.

```python
from lexpath.path import Path

p = Path("/foo/bar/baz.zoo")
p.parent_path()      # Path('/foo/bar')
p.filename()         # Path('baz.zoo')
p.stem()             # Path('baz')
p.extension()        # Path('.zoo')
p.replace_extension("txt")   # Path('/foo/bar/baz.txt')

list(Path("foo/bar/baz"))        # [Path('foo'), Path('bar'), Path('baz')]
list(reversed(Path("foo/bar")))  # [Path('bar'), Path('foo')]
Path("foo") / "bar"              # Path('foo/bar')
"foo" / Path("bar")              # Path('foo/bar')
Path("foo") + "-x"               # Path('foo-x')

Path("foo/bar/../blah").lexically_normal()      # Path('foo/blah')
Path("a/b/c").lexically_relative(Path("a/x"))   # Path('../b/c')
```

A `Path` can be made from a `str`, from bytes (decoded with the current
converter, or with a `Codecvt` passed as the second argument), from any
path-like object, or from an iterable of characters or byte values.

Some rules worth knowing:

- `/` is the only separator.
- A path starting with exactly two separators and a name carries a network
  root name: `Path("//netname/foo").root_name()` is `//netname`, and its
  `root_path()` is `//netname/`.
- A trailing non-root separator counts as a final `.` element, so
  `Path("foo/").filename()` is `.` and `Path("foo/").filename_is_dot()` is
  true.
- `is_absolute()` is true when the path has a root directory.

The `has_*` queries (`has_root_path`, `has_root_name`,
`has_root_directory`, `has_relative_path`, `has_parent_path`,
`has_filename`, `has_stem`, `has_extension`) tell whether the matching
decomposition is non-empty.

Paths compare element by element through `lex_compare`, so `==`, `<`,
`compare()` and hashing follow the lexical structure: `Path("a//b")` equals
`Path("a/b")`. A `Path` also compares with plain strings and bytes.

The lower-level functions behind this live in `lexpath.elements`:
`elements(text)` and `reversed_elements(text)` yield `(position, element)`
pairs, and `first_element`, `filename_pos`, `root_directory_start`,
`parent_path_end`, `is_root_separator` and `is_separator` work on raw
strings.

## Name portability

```python
from lexpath.portability import portable_file_name, windows_name

portable_file_name("readme.txt")   # True
portable_file_name("archive.tar.gz")   # False: more than one dot
windows_name("bad:name")           # False
```

`native`, `portable_posix_name`, `portable_name` and
`portable_directory_name` are also available. `native` applies the Windows
rules when running on Windows and otherwise rejects only empty names, names
starting with a space, and names containing `/`.

## Unique paths

```python
from lexpath.unique import unique_path

unique_path("tmp-%%%%-%%%%")   # e.g. Path('tmp-3f0a-b71c')
unique_path()                  # model "%%%%-%%%%-%%%%-%%%%"
```

Each `%` is replaced by a random lowercase hexadecimal digit drawn from
`os.urandom`. The file system is not consulted, so uniqueness is only
probabilistic.

## String files

```python
from lexpath.stringfile import save_string_file, load_string_file

save_string_file("out.bin", b"contents")
load_string_file("out.bin")   # b'contents'
```

Both functions work in binary mode and raise `OSError` as `open` does.

## Encodings

`lexpath.encoding` converts between bytes and text. `Codecvt(encoding)`
uses any codec Python knows (by default the file system encoding);
`Utf8Codecvt` is strict UTF-8. `codecvt()` returns the converter used when
none is given, and `imbue(cvt)` installs a new one and returns the previous
one. On macOS and the BSDs the default is `Utf8Codecvt`.

`to_wide`, `to_narrow` and `to_text` do the conversions. A failed
conversion raises `CodecvtError` (a `ValueError`) whose `result` is a
`CodecvtResult`: `PARTIAL` for an incomplete multibyte sequence, `ERROR`
for data that cannot be converted.

## What this package does not do

It has no file-system operations beyond the two string-file helpers: it does
not test whether paths exist, create or remove directories, copy files, or
walk directory trees. Windows drive letters (`c:`) and backslash separators
get no special meaning; they are treated as ordinary characters.