"""Names that are never treated as installable crates."""

from __future__ import annotations

SELF_REFERENCES: frozenset[str] = frozenset({"self", "super", "crate"})

# Standard library roots, common std submodule names, primitive types,
# and the path keywords that refer to the current crate.
STD_MODULES: frozenset[str] = frozenset(
    {
        "std",
        "core",
        "alloc",
        "proc_macro",
        "test",
        "collections",
        "env",
        "fs",
        "io",
        "net",
        "path",
        "process",
        "sync",
        "thread",
        "time",
        "fmt",
        "mem",
        "ptr",
        "slice",
        "str",
        "vec",
        "hash",
        "cmp",
        "ops",
        "iter",
        "option",
        "result",
        "clone",
        "convert",
        "default",
        "drop",
        "marker",
        "ascii",
        "char",
        "f32",
        "f64",
        "i8",
        "i16",
        "i32",
        "i64",
        "i128",
        "isize",
        "u8",
        "u16",
        "u32",
        "u64",
        "u128",
        "usize",
        "bool",
        "never",
        "array",
        "tuple",
        "unit",
    }
) | SELF_REFERENCES


def is_reserved(name: str) -> bool:
    """Return True if *name* is part of std, a primitive, or a self reference."""
    return name in STD_MODULES
