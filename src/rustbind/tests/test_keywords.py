"""Tests for reserved word escaping."""

import pytest

from rustbind.cmodel import FunctionDecl, IntKind, TInt
from rustbind.ir.gen import generate_bindings
from rustbind.keywords import RUST_KEYWORDS, rust_id


class TestRustId:
    @pytest.mark.parametrize("word", ["type", "fn", "match", "struct", "loop", "Self", "async"])
    def test_reserved_words_escaped(self, word):
        assert rust_id(word) == "_" + word

    @pytest.mark.parametrize("name", ["x", "Point", "Struct_type", "_type", "self_", "Type"])
    def test_other_names_unchanged(self, name):
        assert rust_id(name) == name

    def test_idempotent(self):
        for word in RUST_KEYWORDS:
            once = rust_id(word)
            assert rust_id(once) == once
            assert once not in RUST_KEYWORDS

    def test_wildcard_escaped(self):
        assert rust_id("_") == "__"
        assert rust_id("__") == "__"

    def test_custom_table_and_prefix(self):
        assert rust_id("begin", frozenset({"begin"}), "r#") == "r#begin"
        assert rust_id("type", frozenset({"begin"})) == "type"


class TestGeneratorKeywords:
    def test_generator_uses_configured_table(self):
        decl = FunctionDecl.of("end", TInt(IntKind.INT), [("type", TInt(IntKind.INT))])
        bindings = generate_bindings([decl], "foo", keywords={"end"}, escape_prefix="x_")
        (fn,) = bindings.foreign_block.functions
        assert fn.name == "x_end"
        assert fn.params[0].name == "type"
