"""Tests for the Rust text emitter."""

from rustbind.cmodel import (
    AggregateDefDecl, AggregateForwardDecl, CompInfo, EnumDefDecl, EnumInfo,
    EnumItem, FieldInfo, FunctionDecl, IntKind, TArray, TComp, TFunc, TInt,
    TPtr, TVoid, TypedefDecl, TypedefInfo, VariableDecl, VarInfo,
)
from rustbind.ir import RustEmitter
from rustbind.ir.gen import generate_bindings

INT = TInt(IntKind.INT)


def render(*decls, link="demo") -> str:
    return RustEmitter().emit(generate_bindings(list(decls), link))


def assert_contains(output: str, *fragments: str):
    for frag in fragments:
        assert frag in output, f"Expected '{frag}' in output:\n{output}"


class TestEmitter:
    def test_full_file(self):
        point = CompInfo("", True, [FieldInfo("x", INT), FieldInfo("y", INT)])
        color = EnumInfo("Color", IntKind.INT, [EnumItem("RED", 0), EnumItem("GREEN", 1)])
        output = render(
            AggregateDefDecl(point),
            TypedefDecl(TypedefInfo("Point", TComp(point))),
            AggregateForwardDecl(CompInfo("FILE")),
            EnumDefDecl(color),
            VariableDecl(VarInfo("errno", INT)),
            FunctionDecl.of("add", INT, [("a", INT), ("b", INT)]),
            FunctionDecl.of("printf", INT, [("fmt", TPtr(TInt(IntKind.SCHAR)))], variadic=True),
        )
        assert output == (
            "/* automatically generated by rust-bindgen */\n"
            "\n"
            "use libc::*;\n"
            "\n"
            "#[repr(C)]\n"
            "pub struct Struct_Point {\n"
            "    pub x: c_int,\n"
            "    pub y: c_int,\n"
            "}\n"
            "pub type Struct_FILE = c_void;\n"
            "pub type Enum_Color = c_int;\n"
            "pub const RED: Enum_Color = 0;\n"
            "pub const GREEN: Enum_Color = 1;\n"
            "\n"
            '#[link(name = "demo")]\n'
            'extern "C" {\n'
            "    pub static errno: c_int;\n"
            "    pub fn add(a: c_int, b: c_int) -> c_int;\n"
            "    pub fn printf(fmt: *mut c_schar, ...) -> c_int;\n"
            "}\n"
        )

    def test_void_function_has_no_arrow(self):
        assert_contains(render(FunctionDecl.of("reset", TVoid())), "pub fn reset();")

    def test_array_and_callback_types(self):
        s = CompInfo("S", True, [
            FieldInfo("buf", TArray(TInt(IntKind.UCHAR), 16)),
            FieldInfo("cb", TPtr(TFunc(TVoid()))),
        ])
        assert_contains(render(AggregateDefDecl(s)),
                        "pub buf: [c_uchar; 16],", "pub cb: *mut *const u8,")

    def test_empty_struct(self):
        assert_contains(render(AggregateDefDecl(CompInfo("Empty"))),
                        "#[repr(C)]\npub struct Struct_Empty;")

    def test_escaped_names_rendered(self):
        s = CompInfo("S", True, [FieldInfo("type", INT)])
        assert_contains(render(AggregateDefDecl(s)), "pub _type: c_int,")

    def test_emitter_reusable(self):
        bindings = generate_bindings([FunctionDecl.of("f", TVoid())], "x")
        emitter = RustEmitter()
        assert emitter.emit(bindings) == emitter.emit(bindings)
