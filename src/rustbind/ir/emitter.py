"""Rust emitter: walks Bindings and renders Rust source text."""

from __future__ import annotations

from .nodes import (
    Bindings, RsArray, RsCallback, RsConst, RsForeignBlock, RsForeignFn,
    RsOpaque, RsPath, RsPtr, RsStruct, RsType, RsTypeAlias,
)

HEADER = "/* automatically generated by rust-bindgen */"


class RustEmitter:
    """Renders a Bindings tree as one Rust source file."""

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def emit(self, bindings: Bindings) -> str:
        self.output = []
        self.indent_level = 0
        self._emit(HEADER)
        self._emit()
        for crate in bindings.imports:
            self._emit(f"use {crate}::*;")
        self._emit()
        for item in bindings.items:
            if isinstance(item, RsTypeAlias):
                self._emit(f"pub type {item.name} = {self._type(item.target)};")
            elif isinstance(item, RsOpaque):
                self._emit(f"pub type {item.name} = c_void;")
            elif isinstance(item, RsStruct):
                self._emit_struct(item)
            elif isinstance(item, RsConst):
                self._emit(f"pub const {item.name}: {self._type(item.type)} = {item.value};")
            elif isinstance(item, RsForeignBlock):
                self._emit_foreign_block(item)
        return "\n".join(self.output) + "\n"

    # ---- Output helpers ----

    def _emit(self, line: str = ""):
        if line:
            self.output.append("    " * self.indent_level + line)
        else:
            self.output.append("")

    def _emit_struct(self, struct: RsStruct):
        self._emit("#[repr(C)]")
        if not struct.fields:
            self._emit(f"pub struct {struct.name};")
            return
        self._emit(f"pub struct {struct.name} {{")
        self.indent_level += 1
        for f in struct.fields:
            self._emit(f"pub {f.name}: {self._type(f.type)},")
        self.indent_level -= 1
        self._emit("}")

    def _emit_foreign_block(self, block: RsForeignBlock):
        self._emit()
        self._emit(f'#[link(name = "{block.link}")]')
        self._emit('extern "C" {')
        self.indent_level += 1
        for static in block.statics:
            self._emit(f"pub static {static.name}: {self._type(static.type)};")
        for fn in block.functions:
            self._emit(self._fn_signature(fn))
        self.indent_level -= 1
        self._emit("}")

    def _fn_signature(self, fn: RsForeignFn) -> str:
        params = [f"{p.name}: {self._type(p.type)}" for p in fn.params]
        if fn.variadic:
            params.append("...")
        sig = f"pub fn {fn.name}({', '.join(params)})"
        if fn.ret is not None:
            sig += f" -> {self._type(fn.ret)}"
        return sig + ";"

    def _type(self, t: RsType) -> str:
        if isinstance(t, RsPath):
            return t.name
        if isinstance(t, RsPtr):
            return f"*mut {self._type(t.pointee)}"
        if isinstance(t, RsArray):
            return f"[{self._type(t.element)}; {t.length}]"
        if isinstance(t, RsCallback):
            return "*const u8"
        raise TypeError(f"not a Rust type node: {t!r}")
