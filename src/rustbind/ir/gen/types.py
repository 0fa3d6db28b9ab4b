"""Type utilities for binding generation: C type model -> Rust type expressions."""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from ...cmodel import (
    CompInfo, CType, EnumInfo, FloatKind, IntKind, TArray, TComp, TEnum,
    TFloat, TFunc, TInt, TNamed, TPtr, TVoid,
)
from ..nodes import RsArray, RsCallback, RsPath, RsPtr, RsType

if TYPE_CHECKING:
    from .generator import BindingGenerator


C_VOID = "c_void"

# One alias per C integer kind, even where widths coincide on a platform.
_INT_MAP = {
    IntKind.BOOL: "bool",
    IntKind.SCHAR: "c_schar",
    IntKind.UCHAR: "c_uchar",
    IntKind.SHORT: "c_short",
    IntKind.USHORT: "c_ushort",
    IntKind.INT: "c_int",
    IntKind.UINT: "c_uint",
    IntKind.LONG: "c_long",
    IntKind.ULONG: "c_ulong",
    IntKind.LONGLONG: "c_longlong",
    IntKind.ULONGLONG: "c_ulonglong",
}

_FLOAT_MAP = {
    FloatKind.FLOAT: "c_float",
    FloatKind.DOUBLE: "c_double",
}


def comp_type_name(gen: BindingGenerator, info: CompInfo) -> str:
    """`Struct_<name>` or `Union_<name>`, naming the identity first if needed."""
    prefix = "Struct_" if info.is_struct else "Union_"
    return gen.rust_id(prefix + gen.resolve_name(info))


def enum_type_name(gen: BindingGenerator, info: EnumInfo) -> str:
    return gen.rust_id("Enum_" + gen.resolve_name(info))


def lower_type(gen: BindingGenerator, t: CType) -> RsType:
    """Convert a C type reference to a Rust type expression."""
    if isinstance(t, TVoid):
        return RsPath(C_VOID)
    if isinstance(t, TInt):
        return RsPath(_INT_MAP[t.kind])
    if isinstance(t, TFloat):
        return RsPath(_FLOAT_MAP[t.kind])
    if isinstance(t, TPtr):
        return RsPtr(lower_type(gen, t.pointee))
    if isinstance(t, TArray):
        return RsArray(lower_type(gen, t.element), t.length)
    if isinstance(t, TFunc):
        return RsCallback()
    if isinstance(t, TNamed):
        # A typedef collapsed into its definition has no alias of its own
        if gen.owns_definition(t.info):
            return lower_type(gen, t.info.type)
        return RsPath(gen.rust_id(t.info.name))
    if isinstance(t, TComp):
        return RsPath(comp_type_name(gen, t.info))
    if isinstance(t, TEnum):
        return RsPath(enum_type_name(gen, t.info))
    raise TypeError(f"not a C type: {t!r}")


def lower_return_type(gen: BindingGenerator, t: CType) -> Optional[RsType]:
    """Like lower_type, but `void` means no return value."""
    if isinstance(t, TVoid):
        return None
    return lower_type(gen, t)
