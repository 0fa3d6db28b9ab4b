"""Aggregate lowering: struct/union definitions and forward declarations."""

from __future__ import annotations
from typing import TYPE_CHECKING

from ...cmodel import CompInfo
from ..nodes import RsField, RsOpaque, RsStruct
from .types import comp_type_name, lower_type

if TYPE_CHECKING:
    from .generator import BindingGenerator


def emit_comp_forward(gen: BindingGenerator, info: CompInfo):
    """Layout unknown: emit an opaque placeholder."""
    gen.emit(RsOpaque(comp_type_name(gen, info)))


def emit_comp_def(gen: BindingGenerator, info: CompInfo):
    """Emit a struct as a record. Unions stay opaque; their layout is not modelled."""
    if info.is_struct:
        gen.emit(lower_struct(gen, info))
    else:
        gen.emit(RsOpaque(comp_type_name(gen, info)))


def lower_struct(gen: BindingGenerator, info: CompInfo) -> RsStruct:
    # Name the struct before its fields so nested anonymous types number after it
    name = comp_type_name(gen, info)
    fields = []
    unnamed = 0
    for f in info.fields:
        if f.name:
            field_name = gen.rust_id(f.name)
        else:
            unnamed += 1
            field_name = f"unnamed_field{unnamed}"
        fields.append(RsField(name=field_name, type=lower_type(gen, f.type)))
    return RsStruct(name=name, fields=fields)
