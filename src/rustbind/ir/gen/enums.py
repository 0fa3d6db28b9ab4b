"""Enum lowering: EnumDefDecl -> integer alias + constants."""

from __future__ import annotations
from typing import TYPE_CHECKING

from ...cmodel import EnumInfo, TInt
from ..nodes import RsConst, RsOpaque, RsPath, RsTypeAlias
from .types import enum_type_name, lower_type

if TYPE_CHECKING:
    from .generator import BindingGenerator


def emit_enum_forward(gen: BindingGenerator, info: EnumInfo):
    gen.emit(RsOpaque(enum_type_name(gen, info)))


def emit_enum_def(gen: BindingGenerator, info: EnumInfo):
    """Emit `Enum_<name>` as an alias of the underlying integer, then one const per item."""
    name = enum_type_name(gen, info)
    gen.emit(RsTypeAlias(name=name, target=lower_type(gen, TInt(info.kind))))
    for item in info.items:
        gen.emit(RsConst(name=gen.rust_id(item.name), type=RsPath(name), value=item.value))
