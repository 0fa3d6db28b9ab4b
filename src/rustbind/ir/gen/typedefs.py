"""Typedef lowering: TypedefDecl -> type alias, or the definition it names."""

from __future__ import annotations
from typing import TYPE_CHECKING

from ...cmodel import TComp, TypedefInfo
from ..nodes import RsTypeAlias
from .aggregates import emit_comp_def
from .enums import emit_enum_def
from .types import lower_type

if TYPE_CHECKING:
    from .generator import BindingGenerator


def emit_typedef(gen: BindingGenerator, info: TypedefInfo):
    target = info.type
    if gen.owns_definition(info):
        # typedef struct { ... } Foo;  ->  Struct_Foo, no alias
        if isinstance(target, TComp):
            emit_comp_def(gen, target.info)
        else:
            emit_enum_def(gen, target.info)
        return
    gen.emit(RsTypeAlias(name=gen.rust_id(info.name), target=lower_type(gen, target)))
