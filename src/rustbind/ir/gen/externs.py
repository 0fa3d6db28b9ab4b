"""Foreign block lowering: global variables and functions -> one extern block."""

from __future__ import annotations
from typing import TYPE_CHECKING

from ...cmodel import TFunc, TVoid, VarInfo
from ...errors import ModelInvariantError
from ..nodes import RsForeignBlock, RsForeignFn, RsForeignStatic, RsParam
from .types import lower_return_type, lower_type

if TYPE_CHECKING:
    from .generator import BindingGenerator


def build_foreign_block(gen: BindingGenerator, variables: list[VarInfo],
                        functions: list[VarInfo]) -> RsForeignBlock:
    """Collect every variable and function into a block linked against gen.link."""
    return RsForeignBlock(
        link=gen.link,
        statics=[lower_variable(gen, v) for v in variables],
        functions=[lower_function(gen, f) for f in functions],
    )


def lower_variable(gen: BindingGenerator, info: VarInfo) -> RsForeignStatic:
    if isinstance(info.type, (TFunc, TVoid)):
        raise ModelInvariantError(
            f"variable has non-object type {type(info.type).__name__}", info.name)
    return RsForeignStatic(name=gen.rust_id(info.name), type=lower_type(gen, info.type))


def lower_function(gen: BindingGenerator, info: VarInfo) -> RsForeignFn:
    fn = info.type
    if not isinstance(fn, TFunc):
        raise ModelInvariantError(
            f"function has non-function type {type(fn).__name__}", info.name)

    params = []
    for pos, (name, ty) in enumerate(fn.params, start=1):
        param_name = gen.rust_id(name) if name else f"arg{pos}"
        params.append(RsParam(name=param_name, type=lower_type(gen, ty)))

    return RsForeignFn(
        name=gen.rust_id(info.name),
        params=params,
        ret=lower_return_type(gen, fn.ret),
        variadic=fn.variadic,
    )
