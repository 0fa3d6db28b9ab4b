"""IR node definitions for the generated Rust bindings.

Flat declaration list between the C type model and Rust text emission.
Every node here is freshly allocated by the generator; nothing in the input
model is shared with the output.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Union


# --- Rust type expressions ---

@dataclass
class RsPath:
    """A named type, e.g. `c_int` or `Struct_Point`."""
    name: str


@dataclass
class RsPtr:
    pointee: RsType


@dataclass
class RsArray:
    element: RsType
    length: int


@dataclass
class RsCallback:
    """Opaque stand-in for any C function pointer type."""
    pass


RsType = Union[RsPath, RsPtr, RsArray, RsCallback]


# --- Type-class items ---

@dataclass
class RsTypeAlias:
    """`pub type name = target;`"""
    name: str
    target: RsType


@dataclass
class RsField:
    name: str
    type: RsType


@dataclass
class RsStruct:
    """`#[repr(C)]` record with fields in C layout order."""
    name: str
    fields: list[RsField] = field(default_factory=list)


@dataclass
class RsOpaque:
    """Placeholder type with no accessible layout."""
    name: str


@dataclass
class RsConst:
    name: str
    type: RsType
    value: int


# --- Linkage block ---

@dataclass
class RsParam:
    name: str
    type: RsType


@dataclass
class RsForeignStatic:
    name: str
    type: RsType


@dataclass
class RsForeignFn:
    name: str
    params: list[RsParam] = field(default_factory=list)
    ret: Optional[RsType] = None  # None: no return value
    variadic: bool = False


@dataclass
class RsForeignBlock:
    """All foreign statics and functions, linked against one native library."""
    link: str
    statics: list[RsForeignStatic] = field(default_factory=list)
    functions: list[RsForeignFn] = field(default_factory=list)


RsItem = Union[RsTypeAlias, RsStruct, RsOpaque, RsConst, RsForeignBlock]


# --- Root ---

@dataclass
class Bindings:
    """Root of the IR: type-class items followed by exactly one foreign block."""
    link: str
    imports: list[str] = field(default_factory=list)
    items: list[RsItem] = field(default_factory=list)

    @property
    def foreign_block(self) -> RsForeignBlock:
        for item in self.items:
            if isinstance(item, RsForeignBlock):
                return item
        raise LookupError("bindings have no foreign block")

    @property
    def type_items(self) -> list[RsItem]:
        return [i for i in self.items if not isinstance(i, RsForeignBlock)]
