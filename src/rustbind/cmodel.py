"""C type model consumed by the binding generator.

Built upstream by the header parser. Aggregate, enum and typedef records are
identities: several declarations and type references may point at the same
object, and two identities are only ever equal if they are the same object.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


class IntKind(Enum):
    BOOL = auto()
    SCHAR = auto()
    UCHAR = auto()
    SHORT = auto()
    USHORT = auto()
    INT = auto()
    UINT = auto()
    LONG = auto()
    ULONG = auto()
    LONGLONG = auto()
    ULONGLONG = auto()


class FloatKind(Enum):
    FLOAT = auto()
    DOUBLE = auto()


# --- Identities ---

@dataclass(eq=False)
class FieldInfo:
    name: str
    type: CType


@dataclass(eq=False)
class CompInfo:
    """A struct or union. `name` is empty for anonymous aggregates."""
    name: str = ""
    is_struct: bool = True
    fields: list[FieldInfo] = field(default_factory=list)


@dataclass(eq=False)
class EnumItem:
    name: str
    value: int


@dataclass(eq=False)
class EnumInfo:
    name: str = ""
    kind: IntKind = IntKind.UINT
    items: list[EnumItem] = field(default_factory=list)


@dataclass(eq=False)
class TypedefInfo:
    name: str
    type: CType


@dataclass(eq=False)
class VarInfo:
    name: str
    type: CType


# --- Types ---

@dataclass
class TVoid:
    pass


@dataclass
class TInt:
    kind: IntKind


@dataclass
class TFloat:
    kind: FloatKind


@dataclass
class TPtr:
    pointee: CType


@dataclass
class TArray:
    element: CType
    length: int


@dataclass
class TFunc:
    ret: CType
    params: list[tuple[str, CType]] = field(default_factory=list)
    variadic: bool = False


@dataclass
class TNamed:
    info: TypedefInfo


@dataclass
class TComp:
    info: CompInfo


@dataclass
class TEnum:
    info: EnumInfo


CType = Union[TVoid, TInt, TFloat, TPtr, TArray, TFunc, TNamed, TComp, TEnum]


# --- Declarations ---

@dataclass
class TypedefDecl:
    info: TypedefInfo


@dataclass
class AggregateForwardDecl:
    info: CompInfo


@dataclass
class AggregateDefDecl:
    info: CompInfo


@dataclass
class EnumForwardDecl:
    info: EnumInfo


@dataclass
class EnumDefDecl:
    info: EnumInfo


@dataclass
class VariableDecl:
    info: VarInfo


@dataclass
class FunctionDecl:
    info: VarInfo

    @classmethod
    def of(cls, name: str, ret: CType, params: list[tuple[str, CType]] = None,
           variadic: bool = False) -> FunctionDecl:
        return cls(VarInfo(name, TFunc(ret, list(params or []), variadic)))


@dataclass
class OpaqueDecl:
    """Anything the lowering ignores (macros, inline bodies, ...)."""
    pass


Declaration = Union[
    TypedefDecl, AggregateForwardDecl, AggregateDefDecl, EnumForwardDecl,
    EnumDefDecl, VariableDecl, FunctionDecl, OpaqueDecl,
]
