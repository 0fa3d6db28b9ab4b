"""Redundant declaration removal, run before lowering.

`typedef struct { ... } Foo;` reaches us as a TypedefDecl plus an
AggregateDefDecl for the same anonymous identity. The typedef lowering emits
the definition, so the separate record has to go or the type is emitted
twice.
"""

from __future__ import annotations

from ...cmodel import (
    AggregateDefDecl, AggregateForwardDecl, EnumDefDecl, EnumForwardDecl,
    TComp, TEnum, TypedefDecl,
)

_IDENTITY_DECLS = (AggregateDefDecl, AggregateForwardDecl, EnumDefDecl, EnumForwardDecl)
_DEFINITIONS = (AggregateDefDecl, EnumDefDecl)
_FORWARDS = (AggregateForwardDecl, EnumForwardDecl)


def remove_redundant_decls(decls: list) -> list:
    """Return `decls` without records that duplicate another declaration.

    Drops aggregate/enum records whose identity is anonymous and aliased
    directly by a typedef, and forward declarations of identities that are
    defined elsewhere in the list or were already forward-declared.
    The input list is not modified.
    """
    aliased = _typedef_targets(decls)
    defined = {id(d.info) for d in decls if isinstance(d, _DEFINITIONS)}

    kept = []
    forwarded = set()
    for decl in decls:
        if isinstance(decl, _IDENTITY_DECLS):
            info = decl.info
            if id(info) in aliased and not info.name:
                continue
            if isinstance(decl, _FORWARDS):
                if id(info) in defined or id(info) in forwarded:
                    continue
                forwarded.add(id(info))
        kept.append(decl)
    return kept


def _typedef_targets(decls) -> set[int]:
    targets = set()
    for decl in decls:
        if isinstance(decl, TypedefDecl) and isinstance(decl.info.type, (TComp, TEnum)):
            targets.add(id(decl.info.type.info))
    return targets
