"""Binding generator: main class and module-level orchestration.

Walks the C type model and produces Bindings. Per-kind lowering lives in the
sibling modules; each takes the generator as `gen` for naming state.
"""

from __future__ import annotations

import logging

from ...cmodel import (
    AggregateDefDecl, AggregateForwardDecl, CompInfo, EnumDefDecl,
    EnumForwardDecl, EnumInfo, FunctionDecl, OpaqueDecl, TComp, TEnum,
    TypedefDecl, TypedefInfo, VariableDecl,
)
from ...keywords import ESCAPE_PREFIX, RUST_KEYWORDS, rust_id
from ..nodes import Bindings, RsItem
from .aggregates import emit_comp_def, emit_comp_forward
from .enums import emit_enum_def, emit_enum_forward
from .externs import build_foreign_block
from .redundancy import remove_redundant_decls
from .typedefs import emit_typedef

logger = logging.getLogger(__name__)

_IMPORTS = ["libc"]


def partition_declarations(declarations):
    """Split declarations into (functions, variables, others), dropping OpaqueDecl."""
    functions, variables, others = [], [], []
    for decl in declarations:
        if isinstance(decl, FunctionDecl):
            functions.append(decl)
        elif isinstance(decl, VariableDecl):
            variables.append(decl)
        elif not isinstance(decl, OpaqueDecl):
            others.append(decl)
    return functions, variables, others


class BindingGenerator:
    """Lowers one C type model into Rust bindings for the library `link`."""

    def __init__(self, declarations, link: str, *,
                 keywords=None, escape_prefix: str = ESCAPE_PREFIX):
        self.declarations = declarations
        self.link = link
        self.keywords = frozenset(keywords) if keywords is not None else RUST_KEYWORDS
        self.escape_prefix = escape_prefix
        self._items: list[RsItem] = []
        self._unnamed_counter = 0

        # Anonymity is read here, before lowering writes names back onto the
        # identities, so every generate() call sees the same model.
        self._functions, self._variables, others = partition_declarations(declarations)
        self._kept = remove_redundant_decls(others)
        if len(self._kept) != len(others):
            logger.debug("dropped %d redundant declarations", len(others) - len(self._kept))
        # anonymous identity -> the typedef that names it and carries its definition
        self._typedef_owners: dict[CompInfo | EnumInfo, TypedefInfo] = \
            _find_typedef_owners(self._kept)

    def generate(self) -> Bindings:
        """Run the lowering and return the bindings; repeated calls give equal results."""
        self._items = []
        self._unnamed_counter = 0
        logger.debug("lowering %d type declarations, %d variables, %d functions for '%s'",
                     len(self._kept), len(self._variables), len(self._functions), self.link)

        for decl in self._kept:
            self._emit_type_decl(decl)
        self._items.append(build_foreign_block(
            self, [v.info for v in self._variables], [f.info for f in self._functions]))

        logger.debug("emitted %d items", len(self._items))
        return Bindings(link=self.link, imports=list(_IMPORTS), items=self._items)

    def emit(self, item: RsItem):
        self._items.append(item)

    def rust_id(self, name: str) -> str:
        return rust_id(name, self.keywords, self.escape_prefix)

    # --- Naming ---

    def resolve_name(self, info: CompInfo | EnumInfo) -> str:
        """Return the identity's name, naming it first if it has none.

        An anonymous identity aliased by a typedef takes the typedef's name;
        any other gets the next `UnnamedN`. The name is written back onto the
        shared identity so every later reference agrees.
        """
        if not info.name:
            owner = self._typedef_owners.get(info)
            if owner is not None:
                info.name = owner.name
            else:
                self._unnamed_counter += 1
                info.name = f"Unnamed{self._unnamed_counter}"
                logger.debug("allocated synthetic name %s", info.name)
        return info.name

    def owns_definition(self, typedef: TypedefInfo) -> bool:
        """True if `typedef` collapses into the definition of the anonymous type it aliases."""
        target = typedef.type
        if not isinstance(target, (TComp, TEnum)):
            return False
        return self._typedef_owners.get(target.info) is typedef

    # --- Dispatch ---

    def _emit_type_decl(self, decl):
        if isinstance(decl, TypedefDecl):
            emit_typedef(self, decl.info)
        elif isinstance(decl, AggregateForwardDecl):
            emit_comp_forward(self, decl.info)
        elif isinstance(decl, AggregateDefDecl):
            emit_comp_def(self, decl.info)
        elif isinstance(decl, EnumForwardDecl):
            emit_enum_forward(self, decl.info)
        elif isinstance(decl, EnumDefDecl):
            emit_enum_def(self, decl.info)


def _find_typedef_owners(decls) -> dict:
    """Map each anonymous identity to the first typedef that aliases it directly."""
    owners = {}
    for decl in decls:
        if not isinstance(decl, TypedefDecl):
            continue
        target = decl.info.type
        if isinstance(target, (TComp, TEnum)) and not target.info.name:
            owners.setdefault(target.info, decl.info)
    return owners
