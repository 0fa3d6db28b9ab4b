"""Binding generation package: C type model -> Rust IR lowering."""

from ...keywords import ESCAPE_PREFIX
from ..nodes import Bindings
from .generator import BindingGenerator, partition_declarations
from .redundancy import remove_redundant_decls


def generate_bindings(declarations, link: str, *, keywords=None,
                      escape_prefix: str = ESCAPE_PREFIX) -> Bindings:
    """Lower a C declaration list into Rust bindings for the library `link`.

    This is the main entry point for the generation pipeline.
    """
    gen = BindingGenerator(declarations, link, keywords=keywords,
                           escape_prefix=escape_prefix)
    return gen.generate()


__all__ = ["generate_bindings", "BindingGenerator", "partition_declarations",
           "remove_redundant_decls"]
