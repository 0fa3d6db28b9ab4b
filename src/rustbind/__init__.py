"""rustbind: lowers a C declaration model to Rust FFI bindings."""

from .errors import BindgenError as BindgenError, ModelInvariantError as ModelInvariantError
from .ir import Bindings as Bindings, RustEmitter as RustEmitter
from .ir.gen import BindingGenerator as BindingGenerator, generate_bindings as generate_bindings
from .keywords import RUST_KEYWORDS as RUST_KEYWORDS, rust_id as rust_id
