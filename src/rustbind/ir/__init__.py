"""IR package: nodes and the Rust emitter."""

from .nodes import (
    Bindings, RsArray, RsCallback, RsConst, RsField, RsForeignBlock,
    RsForeignFn, RsForeignStatic, RsOpaque, RsParam, RsPath, RsPtr,
    RsStruct, RsTypeAlias,
)
from .emitter import RustEmitter
