"""Error types raised by the binding generator."""


class BindgenError(Exception):
    pass


class ModelInvariantError(BindgenError):
    """The upstream type model broke an invariant the generator relies on.

    Always fatal: it points at a parser bug, not at anything the user of the
    generated bindings can fix.
    """

    def __init__(self, message: str, decl_name: str = ""):
        self.decl_name = decl_name
        if decl_name:
            message = f"{message} (declaration '{decl_name}')"
        super().__init__(message)
