"""Rust reserved words and identifier escaping.

Every identifier the generator emits goes through rust_id() so a C name that
collides with a Rust keyword still produces a valid item.
"""

ESCAPE_PREFIX = "_"

# Strict, reserved and weak keywords of the target language.
RUST_KEYWORDS: frozenset[str] = frozenset({
    # strict
    "as", "break", "const", "continue", "crate", "else", "enum", "extern",
    "false", "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod",
    "move", "mut", "pub", "ref", "return", "self", "Self", "static",
    "struct", "super", "trait", "true", "type", "unsafe", "use", "where",
    "while", "async", "await", "dyn",
    # reserved for future use
    "abstract", "become", "box", "do", "final", "macro", "override", "priv",
    "typeof", "unsized", "virtual", "yield", "try", "gen",
    # weak
    "union", "macro_rules", "raw", "safe",
    # wildcard pattern, not usable as an item or binding name
    "_",
})


def rust_id(name: str, keywords: frozenset[str] = RUST_KEYWORDS,
            prefix: str = ESCAPE_PREFIX) -> str:
    """Escape `name` if it is a reserved word, otherwise return it unchanged."""
    if name in keywords:
        return prefix + name
    return name
