"""Rustdoc item kinds and their URL/class tokens."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from rustdoc_mcp.errors import UnknownKindError


class ItemKind(Enum):
    """Kinds of items rustdoc renders a page (or a listing entry) for."""

    MODULE = "module"
    EXTERN_CRATE = "extern-crate"
    IMPORT = "import"
    STRUCT = "struct"
    UNION = "union"
    ENUM = "enum"
    FUNCTION = "function"
    TYPE_ALIAS = "type-alias"
    STATIC = "static"
    TRAIT = "trait"
    IMPL = "impl"
    REQUIRED_METHOD = "required-method"
    PROVIDED_METHOD = "provided-method"
    STRUCT_FIELD = "struct-field"
    ENUM_VARIANT = "enum-variant"
    MACRO = "macro"
    PRIMITIVE = "primitive"
    ASSOCIATED_TYPE = "associated-type"
    CONSTANT = "constant"
    ASSOCIATED_CONSTANT = "associated-constant"
    FOREIGN_TYPE = "foreign-type"
    KEYWORD = "keyword"
    ATTRIBUTE_MACRO = "attribute-macro"
    DERIVE_MACRO = "derive-macro"
    TRAIT_ALIAS = "trait-alias"
    ATTRIBUTE = "attribute"


# Token used in page file names (struct.Foo.html) and listing link classes.
KIND_TOKENS: MappingProxyType[ItemKind, str] = MappingProxyType(
    {
        ItemKind.MODULE: "mod",
        ItemKind.EXTERN_CRATE: "externcrate",
        ItemKind.IMPORT: "import",
        ItemKind.STRUCT: "struct",
        ItemKind.UNION: "union",
        ItemKind.ENUM: "enum",
        ItemKind.FUNCTION: "fn",
        ItemKind.TYPE_ALIAS: "type",
        ItemKind.STATIC: "static",
        ItemKind.TRAIT: "trait",
        ItemKind.IMPL: "impl",
        ItemKind.REQUIRED_METHOD: "tymethod",
        ItemKind.PROVIDED_METHOD: "method",
        ItemKind.STRUCT_FIELD: "structfield",
        ItemKind.ENUM_VARIANT: "variant",
        ItemKind.MACRO: "macro",
        ItemKind.PRIMITIVE: "primitive",
        ItemKind.ASSOCIATED_TYPE: "associatedtype",
        ItemKind.CONSTANT: "constant",
        ItemKind.ASSOCIATED_CONSTANT: "associatedconstant",
        ItemKind.FOREIGN_TYPE: "foreigntype",
        ItemKind.KEYWORD: "keyword",
        ItemKind.ATTRIBUTE_MACRO: "attr",
        ItemKind.DERIVE_MACRO: "derive",
        ItemKind.TRAIT_ALIAS: "traitalias",
        ItemKind.ATTRIBUTE: "attribute",
    }
)

TOKEN_KINDS: MappingProxyType[str, ItemKind] = MappingProxyType(
    {token: kind for kind, token in KIND_TOKENS.items()}
)


def parse_kind(token: str | ItemKind) -> ItemKind:
    """Map a rustdoc token (``"fn"``, ``"struct"``...) to its ``ItemKind``."""
    if isinstance(token, ItemKind):
        return token
    try:
        return TOKEN_KINDS[token]
    except KeyError:
        raise UnknownKindError(token) from None


def kind_token(kind: ItemKind) -> str:
    """Return the rustdoc token for ``kind``."""
    return KIND_TOKENS[kind]
