"""Extract exported interfaces, type aliases and functions from a TypeScript file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from types_not_docs.comment_resolver import (
    resolve_description,
    resolve_param_descriptions,
)
from types_not_docs.models import (
    ParsedFile,
    ParsedFunction,
    ParsedInterface,
    ParsedParameter,
    ParsedProperty,
    ParsedTypeAlias,
)
from types_not_docs.typed_ast import Declaration, SourceTree, load_source_tree

if TYPE_CHECKING:
    from tree_sitter import Node

    from types_not_docs.jsdoc import JsDocBlock

ANONYMOUS_FUNCTION_NAME = "anonymous"


def parse_file(path: str | Path) -> ParsedFile:
    """Parse a TypeScript file and extract all exported declarations.

    Raises:
        ExtractionFailure: the file cannot be read or parsed.
    """
    tree = load_source_tree(Path(path))
    return extract_declarations(tree, file_path=str(path))


def extract_declarations(tree: SourceTree, file_path: str) -> ParsedFile:
    """Build a `ParsedFile` from an already parsed source tree."""
    interfaces: list[ParsedInterface] = []
    type_aliases: list[ParsedTypeAlias] = []
    functions: list[ParsedFunction] = []

    declarations = list(tree.declarations())
    implemented = {
        tree.name_of(d.node)
        for d in declarations
        if d.kind == "function" and d.node.type != "function_signature"
    }

    for decl in declarations:
        if decl.kind == "interface":
            if tree.is_exported(decl, tree.name_of(decl.node)):
                interfaces.append(_parse_interface(tree, decl))
        elif decl.kind == "type_alias":
            if tree.is_exported(decl, tree.name_of(decl.node)):
                type_aliases.append(_parse_type_alias(tree, decl))
        elif decl.kind == "function":
            name = tree.name_of(decl.node)
            # Overload signatures are documented through their implementation
            if decl.node.type == "function_signature" and name in implemented:
                continue
            if tree.is_exported(decl, name):
                functions.append(_parse_function_declaration(tree, decl))
        elif decl.kind == "variable":
            functions.extend(_parse_function_bindings(tree, decl))

    return ParsedFile(
        file_path=file_path,
        interfaces=tuple(interfaces),
        type_aliases=tuple(type_aliases),
        functions=tuple(functions),
    )


# -----------------------------
# Interfaces
# -----------------------------


def _parse_interface(tree: SourceTree, decl: Declaration) -> ParsedInterface:
    node = decl.node
    return ParsedInterface(
        name=tree.name_of(node) or "",
        description=resolve_description(tree.jsdocs(decl.statement)),
        properties=_parse_properties(tree, node),
        extends=_extends_clause(tree, node),
    )


def _parse_properties(tree: SourceTree, iface: Node) -> tuple[ParsedProperty, ...]:
    """Collect properties, then method signatures, each in declaration order."""
    body = iface.child_by_field_name("body")
    if body is None:
        return ()
    members = body.named_children

    properties = [
        ParsedProperty(
            name=tree.name_of(member) or "",
            type=tree.render_annotation(member.child_by_field_name("type")),
            required=not tree.is_optional(member),
            description=resolve_description(tree.jsdocs(member)),
        )
        for member in members
        if member.type == "property_signature"
    ]
    # Methods are normalized into properties with a function type
    properties.extend(
        ParsedProperty(
            name=tree.name_of(member) or "",
            type=tree.function_type(member),
            required=not tree.is_optional(member),
            description=resolve_description(tree.jsdocs(member)),
        )
        for member in members
        if member.type == "method_signature"
    )
    return tuple(properties)


def _extends_clause(tree: SourceTree, iface: Node) -> tuple[str, ...] | None:
    clause = next(
        (c for c in iface.children if c.type == "extends_type_clause"), None
    )
    if clause is None:
        return None
    supertypes = tuple(
        tree.render(c) for c in clause.named_children if c.type != "comment"
    )
    return supertypes or None


# -----------------------------
# Type aliases
# -----------------------------


def _parse_type_alias(tree: SourceTree, decl: Declaration) -> ParsedTypeAlias:
    value = decl.node.child_by_field_name("value")
    return ParsedTypeAlias(
        name=tree.name_of(decl.node) or "",
        type=tree.render(value) if value is not None else "any",
        description=resolve_description(tree.jsdocs(decl.statement)),
    )


# -----------------------------
# Functions
# -----------------------------


def _parse_function_declaration(tree: SourceTree, decl: Declaration) -> ParsedFunction:
    return _build_function(
        tree,
        name=tree.name_of(decl.node) or ANONYMOUS_FUNCTION_NAME,
        fn=decl.node,
        jsdocs=tree.jsdocs(decl.statement),
    )


def _parse_function_bindings(
    tree: SourceTree, decl: Declaration
) -> list[ParsedFunction]:
    """Parse `export const foo = (...) => ...` style bindings of a statement."""
    functions = []
    for declarator in decl.node.named_children:
        if declarator.type != "variable_declarator":
            continue
        name_node = declarator.child_by_field_name("name")
        value = declarator.child_by_field_name("value")
        if name_node is None or not tree.is_function_initializer(value):
            continue
        name = tree.text(name_node)
        if not tree.is_exported(decl, name):
            continue
        # JSDoc sits on the variable statement, not on the function expression
        jsdocs = tree.jsdocs(decl.statement)
        functions.append(_build_function(tree, name=name, fn=value, jsdocs=jsdocs))
    return functions


def _build_function(
    tree: SourceTree, name: str, fn: Node, jsdocs: list[JsDocBlock]
) -> ParsedFunction:
    param_descriptions = resolve_param_descriptions(jsdocs)
    parameters = tuple(
        ParsedParameter(
            name=param_name,
            type=type_text,
            required=required,
            description=param_descriptions.get(param_name),
        )
        for param_name, type_text, required in tree.parameters(fn)
    )
    return ParsedFunction(
        name=name,
        description=resolve_description(jsdocs),
        parameters=parameters,
        return_type=tree.return_type(fn),
        is_async=tree.is_async(fn),
    )
