"""Typed syntax tree access for TypeScript sources, backed by tree-sitter.

`SourceTree` is the only place that knows about tree-sitter node shapes. The
extractor asks it for top-level declarations, export status, attached JSDoc
blocks and rendered type text.
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import tree_sitter_typescript
from tree_sitter import Language, Parser

from types_not_docs.errors import ExtractionFailure
from types_not_docs.jsdoc import JsDocBlock, is_jsdoc_comment, parse_jsdoc

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tree_sitter import Node

TYPESCRIPT = Language(tree_sitter_typescript.language_typescript())
TSX = Language(tree_sitter_typescript.language_tsx())

WHITESPACE_RE = re.compile(r"\s+")
LEADING_OPERATOR_RE = re.compile(r"^[|&]\s*")

DECLARATION_KINDS = {
    "interface_declaration": "interface",
    "type_alias_declaration": "type_alias",
    "function_declaration": "function",
    "generator_function_declaration": "function",
    "function_signature": "function",
    "lexical_declaration": "variable",
    "variable_declaration": "variable",
}
# Older grammars name function expressions "function"
FUNCTION_EXPRESSION_TYPES = {
    "arrow_function",
    "function_expression",
    "function",
    "generator_function",
}
GENERATOR_TYPES = {"generator_function_declaration", "generator_function"}
NESTED_SCOPE_TYPES = FUNCTION_EXPRESSION_TYPES | {
    "function_declaration",
    "generator_function_declaration",
    "method_definition",
    "class_declaration",
    "class",
}
LITERAL_TYPES = {
    "number": "number",
    "string": "string",
    "template_string": "string",
    "true": "boolean",
    "false": "boolean",
}
# Literal nodes whose text is rendered untouched
VERBATIM_TYPES = {"string", "template_string", "template_literal_type"}


@dataclass(frozen=True)
class Declaration:
    """A top-level declaration together with the statement that carries its docs."""

    kind: str  # interface / type_alias / function / variable
    node: Node
    statement: Node
    exported: bool  # carries an export modifier itself


def language_for(path: Path) -> Language:
    """Pick the grammar for a source file by its suffix."""
    return TSX if path.suffix.lower() == ".tsx" else TYPESCRIPT


def load_source_tree(path: Path) -> SourceTree:
    """Read and parse a TypeScript source file."""
    try:
        source = path.read_bytes()
    except OSError as exc:
        raise ExtractionFailure(str(path), exc.strerror or str(exc)) from exc
    return SourceTree.parse(str(path), source, language_for(path))


def _walk(root: Node) -> Iterator[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _verbatim_nodes(root: Node) -> Iterator[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in VERBATIM_TYPES:
            yield node
        else:
            stack.extend(node.children)


class SourceTree:
    """A parsed source file with the queries the extractor needs."""

    def __init__(self, file_path: str, source: bytes, root: Node) -> None:
        """Index comments and local export clauses of a parsed file."""
        self.file_path = file_path
        self.source = source
        self.root = root
        self._comments = [n for n in _walk(root) if n.type == "comment"]
        self._comment_starts = [c.start_byte for c in self._comments]
        self._comment_ends = [c.end_byte for c in self._comments]
        self.exported_names = self._collect_exported_names()

    @classmethod
    def parse(
        cls, file_path: str, source: bytes, language: Language = TYPESCRIPT
    ) -> SourceTree:
        """Parse source bytes, rejecting undecodable or malformed input."""
        try:
            source.decode("utf-8")
        except UnicodeDecodeError as exc:
            reason = f"not valid UTF-8 ({exc.reason})"
            raise ExtractionFailure(file_path, reason) from exc

        tree = Parser(language).parse(source)
        root = tree.root_node
        if root.has_error:
            bad = next(
                (n for n in _walk(root) if n.type == "ERROR" or n.is_missing), root
            )
            line = bad.start_point[0] + 1
            raise ExtractionFailure(file_path, f"syntax error at line {line}")
        return cls(file_path, source, root)

    # -----------------------------
    # Text
    # -----------------------------

    def text(self, node: Node) -> str:
        """Return the exact source text of a node."""
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def render(self, node: Node) -> str:
        """Render a node as canonical source text.

        Comments are dropped and whitespace runs collapse to one space, except
        inside string and template literals, which are kept verbatim. A leading
        `|` or `&` of a multi-line union or intersection is dropped.
        """
        start, end = node.start_byte, node.end_byte
        first = bisect.bisect_left(self._comment_starts, start)
        cuts = [
            (c.start_byte, c.end_byte, False)
            for c in self._comments[first:]
            if c.end_byte <= end
        ]
        cuts += [(n.start_byte, n.end_byte, True) for n in _verbatim_nodes(node)]
        cuts.sort()

        pieces: list[str] = []
        code = ""
        pos = start
        for cut_start, cut_end, verbatim in cuts:
            if cut_start < pos:
                continue  # comment inside a literal
            code += self.source[pos:cut_start].decode("utf-8")
            if verbatim:
                pieces.append(WHITESPACE_RE.sub(" ", code))
                pieces.append(self.source[cut_start:cut_end].decode("utf-8"))
                code = ""
            else:
                code += " "
            pos = cut_end
        code += self.source[pos:end].decode("utf-8")
        pieces.append(WHITESPACE_RE.sub(" ", code))
        return LEADING_OPERATOR_RE.sub("", "".join(pieces).strip())

    def render_annotation(self, annotation: Node | None) -> str:
        """Render a `: Type` annotation without its colon."""
        if annotation is None:
            return "any"
        text = self.render(annotation)
        if text.startswith(":"):
            text = LEADING_OPERATOR_RE.sub("", text[1:].strip())
        return text.strip()

    # -----------------------------
    # Declarations and exports
    # -----------------------------

    def declarations(self) -> Iterator[Declaration]:
        """Yield top-level declarations in source order."""
        for stmt in self.root.named_children:
            if stmt.type == "export_statement":
                node = stmt.child_by_field_name("declaration")
                if node is None:
                    node = self._default_function(stmt)
                if node is None:
                    continue
                exported = True
            else:
                node = stmt
                exported = False
            if node.type == "ambient_declaration":
                node = next(
                    (c for c in node.named_children if c.type in DECLARATION_KINDS),
                    node,
                )
            kind = DECLARATION_KINDS.get(node.type)
            if kind is None and node.type in FUNCTION_EXPRESSION_TYPES:
                kind = "function"
            if kind:
                yield Declaration(
                    kind=kind, node=node, statement=stmt, exported=exported
                )

    def _default_function(self, stmt: Node) -> Node | None:
        value = stmt.child_by_field_name("value")
        if value is not None and value.type in FUNCTION_EXPRESSION_TYPES - {
            "arrow_function"
        }:
            return value
        return None

    def _collect_exported_names(self) -> frozenset[str]:
        """Names exported by `export { a, b as c }` or `export default a;`."""
        names: set[str] = set()
        for stmt in self.root.named_children:
            if stmt.type != "export_statement":
                continue
            if stmt.child_by_field_name("source") is not None:
                continue
            for child in stmt.named_children:
                if child.type != "export_clause":
                    continue
                for spec in child.named_children:
                    name = spec.child_by_field_name("name")
                    if spec.type == "export_specifier" and name is not None:
                        names.add(self.text(name))
            value = stmt.child_by_field_name("value")
            if value is not None and value.type == "identifier":
                names.add(self.text(value))
        return frozenset(names)

    def is_exported(self, decl: Declaration, name: str | None) -> bool:
        """Check whether a declaration is part of the module's public surface."""
        return decl.exported or (name is not None and name in self.exported_names)

    def name_of(self, node: Node) -> str | None:
        name = node.child_by_field_name("name")
        return self.text(name) if name is not None else None

    # -----------------------------
    # Documentation comments
    # -----------------------------

    def jsdocs(self, node: Node) -> list[JsDocBlock]:
        """Return the JSDoc blocks attached to a node, in source order.

        Attached blocks are those separated from the node only by whitespace
        or other comments.
        """
        blocks: list[JsDocBlock] = []
        cursor = node.start_byte
        index = bisect.bisect_right(self._comment_ends, cursor) - 1
        while index >= 0:
            comment = self._comments[index]
            if self.source[comment.end_byte : cursor].strip():
                break
            text = self.text(comment)
            if is_jsdoc_comment(text):
                blocks.append(parse_jsdoc(text))
            cursor = comment.start_byte
            index -= 1
        blocks.reverse()
        return blocks

    # -----------------------------
    # Markers
    # -----------------------------

    @staticmethod
    def is_optional(node: Node) -> bool:
        """Report the `?` optional marker of a member or parameter."""
        return any(child.type == "?" for child in node.children)

    @staticmethod
    def is_async(node: Node) -> bool:
        return any(child.type == "async" for child in node.children)

    @staticmethod
    def is_function_initializer(node: Node | None) -> bool:
        return node is not None and node.type in FUNCTION_EXPRESSION_TYPES

    # -----------------------------
    # Signatures
    # -----------------------------

    def parameters(self, fn: Node) -> list[tuple[str, str, bool]]:
        """Return `(name, type, required)` for each parameter of a function."""
        params = fn.child_by_field_name("parameters")
        if params is None:
            single = fn.child_by_field_name("parameter")  # x => ...
            if single is None:
                return []
            return [(self.render(single), "any", True)]
        return [
            self._parameter(p)
            for p in params.named_children
            if p.type in {"required_parameter", "optional_parameter"}
        ]

    def _parameter(self, param: Node) -> tuple[str, str, bool]:
        pattern = param.child_by_field_name("pattern")
        annotation = param.child_by_field_name("type")
        value = param.child_by_field_name("value")
        is_rest = pattern is not None and pattern.type == "rest_pattern"

        if pattern is None:
            name = self.render(param)
        elif is_rest:
            name = self.render(pattern).lstrip(".").strip()
        else:
            name = self.render(pattern)

        if annotation is not None:
            type_text = self.render_annotation(annotation)
        elif value is not None:
            type_text = LITERAL_TYPES.get(value.type, "any")
        else:
            type_text = "any"

        required = param.type == "required_parameter" and value is None and not is_rest
        return name, type_text, required

    def return_type(self, fn: Node) -> str:
        """Render the declared return type, or a best-effort stand-in."""
        annotation = fn.child_by_field_name("return_type")
        if annotation is not None:
            return self.render_annotation(annotation)
        if fn.type in GENERATOR_TYPES:
            return "any"
        body = fn.child_by_field_name("body")
        if body is None or body.type != "statement_block" or self._returns_value(body):
            inferred = "any"
        else:
            inferred = "void"
        return f"Promise<{inferred}>" if self.is_async(fn) else inferred

    @staticmethod
    def _returns_value(body: Node) -> bool:
        stack = list(body.named_children)
        while stack:
            node = stack.pop()
            if node.type in NESTED_SCOPE_TYPES:
                continue
            if node.type == "return_statement" and any(
                c.type != "comment" for c in node.named_children
            ):
                return True
            stack.extend(node.named_children)
        return False

    def function_type(self, fn: Node) -> str:
        """Synthesize `(name: type, ...) => returnType` for a method signature."""
        params = ", ".join(
            f"{name}: {type_text}" for name, type_text, _ in self.parameters(fn)
        )
        return f"({params}) => {self.return_type(fn)}"
