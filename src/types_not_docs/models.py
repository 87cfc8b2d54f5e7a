"""Data models for the extracted documentation of TypeScript declarations."""

from dataclasses import dataclass

DEFAULT_TITLE = "API Reference"


@dataclass(frozen=True)
class ParsedProperty:
    """A property (or method signature) of an exported interface."""

    name: str
    type: str  # rendered type text, e.g. "string | null"
    required: bool
    description: str | None = None


@dataclass(frozen=True)
class ParsedInterface:
    """An exported interface declaration."""

    name: str
    properties: tuple[ParsedProperty, ...] = ()
    description: str | None = None
    extends: tuple[str, ...] | None = None  # None when there is no extends clause


@dataclass(frozen=True)
class ParsedTypeAlias:
    """An exported type alias declaration."""

    name: str
    type: str
    description: str | None = None


@dataclass(frozen=True)
class ParsedParameter:
    """A parameter of an exported function."""

    name: str
    type: str
    required: bool
    description: str | None = None


@dataclass(frozen=True)
class ParsedFunction:
    """An exported function declaration or function-valued binding."""

    name: str
    return_type: str
    parameters: tuple[ParsedParameter, ...] = ()
    is_async: bool = False
    description: str | None = None


@dataclass(frozen=True)
class ParsedFile:
    """All exported declarations found in a single source file."""

    file_path: str
    interfaces: tuple[ParsedInterface, ...] = ()
    type_aliases: tuple[ParsedTypeAlias, ...] = ()
    functions: tuple[ParsedFunction, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.interfaces or self.type_aliases or self.functions)


@dataclass(frozen=True)
class GeneratorOptions:
    """Options recognised by the markdown renderer."""

    title: str = DEFAULT_TITLE
