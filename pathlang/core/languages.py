"""Language registry and path-based language resolution.

Single source of truth for language/extension mappings used by:
- Language detection (language ids such as "python", "yaml")
- Editor highlighting (Monaco-style highlighter ids)
- Snippet fences and LSP language ids

To add a new language, add a single entry to LANGUAGE_REGISTRY. The lookup
indexes are derived from the registry once at import time and are read-only.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from pathlang.domain.exceptions import UnknownLanguageError

logger = logging.getLogger(__name__)

PLAINTEXT_LANGUAGE: Final = "text"
PLAINTEXT_HIGHLIGHTER: Final = "plaintext"


@dataclass(frozen=True)
class LanguageSpec:
    """Static description of one supported language.

    Attributes:
        id: Unique language id (e.g., "bash", "yaml").
        extensions: Lowercase file extensions without the leading dot.
            Empty for languages identified only by filename.
        filenames: Exact filenames that identify the language, matched
            case-insensitively. None when the language has none.
        monaco: Highlighter id for the editor, or None if not mapped.
    """

    id: str
    extensions: tuple[str, ...] = ()
    filenames: tuple[str, ...] | None = None
    monaco: str | None = None


@dataclass(frozen=True)
class LanguageIndexes:
    """Reverse lookup tables derived from a registry.

    Attributes:
        by_extension: Extension -> language id.
        by_filename: Lowercased filename -> language id.
        highlighters: Language id -> highlighter id.
    """

    by_extension: Mapping[str, str]
    by_filename: Mapping[str, str]
    highlighters: Mapping[str, str]


# Master registry. Order matters: on a duplicate extension or filename the
# later entry wins.
LANGUAGE_REGISTRY: Final[tuple[LanguageSpec, ...]] = (
    LanguageSpec(id="bash", extensions=("bash", "sh"), monaco="shell"),
    LanguageSpec(id="c", extensions=("c", "h")),
    LanguageSpec(id="cpp", extensions=("cpp", "hpp")),
    LanguageSpec(id="css", extensions=("css",), monaco="css"),
    LanguageSpec(id="graphql", extensions=("gql", "graphql"), monaco="graphql"),
    LanguageSpec(id="go", extensions=("go",)),
    LanguageSpec(id="java", extensions=("java",)),
    LanguageSpec(id="javascript", extensions=("js", "mjs"), monaco="javascript"),
    LanguageSpec(id="json", extensions=("json",), monaco="json"),
    LanguageSpec(id="jsx", extensions=("jsx",), monaco="javascript"),
    LanguageSpec(id="kotlin", extensions=("kt",)),
    LanguageSpec(id="markdown", extensions=("md",), monaco="markdown"),
    LanguageSpec(id="php", extensions=("php",)),
    LanguageSpec(id="prisma", extensions=("prisma",), monaco="prisma"),
    LanguageSpec(id="rust", extensions=("rs",)),
    LanguageSpec(id="scss", extensions=("sass", "scss"), monaco="scss"),
    LanguageSpec(id="sql", extensions=("sql",), monaco="sql"),
    LanguageSpec(id="swift", extensions=("swift",)),
    LanguageSpec(id="terraform", extensions=("tf", "tfvars", "hcl"), monaco="terraform"),
    LanguageSpec(id="toml", extensions=("toml",)),
    LanguageSpec(id="typescript", extensions=("ts",), monaco="typescript"),
    LanguageSpec(id="tsx", extensions=("tsx",), monaco="typescript"),
    LanguageSpec(id="text", extensions=("txt",), monaco="plaintext"),
    LanguageSpec(id="xml", extensions=("xml",)),
    LanguageSpec(id="yaml", extensions=("yaml", "yml"), monaco="yaml"),
    LanguageSpec(id="lua", extensions=("lua",)),
    LanguageSpec(id="ruby", extensions=("rb", "rake")),
    LanguageSpec(id="markup", extensions=("html",), monaco="html"),
    LanguageSpec(
        id="dockerfile",
        extensions=(),
        filenames=("dockerfile",),
        monaco="dockerfile",
    ),
)


def build_indexes(registry: Iterable[LanguageSpec]) -> LanguageIndexes:
    """Build read-only lookup indexes from a language registry.

    Entries are applied in order, so a later spec sharing an extension or
    filename with an earlier one replaces it.

    Args:
        registry: Ordered language specs.

    Returns:
        LanguageIndexes wrapping immutable mappings.
    """
    by_extension: dict[str, str] = {}
    by_filename: dict[str, str] = {}
    highlighters: dict[str, str] = {}

    for spec in registry:
        for ext in spec.extensions:
            by_extension[ext] = spec.id
        for name in spec.filenames or ():
            by_filename[name.lower()] = spec.id
        if spec.monaco:
            highlighters[spec.id] = spec.monaco

    return LanguageIndexes(
        by_extension=MappingProxyType(by_extension),
        by_filename=MappingProxyType(by_filename),
        highlighters=MappingProxyType(highlighters),
    )


_INDEXES: Final = build_indexes(LANGUAGE_REGISTRY)
_SPECS_BY_ID: Final[Mapping[str, LanguageSpec]] = MappingProxyType(
    {spec.id: spec for spec in LANGUAGE_REGISTRY}
)

EXTENSION_TO_LANGUAGE: Final = _INDEXES.by_extension
FILENAME_TO_LANGUAGE: Final = _INDEXES.by_filename
LANGUAGE_TO_MONACO: Final = _INDEXES.highlighters

logger.debug(
    "Language indexes built: %d languages, %d extensions, %d filenames",
    len(LANGUAGE_REGISTRY),
    len(EXTENSION_TO_LANGUAGE),
    len(FILENAME_TO_LANGUAGE),
)


def language_from_path(path: str | None) -> str | None:
    """Resolve the language id for a file path.

    Exact filename matches (e.g., "Dockerfile") take priority over the
    extension. Only the final "/"-separated segment is considered, and only
    its last extension.

    Args:
        path: File path, possibly empty or None.

    Returns:
        Language id, or None if nothing matches.
    """
    if not path:
        return None

    file_name = path.rsplit("/", 1)[-1]
    by_name = FILENAME_TO_LANGUAGE.get(file_name.lower())
    if by_name:
        return by_name

    # A leading dot marks a dotfile, a trailing one an empty extension
    dot_index = file_name.rfind(".")
    if dot_index <= 0 or dot_index == len(file_name) - 1:
        return None

    ext = file_name[dot_index + 1 :].lower()
    return EXTENSION_TO_LANGUAGE.get(ext)


def monaco_language_from_path(path: str | None) -> str:
    """Resolve the editor highlighter id for a file path.

    Args:
        path: File path, possibly empty or None.

    Returns:
        Highlighter id. Defaults to "plaintext" for unknown paths, plain text
        files, and languages without a highlighter mapping.
    """
    language = language_from_path(path)
    if not language or language == PLAINTEXT_LANGUAGE:
        return PLAINTEXT_HIGHLIGHTER
    return LANGUAGE_TO_MONACO.get(language, PLAINTEXT_HIGHLIGHTER)


def get_language_spec(language_id: str) -> LanguageSpec | None:
    """Get the registry entry for a language id, or None if unregistered."""
    return _SPECS_BY_ID.get(language_id)


def require_language_spec(language_id: str) -> LanguageSpec:
    """Get the registry entry for a language id.

    Raises:
        UnknownLanguageError: If the id is not registered.
    """
    spec = get_language_spec(language_id)
    if spec is None:
        raise UnknownLanguageError(language_id)
    return spec


def supported_languages() -> tuple[str, ...]:
    """Get all registered language ids in registry order."""
    return tuple(spec.id for spec in LANGUAGE_REGISTRY)
