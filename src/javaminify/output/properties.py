"""Ordered Java .properties files and pruning of unreachable class keys.

Files are read as ISO-8859-1 like ``java.util.Properties`` does. Lines
that are not removed are written back byte-for-byte, so comments, key
order and formatting survive a rewrite.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from javaminify.errors import PropertiesError
from javaminify.models.results import PropertyPatch
from javaminify.models.run import PropertyFile

console = Console(stderr=True)

ENCODING = "latin-1"
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_PHYSICAL_LINE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+$")


@dataclass
class PropertyEntry:
    """One key/value pair plus the physical lines it was read from."""

    key: str
    value: str
    lines: list[str] = field(default_factory=list)


class PropertiesDocument:
    """An ordered key/value mapping that keeps comments and layout."""

    def __init__(self, chunks: list[PropertyEntry | str] | None = None) -> None:
        # Either entries or verbatim comment/blank lines, in file order
        self._chunks: list[PropertyEntry | str] = chunks or []

    @classmethod
    def parse(cls, text: str) -> "PropertiesDocument":
        chunks: list[PropertyEntry | str] = []
        lines = _PHYSICAL_LINE.findall(text)
        i = 0
        while i < len(lines):
            line = lines[i]
            stripped = line.rstrip("\r\n").lstrip(_WHITESPACE)
            if not stripped or stripped[0] in "#!":
                chunks.append(line)
                i += 1
                continue

            raw = [line]
            logical = stripped
            while _continues(logical) and i + 1 < len(lines):
                i += 1
                raw.append(lines[i])
                logical = logical[:-1] + lines[i].rstrip("\r\n").lstrip(_WHITESPACE)
            if _continues(logical):
                logical = logical[:-1]
            key, value = _split_entry(logical)
            chunks.append(PropertyEntry(key=key, value=value, lines=raw))
            i += 1
        return cls(chunks)

    @classmethod
    def load(cls, path: Path) -> "PropertiesDocument":
        return cls.parse(path.read_text(encoding=ENCODING))

    def dumps(self) -> str:
        parts: list[str] = []
        for chunk in self._chunks:
            if isinstance(chunk, PropertyEntry):
                parts.extend(chunk.lines)
            else:
                parts.append(chunk)
        return "".join(parts)

    def save(self, path: Path) -> None:
        with open(path, "w", encoding=ENCODING, newline="") as f:
            f.write(self.dumps())

    def keys(self) -> list[str]:
        seen: dict[str, None] = {}
        for chunk in self._chunks:
            if isinstance(chunk, PropertyEntry):
                seen[chunk.key] = None
        return list(seen)

    def get(self, key: str, default: str | None = None) -> str | None:
        value = default
        for chunk in self._chunks:
            if isinstance(chunk, PropertyEntry) and chunk.key == key:
                value = chunk.value
        return value

    def __contains__(self, key: object) -> bool:
        return key in self.keys()

    def __len__(self) -> int:
        return len(self.keys())

    def remove(self, key: str) -> bool:
        """Remove every occurrence of ``key``; return whether anything was removed."""
        before = len(self._chunks)
        self._chunks = [
            chunk for chunk in self._chunks
            if not (isinstance(chunk, PropertyEntry) and chunk.key == key)
        ]
        return len(self._chunks) != before


def _continues(logical: str) -> bool:
    """A line continues when it ends in an odd number of backslashes."""
    trailing = len(logical) - len(logical.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(logical: str) -> tuple[str, str]:
    i = 0
    while i < len(logical):
        ch = logical[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        i += 1
    key = logical[:i]
    rest = logical[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(key), _unescape(rest)


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\" or i + 1 >= len(text):
            out.append(ch)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u" and re.fullmatch(r"[0-9a-fA-F]{4}", text[i + 2:i + 6]):
            out.append(chr(int(text[i + 2:i + 6], 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def prune_property_file(path: Path, spec: PropertyFile, retained: set[str]) -> PropertyPatch:
    """Remove keys naming classes outside ``retained``; rewrite only if needed.

    Raises:
        PropertiesError: If the file cannot be loaded or saved.
    """
    try:
        document = PropertiesDocument.load(path)
    except (OSError, UnicodeDecodeError) as e:
        raise PropertiesError(f"Failed to load properties: {path}\n{e}") from e

    patch = PropertyPatch(file=path)
    for key in document.keys():
        if spec.class_name(key) not in retained:
            document.remove(key)
            patch.removed.append(key)

    if patch.modified:
        try:
            document.save(path)
        except OSError as e:
            raise PropertiesError(f"Failed to save properties: {path}\n{e}") from e
    return patch


def patch_properties(
    output_dir: Path,
    property_files: tuple[PropertyFile, ...] | list[PropertyFile],
    retained: set[str],
) -> list[PropertyPatch]:
    """Prune every configured property file present in the output tree."""
    patches = []
    for spec in property_files:
        path = output_dir / spec.path
        if not path.exists():
            console.print(f"[dim]Property file not present:[/] {path}")
            continue
        patch = prune_property_file(path, spec, retained)
        if patch.modified:
            console.print(f"[dim]Removed {len(patch.removed)} key(s) from[/] {path}")
        patches.append(patch)
    return patches
