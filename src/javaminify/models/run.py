"""Data models for a single minification run."""

from dataclasses import dataclass, field
from pathlib import Path

from javaminify.config import (
    get_auxiliary_paths,
    get_build_command,
    get_mindeps_classpath,
    get_property_files,
    get_repository,
)


@dataclass(frozen=True)
class PropertyFile:
    """A property file whose keys name classes."""

    path: str  # relative to the project root
    strip_array: bool = False  # keys like "a.b.C[]" refer to "a.b.C"

    def class_name(self, key: str) -> str:
        if self.strip_array and key.endswith("[]"):
            return key[:-2]
        return key


@dataclass(frozen=True)
class Layout:
    """Declarative description of what gets built, copied and pruned."""

    build_command: tuple[str, ...]
    repository: Path
    auxiliary_paths: tuple[str, ...]
    property_files: tuple[PropertyFile, ...]
    mindeps_classpath: str | None = None

    @classmethod
    def from_config(cls, config: dict) -> "Layout":
        return cls(
            build_command=tuple(get_build_command(config)),
            repository=get_repository(config),
            auxiliary_paths=tuple(get_auxiliary_paths(config)),
            property_files=tuple(
                PropertyFile(path, strip_array) for path, strip_array in get_property_files(config)
            ),
            mindeps_classpath=get_mindeps_classpath(config),
        )


@dataclass(frozen=True)
class RunConfiguration:
    """Validated options of one run."""

    java_home: Path
    classes_file: Path
    input_dir: Path
    output_dir: Path
    packages: tuple[str, ...]
    additional_file: Path | None = None
    test: bool = False
    verbose: bool = False
    layout: Layout = field(default_factory=lambda: Layout.from_config({}))
