"""Centralized layout of the Maven build environment being minified."""

from pathlib import Path

# Build descriptor at the project root
POM_FILE = "pom.xml"

# Directory holding the built project jar
TARGET_DIR = "target"
SNAPSHOT_SUFFIX = "-SNAPSHOT.jar"

# Source and resource trees (also the skeleton of every output directory)
SOURCE_ROOT = "src/main/java"
RESOURCE_ROOT = "src/main/resources"
SOURCE_SUFFIX = ".java"

# Auxiliary paths copied verbatim from input to output
AUXILIARY_PATHS = [
    "src/main/assembly",  # assembly descriptors
    "src/main/latex",  # documentation sources
    "src/main/scripts",
    POM_FILE,
]

# Property files pruned after copying: (path, strip trailing "[]" from keys)
PROPERTY_FILES = [
    ("src/main/java/meka/gui/goe/GenericPropertiesCreator.props", False),
    ("src/main/java/meka/gui/goe/MekaEditors.props", True),
]

# Local artifact cache
MAVEN_REPOSITORY = Path(".m2") / "repository"


def get_pom_path(project_path: Path) -> Path:
    """Get the pom.xml path for a project."""
    return project_path / POM_FILE


def get_target_dir(project_path: Path) -> Path:
    """Get the directory with the built artifacts of a project."""
    return project_path / TARGET_DIR


def get_source_root(project_path: Path) -> Path:
    """Get the Java source root of a project."""
    return project_path / SOURCE_ROOT


def get_resource_root(project_path: Path) -> Path:
    """Get the resource root of a project."""
    return project_path / RESOURCE_ROOT


def get_default_repository() -> Path:
    """Get the local Maven repository of the current user."""
    return Path.home() / MAVEN_REPOSITORY


def class_to_source(project_path: Path, class_name: str) -> Path:
    """Map a fully qualified class name to its source file.

    Inner classes (``a.b.Outer$Inner``) live in the outer class' file.
    """
    outer = class_name.split("$", 1)[0]
    return get_source_root(project_path) / (outer.replace(".", "/") + SOURCE_SUFFIX)


def source_to_resource_dir(project_path: Path, source_dir: Path) -> Path:
    """Get the resource directory that mirrors a source directory."""
    return get_resource_root(project_path) / source_dir.relative_to(get_source_root(project_path))
