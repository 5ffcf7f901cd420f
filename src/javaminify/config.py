"""Configuration loading for javaminify.

All keys are optional; anything missing falls back to the Maven layout
in :mod:`javaminify.paths`.

Example::

    {
      "build": {"command": ["./mvnw", "clean", "package", "-DskipTests=True"]},
      "maven": {"repository": "/opt/m2/repository"},
      "mindeps": {"classpath": "/opt/deps4j/deps4j.jar:/opt/deps4j/lib/*"},
      "layout": {
        "auxiliary": ["src/main/assembly", "pom.xml"],
        "properties": [{"path": "src/main/java/x/Editors.props", "strip_array": true}]
      }
    }
"""

import json
from pathlib import Path

from javaminify.errors import ValidationError
from javaminify.paths import AUXILIARY_PATHS, PROPERTY_FILES, get_default_repository

DEFAULT_BUILD_COMMAND = ["mvn", "clean", "compile", "package", "-DskipTests=True"]


def load_config(config_path: Path) -> dict:
    """Load a javaminify JSON configuration file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(f"Failed to load configuration: {config_path}\n{e}") from e
    if not isinstance(data, dict):
        raise ValidationError(f"Configuration must be a JSON object: {config_path}")
    return data


def get_build_command(config: dict) -> list[str]:
    """Get the command used to build a project directory."""
    return list(config.get("build", {}).get("command", DEFAULT_BUILD_COMMAND))


def get_repository(config: dict) -> Path:
    """Get the root of the local artifact cache."""
    repository = config.get("maven", {}).get("repository")
    return Path(repository).expanduser().resolve() if repository else get_default_repository()


def get_mindeps_classpath(config: dict) -> str | None:
    """Get the classpath for running the MinDeps analyzer, if configured."""
    return config.get("mindeps", {}).get("classpath")


def get_auxiliary_paths(config: dict) -> list[str]:
    """Get the paths copied verbatim into the output directory."""
    return list(config.get("layout", {}).get("auxiliary", AUXILIARY_PATHS))


def get_property_files(config: dict) -> list[tuple[str, bool]]:
    """Get the property files to prune as (path, strip_array) pairs."""
    entries = config.get("layout", {}).get("properties")
    if entries is None:
        return list(PROPERTY_FILES)
    return [(entry["path"], bool(entry.get("strip_array", False))) for entry in entries]
