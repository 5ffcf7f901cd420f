"""Assembling the classpath handed to the dependency analyzer."""

from pathlib import Path

from rich.console import Console

from javaminify.analysis.descriptor import BuildDescriptor
from javaminify.errors import ClasspathError
from javaminify.models.descriptor import Classpath
from javaminify.paths import SNAPSHOT_SUFFIX, get_target_dir

console = Console(stderr=True)


def resolve_dependencies(descriptor: BuildDescriptor, repository: Path) -> list[Path]:
    """Resolve the non-test dependencies of a descriptor to local jars.

    Dependencies without group, artifact or version cannot be located and
    are skipped. A resolvable dependency whose jar is missing fails the
    whole classpath.

    Raises:
        ClasspathError: If an expected jar does not exist.
    """
    jars: list[Path] = []
    for dependency in descriptor.dependencies():
        if dependency.is_test:
            continue
        if not dependency.is_resolvable:
            console.print(f"[yellow]Skipping unresolvable dependency:[/] {dependency.coordinates}")
            continue
        jar = dependency.jar_path(repository)
        if not jar.exists():
            raise ClasspathError(
                f"Failed to determine 'dependency' tags to build classpath!\nFile not found: {jar}"
            )
        jars.append(jar)
    return jars


def find_project_jar(project_path: Path) -> Path:
    """Locate the snapshot jar built into the project's target directory."""
    target = get_target_dir(project_path)
    try:
        candidates = sorted(
            entry for entry in target.iterdir()
            if entry.name.endswith(SNAPSHOT_SUFFIX) and entry.is_file()
        )
    except OSError as e:
        raise ClasspathError(f"Failed to list directory: {target}\n{e}") from e
    if not candidates:
        raise ClasspathError(f"Project jar not found in directory: {target}")
    return candidates[0].resolve()


def assemble_classpath(
    descriptor: BuildDescriptor,
    project_path: Path,
    repository: Path,
) -> Classpath:
    """Build the analyzer classpath: project jar first, then dependency jars."""
    dependencies = resolve_dependencies(descriptor, repository)
    return Classpath(artifact=find_project_jar(project_path), dependencies=dependencies)
