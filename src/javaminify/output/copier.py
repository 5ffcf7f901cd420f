"""Copying retained classes and their resources into the output tree."""

from pathlib import Path

from rich.console import Console

from javaminify.models.results import CopyReport
from javaminify.output.prepare import copy_path
from javaminify.paths import SOURCE_SUFFIX, class_to_source, source_to_resource_dir

console = Console(stderr=True)


def copy_classes(
    classes: list[str],
    input_dir: Path,
    output_dir: Path,
    verbose: bool = False,
) -> CopyReport:
    """Copy the source file of every class, then the resources next to them.

    Classes without a local source file (synthetic ones, or classes that
    come from a dependency jar) are reported and skipped.
    """
    report = CopyReport()
    source_dirs: list[Path] = []
    seen: set[Path] = set()
    handled: set[Path] = set()

    for cls in classes:
        source = class_to_source(input_dir, cls)
        if source.parent not in seen:
            seen.add(source.parent)
            source_dirs.append(source.parent)
        if source in handled:
            continue
        handled.add(source)
        if copy_path(input_dir, output_dir, source):
            report.copied_sources.append(source)
            if verbose:
                console.print(f"[dim]- {source.relative_to(input_dir)}[/]")
        else:
            report.missing_sources.append(source)

    console.print("[dim]Copying resources...[/]")
    for source_dir in source_dirs:
        # non-source files living next to the classes
        if source_dir.is_dir():
            report.copied_resources.extend(_copy_resources(source_dir, input_dir, output_dir))

        resource_dir = source_to_resource_dir(input_dir, source_dir)
        if not resource_dir.is_dir():
            report.missing_resource_dirs.append(resource_dir)
            if verbose:
                console.print(f"[dim]No resources:[/] {resource_dir}")
            continue
        if verbose:
            console.print(f"[dim]- {resource_dir}[/]")
        report.copied_resources.extend(_copy_resources(resource_dir, input_dir, output_dir))

    return report


def _copy_resources(directory: Path, input_dir: Path, output_dir: Path) -> list[Path]:
    """Copy the plain, non-source files of a single directory."""
    copied = []
    for entry in sorted(directory.iterdir()):
        if entry.name in (".", "..") or entry.is_dir() or entry.name.endswith(SOURCE_SUFFIX):
            continue
        if copy_path(input_dir, output_dir, entry):
            copied.append(entry)
    return copied
