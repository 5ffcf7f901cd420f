"""Creating or cleaning the output build environment."""

import shutil
from pathlib import Path

from rich.console import Console

from javaminify.errors import CopyError
from javaminify.paths import RESOURCE_ROOT, SOURCE_ROOT

console = Console(stderr=True)

SKELETON_DIRS = [SOURCE_ROOT, RESOURCE_ROOT]


def clean_output_dir(output_dir: Path) -> None:
    """Create ``output_dir`` or remove everything inside it."""
    if not output_dir.exists():
        console.print("[dim]Creating output dir...[/]")
        try:
            output_dir.mkdir(parents=True)
        except OSError as e:
            raise CopyError(f"Failed to create output directory: {output_dir}\n{e}") from e
        return

    entries = list(output_dir.iterdir())
    if not entries:
        return

    console.print("[dim]Cleaning output dir...[/]")
    for entry in entries:
        if entry.name in (".", ".."):
            continue
        if entry.is_dir() and not entry.is_symlink():
            try:
                shutil.rmtree(entry)
            except OSError as e:
                raise CopyError(f"Failed to delete directory: {entry}\n{e}") from e
        else:
            try:
                entry.unlink()
            except OSError as e:
                raise CopyError(f"Failed to delete file: {entry}\n{e}") from e


def copy_path(input_dir: Path, output_dir: Path, path: Path) -> bool:
    """Copy a file or directory below ``input_dir`` to the same spot below ``output_dir``.

    Returns False (after logging) when ``path`` does not exist.

    Raises:
        CopyError: If the copy itself fails.
    """
    if not path.exists():
        console.print(f"[yellow]Missing:[/] {path}")
        return False

    target = output_dir / path.relative_to(input_dir)
    try:
        if path.is_dir():
            shutil.copytree(path, target, dirs_exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(path, target)
    except (OSError, shutil.Error) as e:
        raise CopyError(f"Failed to copy: {path} -> {target}\n{e}") from e
    return True


def prepare_output_dir(input_dir: Path, output_dir: Path, auxiliary_paths: list[str]) -> None:
    """Clean the output, lay down the skeleton and copy the auxiliary paths."""
    clean_output_dir(output_dir)

    for skeleton in SKELETON_DIRS:
        (output_dir / skeleton).mkdir(parents=True, exist_ok=True)

    for aux in auxiliary_paths:
        copy_path(input_dir, output_dir, input_dir / aux)
