"""Rich summary of a minification run."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from javaminify.models.results import MinifyResult

console = Console(stderr=True)


def build_summary_table(result: MinifyResult) -> Table:
    report = result.copy_report

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Classpath entries", str(len(result.classpath)))
    table.add_row("Retained classes", str(len(result.retained_classes)))
    table.add_row("", "")
    table.add_row("Source files copied", str(len(report.copied_sources)))
    missing_color = "yellow" if report.missing_sources else "green"
    table.add_row(
        f"  [{missing_color}]without local source[/]", str(len(report.missing_sources))
    )
    table.add_row("Resources copied", str(len(report.copied_resources)))

    if result.property_patches:
        table.add_row("", "")
        table.add_row("Property keys removed:", "")
        for patch in result.property_patches:
            table.add_row(f"  {patch.file.name}", str(len(patch.removed)))

    table.add_row("", "")
    table.add_row("Verified build", "[green]yes[/]" if result.verified else "[dim]skipped[/]")
    return table


def display_summary(result: MinifyResult) -> None:
    """Display the run summary."""
    console.print(
        Panel(build_summary_table(result), title="[bold]Minification Summary[/]", border_style="blue")
    )
