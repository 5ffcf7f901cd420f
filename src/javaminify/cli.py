"""javaminify CLI - Minify a Maven build environment to a set of seed classes."""

import sys
from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from javaminify import __version__
from javaminify.config import load_config
from javaminify.errors import MinifyError, ValidationError
from javaminify.models.run import Layout, RunConfiguration
from javaminify.output.json_writer import write_report
from javaminify.output.summary import display_summary
from javaminify.pipeline import Minifier

EXIT_OK = 0
EXIT_VALIDATION = 1
EXIT_FAILURE = 2

app = typer.Typer(
    name="javaminify",
    help="Minify a Maven build environment using a minimal set of classes",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"javaminify version {__version__}")
        raise typer.Exit()


def check_options(
    java_home: Path,
    classes: Path,
    input_dir: Path,
    output: Optional[Path],
    packages: List[str],
    additional: Optional[Path] = None,
    test: bool = False,
    verbose: bool = False,
    config_path: Optional[Path] = None,
    mindeps_classpath: Optional[str] = None,
    maven_repo: Optional[Path] = None,
) -> RunConfiguration:
    """Validate the options and turn them into a RunConfiguration.

    Raises:
        ValidationError: Describing the first invalid option.
    """
    if not java_home.exists():
        raise ValidationError(f"Java home directory does not exist: {java_home}")
    if not java_home.is_dir():
        raise ValidationError(f"Java home does not point to a directory: {java_home}")

    if not classes.exists():
        raise ValidationError(f"File with class names does not exist: {classes}")
    if classes.is_dir():
        raise ValidationError(f"File with class names points to directory: {classes}")

    if additional is not None:
        if not additional.exists():
            raise ValidationError(f"File with additional class names does not exist: {additional}")
        if additional.is_dir():
            raise ValidationError(f"File with additional class names points to directory: {additional}")

    if not input_dir.exists():
        raise ValidationError(f"Input build environment does not exist: {input_dir}")
    if not input_dir.is_dir():
        raise ValidationError(f"Input build environment points to a file: {input_dir}")

    if output is None:
        raise ValidationError("No output directory supplied!")
    if output.exists() and not output.is_dir():
        raise ValidationError(f"Output build environment points to a file: {output}")

    if not packages:
        raise ValidationError("At least one package to keep is required!")

    config_data = load_config(config_path) if config_path is not None else {}
    try:
        if mindeps_classpath:
            config_data.setdefault("mindeps", {})["classpath"] = mindeps_classpath
        if maven_repo is not None:
            config_data.setdefault("maven", {})["repository"] = str(maven_repo)
        layout = Layout.from_config(config_data)
    except (AttributeError, KeyError, TypeError) as e:
        raise ValidationError(f"Invalid configuration: {config_path}\n{e!r}") from e

    return RunConfiguration(
        java_home=java_home.resolve(),
        classes_file=classes.resolve(),
        additional_file=additional.resolve() if additional is not None else None,
        input_dir=input_dir.resolve(),
        output_dir=output.resolve(),
        packages=tuple(packages),
        test=test,
        verbose=verbose,
        layout=layout,
    )


@app.command()
def minify(
    packages: List[str] = typer.Argument(
        ...,
        metavar="PACKAGE...",
        help="The packages to keep, e.g. 'meka'",
    ),
    java_home: Path = typer.Option(
        ...,
        "--java-home",
        envvar="JAVA_HOME",
        help="Java home directory of the JDK that includes the jdeps binary",
    ),
    classes: Path = typer.Option(
        ...,
        "--classes",
        help="File with the classes to determine the dependencies for; "
        "empty lines and lines starting with # are ignored",
    ),
    additional: Optional[Path] = typer.Option(
        None,
        "--additional",
        help="File with additional class names to just include",
    ),
    input_dir: Path = typer.Option(
        ...,
        "--input",
        help="Directory with the pristine build environment",
    ),
    output: Path = typer.Option(
        ...,
        "--output",
        help="Directory for storing the minified build environment",
    ),
    test: bool = typer.Option(
        False,
        "--test",
        help="Build the minified build environment afterwards",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="JSON file overriding build command, repository and layout",
    ),
    mindeps_classpath: Optional[str] = typer.Option(
        None,
        "--mindeps-classpath",
        help="Classpath for running MinDeps (default: $MINDEPS_CLASSPATH)",
    ),
    maven_repo: Optional[Path] = typer.Option(
        None,
        "--maven-repo",
        help="Local Maven repository (default: ~/.m2/repository)",
    ),
    report: Optional[Path] = typer.Option(
        None,
        "--report",
        "-r",
        help="Path for a JSON report of the run",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show the classpath and every copied file",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Minify a Maven build environment to the classes needed by a seed set."""
    try:
        run_config = check_options(
            java_home,
            classes,
            input_dir,
            output,
            packages,
            additional=additional,
            test=test,
            verbose=verbose,
            config_path=config,
            mindeps_classpath=mindeps_classpath,
            maven_repo=maven_repo,
        )
    except ValidationError as e:
        console.print("[red]Error:[/]", escape(str(e)))
        raise typer.Exit(EXIT_VALIDATION)

    console.print(Panel.fit("[bold blue]javaminify - Build Environment Minification[/]"))
    console.print(f"\n[dim]Input:[/] {run_config.input_dir}")
    console.print(f"[dim]Output:[/] {run_config.output_dir}\n")

    try:
        result = Minifier(run_config).execute()
    except MinifyError as e:
        console.print("[red]Error:[/]", escape(str(e)))
        raise typer.Exit(EXIT_FAILURE)

    display_summary(result)

    if report is not None:
        try:
            write_report(result, run_config, report)
        except OSError as e:
            console.print("[red]Error:[/]", escape(f"Failed to write report: {report}\n{e}"))
            raise typer.Exit(EXIT_FAILURE)
        console.print(f"\n[green]Report saved to:[/] {report}")


# Newer Typer releases raise their own copy of the click exceptions
USAGE_ERRORS = tuple(
    {click.ClickException}
    | {cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "ClickException"}
)
ABORTS = tuple({click.Abort, typer.Abort})


def main(argv: Optional[List[str]] = None) -> int:
    """Console script entry point; maps usage errors to exit status 1."""
    argv = argv if argv is not None else sys.argv[1:]
    command = typer.main.get_command(app)
    try:
        rv = command.main(args=list(argv), prog_name="javaminify", standalone_mode=False)
    except USAGE_ERRORS as exc:
        exc.show()
        return EXIT_VALIDATION
    except ABORTS:
        console.print("Aborted.")
        return EXIT_VALIDATION
    return rv if isinstance(rv, int) else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
