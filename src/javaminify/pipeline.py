"""The minification pipeline: build, analyze, copy, prune, verify."""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from javaminify.analysis.classpath import assemble_classpath
from javaminify.analysis.descriptor import read_descriptor
from javaminify.analysis.mindeps import DependencyAnalyzer, MinDepsAnalyzer, determine_classes
from javaminify.build.maven import MavenBuilder, ProjectBuilder, run_build
from javaminify.errors import BuildError
from javaminify.models.results import MinifyResult
from javaminify.models.run import RunConfiguration
from javaminify.output.copier import copy_classes
from javaminify.output.prepare import prepare_output_dir
from javaminify.output.properties import patch_properties

console = Console(stderr=True)


class Minifier:
    """Runs every stage in order; the first MinifyError aborts the run."""

    def __init__(
        self,
        config: RunConfiguration,
        builder: ProjectBuilder | None = None,
        analyzer: DependencyAnalyzer | None = None,
    ) -> None:
        self.config = config
        self.builder = builder or MavenBuilder(config.layout.build_command)
        self.analyzer = analyzer or MinDepsAnalyzer(config.layout.mindeps_classpath)

    def execute(self) -> MinifyResult:
        config = self.config
        result = MinifyResult()

        with _phase("Building input build environment..."):
            try:
                run_build(self.builder, config.input_dir)
            except BuildError as e:
                raise BuildError(f"Failed to build input build environment: {e}") from e

        descriptor = read_descriptor(config.input_dir)
        classpath = assemble_classpath(descriptor, config.input_dir, config.layout.repository)
        result.classpath = classpath.entries
        if config.verbose:
            console.print("[dim]Classpath:[/]")
            for entry in classpath.entries:
                console.print(f"  {entry}")

        with _phase("Determining minimal set of classes..."):
            result.retained_classes = determine_classes(self.analyzer, config, classpath)
        console.print(f"[dim]Retaining {len(result.retained_classes)} classes[/]")

        prepare_output_dir(config.input_dir, config.output_dir, list(config.layout.auxiliary_paths))
        result.copy_report = copy_classes(
            result.retained_classes, config.input_dir, config.output_dir, verbose=config.verbose
        )
        result.property_patches = patch_properties(
            config.output_dir, config.layout.property_files, set(result.retained_classes)
        )

        if config.test:
            with _phase("Building minified build environment..."):
                try:
                    run_build(self.builder, config.output_dir)
                except BuildError as e:
                    raise BuildError(f"Failed to build minified build environment: {e}") from e
            result.verified = True

        return result


@contextmanager
def _phase(description: str) -> Iterator[None]:
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(description, total=None)
        yield
    console.print(f"[green]✓[/] {description.rstrip('.')}")
