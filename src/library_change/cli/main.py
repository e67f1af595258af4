"""Main CLI interface for library-change."""

import json
import sys
from pathlib import Path, PurePosixPath
from typing import List, Optional

import click
import git
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from library_change.core.analyzer import LibraryChangeAnalyzer
from library_change.core.build_file import GRADLE_BUILD_FILE, analyze_build_file
from library_change.core.config import AnalyzerConfig, load_config
from library_change.core.repository import GitCommitSource
from library_change.core.result_writer import write_results
from library_change.errors import AnalysisSetupError
from library_change.logging_config import setup_logging
from library_change.models.change import ChangeType
from library_change.models.commit import ChangedArtifact
from library_change.models.result import AnalysisReport, BuildFileResult, CommitStatus

console = Console()

CHANGE_STYLES = {
    ChangeType.ADDITION: "green",
    ChangeType.REMOVAL: "red",
    ChangeType.VERSION_CHANGE: "yellow",
    ChangeType.REPLACEMENT: "magenta",
    ChangeType.NO_CHANGE: "dim",
}


def build_file_table(file_result: BuildFileResult, show_unchanged: bool = True) -> Table:
    """Render one build file's changes as a rich table."""
    table = Table(title=escape(file_result.build_file_path))
    table.add_column("Change", no_wrap=True)
    table.add_column("Scope", style="cyan")
    table.add_column("Library", style="blue")
    table.add_column("Previous", style="magenta")
    table.add_column("Current", style="green")

    for change in file_result.changes:
        change_type = change.change_type
        if change_type == ChangeType.NO_CHANGE and not show_unchanged:
            continue
        record = change.current or change.previous
        scope = record.scope
        if change.previous and change.current and change.previous.scope != change.current.scope:
            scope = f"{change.previous.scope} -> {change.current.scope}"
        previous = change.previous.version if change.previous else "-"
        current = change.current.version if change.current else "-"
        table.add_row(
            f"[{CHANGE_STYLES[change_type]}]{change_type.value}[/{CHANGE_STYLES[change_type]}]",
            escape(scope),
            escape(record.key),
            escape(previous),
            escape(current),
        )
    return table


def _load_settings(
    config_file: Optional[str],
    build_files_regex: Optional[str],
    output: Optional[str],
) -> AnalyzerConfig:
    config = load_config(Path(config_file)) if config_file else AnalyzerConfig()
    return config.merged(
        build_files_regex=build_files_regex,
        output_dir=Path(output) if output else None,
    )


def _print_report(report: AnalysisReport, show_unchanged: bool) -> None:
    for outcome in report.outcomes:
        if outcome.status == CommitStatus.FAILED:
            console.print(
                f"[red]Commit {escape(outcome.commit_id)}: analysis unsuccessful "
                f"({escape(outcome.error or '')})[/red]"
            )
            continue
        if outcome.status == CommitStatus.SKIPPED or outcome.result is None:
            continue
        if not outcome.result.file_results:
            continue
        console.print(f"[bold]Commit:[/bold] {escape(outcome.commit_id)}")
        for file_result in outcome.result.file_results:
            if file_result.changes:
                console.print(build_file_table(file_result, show_unchanged))
            else:
                console.print(
                    f"  {escape(file_result.build_file_path)}: [yellow]no dependencies found[/yellow]"
                )


@click.group()
@click.version_option(package_name="library-change")
def main():
    """library-change - Report library dependency changes in commits."""


@main.command()
@click.argument("rev", default="HEAD")
@click.option(
    "--repo",
    "repo_path",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Path to the git repository",
)
@click.option(
    "--max-count", "-n", type=int, default=1, help="Number of commits to analyze (0 for all)"
)
@click.option("--build-files-regex", help="Regular expression selecting build files")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON configuration file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False),
    help="Directory to write <commit>.changedlibs.result files to",
)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.option("--all", "show_unchanged", is_flag=True, help="Also list unchanged libraries")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def analyze(
    rev: str,
    repo_path: str,
    max_count: int,
    build_files_regex: Optional[str],
    config_file: Optional[str],
    output: Optional[str],
    as_json: bool,
    show_unchanged: bool,
    verbose: bool,
):
    """Analyze library changes in commits reachable from REV."""
    setup_logging(verbose)

    try:
        config = _load_settings(config_file, build_files_regex, output)
    except AnalysisSetupError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort() from e

    analyzer = LibraryChangeAnalyzer(config)
    source = GitCommitSource(Path(repo_path), build_files=config.build_files_pattern())
    try:
        report = analyzer.run(source.iter_commits(rev, max_count=max_count or None))
    except (git.exc.GitError, ValueError) as e:
        console.print(f"[red]Error reading commits: {escape(str(e))}[/red]")
        raise click.Abort() from e

    if as_json:
        click.echo(json.dumps([o.model_dump(mode="json") for o in report.outcomes], indent=2))
    else:
        _print_report(report, show_unchanged)

    if config.output_dir is not None:
        config.output_dir.mkdir(parents=True, exist_ok=True)
        written: List[Path] = write_results(report, config.output_dir)
        if not as_json:
            console.print(f"[green]✅ Wrote {len(written)} result file(s) to {escape(str(config.output_dir))}[/green]")

    if report.failed:
        sys.exit(1)


@main.command()
@click.argument("diff_file", type=click.File("r"))
@click.option("--path", "artifact_path", help="Path to report for the build file")
@click.option("--all", "show_unchanged", is_flag=True, help="Also list unchanged libraries")
def diff(diff_file, artifact_path: Optional[str], show_unchanged: bool):
    """Analyze a single diff-annotated build file (use - for stdin)."""
    if artifact_path:
        name = PurePosixPath(artifact_path).name
    elif diff_file.name == "<stdin>":
        name = GRADLE_BUILD_FILE
    else:
        name = Path(diff_file.name).name
    artifact = ChangedArtifact(
        name=name,
        path=artifact_path or diff_file.name,
        content=diff_file.read().splitlines(),
    )

    result = analyze_build_file(artifact)
    if result is None:
        console.print(f"[yellow]No analyzer available for {escape(artifact.name)}[/yellow]")
        return
    if not result.changes:
        console.print("[yellow]No dependencies found[/yellow]")
        return
    console.print(build_file_table(result, show_unchanged))


if __name__ == "__main__":
    main()
