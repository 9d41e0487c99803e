"""
file-info CLI Entry Point.

This module implements the command-line interface around the path classifier.
The classifier assigns project files to a semantic category (main file,
template, module, module test, acceptance test) from their position in the
project layout alone; the CLI feeds it paths and presents the results.

Commands:

1.  **classify**: Classifies the relative paths given on the command line.
    Nothing is read from disk, so the paths do not need to exist.
2.  **scan**: Lists the files of a git repository with `git ls-files`,
    classifies all of them and prints the selected categories as a table,
    as JSON lines, or grouped by container name.

Usage:
    $ python main.py classify app/routes/foo/bar.js tests/unit/components/widget-test.js
    $ python main.py scan --path /path/to/project --category module --json

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal UI, colors, tables and progress visualization.
    - Inquirer: Interactive category selection.
    - inflection: Singularization of directory names.
"""

from pathlib import Path
from typing import Annotated

from rich import print as pr
from rich.tree import Tree
import typer

from adapters.git import GitClient
from core.classification import classify, classify_files, group_by_container
from core.exceptions import GitCommandError, GitError, NotAGitRepositoryError
from core.inflector import Singularizer, TableSingularizer, default_singularizer
from core.models import ClassifiedFiles, FileInfo
from models import FileCategory
from ui.progress_display import NoOpProgressDisplay, ProgressDisplay
from ui.prompts import select_categories
from ui.report import print_json_lines, print_table
from utils import console, debug

app = typer.Typer(help="Classify project files by their path conventions.")

SINGULAR_HELP = (
    "Singular form of a custom directory name, as PLURAL=SINGULAR. Can be "
    "repeated. Other names are singularized by inflection rules."
)


def build_singularizer(singular: list[str] | None) -> Singularizer:
    """
    Build the singularizer for the `--singular PLURAL=SINGULAR` options.

    Without options the default inflection-backed singularizer is returned.

    Raises:
        typer.BadParameter: If an option is not of the form PLURAL=SINGULAR.
    """
    if not singular:
        return default_singularizer

    singular_forms: dict[str, str] = {}
    for pair in singular:
        plural, sep, singular_form = pair.partition("=")
        plural, singular_form = plural.strip(), singular_form.strip()
        if not sep or not plural or not singular_form or "/" in pair:
            raise typer.BadParameter(
                f"'{pair}' is not of the form PLURAL=SINGULAR", param_hint="--singular"
            )
        singular_forms[plural] = singular_form

    return TableSingularizer(singular_forms, fallback=default_singularizer)


@app.command("classify")
def classify_command(
    paths: Annotated[
        list[str],
        typer.Argument(help="Project-relative paths, e.g. app/routes/index.js"),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print one JSON object per classified path."),
    ] = False,
    singular: Annotated[
        list[str] | None,
        typer.Option("--singular", metavar="PLURAL=SINGULAR", help=SINGULAR_HELP),
    ] = None,
):
    """
    Classify the given project-relative paths.

    Paths that are not classifiable are reported and skipped; they do not
    change the exit code.
    """
    singularizer = build_singularizer(singular)
    file_infos: list[FileInfo] = []
    for relative_path in paths:
        file_info = classify(relative_path, singularizer=singularizer)
        if file_info is None:
            if not as_json:
                pr(f"[yellow]Not classifiable:[/yellow] {relative_path}")
            continue
        file_infos.append(file_info)

    if as_json:
        print_json_lines(console, file_infos)
    elif file_infos:
        print_table(console, file_infos)


@app.command()
def scan(
    path: Annotated[
        Path,
        typer.Option(
            exists=True,  # Typer throws error if path doesn't exist
            file_okay=False,  # Typer throws error if it's a file, not a dir
            dir_okay=True,
            resolve_path=True,
            help="Root of the git repository to scan",
        ),
    ] = Path.cwd(),  # If not provided, use the current working directory
    category: Annotated[
        list[FileCategory] | None,
        typer.Option(
            "--category",
            "-c",
            help="Only list files of this category. Can be repeated.",
        ),
    ] = None,
    pick: Annotated[
        bool,
        typer.Option("--pick", help="Choose the categories to list interactively."),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print one JSON object per file instead of a table."),
    ] = False,
    group: Annotated[
        bool,
        typer.Option("--group", help="Group main files and modules by container name."),
    ] = False,
    exclude_tests: Annotated[
        bool,
        typer.Option("--exclude-tests", help="Leave module and acceptance tests out."),
    ] = False,
    singular: Annotated[
        list[str] | None,
        typer.Option("--singular", metavar="PLURAL=SINGULAR", help=SINGULAR_HELP),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Also print the paths that were skipped."),
    ] = False,
):
    """
    Classify every file of a git repository.

    Args:
        path (Path): Root of the repository. Defaults to the current working
            directory.
        category (list[FileCategory] | None): Categories to list. If omitted,
            every category is listed unless `--pick` is given.
        pick (bool): Prompt for the categories to list.
        as_json (bool): Print JSON lines instead of a table.
        group (bool): Print container groups instead of a flat listing.
        exclude_tests (bool): Drop test files from the listing.
        singular (list[str] | None): PLURAL=SINGULAR forms for custom
            directory names.
        verbose (bool): Print unclassified paths as debug output.

    Raises:
        typer.Exit: If the path is not a git repository or git fails.
        typer.BadParameter: If a `--singular` option is malformed.
    """
    singularizer = build_singularizer(singular)
    git_client = GitClient(path)

    try:
        git_client.ensure_repo()

        if not as_json:
            pr(f"\n[green]Scanning: {path}...[/green]")

        progress_display: ProgressDisplay | None = (
            NoOpProgressDisplay() if as_json else None
        )
        classified = classify_files(
            git_client.stream_file_paths(),
            git_client.count_files(),
            progress_display=progress_display,
            singularizer=singularizer,
        )
    except GitError as e:
        print_git_err(e)
        return
    except Exception as e:  # noqa: BLE001
        # Catch-all for any unexpected errors - ensures users always see
        # a friendly message instead of a raw Python stack trace
        print_unexpected_err(e)
        return

    if verbose:
        for relative_path in classified.unclassified:
            debug("skipped", relative_path)

    categories = resolve_categories(classified, category, pick)
    file_infos = [
        file_info
        for file_info in classified.iter_files(categories)
        if not (exclude_tests and file_info.is_test)
    ]

    if group:
        print_groups(file_infos)
    elif as_json:
        print_json_lines(console, file_infos)
    else:
        shown = print_table(console, file_infos, title=str(path.name))
        pr(
            f"\n[green]✅ {shown} files listed, "
            f"{len(classified.unclassified)} not classifiable.[/green]"
        )


def resolve_categories(
    classified: ClassifiedFiles,
    category: list[FileCategory] | None,
    pick: bool,
) -> list[FileCategory]:
    """
    Decide which categories of a scan to list.

    Explicit `--category` options win over `--pick`; with neither, every
    category is listed.
    """
    if category:
        return [c for c in FileCategory if c in set(category)]
    if pick:
        return select_categories(classified)
    return list(FileCategory)


def print_groups(file_infos: list[FileInfo]) -> None:
    """Print a tree of container names and the files grouped under each."""
    groups = group_by_container(file_infos)
    if not groups:
        pr("[yellow]No main files or modules to group.[/yellow]")
        return

    tree = Tree("[bold]containers")
    for container_name, members in groups.items():
        branch = tree.add(f"[green]{container_name}")
        for file_info in members:
            branch.add(f"{file_info.display_label} [dim]({file_info.relative_path})")
    console.print(tree)


def print_git_err(e: GitError) -> None:
    """
    Displays a user-friendly error message for git failures.

    Args:
        e (GitError): The exception that was raised.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    if isinstance(e, NotAGitRepositoryError):
        pr(f"[red]Error:[/red] Not a git repository: [green]'{e.root}'[/green]")
        raise typer.Exit(code=1) from e

    pr("❌ [bold red]Git Error[/bold red]")
    pr(f"The app couldn't list the repository files: {e.message}")
    if isinstance(e, GitCommandError):
        pr("\n[yellow]Quick Fix:[/yellow] Run the command above by hand to see git's output.")

    pr("\n--- PLEASE REPORT THIS ---")
    pr(f"Diagnostics: {e.diagnostic_info}")
    raise typer.Exit(code=1) from e


def print_unexpected_err(e: Exception) -> None:
    """
    Displays a user-friendly error message for unexpected errors.

    Args:
        e (Exception): The unexpected exception that was raised.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Unexpected Error[/bold red]")
    pr("An unexpected error occurred while processing your request.")
    pr(f"\n[yellow]Error Type:[/yellow] {type(e).__name__}")
    pr(f"[yellow]Error Message:[/yellow] {str(e)}")

    pr("\n--- PLEASE REPORT THIS ---")
    pr(f"Error Type: {type(e).__name__}")
    pr(f"Error Message: {e}")
    if e.__cause__:
        pr(f"Caused by: {e.__cause__}")

    raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
