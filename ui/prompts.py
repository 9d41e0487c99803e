"""
Interactive user prompts for the file-info CLI.

Lets the user pick which categories of a scan to display when none were given
with `--category`. Uses `inquirer` for the checkbox and `rich` for output.
"""

import inquirer  # type: ignore
from inquirer.themes import GreenPassion  # type: ignore
from rich import print as pr
import typer

from core.models import ClassifiedFiles
from models import FileCategory


def select_categories(classified: ClassifiedFiles) -> list[FileCategory]:
    """
    Prompt the user to choose the categories to display.

    Only categories that actually contain files are offered, each with its
    file count. Every offered category is checked by default.

    Args:
        classified: The result of classifying the repository.

    Returns:
        list[FileCategory]: The selected categories, in `FileCategory` order.

    Raises:
        typer.Exit: If nothing was classified, or if the prompt is cancelled or
            left empty.
    """
    available = [
        category for category in FileCategory if classified.by_category[category]
    ]

    if not available:
        pr("[bold red]No classifiable files found.[/bold red]")
        raise typer.Exit()

    if len(available) == 1:
        return available

    choices = [
        (f"{category} ({len(classified.by_category[category])})", category)
        for category in available
    ]

    questions = [
        inquirer.Checkbox(
            "categories",
            message="Which categories should be listed? [SPACE] toggles, [ENTER] confirms",
            choices=choices,
            default=available,
        ),
    ]

    answers = inquirer.prompt(questions, theme=GreenPassion())

    if not answers or not answers["categories"]:
        raise typer.Exit()

    selected = set(answers["categories"])
    return [category for category in FileCategory if category in selected]
