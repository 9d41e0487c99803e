"""
Rendering of classification results.

Classified files are shown as a Rich table in the terminal, or as JSON lines
when the output is meant for another program.
"""

import json
from typing import Iterable

from rich.console import Console
from rich.table import Table

from core.models import FileInfo
from ui.progress import ProgressState

CATEGORY_STYLES = {
    "main": "bold cyan",
    "template": "yellow",
    "module": "green",
    "module-test": "magenta",
    "acceptance-test": "blue",
}


def build_table(file_infos: Iterable[FileInfo], title: str | None = None) -> Table:
    """
    Build a Rich table with one row per classified file.

    Columns: category, display label, container name (empty for variants
    without one) and the relative path.
    """
    table = Table(title=title, header_style="bold")
    table.add_column("Category")
    table.add_column("Label")
    table.add_column("Container", style="dim")
    table.add_column("Path", overflow="fold")

    for file_info in file_infos:
        category = str(file_info.category)
        table.add_row(
            f"[{CATEGORY_STYLES.get(category, 'white')}]{category}",
            file_info.display_label,
            file_info.container_name or "",
            file_info.relative_path,
        )

    return table


def print_table(
    console: Console, file_infos: Iterable[FileInfo], title: str | None = None
) -> int:
    """Print the table and return the number of rows."""
    rows = list(file_infos)
    if not rows:
        console.print(f"[{ProgressState.IN_PROGRESS}]Nothing to show.")
        return 0
    console.print(build_table(rows, title=title))
    return len(rows)


def print_json_lines(console: Console, file_infos: Iterable[FileInfo]) -> int:
    """Print one JSON object per file and return how many were printed."""
    count = 0
    for file_info in file_infos:
        console.print_json(json.dumps(file_info.to_dict()), indent=None)
        count += 1
    return count
