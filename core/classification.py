"""
Path classification module.

This module assigns a project-relative file path to one of the semantic
categories defined in `models.FileCategory` based purely on the positional
conventions of its directory segments:

- `app/<file>`                          -> main file
- `app/**/<file>.hbs`                   -> template (component template when the
                                           path runs through `components/`)
- `app/<type>s/**/<file>.js`            -> module of type `<type>`
- `tests/{unit,integration}/<type>s/**` -> module test
- `tests/acceptance/**`                 -> acceptance test

`classify` is a total function: any path it does not recognize yields None,
so callers can filter a file listing without per-file error handling. Nothing
is read from disk and nothing is cached between calls.

`classify_files` and `group_by_container` are the batch helpers used by the
CLI to classify a whole repository listing and to group the files that share
a container name.
"""

from pathlib import PurePath
import posixpath
from typing import Iterable

from constants import (
    ACCEPTANCE_DIR,
    COMPONENTS_DIR,
    MODULE_TEST_KINDS,
    NAME_SEPARATOR,
    PATH_SEPARATOR,
    SOURCE_EXTENSIONS,
    TEMPLATE_EXTENSIONS,
)
from core.inflector import Singularizer, default_singularizer
from core.models import (
    AcceptanceTestFileInfo,
    ClassifiedFiles,
    FileInfo,
    MainFileInfo,
    ModuleFileInfo,
    ModuleTestFileInfo,
    TemplateFileInfo,
)
from models import FileCategory, SourceRoot
from ui.progress_display import ProgressDisplay, RichProgressDisplay


def classify(
    relative_path: str, singularizer: Singularizer | None = None
) -> FileInfo | None:
    """
    Classify a project-relative path into a `FileInfo` variant.

    Classification Rules (applied in order):
        1. Extension gate: the final segment must end in `.js`, `.hbs` or
           `.handlebars`. A leading dot does not start an extension, so
           `app/.hbs` has none.
        2. The path is split on "/". Paths with empty segments (leading,
           trailing or doubled slashes) are rejected.
        3. Root dispatch on the first segment:
           a. "app": two segments -> MainFileInfo; template extension ->
              TemplateFileInfo; otherwise ModuleFileInfo.
           b. "tests": second segment "unit"/"integration" ->
              ModuleTestFileInfo; "acceptance" -> AcceptanceTestFileInfo.
           c. Anything else is not classifiable.

    Examples:
        >>> classify("app/routes/foo/bar.js")
        ModuleFileInfo(relative_path='app/routes/foo/bar.js', module_type='route', name='foo.bar', slash_name='foo/bar')
        >>> classify("app/components/widget.hbs").display_label
        'widget component-template'
        >>> classify("lib/foo.js") is None
        True

    Args:
        relative_path: Forward-slash-delimited path relative to the project root.
        singularizer: Used to derive module and test subject types from their
            directory names. Defaults to the `inflection`-backed singularizer.

    Returns:
        The classification record, or None when the path is not a source file
        this classifier assigns a category to.
    """
    path_parts = relative_path.split(PATH_SEPARATOR)

    extension = posixpath.splitext(path_parts[-1])[1]
    if extension not in SOURCE_EXTENSIONS:
        return None

    if not all(path_parts):
        return None

    singularizer = singularizer if singularizer is not None else default_singularizer

    source_root = path_parts[0]
    if source_root == SourceRoot.APP:
        return _classify_app_file(relative_path, path_parts, extension, singularizer)
    if source_root == SourceRoot.TESTS:
        return _classify_test_file(relative_path, path_parts, singularizer)

    return None


def _classify_app_file(
    relative_path: str,
    path_parts: list[str],
    extension: str,
    singularizer: Singularizer,
) -> FileInfo:
    # Files in the source root
    if len(path_parts) == 2:
        return MainFileInfo(relative_path, name=_strip_extension(path_parts[1]))

    if extension in TEMPLATE_EXTENSIONS:
        is_component_template, name_parts = _split_template_parts(path_parts)
        name, slash_name = _join_name_parts(name_parts)
        return TemplateFileInfo(
            relative_path,
            name=name,
            slash_name=slash_name,
            is_component_template=is_component_template,
        )

    name, slash_name = _join_name_parts(path_parts[2:])
    return ModuleFileInfo(
        relative_path,
        module_type=singularizer.singularize(path_parts[1]),
        name=name,
        slash_name=slash_name,
    )


def _classify_test_file(
    relative_path: str, path_parts: list[str], singularizer: Singularizer
) -> FileInfo | None:
    if len(path_parts) < 3:
        return None

    test_kind = path_parts[1]

    if test_kind in MODULE_TEST_KINDS:
        # tests/<kind>/<subjects>/<name...>
        if len(path_parts) < 4:
            return None
        name, slash_name = _join_name_parts(path_parts[3:])
        return ModuleTestFileInfo(
            relative_path,
            test_kind=test_kind,
            subject_type=singularizer.singularize(path_parts[2]),
            name=name,
            slash_name=slash_name,
        )

    if test_kind == ACCEPTANCE_DIR:
        name, slash_name = _join_name_parts(path_parts[2:])
        return AcceptanceTestFileInfo(relative_path, name=name, slash_name=slash_name)

    return None


def _split_template_parts(path_parts: list[str]) -> tuple[bool, list[str]]:
    """
    Separate the routing prefix of a template path from its name segments.

    Returns whether the template belongs to a component, and the segments that
    make up its name. Both `app/components/x.hbs` and
    `app/templates/components/x.hbs` are component templates named "x";
    `app/templates/x.hbs` is a plain template named "x".
    """
    if path_parts[1] == COMPONENTS_DIR:
        return True, path_parts[2:]

    if len(path_parts) > 3 and path_parts[2] == COMPONENTS_DIR:
        return True, path_parts[3:]

    return False, path_parts[2:]


def _join_name_parts(name_parts: list[str]) -> tuple[str, str]:
    """Join name segments into their dotted and slashed forms, minus the extension."""
    parts = [*name_parts[:-1], _strip_extension(name_parts[-1])]
    return NAME_SEPARATOR.join(parts), PATH_SEPARATOR.join(parts)


def _strip_extension(file_name: str) -> str:
    return posixpath.splitext(file_name)[0]


def classify_files(
    file_paths: Iterable[str | PurePath],
    total_files: int,
    progress_display: ProgressDisplay | None = None,
    singularizer: Singularizer | None = None,
) -> ClassifiedFiles:
    """
    Classify a batch of project-relative paths and group them by category.

    Each path is passed through `classify`; `Path` objects are converted to
    their POSIX form first so listings produced on Windows classify the same
    way. Paths the classifier does not recognize are collected separately.

    Args:
        file_paths: Paths relative to the project root.
        total_files: Number of paths in `file_paths`, used for progress
            reporting.
        progress_display: Optional progress display implementation. If None,
            defaults to `RichProgressDisplay`. For testing, pass
            `NoOpProgressDisplay()` to avoid UI dependencies.
        singularizer: Forwarded to `classify`.

    Returns:
        A `ClassifiedFiles` whose `by_category` mapping contains every
        `FileCategory`, even those without files, in input order.

    Note:
        Progress updates are sent in 10% increments, like the rest of the
        application's batch operations.
    """
    classified = ClassifiedFiles(
        by_category={category: [] for category in FileCategory}, unclassified=[]
    )

    items_processed = 0
    # At least 1 so an empty or tiny listing never divides by zero
    advance = max(1, int(total_files * 0.1)) if total_files > 0 else 1

    rich_progress_display = (
        progress_display if progress_display is not None else RichProgressDisplay()
    )

    with rich_progress_display as rpd:
        rpd.on_start(f"Classifying {total_files} files...", total=total_files)

        for file_path in file_paths:
            relative_path = (
                file_path.as_posix() if isinstance(file_path, PurePath) else file_path
            )
            file_info = classify(relative_path, singularizer)
            if file_info is None:
                classified.unclassified.append(relative_path)
            else:
                classified.by_category[file_info.category].append(file_info)

            items_processed += 1
            if items_processed % advance == 0:
                rpd.on_update(advance=advance)

        rpd.on_complete(
            f"✅ Classified {classified.total} of {items_processed} files.",
            completed=items_processed,
        )

    return classified


def group_by_container(file_infos: Iterable[FileInfo]) -> dict[str, list[FileInfo]]:
    """
    Group classified files by their container name.

    Only main files and modules define a container name; every other record
    is skipped. Groups and the files inside them keep their input order.

    Args:
        file_infos: Classified files, in any mix of categories.

    Returns:
        Mapping of container name (e.g. "route:foo.bar") to the files sharing it.
    """
    groups: dict[str, list[FileInfo]] = {}
    for file_info in file_infos:
        container_name = file_info.container_name
        if container_name is None:
            continue
        groups.setdefault(container_name, []).append(file_info)
    return groups
