"""
Type definitions and enums used across the file-info application.

This module contains the shared vocabulary of the classifier: the categories a
path can be assigned to, the source roots the classifier recognizes and the
kinds of module tests found under `tests/`.
"""

from enum import StrEnum
from typing import TypedDict


class FileCategory(StrEnum):
    """
    Enumeration of the semantic categories a project file can belong to.

    The values are the discriminant tags of the `FileInfo` variants and are
    also what the CLI accepts for `--category` filters.
    """

    MAIN = "main"
    TEMPLATE = "template"
    MODULE = "module"
    MODULE_TEST = "module-test"
    ACCEPTANCE_TEST = "acceptance-test"


class SourceRoot(StrEnum):
    """Top-level directories that hold classifiable files."""

    APP = "app"
    TESTS = "tests"


class ModuleTestKind(StrEnum):
    """
    Kinds of module tests, named after the directory directly under `tests/`.

    Component tests default to integration-style and every other subject
    defaults to unit-style; see `ModuleTestFileInfo.display_label`.
    """

    UNIT = "unit"
    INTEGRATION = "integration"


class FileInfoRecord(TypedDict, total=False):
    """
    JSON-ready representation of a `FileInfo`, as produced by `FileInfo.to_dict()`.

    Only `relative_path`, `category`, `display_label` and `container_name` are
    present for every variant; the remaining keys depend on the category.
    """

    relative_path: str
    category: str
    display_label: str
    container_name: str | None
    name: str
    slash_name: str
    is_component_template: bool
    module_type: str
    test_kind: str
    subject_type: str
