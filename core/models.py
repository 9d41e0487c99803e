"""
Core data models for path classification.

This module defines the records produced by `core.classification.classify`.
They form a small tagged union: `FileInfo` carries the fields every
classification shares, and one frozen subclass per `FileCategory` carries the
category-specific payload. Records are immutable and compare structurally, so
classifying the same path twice yields equal results.
"""

from dataclasses import asdict, dataclass
from typing import ClassVar, Iterable, Iterator

from constants import COMPONENT_TYPE
from models import FileCategory, FileInfoRecord, ModuleTestKind


@dataclass(frozen=True)
class FileInfo:
    """
    Base record for a classified project file.

    Attributes:
        relative_path: The path exactly as it was passed to the classifier.

    Class Attributes:
        category: The discriminant tag identifying the variant.

    Derived Attributes:
        display_label: Human-facing label used in messages and listings.
            `str(info)` returns the same value.
        container_name: Identifier used to group related files, or None for
            variants that do not group. Only main files and modules define one.
    """

    category: ClassVar[FileCategory]

    relative_path: str

    @property
    def display_label(self) -> str:
        """
        Human-facing label of the file.

        Every variant overrides this; the base record has no category of its
        own and raises NotImplementedError.
        """
        raise NotImplementedError

    @property
    def container_name(self) -> str | None:
        return None

    @property
    def is_test(self) -> bool:
        """True for module tests and acceptance tests."""
        return self.category in (FileCategory.MODULE_TEST, FileCategory.ACCEPTANCE_TEST)

    def to_dict(self) -> FileInfoRecord:
        """
        Serialize the record into a JSON-ready dictionary.

        The dataclass fields are included as-is, followed by the discriminant
        and the derived label and container name.
        """
        record: FileInfoRecord = asdict(self)  # type: ignore[assignment]
        record["category"] = str(self.category)
        record["display_label"] = self.display_label
        record["container_name"] = self.container_name
        return record

    def __str__(self) -> str:
        return self.display_label


@dataclass(frozen=True)
class MainFileInfo(FileInfo):
    """A file directly inside `app/`, such as `app/app.js` or `app/router.js`."""

    category: ClassVar[FileCategory] = FileCategory.MAIN

    name: str

    @property
    def display_label(self) -> str:
        return self.name

    @property
    def container_name(self) -> str:
        return f"main:{self.name}"


@dataclass(frozen=True)
class TemplateFileInfo(FileInfo):
    """
    A template below `app/`.

    Attributes:
        name: Dot-joined path remainder, e.g. "users.index".
        slash_name: Slash-joined path remainder, e.g. "users/index".
        is_component_template: True when the path runs through a `components`
            directory.
    """

    category: ClassVar[FileCategory] = FileCategory.TEMPLATE

    name: str
    slash_name: str
    is_component_template: bool

    @property
    def display_label(self) -> str:
        kind = "component-template" if self.is_component_template else "template"
        return f"{self.name} {kind}"


@dataclass(frozen=True)
class ModuleFileInfo(FileInfo):
    """
    A script below one of the typed directories of `app/`.

    Attributes:
        module_type: Singular form of the directory under `app/`, e.g. "route".
        name: Dot-joined path remainder, e.g. "foo.bar".
        slash_name: Slash-joined path remainder, e.g. "foo/bar".
    """

    category: ClassVar[FileCategory] = FileCategory.MODULE

    module_type: str
    name: str
    slash_name: str

    @property
    def display_label(self) -> str:
        return f"{self.name} {self.module_type}"

    @property
    def container_name(self) -> str:
        return f"{self.module_type}:{self.name}"


@dataclass(frozen=True)
class ModuleTestFileInfo(FileInfo):
    """
    A unit or integration test below `tests/unit/` or `tests/integration/`.

    Attributes:
        test_kind: "unit" or "integration", taken verbatim from the path.
        subject_type: Singular form of the directory under `tests/<kind>/`.
        name: Dot-joined path remainder, e.g. "widget-test".
        slash_name: Slash-joined path remainder.
    """

    category: ClassVar[FileCategory] = FileCategory.MODULE_TEST

    test_kind: str
    subject_type: str
    name: str
    slash_name: str

    @property
    def display_label(self) -> str:
        """
        Label of the form "<name> <subject>-[-<kind>]-test".

        Component tests are integration tests by default and every other
        subject is unit tested by default, so only the other pairing gets
        its kind spelled out:

            widget-test component--unit-test   (component, unit)
            widget-test component--test        (component, integration)
            foo-test route--integration-test   (route, integration)
            foo-test route--test               (route, unit)
        """
        suffix = f"{self.subject_type}-"
        if self.subject_type == COMPONENT_TYPE and self.test_kind == ModuleTestKind.UNIT:
            suffix += "-unit"
        elif (
            self.subject_type != COMPONENT_TYPE
            and self.test_kind == ModuleTestKind.INTEGRATION
        ):
            suffix += "-integration"
        suffix += "-test"

        return f"{self.name} {suffix}"


@dataclass(frozen=True)
class AcceptanceTestFileInfo(FileInfo):
    """An acceptance test below `tests/acceptance/`."""

    category: ClassVar[FileCategory] = FileCategory.ACCEPTANCE_TEST

    name: str
    slash_name: str

    @property
    def display_label(self) -> str:
        return f"{self.name} acceptance-test"


@dataclass
class ClassifiedFiles:
    """
    Result of classifying a batch of paths.

    Attributes:
        by_category: Classified files keyed by category. Every `FileCategory`
            is present, with an empty list when no file matched it.
        unclassified: Paths the classifier did not recognize, in input order.
    """

    by_category: dict[FileCategory, list[FileInfo]]
    unclassified: list[str]

    @property
    def total(self) -> int:
        """Number of files that were assigned a category."""
        return sum(len(files) for files in self.by_category.values())

    def iter_files(
        self, categories: Iterable[FileCategory] | None = None
    ) -> Iterator[FileInfo]:
        """
        Iterate over classified files, category by category.

        Args:
            categories: Restrict the iteration to these categories. If None,
                every category is included, in `FileCategory` order.
        """
        selected = list(categories) if categories is not None else list(FileCategory)
        for category in selected:
            yield from self.by_category.get(category, [])
