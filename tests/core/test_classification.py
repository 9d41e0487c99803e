"""
Comprehensive tests for the classification module using pytest.

Tests cover:
- classify: extension gate, root dispatch, per-category name extraction,
  display labels, container names and rejection of malformed paths.
- classify_files: batch classification, grouping by category and progress
  reporting.
- group_by_container: grouping of main files and modules.
"""

from pathlib import PurePosixPath

import pytest

from core.classification import classify, classify_files, group_by_container
from core.inflector import TableSingularizer
from core.models import (
    AcceptanceTestFileInfo,
    ClassifiedFiles,
    MainFileInfo,
    ModuleFileInfo,
    ModuleTestFileInfo,
    TemplateFileInfo,
)
from models import FileCategory


# ============================================================================
# Tests for classify - Extension Gate
# ============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "path",
    [
        "app/styles/app.css",
        "app/images/logo.png",
        "app/routes/foo.ts",
        "app/templates/index.html",
        "tests/unit/routes/foo-test.json",
        "app/routes/foo.JS",
        "app/router",
        "app/.hbs",
        "",
    ],
)
def test_unrecognized_extension_is_not_classified(path):
    """Only .js, .hbs and .handlebars files are classifiable."""
    assert classify(path) is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "path",
    ["app/app.js", "app/templates/index.hbs", "app/templates/index.handlebars"],
)
def test_recognized_extensions_are_classified(path):
    assert classify(path) is not None


# ============================================================================
# Tests for classify - Root Dispatch
# ============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "path",
    [
        "lib/foo.js",
        "addon/components/widget.js",
        "vendor/app/foo.js",
        "foo.js",
        "tests/other/x.js",
        "tests/x.js",
        "tests/helpers/start-app.js",
        "tests/test-helper.js",
    ],
)
def test_unrecognized_root_or_test_kind(path):
    """Only app/ and tests/{unit,integration,acceptance}/ are recognized."""
    assert classify(path) is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "path,expected_category",
    [
        ("app/app.js", FileCategory.MAIN),
        ("app/router.js", FileCategory.MAIN),
        ("app/index.hbs", FileCategory.MAIN),
        ("app/templates/index.hbs", FileCategory.TEMPLATE),
        ("app/components/widget.hbs", FileCategory.TEMPLATE),
        ("app/routes/index.js", FileCategory.MODULE),
        ("app/components/widget.js", FileCategory.MODULE),
        ("tests/unit/routes/index-test.js", FileCategory.MODULE_TEST),
        ("tests/integration/components/widget-test.js", FileCategory.MODULE_TEST),
        ("tests/acceptance/login-test.js", FileCategory.ACCEPTANCE_TEST),
    ],
)
def test_root_dispatch(path, expected_category):
    assert classify(path).category == expected_category


@pytest.mark.unit
@pytest.mark.parametrize(
    "path",
    [
        "/app/foo.js",
        "app//foo.js",
        "app/routes//foo.js",
        "tests//unit/routes/foo-test.js",
    ],
)
def test_empty_segments_are_not_classified(path):
    """Leading or doubled slashes produce empty segments and are rejected."""
    assert classify(path) is None


# ============================================================================
# Tests for classify - Main Files
# ============================================================================


@pytest.mark.unit
def test_main_file():
    info = classify("app/foo.js")

    assert info == MainFileInfo("app/foo.js", name="foo")
    assert info.container_name == "main:foo"
    assert info.display_label == "foo"
    assert str(info) == "foo"


@pytest.mark.unit
def test_main_file_keeps_inner_dots():
    """Only the final extension is stripped from the name."""
    assert classify("app/app.config.js").name == "app.config"


# ============================================================================
# Tests for classify - Templates
# ============================================================================


@pytest.mark.unit
def test_component_template_directly_under_app():
    info = classify("app/components/widget.hbs")

    assert isinstance(info, TemplateFileInfo)
    assert info.name == "widget"
    assert info.slash_name == "widget"
    assert info.is_component_template is True
    assert info.display_label == "widget component-template"
    assert info.container_name is None


@pytest.mark.unit
def test_component_template_under_templates():
    info = classify("app/templates/components/user/avatar.hbs")

    assert info.is_component_template is True
    assert info.name == "user.avatar"
    assert info.slash_name == "user/avatar"
    assert info.display_label == "user.avatar component-template"


@pytest.mark.unit
def test_route_template():
    info = classify("app/templates/index.hbs")

    assert info == TemplateFileInfo(
        "app/templates/index.hbs",
        name="index",
        slash_name="index",
        is_component_template=False,
    )
    assert info.display_label == "index template"


@pytest.mark.unit
def test_nested_route_template():
    info = classify("app/templates/users/edit.hbs")

    assert info.name == "users.edit"
    assert info.slash_name == "users/edit"
    assert info.is_component_template is False


@pytest.mark.unit
def test_template_named_components_is_not_a_component_template():
    """A file called components.hbs is not a components directory."""
    info = classify("app/templates/components.hbs")

    assert info.is_component_template is False
    assert info.name == "components"


@pytest.mark.unit
def test_handlebars_extension_is_a_template():
    info = classify("app/templates/about.handlebars")

    assert isinstance(info, TemplateFileInfo)
    assert info.name == "about"


# ============================================================================
# Tests for classify - Modules
# ============================================================================


@pytest.mark.unit
def test_nested_module():
    info = classify("app/routes/foo/bar.js")

    assert info == ModuleFileInfo(
        "app/routes/foo/bar.js", module_type="route", name="foo.bar", slash_name="foo/bar"
    )
    assert info.container_name == "route:foo.bar"
    assert info.display_label == "foo.bar route"


@pytest.mark.unit
@pytest.mark.parametrize(
    "path,module_type",
    [
        ("app/components/widget.js", "component"),
        ("app/controllers/index.js", "controller"),
        ("app/services/session.js", "service"),
        ("app/helpers/format-date.js", "helper"),
        ("app/models/user.js", "model"),
        ("app/adapters/application.js", "adapter"),
        ("app/serializers/application.js", "serializer"),
        ("app/utils/titleize.js", "util"),
        ("app/instance-initializers/setup.js", "instance-initializer"),
    ],
)
def test_module_type_is_singular_directory_name(path, module_type):
    assert classify(path).module_type == module_type


@pytest.mark.unit
def test_module_with_injected_singularizer(table_singularizer):
    info = classify("app/widgets/clock.js", singularizer=table_singularizer)

    # Unknown to the table, so left as-is
    assert info.module_type == "widgets"
    assert info.container_name == "widgets:clock"


# ============================================================================
# Tests for classify - Module Tests
# ============================================================================


@pytest.mark.unit
def test_component_unit_test_is_marked():
    info = classify("tests/unit/components/widget-test.js")

    assert info == ModuleTestFileInfo(
        "tests/unit/components/widget-test.js",
        test_kind="unit",
        subject_type="component",
        name="widget-test",
        slash_name="widget-test",
    )
    assert info.display_label == "widget-test component--unit-test"
    assert info.container_name is None


@pytest.mark.unit
def test_component_integration_test_is_unmarked():
    info = classify("tests/integration/components/widget-test.js")

    assert info.display_label == "widget-test component--test"
    assert "-integration" not in info.display_label


@pytest.mark.unit
def test_route_integration_test_is_marked():
    info = classify("tests/integration/routes/foo-test.js")

    assert info.subject_type == "route"
    assert info.test_kind == "integration"
    assert info.display_label == "foo-test route--integration-test"


@pytest.mark.unit
def test_route_unit_test_is_unmarked():
    info = classify("tests/unit/routes/foo-test.js")

    assert info.display_label == "foo-test route--test"
    assert "-unit" not in info.display_label


@pytest.mark.unit
def test_nested_module_test():
    info = classify("tests/unit/services/auth/session-test.js")

    assert info.subject_type == "service"
    assert info.name == "auth.session-test"
    assert info.slash_name == "auth/session-test"


@pytest.mark.unit
def test_module_test_without_subject_directory():
    """tests/<kind>/<file> has no subject type and is not classifiable."""
    assert classify("tests/unit/foo-test.js") is None


# ============================================================================
# Tests for classify - Acceptance Tests
# ============================================================================


@pytest.mark.unit
def test_acceptance_test():
    info = classify("tests/acceptance/login.js")

    assert info == AcceptanceTestFileInfo(
        "tests/acceptance/login.js", name="login", slash_name="login"
    )
    assert info.display_label == "login acceptance-test"
    assert info.container_name is None
    assert info.is_test is True


@pytest.mark.unit
def test_nested_acceptance_test():
    info = classify("tests/acceptance/admin/users-test.js")

    assert info.name == "admin.users-test"
    assert info.slash_name == "admin/users-test"


# ============================================================================
# Tests for classify - Invariants
# ============================================================================

PATHS_WITH_NAMES = [
    "app/templates/users/edit.hbs",
    "app/templates/components/user/avatar.hbs",
    "app/routes/foo/bar/baz.js",
    "tests/unit/routes/foo/bar-test.js",
    "tests/integration/components/a/b/c-test.js",
    "tests/acceptance/admin/users-test.js",
]


@pytest.mark.unit
@pytest.mark.parametrize("path", PATHS_WITH_NAMES)
def test_name_and_slash_name_agree(path):
    info = classify(path)

    assert info.name.split(".") == info.slash_name.split("/")
    assert not info.slash_name.endswith((".js", ".hbs"))


@pytest.mark.unit
@pytest.mark.parametrize("path", PATHS_WITH_NAMES + ["app/app.js"])
def test_classification_is_idempotent(path):
    assert classify(path) == classify(path)


@pytest.mark.unit
@pytest.mark.parametrize(
    "path,has_container",
    [
        ("app/app.js", True),
        ("app/routes/index.js", True),
        ("app/templates/index.hbs", False),
        ("tests/unit/routes/index-test.js", False),
        ("tests/acceptance/index-test.js", False),
    ],
)
def test_container_name_only_for_main_files_and_modules(path, has_container):
    assert (classify(path).container_name is not None) is has_container


@pytest.mark.unit
def test_relative_path_is_kept_verbatim():
    path = "app/routes/foo/bar.js"
    assert classify(path).relative_path is path


# ============================================================================
# Tests for classify_files
# ============================================================================


@pytest.mark.unit
def test_classify_files_groups_by_category(progress_display):
    file_paths = [
        "app/app.js",
        "app/templates/index.hbs",
        "app/routes/index.js",
        "tests/unit/routes/index-test.js",
        "tests/acceptance/index-test.js",
        "app/styles/app.css",
        "package.json",
    ]

    result = classify_files(
        file_paths, total_files=len(file_paths), progress_display=progress_display
    )

    for category in FileCategory:
        assert len(result.by_category[category]) == 1
    assert result.unclassified == ["app/styles/app.css", "package.json"]
    assert result.total == 5


@pytest.mark.unit
def test_classify_files_returns_classified_files_with_singularizer(progress_display):
    result = classify_files(
        ["app/pods/login.js", "lib/x.js"],
        2,
        progress_display=progress_display,
        singularizer=TableSingularizer({"pods": "pod"}),
    )

    assert isinstance(result, ClassifiedFiles)
    assert result.by_category[FileCategory.MODULE][0].module_type == "pod"
    assert result.unclassified == ["lib/x.js"]


@pytest.mark.unit
def test_classify_files_empty_listing(progress_display):
    result = classify_files([], total_files=0, progress_display=progress_display)

    assert set(result.by_category) == set(FileCategory)
    assert result.total == 0
    assert result.unclassified == []


@pytest.mark.unit
def test_classify_files_accepts_path_objects(progress_display):
    result = classify_files(
        [PurePosixPath("app/routes/index.js")],
        total_files=1,
        progress_display=progress_display,
    )

    info = result.by_category[FileCategory.MODULE][0]
    assert info.relative_path == "app/routes/index.js"


@pytest.mark.unit
def test_classify_files_keeps_input_order(progress_display):
    file_paths = ["app/routes/b.js", "app/routes/a.js", "app/routes/c.js"]

    result = classify_files(file_paths, 3, progress_display=progress_display)

    assert [i.name for i in result.by_category[FileCategory.MODULE]] == ["b", "a", "c"]


@pytest.mark.unit
def test_classify_files_reports_progress(tracking_progress_display):
    file_paths = [f"app/routes/r{i}.js" for i in range(20)]

    classify_files(file_paths, 20, progress_display=tracking_progress_display)

    calls = tracking_progress_display.calls
    assert calls[0] == ("start", "Classifying 20 files...")
    # 10% increments of 20 files -> advance by 2, ten times
    assert calls.count(("update", 2)) == 10
    assert calls[-1] == ("complete", "✅ Classified 20 of 20 files.")


@pytest.mark.unit
def test_iter_files_filters_categories(progress_display):
    file_paths = ["app/app.js", "app/routes/index.js", "tests/acceptance/a.js"]
    result = classify_files(file_paths, 3, progress_display=progress_display)

    selected = list(result.iter_files([FileCategory.ACCEPTANCE_TEST, FileCategory.MAIN]))

    assert [i.relative_path for i in selected] == [
        "tests/acceptance/a.js",
        "app/app.js",
    ]


# ============================================================================
# Tests for group_by_container
# ============================================================================


@pytest.mark.unit
def test_group_by_container_skips_non_grouping_records(sample_file_infos):
    groups = group_by_container(sample_file_infos)

    assert list(groups) == ["main:app", "route:foo", "controller:foo"]
    assert all(len(members) == 1 for members in groups.values())


@pytest.mark.unit
def test_group_by_container_collects_shared_names():
    infos = [classify("app/routes/foo.js"), classify("app/routes/foo.js")]

    assert group_by_container(infos) == {"route:foo": infos}


@pytest.mark.unit
def test_group_by_container_empty():
    assert group_by_container([]) == {}
