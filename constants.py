"""
Application-wide constants for path classification.

This module defines the conventions the classifier relies on: which file
extensions are source files, which of them are templates, the names of the
routing directories and the default vocabulary used to singularize directory
names when the `inflection` library is not wanted.
"""

from typing import Final, Mapping

from models import ModuleTestKind

# Every classifiable file ends in one of these. Anything else (styles, images,
# JSON, ...) is not a source file the classifier assigns a category to.
SCRIPT_EXTENSION: Final[str] = ".js"
TEMPLATE_EXTENSIONS: Final[frozenset[str]] = frozenset({".hbs", ".handlebars"})
SOURCE_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {SCRIPT_EXTENSION} | TEMPLATE_EXTENSIONS
)

PATH_SEPARATOR: Final[str] = "/"
NAME_SEPARATOR: Final[str] = "."

# Directory that marks a template as belonging to a component, either directly
# under `app/` or under the templates directory (`app/templates/components/`).
COMPONENTS_DIR: Final[str] = "components"
COMPONENT_TYPE: Final[str] = "component"

ACCEPTANCE_DIR: Final[str] = "acceptance"
MODULE_TEST_KINDS: Final[frozenset[str]] = frozenset(
    kind.value for kind in ModuleTestKind
)

# Singular forms of the directory names found in a conventional project layout.
# Used by `TableSingularizer`; the production classifier goes through
# `inflection` and only needs this for projects with custom vocabulary.
DEFAULT_SINGULAR_FORMS: Final[Mapping[str, str]] = {
    "adapters": "adapter",
    "components": "component",
    "controllers": "controller",
    "helpers": "helper",
    "initializers": "initializer",
    "instance-initializers": "instance-initializer",
    "mixins": "mixin",
    "models": "model",
    "routes": "route",
    "serializers": "serializer",
    "services": "service",
    "templates": "template",
    "transforms": "transform",
    "utils": "util",
}
