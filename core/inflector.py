"""
Singularization of directory names.

Directory names in a conventional project layout are plural ("routes",
"components") while the category labels derived from them are singular
("route", "component"). The classifier depends on the `Singularizer` protocol
so the production implementation (backed by `inflection`) can be swapped for a
fixed vocabulary in tests, or layered under one for projects with custom
directory names (`--singular` on the CLI).
"""

from typing import Mapping, Protocol

import inflection

from constants import DEFAULT_SINGULAR_FORMS


class Singularizer(Protocol):
    """Protocol for turning a plural English noun into its singular form."""

    def singularize(self, word: str) -> str:
        """Return the singular form of `word`."""


class InflectionSingularizer:
    """
    Production implementation of Singularizer using the `inflection` library.

    `inflection` ports the Rails inflector, so regular suffix rules
    ("ies" -> "y", "es"/"s" stripped) and the usual irregular nouns are
    covered. Hyphenated names are singularized on their last word, e.g.
    "instance-initializers" -> "instance-initializer".
    """

    def singularize(self, word: str) -> str:
        return inflection.singularize(word)


class TableSingularizer:
    """
    Singularizer backed by a fixed vocabulary.

    Words missing from the table go to `fallback` when one is given and are
    returned unchanged otherwise, which keeps the classifier total for
    directory names nobody anticipated.
    """

    def __init__(
        self,
        singular_forms: Mapping[str, str] | None = None,
        fallback: Singularizer | None = None,
    ):
        """
        Args:
            singular_forms: Mapping of plural to singular forms. Defaults to
                DEFAULT_SINGULAR_FORMS.
            fallback: Singularizer consulted for words missing from the table.
        """
        self.singular_forms = (
            singular_forms if singular_forms is not None else DEFAULT_SINGULAR_FORMS
        )
        self.fallback = fallback

    def singularize(self, word: str) -> str:
        if word in self.singular_forms:
            return self.singular_forms[word]
        if self.fallback is not None:
            return self.fallback.singularize(word)
        return word


default_singularizer: Singularizer = InflectionSingularizer()
