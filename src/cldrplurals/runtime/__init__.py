"""Runtime plural form resolution.

Exports:
    PluralForms: Resolver answering count_forms / form_index
    PluralRuleTable: Immutable locale -> ordered categories table
    build_table / load_table: Table construction
    select_plural_category: Babel-backed cardinal rule evaluator

Python 3.11+.
"""

from .plural_rules import Number, PluralRuleEvaluator, select_plural_category
from .resolver import (
    PluralForms,
    count_forms,
    form_index,
    get_default_table,
    plural_categories,
    set_default_table,
)
from .table import PluralRuleTable, build_table, load_table

__all__ = [
    "Number",
    "PluralForms",
    "PluralRuleEvaluator",
    "PluralRuleTable",
    "build_table",
    "count_forms",
    "form_index",
    "get_default_table",
    "load_table",
    "plural_categories",
    "select_plural_category",
    "set_default_table",
]
