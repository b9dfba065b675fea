"""
Predicates for fluentassert

Predicates are item tests that remember how they were written, so a
failure can say "(item > 3)" rather than "<function <lambda>>".

Usage:
    from fluentassert.predicates import var, length, Predicate, describe

    item = var("item")
    describe(item > 3)                                   # '(item > 3)'
    describe(length(var("s")) > 0)                       # '(len(s) > 0)'
    describe(Predicate(str.isupper, "s.isupper()"))      # '(s.isupper())'
"""

from .describer import describe, description_of, lambda_source
from .expressions import Expression, length, var
from .models import Predicate

__all__ = [
    # Models
    "Predicate",
    # Builder
    "Expression",
    "var",
    "length",
    # Describer
    "describe",
    "description_of",
    "lambda_source",
]
