# nlg_realiser\core\domain\morphology\__init__.py
"""
Morphology stage: one token in, one surface string out.

Importing this package registers the rule sets of every supported
language with the registry in `base`.
"""

from .base import MorphologyRules, create_rules, inflect, list_registered_languages, register_rules
from .dutch import DutchMorphology, separable_compound
from .english import EnglishMorphology
from .french import FrenchMorphology

__all__ = [
    "MorphologyRules",
    "inflect",
    "register_rules",
    "create_rules",
    "list_registered_languages",
    "DutchMorphology",
    "EnglishMorphology",
    "FrenchMorphology",
    "separable_compound",
]
