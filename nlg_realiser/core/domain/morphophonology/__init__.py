# nlg_realiser\core\domain\morphophonology\__init__.py
"""
Morphophonology stage; importing the package registers every language.
"""

from .base import MorphophonologyRules, adjust_pair, apply_rules, create_morphophonology
from .dutch import DutchMorphophonology
from .english import EnglishMorphophonology
from .french import FrenchMorphophonology

__all__ = [
    "MorphophonologyRules",
    "adjust_pair",
    "apply_rules",
    "create_morphophonology",
    "DutchMorphophonology",
    "EnglishMorphophonology",
    "FrenchMorphophonology",
]
