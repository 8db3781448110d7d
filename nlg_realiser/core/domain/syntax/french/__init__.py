# nlg_realiser\core\domain\syntax\french\__init__.py
from .clause import FrenchClauseHelper
from .verb_phrase import FrenchVerbPhraseHelper

__all__ = ["FrenchClauseHelper", "FrenchVerbPhraseHelper"]
