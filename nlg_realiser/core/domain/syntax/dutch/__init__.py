# nlg_realiser\core\domain\syntax\dutch\__init__.py
from .clause import DutchClauseHelper
from .verb_phrase import DutchVerbPhraseHelper

__all__ = ["DutchClauseHelper", "DutchVerbPhraseHelper"]
