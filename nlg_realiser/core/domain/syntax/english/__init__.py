# nlg_realiser\core\domain\syntax\english\__init__.py
from .clause import EnglishClauseHelper
from .verb_phrase import EnglishVerbPhraseHelper

__all__ = ["EnglishClauseHelper", "EnglishVerbPhraseHelper"]
