# nlg_realiser\core\domain\models.py
from typing import List

from pydantic import BaseModel, Field


class RealisedSentence(BaseModel):
    """
    The output of one realisation.
    """
    language: str = Field(..., description="Language code ('en', 'fr', 'nl')")
    text: str = Field("", description="Final sentence text, capitalised and punctuated")

    # Surface tokens after morphophonology, in order (cleared tokens dropped)
    tokens: List[str] = Field(default_factory=list)

    interrogative: bool = False
