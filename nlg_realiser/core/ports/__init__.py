from .lexicon import Lexicon

__all__ = ["Lexicon"]
