# nlg_realiser/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Entity Not Found Errors ---

class LanguageNotFoundError(DomainError):
    """Raised when realisation is requested for a language with no registered rules."""
    def __init__(self, lang_code: str):
        self.lang_code = lang_code
        super().__init__(f"Language '{lang_code}' is not supported or not found in the registry.")

# --- Validation Errors ---

class UnsupportedInterrogativeError(DomainError):
    """Raised when an interrogative type outside the closed set is requested."""
    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Interrogative type '{value}' is not supported; new question types need their own realisation rules."
        )

class InvalidElementError(DomainError):
    """Raised when a phrase is built from a value that cannot become an element."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid element: {reason}")
