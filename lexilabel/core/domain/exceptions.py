# lexilabel/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Grammar Errors ---

class UnsupportedGrammaticalFormError(DomainError):
    """Raised when a case/number/gender/article is requested that the language does not define."""
    def __init__(self, language_code: str, axis: str, value: object):
        self.language_code = language_code
        self.axis = axis
        self.value = value
        super().__init__(
            f"Unsupported category combination for '{language_code}': {axis}={value!s}."
        )

class NoFormAvailableError(DomainError):
    """Raised when a term has no stored value for a form and no derivation path exists."""
    def __init__(self, term_name: str, form_key: str, language_code: str):
        self.term_name = term_name
        self.form_key = form_key
        super().__init__(
            f"No form '{form_key}' available for '{term_name}' in language '{language_code}'."
        )

# --- Label Resolution Errors ---

class LabelNotFoundError(DomainError):
    """Raised when (section, key) is absent from every layer of an assembled set."""
    def __init__(self, section: str, key: str, language: str):
        self.section = section
        self.key = key
        super().__init__(f"Label '{section}.{key}' not found for language '{language}'.")

class LabelRenderError(DomainError):
    """Raised by strict rendering when a template reference cannot be resolved."""
    def __init__(self, label: str, reason: str):
        self.label = label
        super().__init__(f"Label '{label}' could not be rendered: {reason}")

# --- Load-Time Errors ---

class LabelAliasError(DomainError):
    """Raised when an alias points at a label that no layer defines."""
    def __init__(self, label: str, target: str):
        super().__init__(f"Alias '{label}' points to missing label '{target}'.")

class AliasCycleError(LabelAliasError):
    """Raised when alias redirections loop back on themselves."""
    def __init__(self, chain):
        self.chain = tuple(chain)
        DomainError.__init__(self, "Alias cycle detected: " + " -> ".join(self.chain))

class TemplateSyntaxError(DomainError):
    """Raised when a label template cannot be compiled."""
    def __init__(self, template: str, reason: str):
        self.template = template
        super().__init__(f"Invalid label template {template!r}: {reason}")

class LabelSourceError(DomainError):
    """Raised when a label source holds unreadable or invalid data."""
    def __init__(self, location: str, details: str):
        super().__init__(f"Label source '{location}' could not be loaded: {details}")

# --- Date Errors ---

class DateParseError(DomainError):
    """Raised when a date string does not parse completely or falls outside the supported years."""
    def __init__(self, text: str, reason: str):
        self.text = text
        super().__init__(f"Could not parse date {text!r}: {reason}")
