"""Fatal error types. Data-quality findings are never raised, only reported."""


class ModelLinterError(Exception):
    """Base class for errors that abort linting of one locale."""

    def __init__(self, locale: str, message: str):
        self.locale = locale
        super().__init__(message)


class ModelStructureError(ModelLinterError):
    """The parsed model does not have the shape the checks need (e.g. no 'intents')."""


class ModelLoadError(ModelLinterError):
    """The model file for a locale is missing, unreadable or not valid JSON."""
