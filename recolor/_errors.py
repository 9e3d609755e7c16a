"""Error and warning categories for recolor."""


class ConfigurationError(Exception):
    """Raised when the regex, a style token, or a style assignment is invalid.

    Always raised before any input is consumed."""


class RecolorWarning(UserWarning):
    """Warning category for recolor-specific warnings.

    This can be used to filter recolor warnings:
    >>> import warnings
    >>> warnings.filterwarnings("ignore", category=RecolorWarning)
    """

    pass
