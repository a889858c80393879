"""
Exception classes for ocrtex.

The scanning, repair and alignment functions never raise for string
input; these exceptions only come from loading configuration and from
the command-line entry point.

Example:
    >>> try:
    ...     config = ocrtex.load_config("settings.yaml")
    ... except ocrtex.ConfigurationError as e:
    ...     print(f"Bad settings: {e}")
"""


class OcrTexError(Exception):
    """
    Base exception for all ocrtex errors.

    Catch this to handle any ocrtex-specific error.
    """

    pass


class ConfigurationError(OcrTexError):
    """
    Raised for an invalid configuration file.

    Example:
        >>> load_config("bad.yaml")
        ConfigurationError: Unknown alignment option(s): line_tol
    """

    pass


class InputFormatError(OcrTexError):
    """Raised when an items file cannot be turned into recognized items."""

    pass
