"""Exception classes for mdnote.

Rendering itself never raises on input text: malformed markdown degrades to
plainer output and unsafe link targets become ``#``. These exceptions cover
misconfiguration by the host.
"""

from __future__ import annotations


class MdnoteError(Exception):
    """Base exception for all mdnote errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigError(MdnoteError):
    """Invalid render configuration.
    
    Raised when a RenderConfig is built with values the renderer cannot use,
    such as a document origin that is not an absolute http(s) URL.
    """

    def __init__(self, field: str, value: object, message: str) -> None:
        """Initialize configuration error.
        
        Args:
            field: Name of the offending RenderConfig field
            value: The rejected value
            message: Description of the problem
        """
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: {message}")
