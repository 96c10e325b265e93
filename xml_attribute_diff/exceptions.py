class AttributeDiffError(Exception):
    """Base class for every error raised by xml_attribute_diff."""


class UsageError(AttributeDiffError):
    """Raised when the tool is invoked with invalid arguments."""


class ConfigError(UsageError):
    """Raised when a config.ini file cannot be read or holds invalid values."""


class ReadError(AttributeDiffError):
    """Raised when an XML document cannot be opened or read."""

    def __init__(self, path, reason=None):
        self.path = str(path)
        self.reason = reason
        message = f"Failed to read file from path [{self.path}]"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ParseError(AttributeDiffError):
    """Raised when an XML document is malformed or holds undecodable text.

    ``position`` is the (line, column) pair reported by the XML scanner, or
    None when it is unknown.
    """

    def __init__(self, path, reason=None, position=None):
        self.path = str(path)
        self.reason = reason
        self.position = position
        message = f"XML file [{self.path}] is malformatted"
        if reason:
            message += f": {reason}"
        super().__init__(message)
