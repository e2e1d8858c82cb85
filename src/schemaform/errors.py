"""Exception definitions for schemaform"""


class SchemaFormException(Exception):
    """Base exception for all schemaform errors.

    Validation outcomes are returned as message strings and never raised;
    these exceptions only cover failures the host has to handle itself.
    """

    pass


class ConfigException(SchemaFormException):
    """Raised when configuration validation or loading fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Configuration validation fails (out of range values, bad locale overrides)
    """

    pass


class SchemaException(SchemaFormException):
    """Raised when a schema document cannot be turned into a schema tree.

    Individual malformed constraints do not raise; they are dropped while
    parsing. This is reserved for documents that are not a mapping at all.
    """

    pass


class InvalidPatternError(SchemaFormException, ValueError):
    """Raised when a string schema carries a ``pattern`` that is not a valid
    regular expression.

    The underlying ``re.error`` is chained as ``__cause__``.
    """

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason
