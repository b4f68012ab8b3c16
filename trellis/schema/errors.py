"""Exceptions raised while reading schema and record files."""


class LoadError(Exception):
    """Raised when a YAML file cannot be read or is not a mapping.

    ``document`` names what was being read and appears in the message.
    """

    document = "YAML"

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SchemaLoadError(LoadError):
    """Raised when a schema file or string cannot be read as YAML."""

    document = "schema"


class RecordLoadError(LoadError):
    """Raised when a record file cannot be read as a YAML mapping."""

    document = "record"


class SchemaValidationError(Exception):
    """Raised when schema data does not describe valid models.

    ``errors`` holds one ``{"loc", "msg", "type"}`` dict per problem.
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
