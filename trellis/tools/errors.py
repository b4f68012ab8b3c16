"""Exceptions raised by the schema and record tools."""


class ToolError(Exception):
    """Base class for tool errors."""


class UnknownModelError(ToolError):
    """Raised when a model name is not defined in the schema."""

    def __init__(self, model: str):
        self.model = model
        super().__init__(f"Unknown model: {model!r}")


class RecordError(ToolError):
    """Raised when a value cannot be read as a record of attributes."""


class ResolutionError(ToolError):
    """Raised when a benchmark target cannot be imported or called."""

    def __init__(self, message: str, target: str | None = None):
        self.target = target
        super().__init__(message)
