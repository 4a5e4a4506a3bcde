class GenerationError(Exception):
    """Raised when the schema model handed to a generator is inconsistent."""


class MissingModelError(GenerationError, KeyError):
    def __init__(self, type_name: str) -> None:
        super().__init__(type_name)
        self.type_name = type_name

    def __str__(self) -> str:
        return f"No model is mapped to GraphQL type '{self.type_name}'"


class MissingInputTypeError(GenerationError, KeyError):
    def __init__(self, type_name: str) -> None:
        super().__init__(type_name)
        self.type_name = type_name

    def __str__(self) -> str:
        return f"Input type '{self.type_name}' is referenced but not defined in the schema"


class FormatError(Exception):
    """Raised by a formatter when it cannot format the generated code."""
