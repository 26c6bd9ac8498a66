"""
Errors raised while generating a mapping.

All of them abort the generation call at the first violation; no partial mapping is returned.
"""


class MappingError(ValueError):
    """Base class for mapping generation errors. `path` is the dotted path of the offending field"""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class InvalidTypeOverride(MappingError):
    """An explicit elastic type in a field annotation is not a known primitive type"""


class UnsupportedNativeKind(MappingError):
    """A leaf field has a Python type for which there is no default elastic type"""


class IncompatibleModifier(MappingError):
    """A modifier flag was used on a field whose elastic type does not allow it"""


class DuplicateFieldName(MappingError):
    """Two fields of the same record resolve to the same external name"""


class ProgrammerMisuse(MappingError, TypeError):
    """The generator was called with arguments that make no sense (e.g. not a record type)"""
