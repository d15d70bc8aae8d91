class Abi2TsError(Exception):
    """
    Base class for all abi2ts errors.

    This exception serves as the root of the abi2ts error hierarchy.
    """
    pass


class MissingNameError(Abi2TsError):
    """
    Raised when an identifier is requested for a fragment without a name.

    Callers are expected to filter nameless fragments (constructors,
    fallbacks) out before generating declarations.
    """
    pass


class SerializationError(Abi2TsError):
    """
    Raised when a fragment cannot be turned into a literal.

    Examples include a serializer failure or a value type the literal
    renderer does not support.
    """
    pass


class InvalidParameterError(Abi2TsError):
    """
    Raised when the processor is pointed at unusable paths.

    Examples include a source directory that does not exist or an empty
    output directory argument.
    """
    pass


class ConfigError(Abi2TsError):
    """
    Raised when the generator configuration is missing or invalid.
    """
    pass


class AbiFileError(Abi2TsError):
    """
    Raised when a single ABI artifact cannot be read or parsed.

    Attributes:
        path: Path of the offending input file.
    """

    def __init__(self, message: str, path: str | None = None):
        """
        Initialize an AbiFileError.

        Args:
            message: Description of the error.
            path: Optional path of the input file for reference.
        """
        super().__init__(message)
        self.path = path


class OutputDirectoryError(Abi2TsError):
    """
    Raised when the output directory cannot be created.

    This aborts the whole run since no unit could be written.
    """
    pass
