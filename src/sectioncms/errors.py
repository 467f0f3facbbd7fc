"""Exception definitions for the section CMS"""


class SectionCMSException(Exception):
    """Base exception for all section CMS errors.

    All custom exceptions in the package inherit from this class.
    Use this as a catch-all for CMS-specific errors when you don't need
    to handle specific exception types.
    """

    pass


class ConfigException(SectionCMSException):
    """Raised when configuration validation or loading fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Configuration validation fails (missing required fields, invalid values)
    """

    pass


class ContractException(SectionCMSException):
    """Raised when a content-type contract cannot be registered.

    Use this exception when:
    - A type id is registered twice
    - The contract model is not a pydantic model
    - The derived default data does not validate against the contract model
    """

    pass


class SubmissionValidationError(SectionCMSException):
    """Raised when a document fails its contract validation before submission.

    The field-level messages are kept on ``errors`` as ``(location, message)``
    pairs so a hosting UI can attach them to the offending controls.
    """

    def __init__(self, message: str, errors: list[tuple[str, str]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class SubmissionPendingError(SectionCMSException):
    pass


class PersistenceError(SectionCMSException):
    """Raised when the content store rejects a write or the transport fails.

    The in-memory document is never discarded when this is raised; callers
    surface the message and let the author retry manually.
    """

    pass
