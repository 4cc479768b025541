"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class LLMAPIError(DomainException):
    """LLM API returned an error, an unusable body, or is unreachable"""

    pass


class RecordNotFoundError(DomainException):
    """No transaction or debt exists with the given identifier"""

    pass


class AnalysisInProgressError(DomainException):
    """An analysis request is already running"""

    pass
