"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Loan or analysis parameters are outside the valid range"""

    pass


class UnknownFrequencyError(InvalidInputError):
    """Payment frequency is not one of the supported variants"""

    pass
