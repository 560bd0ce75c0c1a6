class ValidatorError(Exception):
    """Base class for errors raised by the validator clients"""


class ValidatorUnavailable(ValidatorError):
    """The validator could not be reached or refused the request"""


class ParsingError(ValidatorError):
    """The validator response could not be parsed"""
