"""
Exception types raised by the subnetting engine.
"""


class SubnetQuizError(Exception):
    """Base class for all subnet quiz errors."""
    pass


class RangeError(SubnetQuizError, ValueError):
    """Raised when a CIDR prefix or integer address is out of range."""
    pass


class ParseError(SubnetQuizError, ValueError):
    """Raised when a dotted-decimal or CIDR string is malformed."""
    pass


class ValidationError(SubnetQuizError, ValueError):
    """Raised when a subnet mask is not contiguous 1s followed by 0s."""
    pass


class OptionBuildError(SubnetQuizError, RuntimeError):
    """Raised when the option builder cannot find enough distinct distractors."""
    pass


class QuizFinishedError(SubnetQuizError):
    """Raised when an answer is submitted to a quiz that has already ended."""
    pass
