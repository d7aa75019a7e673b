"""Errors raised while talking to the hiring API."""


class HiringApiError(Exception):
    """Base class for hiring API failures."""


class RegistrationError(HiringApiError):
    """The webhook registration produced no usable result."""


class SubmissionError(HiringApiError):
    """The solution could not be delivered to the webhook."""


class RegistrationNumberError(ValueError):
    """The registration number does not end in digits."""
