"""Exceptions raised by the EmailListVerify client."""


class EmailListVerifyError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(EmailListVerifyError):
    pass


class InvalidArgumentError(EmailListVerifyError):
    pass


class AuthenticationError(EmailListVerifyError):
    pass


class InsufficientCreditsError(EmailListVerifyError):
    pass


class UploadRejectedError(EmailListVerifyError):
    pass


class NotFoundError(EmailListVerifyError):
    pass


class UnrecognizedResponseError(EmailListVerifyError):
    """The service answered with text outside its known vocabulary."""

    def __init__(self, body: str):
        super().__init__(f"Unrecognized response from EmailListVerify: {body!r}")
        self.body = body
