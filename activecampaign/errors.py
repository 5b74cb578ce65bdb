"""
Errors raised by the ActiveCampaign helpers.
Transport failures from requests are not wrapped and propagate as-is.
"""


class ActiveCampaignError(Exception):
    """Base class for every error raised by this package."""

    kind = "error"

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(ActiveCampaignError):
    """No credentials were available for the request."""

    kind = "configuration"


class AuthError(ActiveCampaignError):
    """The API rejected the credentials (HTTP 403)."""

    kind = "auth"


class ApiError(ActiveCampaignError):
    """The API answered with a `success: false` payload."""

    kind = "api"

    def __init__(self, error, error_info):
        super().__init__(f"ActiveCampaign error response: {error} ({error_info})")
        self.error = error
        self.error_info = error_info
