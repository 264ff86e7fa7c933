class ConfigError(Exception):
    """Invalid startup configuration."""


class GatewayError(Exception):
    """Base for errors that end a submission request."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class DomainNotAuthorized(GatewayError):
    status_code = 403
    default_message = "Forbidden: Domain not authorized for form submissions"


class MissingRequiredField(GatewayError):
    status_code = 400
    default_message = ("Missing required fields: firstName, lastName, email, "
                       "gpuType, and quantity are required")


class InvalidQuantity(GatewayError):
    status_code = 400
    default_message = "Invalid quantity: must be a positive whole number"


class UpstreamTargetNotFound(GatewayError):
    status_code = 400
    default_message = "Notion database not found. Please check your database ID."


class UpstreamUnauthorized(GatewayError):
    status_code = 401
    default_message = ("Unauthorized access to Notion. "
                       "Please check your integration token.")


class UpstreamOther(GatewayError):
    status_code = 500
    default_message = "Internal server error while submitting to Notion"


class InvalidFieldValue(GatewayError):
    status_code = 400
    default_message = ("Invalid field value: firstName, lastName, email, "
                       "gpuType, and message must be text")
