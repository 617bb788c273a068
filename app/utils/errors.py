from typing import Optional


class PostGenerationError(Exception):
    """Base error for a failed generate-post request. Carries the HTTP status and public message."""

    status_code = 500
    message = "Failed to generate post."

    def __init__(self, details: Optional[str] = None):
        super().__init__(details or self.message)
        self.details = details

    def to_dict(self) -> dict:
        body = {"success": False, "error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class TopicRequiredError(PostGenerationError):
    """The request has no usable topic."""
    status_code = 400
    message = "topic is required"


class InvalidRequestError(PostGenerationError):
    """The request body could not be read as generation parameters."""
    status_code = 400
    message = "Invalid request body."


class ConfigurationError(PostGenerationError):
    """The server is missing the OpenAI credential."""
    status_code = 500
    message = "OPENAI_API_KEY is not set on the server."


class UpstreamError(PostGenerationError):
    """The completion call (or anything after it) raised."""
    status_code = 500
    message = "Failed to generate post."
