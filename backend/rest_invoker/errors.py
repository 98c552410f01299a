"""Exceptions raised by rest_invoker."""

HTML_RESPONSE_MESSAGE = "Response was HTML, Request Failed. Use -Verbose to see the full response"


class RestInvokerError(Exception):
    """Base class for errors synthesized by rest_invoker."""


class HtmlResponseError(RestInvokerError):
    """A response item looked like an HTML page instead of API data.

    Recoverable: reported per item, never raised out of the result stream.
    The offending content is only written to the debug log.
    """

    def __init__(self, message: str = HTML_RESPONSE_MESSAGE):
        super().__init__(message)
