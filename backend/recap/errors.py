class RecapError(Exception):
    """Base class for errors raised by the recap pipeline and its upstreams."""


class InvalidInputError(RecapError):
    """A required input is missing or empty."""


class NotFoundError(RecapError):
    """The requested transcript, video or channel does not exist upstream."""


class UpstreamError(RecapError):
    """A third-party API call failed or returned an unusable body."""


class EmptyGenerationError(RecapError):
    """The generation capability returned no usable output."""


class MalformedStructuredOutputError(RecapError):
    """Structured output from the generation capability is not valid JSON.

    Recovered locally by the concept map step; never surfaced to callers.
    """
