class WeatherLookupError(Exception):
    """Base class for failures of the lookup pipeline.

    The message is user-facing and is surfaced verbatim in the Failure state.
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(WeatherLookupError):
    """The geocoding search matched zero places."""
    def __init__(self, message: str = "City not found"):
        super().__init__(message)


class NetworkError(WeatherLookupError):
    """An upstream call could not complete or returned an unusable body."""
