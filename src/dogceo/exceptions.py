"""Exceptions raised by the Dog CEO client."""


class DogAPIException(Exception):
    """
    Raised for any failed API call.

    Transport errors, malformed bodies, non-success envelopes and empty
    sub-breed listings all surface as this one type. The original error,
    when there is one, is available as ``__cause__``.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
