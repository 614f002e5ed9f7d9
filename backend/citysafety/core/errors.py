"""Error taxonomy shared by stores, services and the HTTP layer."""


class CitySafetyError(Exception):
    """Base class for expected service errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CitySafetyError, LookupError):
    """Unknown region, alert, report or route id."""

    status_code = 404


class InvalidInputError(CitySafetyError, ValueError):
    """Missing or empty required fields on a request."""

    status_code = 400


class InternalError(CitySafetyError):
    """Unexpected failure in scoring or store access."""

    status_code = 500
