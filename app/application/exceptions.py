class UpstreamServiceError(RuntimeError):
    """Raised when the catalog, IBGE or registration service fails (network errors, bad status, bad payload)."""
    pass


class GeolocationUnavailableError(RuntimeError):
    """Raised when the device position was denied or could not be obtained."""
    pass


class SubmissionBlockedError(RuntimeError):
    """Raised when the form is submitted before any point was resolved."""
    pass


class MissingRequiredFieldError(ValueError):
    """Raised when a required form field is blank or still on the "none selected" sentinel."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Missing required field(s): {', '.join(self.fields)}")


class FormNotFoundError(LookupError):
    """Raised when a form session id is unknown or was discarded."""
    pass


class UnknownCityError(ValueError):
    """Raised when the chosen city is not in the city list loaded for the selected state."""

    def __init__(self, city_name: str, state_code: str) -> None:
        self.city_name = city_name
        self.state_code = state_code
        super().__init__(f"City {city_name!r} is not a city of state {state_code!r}")
