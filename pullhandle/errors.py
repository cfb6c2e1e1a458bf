from typing import Optional


class PullHandleError(Exception):
    pass


class NoGithubCredentials(PullHandleError):
    pass


class TransportError(PullHandleError):
    """
    Any failure of a request/response exchange with the API: network errors,
    non-2xx statuses and bodies that aren't the JSON we asked for.
    """

    def __init__(
        self, message: str, status: Optional[int] = None, url: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.status = status
        self.url = url


class MissingFieldError(PullHandleError, LookupError):
    def __init__(self, field: str, number: int) -> None:
        super().__init__(f"{field} is missing in pull request #{number}")
        self.field = field
        self.number = number


class MalformedURLError(PullHandleError, ValueError):
    def __init__(
        self, field: str, number: int, value: str, reason: Optional[str] = None
    ) -> None:
        message = f"{field} of pull request #{number} is not a valid URL: {value!r}"
        if reason is not None:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.reason = reason
        self.field = field
        self.number = number
        self.value = value


class ParseError(PullHandleError, ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Can't parse {value!r} as a timestamp")
        self.value = value
