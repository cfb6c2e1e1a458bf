import logging
from datetime import datetime
from typing import Any, Callable, Dict, TypeVar
from urllib.parse import ParseResult, urlparse

from pullhandle import times
from pullhandle.errors import MalformedURLError, MissingFieldError
from pullhandle.pulls import Pull

log = logging.getLogger(__name__)

T = TypeVar("T")


def read_required_field(
    snapshot: Dict[str, Any],
    name: str,
    number: int,
    converter: Callable[[str], T],
) -> T:
    """
    Pulls the string field `name` out of a snapshot and converts it.

    A field that is absent, null or not a string means the resource doesn't
    look like a pull request, so it is raised as MissingFieldError rather
    than defaulted.
    """
    value = snapshot.get(name)
    if not isinstance(value, str):
        raise MissingFieldError(name, number)
    return converter(value)


def as_text(value: str) -> str:
    return value


def url_converter(name: str, number: int) -> Callable[[str], ParseResult]:
    def convert(value: str) -> ParseResult:
        try:
            parsed = urlparse(value)
        except ValueError as e:
            raise MalformedURLError(name, number, value, str(e)) from e
        if not parsed.scheme or not parsed.netloc:
            raise MalformedURLError(name, number, value, "no scheme or host")
        return parsed

    return convert


class PullTool:
    """
    Typed access to the fields of a pull request.

    Every read fetches a fresh snapshot and every write sends a one-key patch;
    callers have to read again to see what a write did.
    """

    def __init__(self, pull: Pull) -> None:
        self._pull = pull

    def _read(self, name: str, converter: Callable[[str], T]) -> T:
        log.debug("Reading %s of pull request #%d", name, self._pull.number)
        return read_required_field(
            self._pull.json(), name, self._pull.number, converter
        )

    def _write(self, name: str, value: str) -> None:
        log.debug("Setting %s of pull request #%d", name, self._pull.number)
        self._pull.patch({name: value})

    def _url(self, name: str) -> ParseResult:
        return self._read(name, url_converter(name, self._pull.number))

    @property
    def is_open(self) -> bool:
        return self.state == "open"

    @property
    def state(self) -> str:
        return self._read("state", as_text)

    @state.setter
    def state(self, state: str) -> None:
        self._write("state", state)

    @property
    def title(self) -> str:
        return self._read("title", as_text)

    @title.setter
    def title(self, text: str) -> None:
        self._write("title", text)

    @property
    def body(self) -> str:
        return self._read("body", as_text)

    @body.setter
    def body(self, text: str) -> None:
        self._write("body", text)

    @property
    def url(self) -> ParseResult:
        return self._url("url")

    @property
    def html_url(self) -> ParseResult:
        return self._url("html_url")

    @property
    def created_at(self) -> datetime:
        return self._read("created_at", times.parse)

    @property
    def updated_at(self) -> datetime:
        return self._read("updated_at", times.parse)

    @property
    def closed_at(self) -> datetime:
        return self._read("closed_at", times.parse)

    @property
    def merged_at(self) -> datetime:
        return self._read("merged_at", times.parse)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PullTool):
            return NotImplemented
        return self._pull == other._pull

    def __hash__(self) -> int:
        return hash(self._pull)

    def __repr__(self) -> str:
        return f"PullTool({self._pull!r})"
