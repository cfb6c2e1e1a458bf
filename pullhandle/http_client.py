import json
import logging
from typing import Any, Dict, Iterator, Optional

import requests
from requests.auth import AuthBase, HTTPBasicAuth
from requests.models import Response

from pullhandle.errors import TransportError

log = logging.getLogger(__name__)

PER_PAGE = 100


class BearerAuth(AuthBase):
    def __init__(self, token: str) -> None:
        self.token = token

    def __call__(self, r):
        r.headers["Authorization"] = f"Bearer {self.token}"
        return r


class Pages:
    """
    Lazy view over a paginated list endpoint.

    Nothing is fetched until iteration starts, and every new iteration walks
    the `Link: rel="next"` chain again from the first page.
    """

    def __init__(self, requester: "Requester", url: str) -> None:
        self.requester = requester
        self.url = url

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        url: Optional[str] = self.url
        params: Optional[Dict[str, Any]] = {"per_page": PER_PAGE}
        while url is not None:
            response = self.requester.get(url, params=params)
            page = decode(response, url)
            if not isinstance(page, list):
                raise TransportError(
                    "Expected a JSON array", status=response.status_code, url=url
                )
            for item in page:
                if not isinstance(item, dict):
                    raise TransportError(
                        "Expected a JSON object", status=response.status_code, url=url
                    )
                yield item
            url = response.links.get("next", {}).get("url")
            # the next link already carries the query string
            params = None

    def __repr__(self) -> str:
        return f"Pages({self.url!r})"


def decode(response: Response, url: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise TransportError(
            f"Malformed JSON from {url}", status=response.status_code, url=url
        ) from e


class Requester:
    """
    Object used for issuing authenticated API calls.

    Every status of 400 and up is raised as a `TransportError`; nothing here
    retries.
    """

    headers = {
        "Accept": "application/vnd.github+json",
        "content-type": "application/json",
    }

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    def get_auth(self) -> Optional[AuthBase]:
        raise NotImplementedError()

    def request(self, method: str, url: str, **kwargs: Any) -> Response:
        try:
            response = requests.request(
                method,
                url,
                auth=self.get_auth(),
                headers=self.headers,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} to {url} failed: {e}", url=url) from e
        if response.status_code >= 400:
            log.warning(
                "Error on %s to %s. Response: %s", method, url, response.content
            )
            raise TransportError(
                f"{method} to {url} returned {response.status_code}",
                status=response.status_code,
                url=url,
            )
        return response

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Response:
        log.debug("Fetching %s", url)
        return self.request("GET", url, params=params)

    def json(self, url: str) -> Any:
        return decode(self.get(url), url)

    def paginate(self, url: str) -> Pages:
        return Pages(self, url)

    def patch(self, url: str, payload: Dict) -> Response:
        log.debug("Patching %s with %s", url, payload)
        return self.request("PATCH", url, data=json.dumps(payload))

    def post(self, url: str, payload: Dict) -> Response:
        log.debug("Posting %s to %s", payload, url)
        return self.request("POST", url, data=json.dumps(payload))

    def put(self, url: str, payload: Dict) -> Response:
        log.debug("Putting %s to %s", payload, url)
        return self.request("PUT", url, data=json.dumps(payload))


class BasicAuthRequester(Requester):
    def __init__(
        self, username: str, password: str, timeout: Optional[float] = None
    ) -> None:
        super().__init__(timeout)
        self.username = username
        self.password = password

    def get_auth(self) -> HTTPBasicAuth:
        return HTTPBasicAuth(self.username, self.password)


class TokenAuthRequester(Requester):
    def __init__(self, token: str, timeout: Optional[float] = None) -> None:
        super().__init__(timeout)
        self.token = token

    def get_auth(self) -> BearerAuth:
        return BearerAuth(self.token)
