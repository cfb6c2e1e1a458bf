from typing import Optional

from pullhandle.http_client import Requester


class Repo:
    """
    Reference to a github repository, plus the requester used to talk to it.
    """

    def __init__(
        self, requester: Requester, name: str, domain: Optional[str] = "github.com"
    ) -> None:
        self.requester = requester
        self.name = name
        if domain is None:
            self.domain = "github.com"
        else:
            self.domain = domain

    @property
    def api_url(self) -> str:
        # API locations are different for non-github.com locales.
        if self.domain == "github.com":
            return "https://api.%s" % self.domain
        return "https://%s/api/v3" % self.domain

    @property
    def url(self) -> str:
        return f"{self.api_url}/repos/{self.name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repo):
            return NotImplemented
        return (self.name, self.domain) == (other.name, other.domain)

    def __hash__(self) -> int:
        return hash((self.name, self.domain))

    def __repr__(self) -> str:
        return f"Repo({self.name!r}, domain={self.domain!r})"

    def __str__(self) -> str:
        return self.name
