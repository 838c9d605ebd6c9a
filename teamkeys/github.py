import dataclasses
import typing
import urllib.parse

import oauthlib.oauth2
import requests
import requests_oauthlib

from . import __version__, cfg
from .log import log

T = typing.TypeVar("T")


class DirectoryError(Exception):
    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        return f"request to path={self.path!r} failed err={self.cause!r}"


@dataclasses.dataclass
class Team:
    id: int
    name: str

    @classmethod
    def from_github_dict(cls, team: dict) -> "Team":
        return cls(id=int(team["id"]), name=str(team["name"]))


def get_session(access_token: str) -> requests_oauthlib.OAuth2Session:
    session = requests_oauthlib.OAuth2Session(
        token=dict(access_token=access_token, token_type="bearer")
    )
    session.headers.update(
        {
            "Accept": "application/vnd.github+json",
            "User-Agent": f"teamkeys/{__version__}",
        }
    )

    return session


class Directory:
    def __init__(self, session: typing.Any, api_url: str = cfg.DEFAULT_API_URL):
        self.session = session
        self.api_url = api_url.rstrip("/") + "/"

    @classmethod
    def from_config(cls, config: cfg.Config) -> "Directory":
        return cls(get_session(config.access_token), api_url=config.api_url)

    def list_teams(self, organization: str) -> list[Team]:
        return self._list(
            f"orgs/{urllib.parse.quote(organization)}/teams", Team.from_github_dict
        )

    def list_team_members(self, team_id: int) -> list[str]:
        return self._list(f"teams/{team_id}/members", lambda member: member["login"])

    def list_user_keys(self, login: str) -> list[str]:
        return self._list(
            f"users/{urllib.parse.quote(login)}/keys", lambda key: key["key"]
        )

    def _list(self, path: str, convert: typing.Callable[[dict], T]) -> list[T]:
        body = self._get(path)

        if not isinstance(body, list):
            raise DirectoryError(path, TypeError(f"expected a list, got {body!r}"))

        try:
            return [convert(item) for item in body]
        except (KeyError, TypeError, ValueError) as exc:
            raise DirectoryError(path, exc) from exc

    def _get(self, path: str) -> typing.Any:
        url = urllib.parse.urljoin(self.api_url, path)

        log.debug("requesting", extra=dict(url=url))

        try:
            resp = self.session.get(url)
            resp.raise_for_status()

            return resp.json()
        except (requests.RequestException, oauthlib.oauth2.OAuth2Error) as exc:
            raise DirectoryError(path, exc) from exc
