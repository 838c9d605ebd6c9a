import os
import typing

import pytest
import requests

os.environ.update(
    POWERTOOLS_LOG_LEVEL="DEBUG",
    POWERTOOLS_DEV="true",
    POWERTOOLS_DEBUG="true",
)

from teamkeys import cfg, github

AnyDict = dict[str, typing.Any]

API_URL = "https://api.github.example.org"


class FakeResponse:
    def __init__(self, path: str, payload: typing.Any):
        self.path = path
        self.payload = payload

    def raise_for_status(self):
        if isinstance(self.payload, int):
            raise requests.HTTPError(f"{self.payload} for path={self.path!r}")

    def json(self):
        return self.payload


class FakeGitHubSession:
    """stands in for an authenticated session against the GitHub API

    responses are keyed by path relative to the API root; an int value is
    treated as an error status and an exception value is raised from get().
    """

    def __init__(self):
        self.responses: AnyDict = {
            "orgs/frob/teams": [
                {"id": 1, "name": "infra", "slug": "infra"},
                {"id": 2, "name": "dev", "slug": "dev"},
            ],
            "teams/1/members": [{"login": "alice"}, {"login": "bob"}],
            "teams/2/members": [{"login": "bob"}, {"login": "carol"}],
            "users/alice/keys": [
                {"id": 11, "key": "ssh-rsa AAAalice"},
                {"id": 12, "key": "ssh-ed25519 BBBalice"},
            ],
            "users/bob/keys": [{"id": 21, "key": "ssh-ed25519 AAAbob"}],
            "users/carol/keys": [],
        }
        self.requested: list[str] = []

    def get(self, url):
        self.requested.append(url)

        path = url.replace(API_URL + "/", "", 1)
        payload = self.responses.get(path, 404)

        if isinstance(payload, Exception):
            raise payload

        return FakeResponse(path, payload)


@pytest.fixture
def fake_session() -> FakeGitHubSession:
    return FakeGitHubSession()


@pytest.fixture
def directory(fake_session) -> github.Directory:
    return github.Directory(fake_session, api_url=API_URL)


@pytest.fixture
def env(tmp_path) -> dict[str, str]:
    return {
        "GITHUB_ACCESS_TOKEN": "ghp_notarealtoken",
        "GITHUB_ORGANIZATION": "frob",
        "GITHUB_API_URL": API_URL,
        "HOME": str(tmp_path),
        "AUTHORIZED_KEYS_FILE": str(tmp_path / "authorized_keys"),
    }


@pytest.fixture
def config(env) -> cfg.Config:
    return cfg.load(env=env)
