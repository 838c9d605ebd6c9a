import dataclasses
import os
import pathlib
import typing


class ConfigError(ValueError):
    def __init__(self, key: str) -> None:
        self.key = key

    def __str__(self) -> str:
        return (
            f"environment variable {self.key} doesn't exist or it's empty, "
            + "set it and try it again"
        )


class InvalidConfigValue(ConfigError):
    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value

    def __str__(self) -> str:
        return f"environment variable {self.key} has an invalid value {self.value!r}"


def get(
    *keys: str, default: str | None = None, env: dict[str, str] | None = None
) -> str | None:
    env = env if env is not None else os.environ.copy()

    for key in keys:
        if key == "":
            continue

        value = env.get(key)

        if value is not None and str(value).strip() != "":
            return value

    return default


def getbool(
    *keys: str, default: bool = False, env: dict[str, str] | None = None
) -> bool:
    value = get(*keys, env=env)

    if value is not None and str(value).strip() != "":
        return str(value).lower() in ("true", "ok", "yes", "on", "1")

    return default


def getint(
    *keys: str, default: int = 0, base: int = 10, env: dict[str, str] | None = None
) -> int:
    value = get(*keys, env=env)

    if value is not None:
        return int(str(value).strip(), base)

    return default


def getdict(
    *keys: str, default: dict[str, str] | None = None, env: dict[str, str] | None = None
) -> dict[str, str]:
    as_list = [
        s.strip() for s in (get(*keys, env=env) or "").split(",") if s.strip() != ""
    ]
    if len(as_list) == 0:
        return default or {}

    return dict(
        [(k.strip(), v.strip()) for k, v in [pair.split(":", 1) for pair in as_list]]
    )


def require(key: str, env: dict[str, str] | None = None) -> str:
    env = env if env is not None else os.environ.copy()
    value = env.get(key)

    if value is None or value == "":
        raise ConfigError(key)

    return value


DEFAULT_API_URL = "https://api.github.com"
DEFAULT_FILE_MODE = 0o600


@dataclasses.dataclass(frozen=True)
class Config:
    access_token: str = dataclasses.field(repr=False)
    organization: str
    teams: str = ""
    authorized_keys_file: str = ""
    api_url: str = DEFAULT_API_URL
    file_mode: int = DEFAULT_FILE_MODE
    strict: bool = False


def load(env: dict[str, str] | None = None, strict: bool | None = None) -> Config:
    env = env if env is not None else os.environ.copy()

    access_token = require("GITHUB_ACCESS_TOKEN", env=env)
    organization = require("GITHUB_ORGANIZATION", env=env)

    home = get("HOME", default=str(pathlib.Path.home()), env=env)

    if strict is None:
        strict = getbool("TEAMKEYS_STRICT", env=env)

    return Config(
        access_token=access_token,
        organization=organization,
        # NOTE: read raw so a blank filter still filters rather than selecting
        # every team.
        teams=env.get("GITHUB_TEAMS", ""),
        authorized_keys_file=typing.cast(
            str,
            get(
                "AUTHORIZED_KEYS_FILE",
                default=os.path.join(str(home), ".ssh", "authorized_keys"),
                env=env,
            ),
        ),
        api_url=typing.cast(
            str, get("GITHUB_API_URL", default=DEFAULT_API_URL, env=env)
        ),
        file_mode=_file_mode(env),
        strict=strict,
    )


def _file_mode(env: dict[str, str]) -> int:
    try:
        return getint(
            "AUTHORIZED_KEYS_FILE_MODE", default=DEFAULT_FILE_MODE, base=8, env=env
        )
    except ValueError as exc:
        raise InvalidConfigValue(
            "AUTHORIZED_KEYS_FILE_MODE", str(env.get("AUTHORIZED_KEYS_FILE_MODE"))
        ) from exc
