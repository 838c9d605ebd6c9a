import os
import typing

from . import cfg, user
from .log import log


def format_users(users: typing.Iterable[user.User]) -> str:
    return "".join([u.as_authorized_keys() for u in users if u.has_keys])


def write_authorized_keys(
    users: typing.Iterable[user.User],
    path: str,
    mode: int = cfg.DEFAULT_FILE_MODE,
) -> int:
    content = format_users(users).encode("utf-8")

    # NOTE: mode only applies when the file is created; an existing file is
    # truncated in place and keeps its permissions.
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)

    with os.fdopen(fd, "wb") as out:
        out.write(content)

    log.info("wrote authorized keys", extra=dict(path=path, size=len(content)))

    return len(content)
