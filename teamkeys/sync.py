from . import authorized_keys, cfg, github, policy, teams, user
from .log import log


def collect_users(
    directory: github.Directory,
    team_ids: list[int],
    error_policy: policy.ErrorPolicy = policy.ErrorPolicy.DEGRADE,
) -> list[user.User]:
    users: list[user.User] = []
    seen: set[str] = set()

    for team_id in team_ids:
        members = policy.attempt(
            directory.list_team_members, team_id, policy=error_policy, default=[]
        )

        log.debug("listed team members", extra=dict(team_id=team_id, members=members))

        for login in members:
            if login in seen:
                continue

            keys = policy.attempt(
                directory.list_user_keys, login, policy=error_policy, default=[]
            )

            seen.add(login)
            users.append(user.User(name=login, keys=tuple(keys)))

    return users


def sync_authorized_keys(
    config: cfg.Config,
    directory: github.Directory | None = None,
    dry_run: bool = False,
) -> list[user.User]:
    directory = (
        directory if directory is not None else github.Directory.from_config(config)
    )
    error_policy = policy.ErrorPolicy.from_strict(config.strict)

    team_ids = teams.resolve_team_ids(
        directory, config.organization, config.teams, error_policy
    )
    users = collect_users(directory, team_ids, error_policy)

    log.info(
        "collected users",
        extra=dict(
            organization=config.organization,
            team_ids=team_ids,
            users=len(users),
            users_with_keys=len([u for u in users if u.has_keys]),
        ),
    )

    if dry_run:
        print(authorized_keys.format_users(users), end="")

        return users

    try:
        authorized_keys.write_authorized_keys(
            users, config.authorized_keys_file, mode=config.file_mode
        )
    except OSError:
        log.exception(
            "failed to write authorized keys",
            extra=dict(path=config.authorized_keys_file, policy=str(error_policy)),
        )

        if error_policy is policy.ErrorPolicy.ABORT:
            raise

    return users
