from . import github, policy
from .log import log


def select_teams(teams: list[github.Team], teams_filter: str) -> list[github.Team]:
    if teams_filter == "":
        return list(teams)

    # NOTE: entries are matched exactly as given, so "infra, dev" wants a team
    # named " dev" rather than "dev".
    wanted = set(teams_filter.split(","))

    return [team for team in teams if team.name in wanted]


def resolve_team_ids(
    directory: github.Directory,
    organization: str,
    teams_filter: str,
    error_policy: policy.ErrorPolicy = policy.ErrorPolicy.DEGRADE,
) -> list[int]:
    teams = policy.attempt(
        directory.list_teams, organization, policy=error_policy, default=[]
    )
    selected = select_teams(teams, teams_filter)

    log.info(
        "resolved teams",
        extra=dict(
            organization=organization,
            teams_filter=teams_filter,
            listed=len(teams),
            selected=[team.name for team in selected],
        ),
    )

    return [team.id for team in selected]
