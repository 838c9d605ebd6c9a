import enum
import typing

from . import github
from .log import log

T = typing.TypeVar("T")


class ErrorPolicy(enum.Enum):
    DEGRADE = "degrade"
    ABORT = "abort"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_strict(cls, strict: bool) -> "ErrorPolicy":
        return cls.ABORT if strict else cls.DEGRADE


def attempt(
    func: typing.Callable[..., T],
    *args: typing.Any,
    policy: ErrorPolicy = ErrorPolicy.DEGRADE,
    default: T,
) -> T:
    """call func(*args), handing any DirectoryError to the policy

    DEGRADE logs the error and returns the default so the run can continue
    with partial results. ABORT logs and re-raises.
    """
    try:
        return func(*args)
    except github.DirectoryError as exc:
        log.error(
            "directory call failed",
            extra=dict(
                call=func.__name__,
                arguments=args,
                err=str(exc),
                policy=str(policy),
            ),
        )

        if policy is ErrorPolicy.ABORT:
            raise

        return default
