import dataclasses


@dataclasses.dataclass(frozen=True)
class User:
    name: str
    keys: tuple[str, ...] = ()

    @property
    def has_keys(self) -> bool:
        return len(self.keys) > 0

    def as_authorized_keys(self) -> str:
        """return one `<key> <name>-<index>` line per key"""

        return "".join(
            [f"{key} {self.name}-{num_key}\n" for num_key, key in enumerate(self.keys)]
        )
