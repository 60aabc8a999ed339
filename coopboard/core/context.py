from dataclasses import dataclass
from coopboard.models.family import Family


@dataclass(frozen=True)
class AuthContext:
    """
    The family acting on a request.

    Built once per request and handed to every service call; services apply it
    to the store session before each access-controlled query.
    """

    family_id: int
    username: str
    display_name: str
    is_admin: bool = False

    @classmethod
    def from_family(cls, family: Family) -> "AuthContext":
        return cls(
            family_id=family.id,
            username=family.username,
            display_name=family.display_name,
            is_admin=family.is_admin,
        )
