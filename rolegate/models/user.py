"""In-memory user record (auth and RBAC)."""

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """
    Registered user as held by the UserStore.

    role: 'regular' or 'admin'. Records are never updated once created.
    JSON output uses camelCase (passwordHash), like accessToken on login.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    password_hash: str = Field(serialization_alias="passwordHash")
    role: str
