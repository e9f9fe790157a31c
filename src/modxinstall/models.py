"""Shared domain models for modxinstall."""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass(frozen=True)
class ExplicitInputs:
    """Values supplied up front through flags or the config file.

    ``None`` means the value was not supplied and will be prompted for.
    """

    db_name: Optional[str] = None
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_host: Optional[str] = None
    base_url: Optional[str] = None
    language: Optional[str] = None
    manager_user: Optional[str] = None
    manager_password: Optional[str] = None
    manager_email: Optional[str] = None

    def get(self, name: str) -> Optional[str]:
        value = getattr(self, name)
        if value is None or value == "":
            return None
        return value

    def is_complete(self) -> bool:
        return all(self.get(field.name) is not None for field in fields(self))


@dataclass(frozen=True)
class InstallParameters:
    """The resolved and validated configuration for one installation run."""

    db_name: str
    db_user: str
    db_password: str
    db_host: str
    base_url: str
    language: str
    manager_user: str
    manager_password: str
    manager_email: str

    def __repr__(self) -> str:
        return (
            f"InstallParameters(db_name={self.db_name!r}, db_user={self.db_user!r}, "
            f"db_host={self.db_host!r}, base_url={self.base_url!r}, "
            f"language={self.language!r}, manager_user={self.manager_user!r}, "
            f"manager_email={self.manager_email!r})"
        )
