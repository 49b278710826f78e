from __future__ import annotations

import urllib.parse
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "plant_management")),
        )

    @property
    def sqlalchemy_uri(self) -> str:
        # Encode the password so characters like '@' survive inside the URL.
        password = urllib.parse.quote_plus(self.password)
        return f"mysql+mysqlconnector://{self.user}:{password}@{self.host}:{self.port}/{self.database}"


def resolve_database_uri(settings) -> str:
    """Explicit SQLALCHEMY_DATABASE_URI wins; otherwise build a MySQL URI from DB_CONFIG."""

    uri: Optional[str] = getattr(settings, "SQLALCHEMY_DATABASE_URI", None)
    if uri:
        return uri
    return DBConfig.from_dict(getattr(settings, "DB_CONFIG", {})).sqlalchemy_uri
