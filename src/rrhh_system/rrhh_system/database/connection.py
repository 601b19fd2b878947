from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar, Dict

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "rrhh_db"
    charset: str = "utf8mb4"
    connection_timeout: int = 10

    @classmethod
    def from_dict(cls, values: dict) -> "DBConfig":
        known = {k: values[k] for k in asdict(cls()) if values.get(k) is not None}
        if "port" in known:
            known["port"] = int(known["port"])
        return cls(**known)


class DatabaseConnection:
    """Connection factory registered under a logical name ("rrhh", "procurement").

    Each repository call opens and closes its own connection.
    """

    _registry: ClassVar[Dict[str, "DatabaseConnection"]] = {}

    def __init__(self, config: DBConfig):
        self.config = config

    @classmethod
    def get_instance(cls, config: DBConfig, *, name: str = "rrhh") -> "DatabaseConnection":
        return cls._registry.setdefault(name, cls(config))

    def connect(self):
        return mysql.connector.connect(**asdict(self.config))
