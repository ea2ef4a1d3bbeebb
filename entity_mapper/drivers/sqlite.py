import os

from entity_mapper.drivers.base import Connection, DatabaseDriver
from entity_mapper.platforms import SqlitePlatform


class SqliteConnection(Connection):
    MEMORY = ":memory:"

    def get_default_client_url(self) -> str:
        db_name = self.config.get("db_name", self.MEMORY)
        if db_name != self.MEMORY and not os.path.isabs(db_name):
            db_name = os.path.join(self.config.get("base_dir"), db_name)
        return f"sqlite:///{db_name}"

    def _option(self, key: str) -> object:
        # the database file lives in the URL path, there are no credentials or hosts
        if key in ("host", "port", "user", "password", "db_name"):
            return None
        return super()._option(key)


class SqliteDriver(DatabaseDriver):
    PLATFORM_CLASS = SqlitePlatform
    CONNECTION_CLASS = SqliteConnection
