from entity_mapper.drivers.base import Connection, DatabaseDriver
from entity_mapper.platforms import PostgreSqlPlatform


class PostgreSqlConnection(Connection):
    def get_default_client_url(self) -> str:
        return "postgresql://postgres@127.0.0.1:5432"


class PostgreSqlDriver(DatabaseDriver):
    PLATFORM_CLASS = PostgreSqlPlatform
    CONNECTION_CLASS = PostgreSqlConnection
