from entity_mapper.drivers.base import Connection, DatabaseDriver
from entity_mapper.platforms import MariaDbPlatform, MySqlPlatform


class MySqlConnection(Connection):
    def get_default_client_url(self) -> str:
        return "mysql://root@127.0.0.1:3306"


class MariaDbConnection(MySqlConnection):
    def get_default_client_url(self) -> str:
        return "mariadb://root@127.0.0.1:3306"


class MySqlDriver(DatabaseDriver):
    PLATFORM_CLASS = MySqlPlatform
    CONNECTION_CLASS = MySqlConnection


class MariaDbDriver(DatabaseDriver):
    PLATFORM_CLASS = MariaDbPlatform
    CONNECTION_CLASS = MariaDbConnection
