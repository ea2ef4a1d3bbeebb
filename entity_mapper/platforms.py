import typing

from entity_mapper.naming_strategy import MongoNamingStrategy, NamingStrategy, UnderscoreNamingStrategy
from entity_mapper.repository import EntityRepository, SqlEntityRepository

if typing.TYPE_CHECKING:
    from entity_mapper.configuration import Configuration


class Platform:
    def __init__(self) -> None:
        self.config: typing.Optional["Configuration"] = None

    def set_config(self, config: "Configuration") -> None:
        self.config = config

    def get_naming_strategy(self) -> typing.Type[NamingStrategy]:
        return UnderscoreNamingStrategy

    def uses_implicit_transactions(self) -> bool:
        return True

    def get_default_charset(self) -> str:
        return "utf8"

    def get_repository_class(self) -> typing.Type[EntityRepository]:
        return EntityRepository

    def uses_returning_statement(self) -> bool:
        return False

    def supports_transactions(self) -> bool:
        return True


class AbstractSqlPlatform(Platform):
    def get_repository_class(self) -> typing.Type[EntityRepository]:
        return SqlEntityRepository


class PostgreSqlPlatform(AbstractSqlPlatform):
    def uses_returning_statement(self) -> bool:
        return True


class MySqlPlatform(AbstractSqlPlatform):
    def get_default_charset(self) -> str:
        return "utf8mb4"


class MariaDbPlatform(MySqlPlatform):
    pass


class SqlitePlatform(AbstractSqlPlatform):
    def uses_returning_statement(self) -> bool:
        return True


class MongoPlatform(Platform):
    def get_naming_strategy(self) -> typing.Type[NamingStrategy]:
        return MongoNamingStrategy

    def uses_implicit_transactions(self) -> bool:
        return False
