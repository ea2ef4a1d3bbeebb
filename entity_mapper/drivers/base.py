import inspect
import logging
import typing

import attr
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, URL, make_url
from sqlalchemy.exc import SQLAlchemyError

from entity_mapper.errors import ConfigurationError
from entity_mapper.platforms import Platform

if typing.TYPE_CHECKING:
    from entity_mapper.configuration import Configuration


logger = logging.getLogger(__name__)


@attr.s(auto_attribs=True)
class DynamicPassword:
    password: str
    expiration_checker: typing.Optional[typing.Callable[[], bool]] = None


class Connection:
    # pool option name -> create_engine keyword
    POOL_OPTIONS = {"max": "pool_size", "acquire_timeout": "pool_timeout", "recycle": "pool_recycle"}

    def __init__(
        self,
        config: "Configuration",
        options: typing.Optional[typing.Dict[str, typing.Any]] = None,
        connection_type: str = "write",
    ) -> None:
        self.config = config
        self.type = connection_type
        self._options = options or {}
        self._engine: typing.Optional[Engine] = None

    def get_default_client_url(self) -> str:
        raise NotImplementedError

    def get_client_url(self) -> str:
        if self._options.get("client_url"):
            return self._options["client_url"]
        return self.config.get_client_url()

    def _option(self, key: str) -> typing.Any:
        if self._options.get(key) is not None:
            return self._options[key]
        return self.config.get(key)

    def resolve_password(self) -> typing.Optional[str]:
        password = self._option("password")
        if callable(password):
            password = password()
        if inspect.isawaitable(password):
            if inspect.iscoroutine(password):
                password.close()
            raise ConfigurationError("Password callback returned an awaitable, use resolve_password_async() instead")
        if isinstance(password, DynamicPassword):
            return password.password
        return password

    async def resolve_password_async(self) -> typing.Optional[str]:
        password = self._option("password")
        if callable(password):
            password = password()
        if inspect.isawaitable(password):
            password = await password
        if isinstance(password, DynamicPassword):
            return password.password
        return password

    def get_url(self, password: typing.Optional[str] = None) -> URL:
        url = make_url(self.get_client_url())
        overrides = {
            "host": self._option("host"),
            "port": self._option("port"),
            "username": self._option("user"),
            "password": password if password is not None else self.resolve_password(),
            "database": self._option("db_name"),
        }
        return url.set(**{key: value for key, value in overrides.items() if value is not None})

    def get_engine_options(self) -> typing.Dict[str, typing.Any]:
        pool = self.config.get("pool", {})
        options = {engine_key: pool[key] for key, engine_key in self.POOL_OPTIONS.items() if pool.get(key) is not None}
        options.update(self.config.get("driver_options", {}))
        return options

    def connect(self) -> Engine:
        if self._engine is None:
            url = self.get_url()
            logger.debug("Creating %s engine for %s", self.type, url.render_as_string(hide_password=True))
            self._engine = create_engine(url, **self.get_engine_options())
        return self._engine

    def is_connected(self) -> bool:
        if self._engine is None:
            return False
        try:
            with self._engine.connect() as connection:
                connection.execute(text("select 1"))
        except SQLAlchemyError:
            logger.debug("Connection check failed", exc_info=True)
            return False
        return True

    def execute(self, query: str, params: typing.Optional[typing.Dict[str, typing.Any]] = None) -> typing.List[tuple]:
        engine = self.connect()
        self.config.get_logger().log_query(query, connection_type=self.type)
        with engine.begin() as connection:
            result = connection.execute(text(query), params or {})
            return [tuple(row) for row in result] if result.returns_rows else []

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


class DatabaseDriver:
    PLATFORM_CLASS: typing.Type[Platform] = Platform
    CONNECTION_CLASS: typing.Type[Connection] = Connection

    def __init__(self, config: "Configuration") -> None:
        self.config = config
        self.platform = self.PLATFORM_CLASS()
        self.connection = self.CONNECTION_CLASS(config)
        self.replicas = [
            self.CONNECTION_CLASS(config, replica, "read") for replica in config.get("replicas") or []
        ]

    def get_platform(self) -> Platform:
        return self.platform

    def get_connection(self, connection_type: str = "write") -> Connection:
        if connection_type == "read" and self.replicas and self.config.get("prefer_read_replicas", True):
            return self.replicas[0]
        return self.connection

    def connect(self) -> Connection:
        self.connection.connect()
        for replica in self.replicas:
            replica.connect()
        return self.connection

    def close(self) -> None:
        self.connection.close()
        for replica in self.replicas:
            replica.close()
