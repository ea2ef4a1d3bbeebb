import logging
import os
import re
import typing
from urllib.parse import unquote

from entity_mapper.cache import CacheAdapter, NullCacheAdapter
from entity_mapper.comparator import EntityComparator
from entity_mapper.defaults import DEFAULTS
from entity_mapper.drivers.base import DatabaseDriver
from entity_mapper.errors import ConfigurationError
from entity_mapper.hydration import Hydrator
from entity_mapper.logger import DefaultLogger, LoggerOptions, NullHighlighter, colors_enabled
from entity_mapper.merging import clone, merge_options
from entity_mapper.metadata import MetadataProvider, MetadataStorage
from entity_mapper.naming_strategy import NamingStrategy
from entity_mapper.platform_registry import PLATFORMS, set_import_provider
from entity_mapper.platforms import Platform
from entity_mapper.repository import EntityRepository
from entity_mapper.service_cache import ServiceCache, ServiceType
from entity_mapper.source_folder import detect_source_folder
from entity_mapper.validation import validate_options


logger = logging.getLogger(__name__)

Options = typing.Dict[str, typing.Any]

_CREDENTIALS = re.compile(r"//([^:]+):(.+)@")
_DB_NAME = re.compile(r"://.+/([^?]+)")


class Configuration:
    """
    Resolved options plus the services built from them.

    Construction merges the user options over ``DEFAULTS``, validates them, builds the logger
    and the driver, adapts migrations/seeders paths to a ``src`` layout and fills in derived
    values (client URL, database name, charset, cache adapter, subscribers). Any failure aborts
    construction.

    Instances are not synchronised; ``set``, ``reset`` and ``reset_service_cache`` must not run
    concurrently with readers.
    """

    DEFAULTS = DEFAULTS
    PLATFORMS = PLATFORMS

    def __init__(self, options: typing.Optional[typing.Mapping[str, typing.Any]] = None, validate: bool = True) -> None:
        options = options or {}
        if options.get("dynamic_import_provider"):
            set_import_provider(options["dynamic_import_provider"])

        self._options: Options = merge_options(self.DEFAULTS, options)
        self._options["base_dir"] = os.path.abspath(self._options["base_dir"])
        self._services = ServiceCache()

        if validate:
            validate_options(self._options, self.PLATFORMS)

        if not self._options.get("logger_factory"):
            self._options["logger_factory"] = DefaultLogger
        self._logger = self._options["logger_factory"](
            LoggerOptions(
                writer=self._options["logger"],
                debug_mode=self._options["debug"],
                uses_replicas=bool(self._options.get("replicas")),
                highlighter=self._options["highlighter"],
            )
        )

        self._driver = self._init_driver()
        self._platform = self._driver.get_platform()
        self._platform.set_config(self)
        detect_source_folder(self._options, options)
        self._init()

    def get(self, key: str, default: typing.Any = None) -> typing.Any:
        """Gets specific configuration option, falls back to ``default`` when the option is not set."""
        value = self._options.get(key)
        if value is not None:
            return value
        return default

    def get_all(self) -> Options:
        return self._options

    def set(self, key: str, value: typing.Any) -> None:
        self._options[key] = value

    def reset(self, key: str) -> None:
        """Resets the option to its value from the defaults table."""
        if key in self.DEFAULTS:
            self._options[key] = clone(self.DEFAULTS[key])
        else:
            self._options.pop(key, None)

    def get_logger(self) -> DefaultLogger:
        return self._logger

    def get_client_url(self, hide_password: bool = False) -> str:
        client_url = self._options.get("client_url")
        if not client_url:
            raise ConfigurationError("No client URL resolved, please fill in `client_url` or `db_name` option")

        if hide_password:
            return _CREDENTIALS.sub(r"//\1:*****@", client_url)

        return client_url

    def get_driver(self) -> DatabaseDriver:
        return self._driver

    def get_platform(self) -> Platform:
        return self._platform

    def get_naming_strategy(self) -> NamingStrategy:
        return self.get_cached_service(self._options.get("naming_strategy") or self._platform.get_naming_strategy())

    def get_hydrator(self, metadata: MetadataStorage) -> Hydrator:
        return self.get_cached_service(self._options["hydrator"], metadata, self._platform, self)

    def get_comparator(self, metadata: MetadataStorage) -> EntityComparator:
        return self.get_cached_service(EntityComparator, metadata, self._platform)

    def get_metadata_provider(self) -> MetadataProvider:
        return self.get_cached_service(self._options["metadata_provider"], self)

    def get_cache_adapter(self) -> CacheAdapter:
        cache = self._options["cache"]
        return self.get_cached_service(cache["adapter"], cache["options"], self._options["base_dir"], cache["pretty"])

    def get_result_cache_adapter(self) -> CacheAdapter:
        result_cache = self._options["result_cache"]
        return self.get_cached_service(
            result_cache["adapter"], {"expiration": result_cache.get("expiration"), **result_cache["options"]}
        )

    def get_repository_class(
        self, custom_repository: typing.Optional[typing.Callable[[], typing.Type[EntityRepository]]] = None
    ) -> typing.Type[EntityRepository]:
        if custom_repository:
            return custom_repository()

        if self._options.get("entity_repository"):
            return self._options["entity_repository"]

        return self._platform.get_repository_class()

    def get_cached_service(self, cls: typing.Type[ServiceType], *args: typing.Any) -> ServiceType:
        """Creates instance of given service on first request and returns the same instance afterwards."""
        return self._services.get_or_create(cls, *args)

    def reset_service_cache(self) -> None:
        self._services.clear()

    def _init_driver(self) -> DatabaseDriver:
        driver_class = self._options.get("driver") or self.PLATFORMS.resolve(self._options.get("type"))
        return driver_class(self)

    def _init(self) -> None:
        use_cache = self.get_metadata_provider().use_cache()
        cache = self._options["cache"]
        if not use_cache:
            cache["adapter"] = NullCacheAdapter

        if "enabled" not in cache:
            cache["enabled"] = use_cache

        if not self._options.get("client_url"):
            self._options["client_url"] = self._driver.get_connection().get_default_client_url()

        if self._options.get("implicit_transactions") is None:
            self.set("implicit_transactions", self._platform.uses_implicit_transactions())

        match = _DB_NAME.search(self.get_client_url())
        if match:
            self._options["db_name"] = self.get("db_name", unquote(match.group(1)))

        if not self._options.get("charset"):
            self._options["charset"] = self._platform.get_default_charset()

        for filter_options in self._options["filters"].values():
            if filter_options.get("default") is None:
                filter_options["default"] = True

        self._options["subscribers"] = _unique_by_identity(
            [*self._options["subscribers"], *MetadataStorage.get_subscriber_metadata().values()]
        )

        if not colors_enabled():
            self._options["highlighter"] = NullHighlighter()

        logger.debug(
            "Configured %s driver for %s", type(self._driver).__name__, self.get_client_url(hide_password=True)
        )


def _unique_by_identity(items: typing.Iterable[typing.Any]) -> typing.List[typing.Any]:
    seen: typing.Set[int] = set()
    result = []
    for item in items:
        if id(item) not in seen:
            seen.add(id(item))
            result.append(item)
    return result


def define_config(**options: typing.Any) -> Options:
    """Helper for ``entity_mapper_config.py`` modules, returns the options unchanged."""
    return options
