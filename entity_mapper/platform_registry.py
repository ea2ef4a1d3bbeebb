import importlib
import logging
import types
import typing

import attr

from entity_mapper.errors import UnresolvedPlatformError


logger = logging.getLogger(__name__)

ImportProvider = typing.Callable[[str], types.ModuleType]

_import_provider: ImportProvider = importlib.import_module


def set_import_provider(provider: ImportProvider) -> None:
    """Replaces the process-wide function used to load driver packages."""
    global _import_provider
    _import_provider = provider


def get_import_provider() -> ImportProvider:
    return _import_provider


@attr.s(auto_attribs=True, frozen=True)
class PlatformDescriptor:
    tag: str
    class_name: str
    module: str

    def load(self, import_provider: ImportProvider) -> type:
        try:
            module = import_provider(self.module)
        except ImportError as exc:
            raise UnresolvedPlatformError(
                f"Cannot load driver for platform type '{self.tag}', "
                f"make sure the '{self.module}' package is installed"
            ) from exc

        try:
            return getattr(module, self.class_name)
        except AttributeError as exc:
            raise UnresolvedPlatformError(
                f"Module '{self.module}' does not provide driver class '{self.class_name}'"
            ) from exc


class PlatformRegistry:
    def __init__(
        self, descriptors: typing.Iterable[PlatformDescriptor], loader: typing.Optional[ImportProvider] = None
    ) -> None:
        self._descriptors: typing.Dict[str, PlatformDescriptor] = {
            descriptor.tag: descriptor for descriptor in descriptors
        }
        self._loader = loader

    def __contains__(self, tag: object) -> bool:
        return tag in self._descriptors

    def __iter__(self) -> typing.Iterator[str]:
        return iter(self._descriptors)

    def tags(self) -> typing.List[str]:
        return list(self._descriptors)

    def get(self, tag: str) -> PlatformDescriptor:
        try:
            return self._descriptors[tag]
        except KeyError:
            raise UnresolvedPlatformError(
                f"Invalid platform type specified: '{tag}', please fill in valid `type` or provide custom driver "
                f"class in `driver` option. Available platforms types: {self.tags()!r}"
            ) from None

    def resolve(self, tag: str) -> type:
        descriptor = self.get(tag)
        driver_cls = descriptor.load(self._loader or get_import_provider())
        logger.debug("Resolved driver %s for platform type '%s'", driver_cls.__name__, tag)
        return driver_cls


PLATFORMS = PlatformRegistry(
    [
        PlatformDescriptor("mongo", "MongoDriver", "entity_mapper_mongodb"),
        PlatformDescriptor("mysql", "MySqlDriver", "entity_mapper.drivers.mysql"),
        PlatformDescriptor("mariadb", "MariaDbDriver", "entity_mapper.drivers.mysql"),
        PlatformDescriptor("postgresql", "PostgreSqlDriver", "entity_mapper.drivers.postgresql"),
        PlatformDescriptor("sqlite", "SqliteDriver", "entity_mapper.drivers.sqlite"),
    ]
)
