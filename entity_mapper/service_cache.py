import typing


ServiceType = typing.TypeVar("ServiceType")


def service_key(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class ServiceCache:
    """
    Singleton store for helper services, one instance per class.

    Entries are keyed by ``module.qualname``. Distinct classes sharing a qualname (made by a
    factory function, for example) get their own entry, suffixed with the class id.

    Not synchronised: two threads asking for the same uncached service may both construct it.
    """

    def __init__(self) -> None:
        self._services: typing.Dict[str, typing.Tuple[type, typing.Any]] = {}

    def _key(self, cls: type) -> str:
        key = service_key(cls)
        entry = self._services.get(key)
        if entry is not None and entry[0] is not cls:
            return f"{key}@{id(cls):x}"
        return key

    def __contains__(self, cls: type) -> bool:
        return self._key(cls) in self._services

    def __len__(self) -> int:
        return len(self._services)

    def get_or_create(self, cls: typing.Type[ServiceType], *args: typing.Any) -> ServiceType:
        key = self._key(cls)
        if key not in self._services:
            self._services[key] = (cls, cls(*args))
        return self._services[key][1]

    def clear(self) -> None:
        self._services.clear()
