import abc
import hashlib
import json
import os
import time
import typing


class CacheAdapter(abc.ABC):
    @abc.abstractmethod
    def get(self, name: str) -> typing.Any:
        pass

    @abc.abstractmethod
    def set(self, name: str, data: typing.Any, origin: str, expiration: typing.Optional[int] = None) -> None:
        pass

    def remove(self, name: str) -> None:
        pass

    def clear(self) -> None:
        pass

    def close(self) -> None:
        pass


class NullCacheAdapter(CacheAdapter):
    def __init__(
        self,
        options: typing.Optional[typing.Dict[str, typing.Any]] = None,
        base_dir: typing.Optional[str] = None,
        pretty: bool = False,
    ) -> None:
        pass

    def get(self, name: str) -> typing.Any:
        return None

    def set(self, name: str, data: typing.Any, origin: str, expiration: typing.Optional[int] = None) -> None:
        pass


class FileCacheAdapter(CacheAdapter):
    """
    Stores JSON-serializable values in ``<cache_dir>/<name>.json``.

    An entry is only returned while the hash of its origin file still matches,
    so editing an entity module invalidates its cached metadata.
    """

    def __init__(self, options: typing.Dict[str, typing.Any], base_dir: str, pretty: bool = False) -> None:
        cache_dir = options.get("cache_dir") or os.path.join(os.getcwd(), "temp")
        self._cache_dir = os.path.join(base_dir, cache_dir)
        self._base_dir = base_dir
        self._pretty = pretty

    def get(self, name: str) -> typing.Any:
        path = self._path(name)
        if not os.path.exists(path):
            return None

        with open(path, encoding="utf-8") as cache_file:
            payload = json.load(cache_file)

        if payload.get("origin") and payload.get("hash") != self._hash_origin(payload["origin"]):
            return None

        return payload.get("data")

    def set(self, name: str, data: typing.Any, origin: str, expiration: typing.Optional[int] = None) -> None:
        os.makedirs(self._cache_dir, exist_ok=True)
        payload = {"data": data, "origin": origin, "hash": self._hash_origin(origin)}
        with open(self._path(name), "w", encoding="utf-8") as cache_file:
            json.dump(payload, cache_file, indent=2 if self._pretty else None)

    def remove(self, name: str) -> None:
        path = self._path(name)
        if os.path.exists(path):
            os.remove(path)

    def clear(self) -> None:
        if not os.path.isdir(self._cache_dir):
            return
        for file_name in os.listdir(self._cache_dir):
            if file_name.endswith(".json"):
                os.remove(os.path.join(self._cache_dir, file_name))

    def _path(self, name: str) -> str:
        return os.path.join(self._cache_dir, f"{name}.json")

    def _hash_origin(self, origin: str) -> typing.Optional[str]:
        path = os.path.join(self._base_dir, origin)
        if not origin or not os.path.isfile(path):
            return None
        with open(path, "rb") as origin_file:
            return hashlib.md5(origin_file.read()).hexdigest()


class MemoryCacheAdapter(CacheAdapter):
    def __init__(self, options: typing.Dict[str, typing.Any]) -> None:
        # expiration is in milliseconds
        self._expiration: typing.Optional[int] = options.get("expiration")
        self._data: typing.Dict[str, typing.Tuple[typing.Any, typing.Optional[float]]] = {}

    def get(self, name: str) -> typing.Any:
        if name not in self._data:
            return None

        data, expires_at = self._data[name]
        if expires_at is not None and expires_at < time.monotonic():
            del self._data[name]
            return None

        return data

    def set(self, name: str, data: typing.Any, origin: str, expiration: typing.Optional[int] = None) -> None:
        ttl = expiration if expiration is not None else self._expiration
        expires_at = time.monotonic() + ttl / 1000 if ttl is not None else None
        self._data[name] = (data, expires_at)

    def remove(self, name: str) -> None:
        self._data.pop(name, None)

    def clear(self) -> None:
        self._data.clear()

    def close(self) -> None:
        self._data.clear()
