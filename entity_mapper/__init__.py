from entity_mapper.cache import CacheAdapter, FileCacheAdapter, MemoryCacheAdapter, NullCacheAdapter
from entity_mapper.configuration import Configuration, define_config
from entity_mapper.drivers import Connection, DatabaseDriver, DynamicPassword
from entity_mapper.enums import FlushMode, LoadStrategy, PopulateHint
from entity_mapper.errors import (
    ConfigurationError,
    ConfigurationValidationError,
    NotFoundError,
    UnresolvedPlatformError,
)
from entity_mapper.events import EventSubscriber
from entity_mapper.metadata import AttrsMetadataProvider, MetadataProvider, MetadataStorage, subscriber
from entity_mapper.platform_registry import PlatformDescriptor, PlatformRegistry
from entity_mapper.repository import EntityRepository


__all__ = [
    "AttrsMetadataProvider",
    "CacheAdapter",
    "Configuration",
    "ConfigurationError",
    "ConfigurationValidationError",
    "Connection",
    "DatabaseDriver",
    "DynamicPassword",
    "EntityRepository",
    "EventSubscriber",
    "FileCacheAdapter",
    "FlushMode",
    "LoadStrategy",
    "MemoryCacheAdapter",
    "MetadataProvider",
    "MetadataStorage",
    "NotFoundError",
    "NullCacheAdapter",
    "PlatformDescriptor",
    "PlatformRegistry",
    "PopulateHint",
    "UnresolvedPlatformError",
    "define_config",
    "subscriber",
]
