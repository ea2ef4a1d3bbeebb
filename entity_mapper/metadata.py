import typing

import attr

from entity_mapper.events import EventSubscriber

if typing.TYPE_CHECKING:
    from entity_mapper.configuration import Configuration


SubscriberType = typing.TypeVar("SubscriberType", bound=typing.Type[EventSubscriber])


@attr.s(auto_attribs=True)
class EntityMetadata:
    class_name: str
    properties: typing.Dict[str, typing.Any] = attr.Factory(dict)


class MetadataStorage:
    _subscribers: typing.Dict[str, EventSubscriber] = {}

    def __init__(self, metadata: typing.Optional[typing.Dict[str, EntityMetadata]] = None) -> None:
        self._metadata: typing.Dict[str, EntityMetadata] = metadata if metadata is not None else {}

    @classmethod
    def get_subscriber_metadata(cls) -> typing.Dict[str, EventSubscriber]:
        return cls._subscribers

    @classmethod
    def register_subscriber(cls, instance: EventSubscriber) -> None:
        cls._subscribers[f"{type(instance).__module__}.{type(instance).__qualname__}"] = instance

    @classmethod
    def clear_subscribers(cls) -> None:
        cls._subscribers.clear()

    def get(self, entity_name: str) -> EntityMetadata:
        if entity_name not in self._metadata:
            raise KeyError(f"Metadata for entity {entity_name} not found")
        return self._metadata[entity_name]

    def has(self, entity_name: str) -> bool:
        return entity_name in self._metadata

    def set(self, entity_name: str, metadata: EntityMetadata) -> None:
        self._metadata[entity_name] = metadata


def subscriber() -> typing.Callable[[SubscriberType], SubscriberType]:
    """Instantiates the decorated class and registers it for every configuration built afterwards."""

    def decorator(cls: SubscriberType) -> SubscriberType:
        MetadataStorage.register_subscriber(cls())
        return cls

    return decorator


class MetadataProvider:
    def __init__(self, config: "Configuration") -> None:
        self.config = config

    def use_cache(self) -> bool:
        return bool(self.config.get("cache", {}).get("enabled", False))

    def load_entity_metadata(self, entity_cls: type) -> EntityMetadata:
        raise NotImplementedError


class AttrsMetadataProvider(MetadataProvider):
    def load_entity_metadata(self, entity_cls: type) -> EntityMetadata:
        if attr.has(entity_cls):
            properties = {field.name: field.type for field in attr.fields(entity_cls)}
        else:
            properties = dict(getattr(entity_cls, "__annotations__", {}))
        return EntityMetadata(class_name=entity_cls.__name__, properties=properties)


class TypeHintsMetadataProvider(MetadataProvider):
    """Resolves forward references with ``typing.get_type_hints``; slow, so caching is on unless disabled."""

    def use_cache(self) -> bool:
        return bool(self.config.get("cache", {}).get("enabled", True))

    def load_entity_metadata(self, entity_cls: type) -> EntityMetadata:
        properties = typing.get_type_hints(entity_cls)
        return EntityMetadata(class_name=entity_cls.__name__, properties=properties)
