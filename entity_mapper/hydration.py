import typing

import attr

from entity_mapper.metadata import MetadataStorage

if typing.TYPE_CHECKING:
    from entity_mapper.configuration import Configuration
    from entity_mapper.platforms import Platform


class Hydrator:
    def __init__(self, metadata: MetadataStorage, platform: "Platform", config: "Configuration") -> None:
        self._metadata = metadata
        self._platform = platform
        self._config = config

    def hydrate(self, entity: typing.Any, data: typing.Dict[str, typing.Any]) -> typing.Any:
        raise NotImplementedError


class ObjectHydrator(Hydrator):
    def hydrate(self, entity: typing.Any, data: typing.Dict[str, typing.Any]) -> typing.Any:
        known = self._known_properties(type(entity))
        force_undefined = self._config.get("force_undefined", False)

        for name, value in data.items():
            if known is not None and name not in known:
                continue
            if value is None and force_undefined:
                continue
            setattr(entity, name, value)

        return entity

    def _known_properties(self, entity_cls: type) -> typing.Optional[typing.Set[str]]:
        if self._metadata.has(entity_cls.__name__):
            return set(self._metadata.get(entity_cls.__name__).properties)
        if attr.has(entity_cls):
            return set(attr.fields_dict(entity_cls))
        return None
