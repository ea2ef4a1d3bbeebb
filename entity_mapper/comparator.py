import typing

import attr

from entity_mapper.metadata import MetadataStorage

if typing.TYPE_CHECKING:
    from entity_mapper.platforms import Platform


class EntityComparator:
    def __init__(self, metadata: MetadataStorage, platform: "Platform") -> None:
        self._metadata = metadata
        self._platform = platform

    def prepare_entity(self, entity: typing.Any) -> typing.Dict[str, typing.Any]:
        if attr.has(type(entity)):
            return attr.asdict(entity, recurse=False)
        return {key: value for key, value in vars(entity).items() if not key.startswith("_")}

    def compare(
        self, current: typing.Dict[str, typing.Any], original: typing.Dict[str, typing.Any]
    ) -> typing.Dict[str, typing.Any]:
        """Returns the properties of ``current`` that differ from the ``original`` snapshot."""
        return {key: value for key, value in current.items() if key not in original or original[key] != value}
