import typing


EntityType = typing.TypeVar("EntityType")


class EntityRepository(typing.Generic[EntityType]):
    def __init__(self, em: typing.Any, entity_name: str) -> None:
        self._em = em
        self.entity_name = entity_name

    def get_entity_manager(self) -> typing.Any:
        return self._em

    def find_one(self, where: typing.Any, **options: typing.Any) -> typing.Optional[EntityType]:
        return self._em.find_one(self.entity_name, where, **options)

    def find_one_or_fail(self, where: typing.Any, **options: typing.Any) -> EntityType:
        return self._em.find_one_or_fail(self.entity_name, where, **options)

    def find(self, where: typing.Any, **options: typing.Any) -> typing.List[EntityType]:
        return self._em.find(self.entity_name, where, **options)

    def persist(self, entity: EntityType) -> None:
        self._em.persist(entity)

    def create(self, data: typing.Dict[str, typing.Any]) -> EntityType:
        return self._em.create(self.entity_name, data)


class SqlEntityRepository(EntityRepository[EntityType]):
    def create_query_builder(self, alias: typing.Optional[str] = None) -> typing.Any:
        return self._em.create_query_builder(self.entity_name, alias)
