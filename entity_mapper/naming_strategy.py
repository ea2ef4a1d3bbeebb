import abc
import typing

import inflection


class NamingStrategy(abc.ABC):
    @abc.abstractmethod
    def class_to_table_name(self, entity_name: str) -> str:
        pass

    @abc.abstractmethod
    def property_to_column_name(self, property_name: str) -> str:
        pass

    def join_column_name(self, property_name: str) -> str:
        return self.property_to_column_name(property_name) + "_" + self.reference_column_name()

    def join_table_name(self, source_entity: str, target_entity: str, property_name: str) -> str:
        return self.class_to_table_name(source_entity) + "_" + self.property_to_column_name(property_name)

    def join_key_column_name(self, entity_name: str, reference_column_name: typing.Optional[str] = None) -> str:
        return self.class_to_table_name(entity_name) + "_" + (reference_column_name or self.reference_column_name())

    def reference_column_name(self) -> str:
        return "id"

    def class_to_migration_name(self, timestamp: str) -> str:
        return f"Migration{timestamp}"


class UnderscoreNamingStrategy(NamingStrategy):
    def class_to_table_name(self, entity_name: str) -> str:
        return inflection.underscore(entity_name)

    def property_to_column_name(self, property_name: str) -> str:
        return inflection.underscore(property_name)


class PluralizedUnderscoreNamingStrategy(UnderscoreNamingStrategy):
    def class_to_table_name(self, entity_name: str) -> str:
        return inflection.pluralize(inflection.underscore(entity_name))


class EntityCaseNamingStrategy(NamingStrategy):
    """Keeps entity and property names exactly as declared."""

    def class_to_table_name(self, entity_name: str) -> str:
        return entity_name

    def property_to_column_name(self, property_name: str) -> str:
        return property_name

    def join_column_name(self, property_name: str) -> str:
        return property_name

    def join_key_column_name(self, entity_name: str, reference_column_name: typing.Optional[str] = None) -> str:
        return inflection.camelize(entity_name, uppercase_first_letter=False)


class MongoNamingStrategy(NamingStrategy):
    def class_to_table_name(self, entity_name: str) -> str:
        return inflection.dasherize(inflection.underscore(entity_name))

    def property_to_column_name(self, property_name: str) -> str:
        return property_name

    def reference_column_name(self) -> str:
        return "_id"
