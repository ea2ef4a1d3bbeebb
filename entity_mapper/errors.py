import typing


class ConfigurationError(Exception):
    pass


class ConfigurationValidationError(ConfigurationError):
    pass


class UnresolvedPlatformError(ConfigurationValidationError):
    pass


class NotFoundError(Exception):
    @classmethod
    def find_one_failed(cls, entity_name: str, where: typing.Any) -> "NotFoundError":
        return cls(f"{entity_name} not found ({where!r})")

    @classmethod
    def find_exactly_one_failed(cls, entity_name: str, where: typing.Any) -> "NotFoundError":
        return cls(
            f"Wrong number of {entity_name} entities found for query {where!r}, expected exactly one"
        )
