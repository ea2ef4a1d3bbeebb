import typing

from entity_mapper.errors import ConfigurationValidationError
from entity_mapper.platform_registry import PlatformRegistry


def validate_options(options: typing.Mapping[str, typing.Any], platforms: PlatformRegistry) -> None:
    platform_type = options.get("type")
    driver = options.get("driver")

    if not platform_type and not driver:
        raise ConfigurationValidationError(
            "No platform type specified, please fill in `type` or provide custom driver class in `driver` option. "
            f"Available platforms types: {platforms.tags()!r}"
        )

    if platform_type and driver:
        driver_name = getattr(driver, "__name__", driver)
        raise ConfigurationValidationError(
            f"Both platform type '{platform_type}' and custom driver class {driver_name} specified, "
            "please use only one of the `type` and `driver` options"
        )

    if platform_type:
        # raises UnresolvedPlatformError listing the available types
        platforms.get(platform_type)

    if not options.get("db_name") and not options.get("client_url"):
        raise ConfigurationValidationError("No database specified, please fill in `db_name` or `client_url` option")

    if not options.get("entities") and options["discovery"].get("warn_when_no_entities", True):
        raise ConfigurationValidationError("No entities found, please use `entities` option")
