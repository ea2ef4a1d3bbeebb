import os
import typing

from entity_mapper.cache import FileCacheAdapter, MemoryCacheAdapter
from entity_mapper.enums import FlushMode, LoadStrategy, PopulateHint
from entity_mapper.errors import NotFoundError
from entity_mapper.hydration import ObjectHydrator
from entity_mapper.logger import NullHighlighter, write_to_stdlib_logger
from entity_mapper.metadata import AttrsMetadataProvider
from entity_mapper.request_context import RequestContext


def migration_file_name(timestamp: str) -> str:
    return f"Migration{timestamp}"


def seeder_file_name(class_name: str) -> str:
    return class_name


def entity_manager_from_context(name: str) -> typing.Any:
    return RequestContext.get_entity_manager(name)


DEFAULTS: typing.Dict[str, typing.Any] = {
    "pool": {},
    "entities": [],
    "subscribers": [],
    "filters": {},
    "discovery": {
        "warn_when_no_entities": True,
        "require_entities_array": False,
        "always_analyse_properties": True,
        "disable_dynamic_file_access": False,
    },
    "strict": False,
    "validate": False,
    "validate_required": True,
    "context": entity_manager_from_context,
    "context_name": "default",
    "allow_global_context": False,
    "logger": write_to_stdlib_logger,
    "find_one_or_fail_handler": NotFoundError.find_one_failed,
    "find_exactly_one_or_fail_handler": NotFoundError.find_exactly_one_failed,
    "base_dir": os.getcwd(),
    "hydrator": ObjectHydrator,
    "flush_mode": FlushMode.AUTO,
    "load_strategy": LoadStrategy.SELECT_IN,
    "populate_where": PopulateHint.ALL,
    "connect": True,
    "auto_join_one_to_one_owner": True,
    "propagate_to_one_owner": True,
    "populate_after_flush": True,
    "persist_on_create": False,
    "force_entity_constructor": False,
    "force_undefined": False,
    "force_utc_timezone": False,
    "ensure_indexes": False,
    "batch_size": 300,
    "debug": False,
    "verbose": False,
    "driver_options": {},
    "migrations": {
        "table_name": "entity_mapper_migrations",
        "path": "./migrations",
        "glob": "*.py",
        "transactional": True,
        "disable_foreign_keys": True,
        "all_or_nothing": True,
        "drop_tables": True,
        "safe": False,
        "snapshot": True,
        "file_name": migration_file_name,
    },
    "schema_generator": {
        "disable_foreign_keys": True,
        "create_foreign_key_constraints": True,
        "ignore_schema": [],
    },
    "entity_generator": {
        "bidirectional_relations": False,
        "identified_references": False,
    },
    "cache": {
        "pretty": False,
        "adapter": FileCacheAdapter,
        "options": {"cache_dir": os.path.join(os.getcwd(), "temp")},
    },
    "result_cache": {
        "adapter": MemoryCacheAdapter,
        "expiration": 1000,  # ms
        "options": {},
    },
    "metadata_provider": AttrsMetadataProvider,
    "highlighter": NullHighlighter(),
    "seeder": {
        "path": "./seeders",
        "default_seeder": "DatabaseSeeder",
        "glob": "*.py",
        "file_name": seeder_file_name,
    },
    "prefer_read_replicas": True,
}
