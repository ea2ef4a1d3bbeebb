import importlib
import pathlib
import typing

import pytest
from _pytest.config.argparsing import Parser

from entity_mapper.metadata import MetadataStorage
from entity_mapper.platform_registry import set_import_provider
from entity_mapper.tests.fakes import Author, FakeDriver


def pytest_addoption(parser: Parser) -> None:
    parser.addoption("--sqlalchemy-postgres-url", action="store", default=None)


@pytest.fixture(autouse=True)
def restore_process_state() -> typing.Generator[None, None, None]:
    yield
    set_import_provider(importlib.import_module)
    MetadataStorage.clear_subscribers()


@pytest.fixture()
def options(tmp_path: pathlib.Path) -> typing.Dict[str, typing.Any]:
    return {"driver": FakeDriver, "db_name": "library", "entities": [Author], "base_dir": str(tmp_path)}


@pytest.fixture()
def sqlite_options(tmp_path: pathlib.Path) -> typing.Dict[str, typing.Any]:
    return {"type": "sqlite", "db_name": ":memory:", "entities": [Author], "base_dir": str(tmp_path)}
