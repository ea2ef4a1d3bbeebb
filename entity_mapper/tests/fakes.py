import typing

import attr

from entity_mapper.drivers.base import Connection, DatabaseDriver
from entity_mapper.platforms import Platform


@attr.s(auto_attribs=True)
class Author:
    id: int
    name: str
    email: typing.Optional[str] = None


class FakeConnection(Connection):
    def get_default_client_url(self) -> str:
        return "fake://root@localhost:1234"


class FakePlatform(Platform):
    def uses_implicit_transactions(self) -> bool:
        return False

    def get_default_charset(self) -> str:
        return "latin1"


class FakeDriver(DatabaseDriver):
    PLATFORM_CLASS = FakePlatform
    CONNECTION_CLASS = FakeConnection
