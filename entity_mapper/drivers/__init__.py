from entity_mapper.drivers.base import Connection, DatabaseDriver, DynamicPassword
