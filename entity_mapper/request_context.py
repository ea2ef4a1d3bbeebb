import contextvars
import typing


_current: contextvars.ContextVar = contextvars.ContextVar("entity_mapper_request_context", default=None)


class RequestContext:
    """Binds entity managers (by context name) to the current execution context."""

    def __init__(self, entity_managers: typing.Dict[str, typing.Any]) -> None:
        self.entity_managers = entity_managers
        self._token: typing.Optional[contextvars.Token] = None

    def __enter__(self) -> "RequestContext":
        self._token = _current.set(self)
        return self

    def __exit__(self, *exc_info: typing.Any) -> None:
        _current.reset(self._token)
        self._token = None

    @classmethod
    def current(cls) -> typing.Optional["RequestContext"]:
        return _current.get()

    @classmethod
    def get_entity_manager(cls, name: str = "default") -> typing.Optional[typing.Any]:
        context = cls.current()
        if context is None:
            return None
        return context.entity_managers.get(name)
