import typing


class EventSubscriber:
    """Base class for lifecycle event subscribers; handlers are plain methods like ``before_create``."""

    def get_subscribed_entities(self) -> typing.List[typing.Union[str, type]]:
        # empty means every entity
        return []
