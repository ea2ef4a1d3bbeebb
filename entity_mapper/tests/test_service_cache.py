from entity_mapper.service_cache import ServiceCache, service_key


class Strategy:
    def __init__(self, *args: object) -> None:
        self.args = args


def test_constructs_once_per_class() -> None:
    cache = ServiceCache()

    first = cache.get_or_create(Strategy, 1, 2)
    second = cache.get_or_create(Strategy, 3)

    assert first is second
    assert first.args == (1, 2)
    assert Strategy in cache
    assert len(cache) == 1


def test_clear_drops_instances() -> None:
    cache = ServiceCache()
    first = cache.get_or_create(Strategy)

    cache.clear()

    assert Strategy not in cache
    assert cache.get_or_create(Strategy) is not first


def test_key_distinguishes_same_named_classes() -> None:
    def make() -> type:
        class Strategy:
            pass

        return Strategy

    assert service_key(make()) != service_key(Strategy)


def _make_strategy(value: int) -> type:
    class FactoryStrategy:
        def __init__(self) -> None:
            self.value = value

    return FactoryStrategy


def test_classes_sharing_a_qualname_get_own_instances() -> None:
    cache = ServiceCache()
    first_cls = _make_strategy(1)
    second_cls = _make_strategy(2)

    first = cache.get_or_create(first_cls)
    second = cache.get_or_create(second_cls)

    assert service_key(first_cls) == service_key(second_cls)
    assert isinstance(second, second_cls)
    assert second.value == 2
    assert cache.get_or_create(first_cls) is first
    assert cache.get_or_create(second_cls) is second
    assert len(cache) == 2
