"""
Merging of user options over the defaults table.

Per-value strategy:

* ``dict`` over ``dict`` is merged key by key, recursively;
* ``list`` replaces the default wholesale (no concatenation);
* anything else (scalars, callables, classes, instances) overrides;
* ``None`` means "not provided" and leaves the default in place.

Only containers are copied; leaf values keep their identity, so entity classes,
subscriber instances and callbacks passed by the user are the very same objects
afterwards.
"""
import typing


Options = typing.Dict[str, typing.Any]


def clone(value: typing.Any) -> typing.Any:
    if isinstance(value, dict):
        return {key: clone(item) for key, item in value.items()}
    if isinstance(value, list):
        return [clone(item) for item in value]
    return value


def merge_into(target: Options, source: typing.Mapping[str, typing.Any]) -> Options:
    for key, value in source.items():
        if value is None:
            continue

        current = target.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merge_into(current, value)
        else:
            target[key] = clone(value)

    return target


def merge_options(defaults: Options, *sources: typing.Optional[typing.Mapping[str, typing.Any]]) -> Options:
    """Returns a new options dict, never mutating ``defaults`` nor any source."""
    result = clone(defaults)
    for source in sources:
        if source:
            merge_into(result, source)
    return result
