import logging
import os
import typing


logger = logging.getLogger(__name__)


def _exists(base_dir: str, path: typing.Optional[str]) -> bool:
    if not path:
        return False
    try:
        return os.path.exists(os.path.join(base_dir, path))
    except (OSError, ValueError):
        return False


def _user_provided_path(user_options: typing.Mapping[str, typing.Any], domain: str) -> bool:
    domain_options = user_options.get(domain) or {}
    return bool(domain_options.get("path") or domain_options.get("source_path"))


def detect_source_folder(options: typing.Dict[str, typing.Any], user_options: typing.Mapping[str, typing.Any]) -> None:
    """
    Points migrations and seeders into the ``src`` layout when the project has one.

    The compiled variant (``path``) goes to ``./dist``, else ``./build``, else ``./src``, while
    ``source_path`` always goes to ``./src``. Explicit user paths, or a default folder that already
    exists on disk, are left untouched, so existing projects keep working.
    """
    base_dir = options["base_dir"]
    if not _exists(base_dir, "src"):
        return

    if _exists(base_dir, "dist"):
        preferred = "./dist"
    elif _exists(base_dir, "build"):
        preferred = "./build"
    else:
        preferred = "./src"

    for domain, folder in (("migrations", "migrations"), ("seeder", "seeders")):
        domain_options = options[domain]
        if _user_provided_path(user_options, domain) or _exists(base_dir, domain_options.get("path")):
            continue

        domain_options["path"] = f"{preferred}/{folder}"
        domain_options["source_path"] = f"./src/{folder}"
        logger.debug("Detected src folder, %s path set to %s", domain, domain_options["path"])
