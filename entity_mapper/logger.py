import logging
import os
import sys
import typing

import attr


LoggerNamespace = str
NAMESPACES: typing.Tuple[LoggerNamespace, ...] = ("discovery", "info", "query", "query-params", "schema")

Writer = typing.Callable[[str], None]

_stdlib_logger = logging.getLogger("entity_mapper")


def write_to_stdlib_logger(message: str) -> None:
    _stdlib_logger.info(message)


def colors_enabled() -> bool:
    """Decides whether ANSI colors may be used, honouring NO_COLOR and FORCE_COLOR."""
    if os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("ENTITY_MAPPER_COLORS", "").lower() == "false":
        return False
    if os.environ.get("FORCE_COLOR") is not None:
        return True
    return bool(getattr(sys.stdout, "isatty", lambda: False)())


class Highlighter:
    def highlight(self, text: str) -> str:
        raise NotImplementedError


class NullHighlighter(Highlighter):
    def highlight(self, text: str) -> str:
        return text


@attr.s(auto_attribs=True)
class LoggerOptions:
    writer: Writer
    debug_mode: typing.Union[bool, typing.List[LoggerNamespace]] = False
    uses_replicas: bool = False
    highlighter: Highlighter = attr.Factory(NullHighlighter)


class DefaultLogger:
    GREY = "\x1b[90m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    RESET = "\x1b[0m"

    def __init__(self, options: LoggerOptions) -> None:
        self._writer = options.writer
        self._highlighter = options.highlighter
        self._uses_replicas = options.uses_replicas
        self.debug_mode = options.debug_mode

    def set_debug_mode(self, debug_mode: typing.Union[bool, typing.List[LoggerNamespace]]) -> None:
        self.debug_mode = debug_mode

    def is_enabled(self, namespace: LoggerNamespace) -> bool:
        if isinstance(self.debug_mode, bool):
            return self.debug_mode
        return namespace in self.debug_mode

    def log(self, namespace: LoggerNamespace, message: str, level: str = "info") -> None:
        if not self.is_enabled(namespace):
            return

        prefix = f"[{namespace}] "
        if colors_enabled():
            prefix = f"{self.GREY}{prefix}{self.RESET}"
            if level == "warning":
                message = f"{self.YELLOW}{message}{self.RESET}"
            elif level == "error":
                message = f"{self.RED}{message}{self.RESET}"

        self._writer(prefix + message)

    def warn(self, namespace: LoggerNamespace, message: str) -> None:
        self.log(namespace, message, level="warning")

    def error(self, namespace: LoggerNamespace, message: str) -> None:
        self.log(namespace, message, level="error")

    def log_query(self, query: str, took: typing.Optional[float] = None, connection_type: str = "write") -> None:
        if not self.is_enabled("query"):
            return

        message = self._highlighter.highlight(query)
        if took is not None:
            message += f" [took {took:.0f} ms]"
        if self._uses_replicas:
            message += f" ({connection_type} connection)"
        self.log("query", message)
