import enum


class FlushMode(enum.Enum):
    COMMIT = "commit"
    AUTO = "auto"
    ALWAYS = "always"


class LoadStrategy(enum.Enum):
    SELECT_IN = "select-in"
    JOINED = "joined"


class PopulateHint(enum.Enum):
    INFER = "infer"
    ALL = "all"
