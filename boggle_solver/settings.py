import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    TRIE_VARIANT: str = "rway"
    MAX_RESULTS: int = 50
    MAX_BOARD_CELLS: int = 100

    LOG_LEVEL: str = "INFO"
    INCLUDE_TIMINGS: bool = True
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                if isinstance(current, bool):
                    setattr(self, fld, env_val.lower() in ("1", "true", "yes"))
                elif isinstance(current, int):
                    setattr(self, fld, int(env_val))
                elif isinstance(current, float):
                    setattr(self, fld, float(env_val))
                elif isinstance(current, Path):
                    setattr(self, fld, Path(env_val))
                else:
                    setattr(self, fld, env_val)


# Fields that may be changed at runtime through /api/settings.
# Dictionary path, trie variant and log level are read once at startup.
EDITABLE_FIELDS: dict[str, type] = {
    "MAX_RESULTS": int,
    "MAX_BOARD_CELLS": int,
    "INCLUDE_TIMINGS": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def _coerce(value, typ: type):
    if typ is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("1", "true", "yes", "0", "false", "no"):
            return value.lower() in ("1", "true", "yes")
        raise ValueError(f"expected a boolean, got {value!r}")
    if typ is int:
        if isinstance(value, bool):
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    if typ is str:
        return str(value)
    return typ(value)


def update_settings(cfg: Settings, /, **values) -> dict[str, str]:
    """Apply editable settings in place.

    Every valid field is applied even when others fail. Returns a mapping of
    field name to error message for the ones that were rejected.
    """
    errors = {}
    for name, value in values.items():
        typ = EDITABLE_FIELDS.get(name)
        if typ is None:
            if hasattr(cfg, name):
                errors[name] = "not editable at runtime"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            setattr(cfg, name, _coerce(value, typ))
        except (TypeError, ValueError) as e:
            errors[name] = str(e)
    return errors


settings = Settings()
