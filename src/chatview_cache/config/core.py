import logging
import os

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Core:
    def __init__(self, config: dict | None = None) -> None:
        cfg = config or {}
        level = str(cfg.get("log_level", os.getenv("LOG_LEVEL", "INFO"))).upper()
        if level not in _LEVELS:
            raise ValueError(f"Invalid LOG_LEVEL: {level}")
        self.LOG_LEVEL: str = level

    @property
    def log_level(self) -> int:
        return getattr(logging, self.LOG_LEVEL)
