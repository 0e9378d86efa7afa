import os


def _truthy(raw) -> bool:
    return str(raw).lower() in ("1", "true", "yes")


class Cache:
    def __init__(self, config: dict | None = None) -> None:
        cache_cfg = (config or {}).get("cache", {})
        # Direct mode bypasses memoization for every lookup.
        self.DIRECT_MODE: bool = _truthy(cache_cfg.get("direct_mode", os.getenv("DIRECT_MODE", "0")))
        self.CLEAR_ON_MEMORY_WARNING: bool = _truthy(
            cache_cfg.get("clear_on_memory_warning", os.getenv("CLEAR_ON_MEMORY_WARNING", "1"))
        )
