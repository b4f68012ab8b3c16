"""Settings for Trellis.

Uses ``pydantic-settings`` so defaults can be overridden with environment
variables prefixed with ``TRELLIS_`` (e.g. ``TRELLIS_MAX_DEPTH=6``).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for the console helpers.

    Attributes:
        max_depth: Longest association path, in edges, that a relation
            search will report.
        max_steps: Queue items a relation search may dequeue before it
            gives up.
        progress_interval: Log search progress every this many steps.
        bench_iterations: Calls per callable in ``bench``.
        log_level: Level for the ``trellis`` logger.
    """

    model_config = SettingsConfigDict(env_prefix="TRELLIS_", extra="ignore")

    max_depth: int = 10
    max_steps: int = 100_000
    progress_interval: int = 100
    bench_iterations: int = 250
    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
