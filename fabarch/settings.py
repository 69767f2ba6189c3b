"""fabarch settings - environment and .env configuration with a global context."""

from pathlib import Path

from loguru import logger
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fabarch.define import RouteType


class ArchSettings(BaseSettings):
    """fabarch settings.

    Values are read from ``FABARCH_`` prefixed environment variables and from the
    ``.env`` files passed to ``init_context``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FABARCH_", case_sensitive=False, extra="ignore"
    )

    route_type: RouteType = RouteType.GLOBAL
    aspect_ratio: float = 1.0
    echo_file: Path = Path("arch.echo")
    warn_unknown_keywords: bool = False
    log_level: str = "INFO"

    @field_validator("route_type", mode="before")
    @classmethod
    def validate_route_type(cls, value: str | RouteType) -> RouteType:
        """Normalise the route type to the RouteType enum."""
        if isinstance(value, RouteType):
            return value
        return RouteType(value.strip().lower())

    @field_validator("aspect_ratio")
    @classmethod
    def positive_aspect_ratio(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("aspect_ratio must be greater than 0")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


# Module-level singleton pattern for settings management
_context_instance: ArchSettings | None = None


def init_context(dot_env: Path | None = None, **overrides: object) -> ArchSettings:
    """Initialize the global fabarch settings.

    Subsequent calls override the existing context.

    Parameters
    ----------
    dot_env : Path | None, optional
        ``.env`` file to read settings from. Ignored with a warning if it does
        not exist.
    **overrides
        Explicit setting values, taking priority over the environment.

    Returns
    -------
    ArchSettings
        The initialized settings instance.
    """
    global _context_instance
    env_files: list[Path] = []
    if dot_env is not None:
        if dot_env.exists():
            env_files.append(dot_env)
        else:
            logger.warning(f".env file not found: {dot_env} this is ignored")

    _context_instance = ArchSettings(_env_file=tuple(env_files), **overrides)
    logger.debug("fabarch context initialized")
    return _context_instance


def get_context() -> ArchSettings:
    """Get the global fabarch settings.

    Raises
    ------
    RuntimeError
        If the context has not been initialized with ``init_context()``.
    """
    if _context_instance is None:
        raise RuntimeError(
            "fabarch context not initialized. Call init_context() first."
        )
    return _context_instance


def reset_context() -> None:
    """Reset the global context (primarily for testing)."""
    global _context_instance
    _context_instance = None
    logger.debug("fabarch context reset")
