"""Runtime settings for the FastAPI integration.

The builder itself takes no configuration; these settings only shape how the
exception handlers answer unhandled errors.
"""

from __future__ import annotations

from dataclasses import dataclass

from jsend_payload.utils.env import get_env, get_flag, get_node_env

DEFAULT_UNHANDLED_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class Settings:
    """Dependency injection wrapper for handler settings."""

    environment: str = "local"
    expose_error_details: bool = False
    unhandled_error_message: str = DEFAULT_UNHANDLED_ERROR_MESSAGE

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``NODE_ENV`` and ``JSEND_*`` variables."""

        environment = get_node_env()
        return cls(
            environment=environment,
            # Error details are hidden in production unless explicitly enabled
            expose_error_details=get_flag(
                "JSEND_EXPOSE_ERROR_DETAILS", default=environment != "production"
            ),
            unhandled_error_message=get_env(
                "JSEND_UNHANDLED_ERROR_MESSAGE", default=DEFAULT_UNHANDLED_ERROR_MESSAGE
            )
            or DEFAULT_UNHANDLED_ERROR_MESSAGE,
        )


__all__ = ["DEFAULT_UNHANDLED_ERROR_MESSAGE", "Settings"]
