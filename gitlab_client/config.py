from os import environ

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://gitlab.com"
DEFAULT_TIMEOUT = 30.0


class ClientSettings(BaseModel):
    """Settings for connecting to a GitLab instance.

    Attributes:
        base_url: URL of the GitLab instance, with or without the API suffix
        token: Personal, project or group access token
        timeout: Request timeout in seconds
        log_level: Level passed to the logging setup
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    token: str = Field("", repr=False)
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}, got '{v}'")
        return upper

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Load settings from the GITLAB_* environment variables.

        Returns:
            Settings with defaults for any variable that is not set

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        return cls(
            base_url=environ.get("GITLAB_URL", DEFAULT_BASE_URL),
            token=environ.get("GITLAB_TOKEN", ""),
            timeout=environ.get("GITLAB_TIMEOUT", DEFAULT_TIMEOUT),
            log_level=environ.get("GITLAB_LOG_LEVEL", "INFO"),
        )
