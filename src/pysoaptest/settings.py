"""Settings for SOAP test execution."""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOAP_ENDPOINT = "https://example.com/soap"


class SoapSettings(BaseSettings):
    """Class for the settings of the SOAP endpoint under test.

    Values are read from init arguments, the environment and a `.env`
    file (in this order of precedence).
    """

    soap_endpoint: str = Field(
        default=DEFAULT_SOAP_ENDPOINT,
        description="URL of the SOAP endpoint the requests are posted to",
    )
    auth_token: SecretStr = Field(
        default=SecretStr(""),
        description="Bearer token for the Authorization header. Empty means no Authorization header.",
    )
    requests_dir: str = Field(
        default="api/requests",
        description="Directory with the SOAP request templates (<name>.xml)",
    )
    responses_dir: str = Field(
        default="api/responses",
        description="Directory with the expected SOAP responses (<name>.xml)",
    )
    request_timeout: float | None = Field(
        default=30.0,
        description="Timeout in seconds handed to the HTTP client. None disables the timeout.",
    )
    extra_headers: dict[str, str] = Field(
        default={},
        description="Additional HTTP headers sent with every request (JSON in the environment)",
    )
    template_cache_size: int = Field(
        default=400,
        description="Number of compiled templates to cache. 0 reloads the template on every render.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def bearer_token(self) -> str | None:
        """Return the bearer token or None if no token is configured.

        Returns:
            str | None:
                The plain token value.

        """

        token = self.auth_token.get_secret_value()

        return token or None

    # end method definition
