"""Client settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (SOLRQUERY_ prefix)
  3. Default values

Example YAML::

    default_endpoint: default
    endpoints:
      default:
        url: http://localhost:8983/solr/gettingstarted
      suggester:
        url: http://localhost:8983/solr/collection
        handler: suggest
      library:
        url: http://localhost:8984/solr/articles
        handler: dismax
        headers:
          accept: application/json
        timeout: 10
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class EndpointConfig(BaseModel):
    """Configuration for a single named Solr endpoint."""

    url: str = Field(description="Core or collection URL, e.g. http://localhost:8983/solr/gettingstarted")
    handler: str = Field(default="select", description="Request handler appended to the URL")
    headers: dict[str, str] = Field(default_factory=dict, description="HTTP headers sent with every request")
    timeout: float | None = Field(default=None, description="Request timeout in seconds (client default if unset)")

    @field_validator("url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the SOLRQUERY_ prefix.
    Nested settings use double underscores; mappings are given as JSON.

    Example:
        SOLRQUERY_ENDPOINTS='{"default": {"url": "http://localhost:8983/solr/films"}}'
        SOLRQUERY_DEFAULT_ENDPOINT=default
        SOLRQUERY_OBSERVABILITY__LOG_LEVEL=debug
    """

    model_config = {
        "env_prefix": "SOLRQUERY_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    endpoints: dict[str, EndpointConfig] = Field(default_factory=dict, description="Named Solr endpoints")
    default_endpoint: str = Field(default="default", description="Endpoint used when none is given")
    timeout: float = Field(default=30.0, description="Default request timeout in seconds")
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file take precedence over environment variables,
        which still fill in anything the file leaves out.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
