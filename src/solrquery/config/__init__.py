"""Configuration — settings loaded from the environment or a YAML file."""

from solrquery.config.settings import EndpointConfig, ObservabilitySettings, Settings

__all__ = ["EndpointConfig", "ObservabilitySettings", "Settings"]
