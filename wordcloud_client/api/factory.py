from typing import ClassVar

from wordcloud_client.api.base import BaseWordCountApi
from wordcloud_client.api.example_adapter import ExampleApiAdapter
from wordcloud_client.api.httpx_adapter import HttpxApiAdapter
from wordcloud_client.config.settings import Settings


class ApiClientFactory:
    """Creates the configured processing-service adapter."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("http", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseWordCountApi:
        """Create an adapter from application settings."""
        provider = settings.api_provider.lower()
        if provider == "example":
            return ExampleApiAdapter(processing_polls=settings.example_processing_polls)
        if provider == "http":
            base_url = settings.api_base_url.strip()
            if not base_url:
                raise ValueError("api_base_url is required for api_provider=http")
            return HttpxApiAdapter(
                base_url=base_url,
                timeout_seconds=settings.api_timeout_seconds,
            )
        raise ValueError(
            f"Unknown API provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
