import json
from typing import Any

import httpx

from wordcloud_client.api.base import BaseWordCountApi
from wordcloud_client.api.exceptions import ApiError, ApiNetworkError, ApiResponseError
from wordcloud_client.jobs.models import JobResult, JobStatus
from wordcloud_client.jobs.validator import build_result, parse_status
from wordcloud_client.logging.logger import Log

UPLOAD_PATH = "/upload"
STATUS_PATH = "/upload/status"
RESULT_PATH = "/upload"


class HttpxApiAdapter(BaseWordCountApi):
    """Processing-service adapter built on ``httpx.AsyncClient``.

    The client's cookie jar is shared by every call, so session cookies set by
    the service travel with later requests.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
        )
        self._owns_client = http_client is None

    async def upload(self, filename: str, content: bytes) -> str:
        Log.info(f"Uploading {filename} ({len(content)} bytes)")
        response = await self._request(
            "POST",
            UPLOAD_PATH,
            files={"file": (filename, content, "text/plain")},
        )
        identifier = self._read_plain_string(response)
        if not identifier:
            raise ApiResponseError("Service returned an empty identifier")
        Log.info(f"Upload accepted, identifier {identifier}")
        return identifier

    async def get_status(self, identifier: str) -> JobStatus:
        response = await self._request(
            "GET", STATUS_PATH, params={"identifier": identifier}
        )
        status = parse_status(self._read_plain_string(response))
        Log.debug(f"Status of {identifier}: {status.value}")
        return status

    async def get_result(self, identifier: str) -> JobResult:
        response = await self._request("GET", RESULT_PATH, params={"identifier": identifier})
        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiResponseError(f"Result body is not valid JSON: {exc}") from exc
        result = build_result(payload)
        Log.debug(
            f"Result of {identifier}: status={result.upload_status}, "
            f"has_data={result.has_data}"
        )
        return result

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ApiResponseError(
                f"{method} {url} returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.TransportError as exc:
            raise ApiNetworkError(f"{method} {url} failed: {exc}") from exc
        except httpx.HTTPError as exc:
            raise ApiError(f"{method} {url} failed: {exc}") from exc
        return response

    @staticmethod
    def _read_plain_string(response: httpx.Response) -> str:
        """Read a body that is either a bare string or a JSON string literal."""
        text = response.text.strip()
        if text.startswith('"'):
            try:
                decoded = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ApiResponseError(f"Malformed string body: {exc}") from exc
            if not isinstance(decoded, str):
                raise ApiResponseError("Expected a string body")
            return decoded
        return text
