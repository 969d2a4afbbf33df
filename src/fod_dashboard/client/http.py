from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from fod_dashboard.core.errors import TransportFailure

Json = dict[str, Any]


@dataclass
class BaseHttpClient:
    """
    Thin JSON-over-HTTP wrapper.

    - Uses a single underlying httpx.Client for connection pooling.
    - Every failure (network, non-2xx, non-JSON) surfaces as TransportFailure.
    """

    base_url: str
    timeout_s: float = 30.0
    connect_timeout_s: float = 10.0
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.Client(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers={"Accept": "application/json", **dict(self.headers)},
            transport=self.transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BaseHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        """
        GET `path` and return the parsed JSON object.
        Raises TransportFailure on transport issues, non-2xx responses, or a non-object body.
        """
        try:
            resp = self._client.request(
                method="GET",
                url=path.lstrip("/"),
                params=params,
                headers=headers,
            )
        except httpx.HTTPError as e:
            raise TransportFailure(str(e) or type(e).__name__) from e

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            # the query string may carry a shared secret
            raise TransportFailure(
                f"HTTP {resp.status_code} for GET {resp.request.url.path}",
                http_status=resp.status_code,
            ) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise TransportFailure("Response was not valid JSON.") from e

        if not isinstance(data, dict):
            raise TransportFailure(f"Expected JSON object, got {type(data).__name__}")

        return data
