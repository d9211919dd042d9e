"""Async HTTP client for the product API.

Every call resolves to an :class:`ApiResult`; transport failures and
responses that are not a valid envelope become failed results carrying a
local message instead of raising.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

from catalog.schemas.common import MessageResponse
from catalog.schemas.product import ProductResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNREACHABLE_MESSAGE = "Unable to reach the server"
MALFORMED_MESSAGE = "Received a malformed response from the server"

_PRODUCT = TypeAdapter(ProductResponse)
_PRODUCT_LIST = TypeAdapter(list[ProductResponse])


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Outcome of one API call.

    ``status_code`` is None when the request never got a response.
    """

    ok: bool
    message: str
    status_code: int | None = None
    data: T | None = None


class ProductApiClient:
    """Client for the ``/products`` resource.

    Args:
        base_url: Server root, used when no client is supplied
        api_prefix: Versioned path prefix of the API
        client: Preconfigured httpx client (e.g. mounted on an ASGI app)
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        api_prefix: str = "/api/v1",
        client: httpx.AsyncClient | None = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url)
        self._path = f"{api_prefix}/products"

    async def __aenter__(self) -> "ProductApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def list_products(self) -> ApiResult[list[ProductResponse]]:
        return await self._request("GET", self._path, _PRODUCT_LIST)

    async def get_product(self, product_id: int) -> ApiResult[ProductResponse]:
        return await self._request("GET", f"{self._path}/{product_id}", _PRODUCT)

    async def create_product(self, payload: Mapping[str, Any]) -> ApiResult[ProductResponse]:
        return await self._request("POST", self._path, _PRODUCT, payload)

    async def update_product(
        self, product_id: int, changes: Mapping[str, Any]
    ) -> ApiResult[ProductResponse]:
        return await self._request("PUT", f"{self._path}/{product_id}", _PRODUCT, changes)

    async def delete_product(self, product_id: int) -> ApiResult[None]:
        return await self._request("DELETE", f"{self._path}/{product_id}")

    async def _request(
        self,
        method: str,
        url: str,
        data_adapter: TypeAdapter | None = None,
        payload: Mapping[str, Any] | None = None,
    ) -> ApiResult:
        json_body = to_jsonable_python(payload) if payload is not None else None

        try:
            response = await self._client.request(method, url, json=json_body)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e!r}")
            return ApiResult(ok=False, message=UNREACHABLE_MESSAGE)

        try:
            body = response.json()
            envelope = MessageResponse.model_validate(body)
            data = None
            if envelope.success and data_adapter is not None:
                data = data_adapter.validate_python(body["data"])
        except (ValueError, KeyError) as e:
            # pydantic's ValidationError and JSONDecodeError are ValueErrors
            logger.warning(
                f"{method} {url} returned an invalid envelope "
                f"(status {response.status_code}): {e!r}"
            )
            return ApiResult(
                ok=False,
                status_code=response.status_code,
                message=MALFORMED_MESSAGE,
            )

        return ApiResult(
            ok=envelope.success and response.is_success,
            status_code=response.status_code,
            message=envelope.message,
            data=data,
        )
