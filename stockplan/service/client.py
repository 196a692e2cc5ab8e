"""Async client for the manufacturing service (products, raw materials,
compositions, production suggestion).

Responses for composition records are canonicalized on the way in; the
production suggestion is returned raw by ``production.list()`` and as a
ranked ``ProductionPlan`` by ``production.plan()``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from stockplan.core.config import Settings
from stockplan.core.errors import ServiceError
from stockplan.normalize.call_shapes import (
    normalize_create_args,
    normalize_delete_args,
    normalize_update_args,
)
from stockplan.normalize.compositions import (
    canonicalize_response,
    filter_by_product,
    join_raw_material_details,
)
from stockplan.normalize.production import build_plan
from stockplan.schemas.dto import ProductionPlan

logger = logging.getLogger(__name__)


class CrudResource:
    def __init__(self, client: ManufacturingClient, path: str) -> None:
        self._client = client
        self.path = path

    async def list(self) -> Any:
        return await self._client.request("GET", self.path)

    async def create(self, payload: dict[str, Any]) -> Any:
        return await self._client.request("POST", self.path, payload)

    async def update(self, item_id: Any, payload: dict[str, Any]) -> Any:
        return await self._client.request("PUT", f"{self.path}/{item_id}", payload)

    async def delete(self, item_id: Any) -> Any:
        return await self._client.request("DELETE", f"{self.path}/{item_id}")


class ProductMaterialsResource:
    """Composition records. Accepts the legacy call shapes, see ``call_shapes``."""

    path = "/product-materials"

    def __init__(self, client: ManufacturingClient) -> None:
        self._client = client

    async def list(self) -> Any:
        data = await self._client.request("GET", self.path)
        if not isinstance(data, list):
            return data
        return [canonicalize_response(item) for item in data]

    async def list_by_product(self, product_id: Any) -> Any:
        associations, raw_materials = await asyncio.gather(
            self.list(), self._client.raw_materials.list()
        )
        return join_raw_material_details(filter_by_product(associations, product_id), raw_materials)

    async def get(self, association_id: Any) -> Any:
        data = await self._client.request("GET", f"{self.path}/{association_id}")
        return canonicalize_response(data)

    async def create(self, *args: Any) -> Any:
        payload = normalize_create_args(*args)
        data = await self._client.request("POST", self.path, payload)
        return canonicalize_response(data)

    async def update(self, *args: Any) -> Any:
        call = normalize_update_args(*args)
        if call.association_id is None:
            raise TypeError("update() needs an association id")
        data = await self._client.request("PUT", f"{self.path}/{call.association_id}", call.payload)
        return canonicalize_response(data)

    async def delete(self, *args: Any) -> Any:
        association_id = normalize_delete_args(*args)
        if association_id is None:
            raise TypeError("delete() needs an association id")
        return await self._client.request("DELETE", f"{self.path}/{association_id}")


class ProductionResource:
    path = "/production/suggestions"

    def __init__(self, client: ManufacturingClient) -> None:
        self._client = client

    async def list(self) -> Any:
        return await self._client.request("GET", self.path)

    async def plan(self) -> ProductionPlan:
        return build_plan(await self.list())


class ManufacturingClient:
    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = settings.API_BASE_URL.rstrip("/")
        self._timeout = settings.TIMEOUT
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

        self.products = CrudResource(self, "/products")
        self.raw_materials = CrudResource(self, "/raw-materials")
        self.product_materials = ProductMaterialsResource(self)
        self.production = ProductionResource(self)

    def build_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _get_http(self) -> httpx.AsyncClient:
        if self._http is None:
            kwargs: dict[str, Any] = {}
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._http = httpx.AsyncClient(**kwargs)
        return self._http

    async def request(self, method: str, path: str, payload: Any = None) -> Any:
        url = self.build_url(path)
        logger.debug("%s %s", method, url)
        kwargs: dict[str, Any] = {}
        if payload is not None:
            kwargs["json"] = payload
        response = await self._get_http().request(method, url, **kwargs)

        if not response.is_success:
            logger.warning("%s %s -> %s", method, url, response.status_code)
            raise ServiceError(response.status_code, response.text)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning("%s %s -> %s with a body that is not JSON", method, url, response.status_code)
            raise ServiceError(response.status_code, f"Invalid JSON response: {response.text[:200]}") from None

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> ManufacturingClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
