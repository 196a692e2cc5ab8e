from typing import AsyncIterator

from stockplan.core.config import get_settings
from stockplan.service.client import ManufacturingClient


async def get_client() -> AsyncIterator[ManufacturingClient]:
    async with ManufacturingClient(get_settings()) as client:
        yield client
