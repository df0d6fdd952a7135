import asyncio
from typing import Awaitable, Optional, TypeVar

from src.app.repositories.errors import StoreError

T = TypeVar("T")


async def bounded(awaitable: Awaitable[T], timeout: Optional[float]) -> T:
    """
    Await a store call, failing with StoreError once timeout seconds pass.

    No retry: a timed out write may or may not have been applied.
    """
    if timeout is None:
        return await awaitable
    try:
        return await asyncio.wait_for(awaitable, timeout)
    except asyncio.TimeoutError as exc:
        raise StoreError(f"Member store did not answer within {timeout}s") from exc
