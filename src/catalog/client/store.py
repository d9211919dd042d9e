"""Observable product store driving the client views."""

import logging
from typing import Any, Awaitable, Callable, Mapping

from catalog.client.api_client import ApiResult, ProductApiClient
from catalog.client.state import (
    CREATE,
    DELETE,
    FETCH,
    LOAD,
    UPDATE,
    ActionFailed,
    ActionStarted,
    Event,
    ProductCreated,
    ProductDeleted,
    ProductFetched,
    ProductState,
    ProductsLoaded,
    ProductUpdated,
    SelectionChanged,
    reduce,
)
from catalog.schemas.product import ProductResponse

logger = logging.getLogger(__name__)

Listener = Callable[[ProductState], None]

UNEXPECTED_MESSAGE = "Something went wrong, please try again"


class ProductStore:
    """Local mirror of the server's product collection.

    Each async action issues exactly one API call and commits exactly one
    state transition once it resolves. Nothing is applied before the server
    confirms it. Calls are neither cancelled nor de-duplicated: overlapping
    calls commit in the order their responses arrive, so the last response
    for an id wins.

    Actions never raise for failed calls; the outcome is always left in
    ``state.last_error`` and the :class:`ApiResult` is returned to the caller.
    """

    def __init__(self, api: ProductApiClient, state: ProductState | None = None):
        self._api = api
        self._state = state or ProductState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ProductState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every new state; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: Event) -> ProductState:
        self._state = reduce(self._state, event)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception as e:
                logger.exception(f"Store listener failed on {type(event).__name__}: {e}")
        return self._state

    def select(self, product: ProductResponse) -> None:
        self.dispatch(SelectionChanged(product))

    def clear_selection(self) -> None:
        self.dispatch(SelectionChanged(None))

    async def load_products(self) -> ApiResult:
        return await self._run(
            LOAD,
            self._api.list_products,
            lambda result: ProductsLoaded(tuple(result.data)),
        )

    async def fetch_product(self, product_id: int) -> ApiResult:
        return await self._run(
            FETCH,
            lambda: self._api.get_product(product_id),
            lambda result: ProductFetched(result.data),
        )

    async def create_product(self, payload: Mapping[str, Any]) -> ApiResult:
        return await self._run(
            CREATE,
            lambda: self._api.create_product(payload),
            lambda result: ProductCreated(result.data),
        )

    async def update_product(self, product_id: int, changes: Mapping[str, Any]) -> ApiResult:
        return await self._run(
            UPDATE,
            lambda: self._api.update_product(product_id, changes),
            lambda result: ProductUpdated(result.data),
        )

    async def delete_product(self, product_id: int) -> ApiResult:
        return await self._run(
            DELETE,
            lambda: self._api.delete_product(product_id),
            lambda result: ProductDeleted(product_id),
        )

    async def _run(
        self,
        action: str,
        call: Callable[[], Awaitable[ApiResult]],
        on_success: Callable[[ApiResult], Event],
    ) -> ApiResult:
        self.dispatch(ActionStarted(action))

        try:
            result = await call()
        except Exception as e:
            logger.exception(f"Store action {action} failed: {e}")
            result = ApiResult(ok=False, message=UNEXPECTED_MESSAGE)

        if result.ok:
            self.dispatch(on_success(result))
        else:
            self.dispatch(ActionFailed(action, result.message or UNEXPECTED_MESSAGE))
        return result
