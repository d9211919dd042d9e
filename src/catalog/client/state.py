"""Client-side product state and its reducer.

State snapshots are immutable; :func:`reduce` returns a new snapshot for each
event. Changes are applied only after the server has confirmed them, so a
failed call never touches ``items``.
"""

from dataclasses import dataclass, replace
from typing import ClassVar, Union

from catalog.schemas.product import ProductResponse

LOAD = "load"
FETCH = "fetch"
CREATE = "create"
UPDATE = "update"
DELETE = "delete"


@dataclass(frozen=True)
class ProductState:
    """Snapshot of the locally mirrored product collection.

    ``in_flight`` holds one entry per outstanding call, so two overlapping
    calls of the same action keep it pending until both have finished.
    """

    items: tuple[ProductResponse, ...] = ()
    selected: ProductResponse | None = None
    in_flight: tuple[str, ...] = ()
    last_error: str | None = None

    @property
    def pending(self) -> bool:
        return bool(self.in_flight)

    def is_pending(self, action: str) -> bool:
        return action in self.in_flight

    @property
    def ids(self) -> list[int]:
        return [item.id for item in self.items]

    def find(self, product_id: int) -> ProductResponse | None:
        for item in self.items:
            if item.id == product_id:
                return item
        return None


# Events


@dataclass(frozen=True)
class ActionStarted:
    action: str


@dataclass(frozen=True)
class ActionFailed:
    action: str
    message: str


@dataclass(frozen=True)
class ProductsLoaded:
    action: ClassVar[str] = LOAD
    products: tuple[ProductResponse, ...]


@dataclass(frozen=True)
class ProductFetched:
    action: ClassVar[str] = FETCH
    product: ProductResponse


@dataclass(frozen=True)
class ProductCreated:
    action: ClassVar[str] = CREATE
    product: ProductResponse


@dataclass(frozen=True)
class ProductUpdated:
    action: ClassVar[str] = UPDATE
    product: ProductResponse


@dataclass(frozen=True)
class ProductDeleted:
    action: ClassVar[str] = DELETE
    product_id: int


@dataclass(frozen=True)
class SelectionChanged:
    product: ProductResponse | None


Event = Union[
    ActionStarted,
    ActionFailed,
    ProductsLoaded,
    ProductFetched,
    ProductCreated,
    ProductUpdated,
    ProductDeleted,
    SelectionChanged,
]


def _finish(in_flight: tuple[str, ...], action: str) -> tuple[str, ...]:
    """Drop one outstanding entry for ``action``."""
    remaining = list(in_flight)
    if action in remaining:
        remaining.remove(action)
    return tuple(remaining)


def _is_selected(state: ProductState, product_id: int) -> bool:
    return state.selected is not None and state.selected.id == product_id


def reduce(state: ProductState, event: Event) -> ProductState:
    """Return the state that results from applying ``event`` to ``state``."""
    if isinstance(event, ActionStarted):
        return replace(state, in_flight=state.in_flight + (event.action,))

    if isinstance(event, ActionFailed):
        return replace(
            state,
            in_flight=_finish(state.in_flight, event.action),
            last_error=event.message,
        )

    if isinstance(event, SelectionChanged):
        return replace(state, selected=event.product)

    if isinstance(event, ProductsLoaded):
        return replace(
            state,
            items=tuple(event.products),
            in_flight=_finish(state.in_flight, event.action),
            last_error=None,
        )

    if isinstance(event, ProductFetched):
        return replace(
            state,
            selected=event.product,
            in_flight=_finish(state.in_flight, event.action),
            last_error=None,
        )

    if isinstance(event, ProductCreated):
        created = event.product
        if state.find(created.id) is None:
            items = state.items + (created,)
        else:
            # a list refresh already delivered this id
            items = tuple(created if item.id == created.id else item for item in state.items)
        return replace(
            state,
            items=items,
            selected=None,
            in_flight=_finish(state.in_flight, event.action),
            last_error=None,
        )

    if isinstance(event, ProductUpdated):
        updated = event.product
        return replace(
            state,
            items=tuple(updated if item.id == updated.id else item for item in state.items),
            selected=None if _is_selected(state, updated.id) else state.selected,
            in_flight=_finish(state.in_flight, event.action),
            last_error=None,
        )

    if isinstance(event, ProductDeleted):
        return replace(
            state,
            items=tuple(item for item in state.items if item.id != event.product_id),
            selected=None if _is_selected(state, event.product_id) else state.selected,
            in_flight=_finish(state.in_flight, event.action),
            last_error=None,
        )

    raise TypeError(f"Unknown event: {event!r}")
