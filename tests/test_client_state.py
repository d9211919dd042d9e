"""Tests for the client state reducer."""

import pytest

from catalog.client.state import (
    CREATE,
    DELETE,
    LOAD,
    UPDATE,
    ActionFailed,
    ActionStarted,
    ProductCreated,
    ProductDeleted,
    ProductFetched,
    ProductState,
    ProductsLoaded,
    ProductUpdated,
    SelectionChanged,
    reduce,
)


@pytest.fixture
def loaded_state(make_product) -> ProductState:
    return ProductState(items=(make_product(1, "A"), make_product(2, "B"), make_product(3, "C")))


class TestPendingFlags:
    """Test in-flight bookkeeping."""

    def test_started_marks_action_pending(self):
        state = reduce(ProductState(), ActionStarted(LOAD))

        assert state.pending is True
        assert state.is_pending(LOAD)
        assert not state.is_pending(DELETE)

    def test_overlapping_calls_of_same_action(self, make_product):
        state = reduce(ProductState(), ActionStarted(DELETE))
        state = reduce(state, ActionStarted(DELETE))

        state = reduce(state, ProductDeleted(1))
        assert state.is_pending(DELETE)

        state = reduce(state, ActionFailed(DELETE, "Product not found"))
        assert not state.pending

    def test_independent_actions_have_independent_flags(self, make_product):
        state = reduce(ProductState(), ActionStarted(LOAD))
        state = reduce(state, ActionStarted(DELETE))

        state = reduce(state, ProductDeleted(1))

        assert state.is_pending(LOAD)
        assert not state.is_pending(DELETE)


class TestSuccessTransitions:
    """Test reconciliation after confirmed calls."""

    def test_loaded_replaces_items_and_clears_error(self, make_product):
        state = ProductState(items=(make_product(9),), last_error="boom", in_flight=(LOAD,))

        state = reduce(state, ProductsLoaded((make_product(1), make_product(2))))

        assert state.ids == [1, 2]
        assert state.last_error is None
        assert not state.pending

    def test_created_appends_and_clears_selection(self, loaded_state, make_product):
        state = reduce(loaded_state, SelectionChanged(loaded_state.items[0]))

        state = reduce(state, ProductCreated(make_product(4, "D")))

        assert state.ids == [1, 2, 3, 4]
        assert state.selected is None

    def test_created_already_listed_keeps_ids_unique(self, loaded_state, make_product):
        state = reduce(loaded_state, ProductCreated(make_product(2, "B2")))

        assert state.ids == [1, 2, 3]
        assert state.find(2).name == "B2"

    def test_updated_replaces_in_place(self, loaded_state, make_product):
        state = reduce(loaded_state, ProductUpdated(make_product(2, "B-new")))

        assert state.ids == [1, 2, 3]
        assert [item.name for item in state.items] == ["A", "B-new", "C"]

    def test_updated_clears_matching_selection(self, loaded_state, make_product):
        state = reduce(loaded_state, SelectionChanged(loaded_state.items[1]))

        state = reduce(state, ProductUpdated(make_product(2, "B-new")))

        assert state.selected is None

    def test_updated_keeps_other_selection(self, loaded_state, make_product):
        state = reduce(loaded_state, SelectionChanged(loaded_state.items[0]))

        state = reduce(state, ProductUpdated(make_product(2, "B-new")))

        assert state.selected.id == 1

    def test_updated_unknown_id_leaves_items(self, loaded_state, make_product):
        state = reduce(loaded_state, ProductUpdated(make_product(42)))
        assert state.items == loaded_state.items

    def test_deleted_removes_item(self, loaded_state):
        state = reduce(loaded_state, ProductDeleted(2))

        assert state.ids == [1, 3]
        assert state.find(2) is None

    def test_deleted_clears_matching_selection(self, loaded_state):
        state = reduce(loaded_state, SelectionChanged(loaded_state.items[2]))

        state = reduce(state, ProductDeleted(3))

        assert state.selected is None

    def test_fetched_sets_selection(self, loaded_state, make_product):
        state = reduce(loaded_state, ProductFetched(make_product(2, "B")))

        assert state.selected.id == 2
        assert state.items == loaded_state.items


class TestFailureTransitions:
    """Failures never touch items."""

    @pytest.mark.parametrize("action", [LOAD, CREATE, UPDATE, DELETE])
    def test_failure_records_message_only(self, loaded_state, action):
        state = reduce(loaded_state, ActionStarted(action))

        state = reduce(state, ActionFailed(action, "Validation failed: price: too low"))

        assert state.items == loaded_state.items
        assert state.last_error == "Validation failed: price: too low"
        assert not state.pending

    def test_failure_keeps_selection(self, loaded_state):
        state = reduce(loaded_state, SelectionChanged(loaded_state.items[0]))

        state = reduce(state, ActionFailed(UPDATE, "Product not found"))

        assert state.selected.id == 1


def test_state_is_not_mutated(loaded_state, make_product):
    before = loaded_state.items

    reduce(loaded_state, ProductCreated(make_product(4)))

    assert loaded_state.items is before
    assert loaded_state.ids == [1, 2, 3]


def test_unknown_event_rejected():
    with pytest.raises(TypeError):
        reduce(ProductState(), object())
