"""Unit tests for core enums."""

import pytest

from sonarqube.web.core import HttpMethod, PaginationState, ResponseType, ValidationReason


@pytest.mark.parametrize(
    "state,terminal",
    [
        (PaginationState.READY, False),
        (PaginationState.FETCHING, False),
        (PaginationState.HAS_PAGE, False),
        (PaginationState.EXHAUSTED, True),
        (PaginationState.FAILED, True),
    ],
)
def test_pagination_state_terminal(state, terminal):
    """Test only EXHAUSTED and FAILED end a walk."""
    assert state.is_terminal is terminal


def test_string_values():
    """Test enums compare equal to their wire values."""
    assert HttpMethod.GET == "GET"
    assert ResponseType.TEXT == "text"
    assert ValidationReason.MUTUALLY_EXCLUSIVE.value == "mutually_exclusive"
