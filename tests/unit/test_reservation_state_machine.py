"""Тесты для Reservation State Machine.

Coverage:
- ACTIVE → CANCELED разрешён
- CANCELED терминально
- Переходы в то же состояние запрещены
"""

from src.core.domain import ReservationState
from src.fulfillment import ReservationStateMachine


class TestReservationStateMachine:
    """Тесты Reservation State Machine."""

    def test_active_to_canceled_allowed(self):
        sm = ReservationStateMachine()

        result = sm.evaluate_transition(ReservationState.ACTIVE, ReservationState.CANCELED)

        assert result.allowed
        assert result.transition_reason == "active_to_canceled"
        assert result.from_state == ReservationState.ACTIVE
        assert result.to_state == ReservationState.CANCELED

    def test_canceled_is_terminal(self):
        sm = ReservationStateMachine()

        assert sm.is_terminal(ReservationState.CANCELED)
        assert not sm.is_terminal(ReservationState.ACTIVE)

    def test_no_transition_out_of_canceled(self):
        sm = ReservationStateMachine()

        for target in ReservationState:
            result = sm.evaluate_transition(ReservationState.CANCELED, target)
            assert not result.allowed
            assert result.transition_reason == "terminal_state_canceled"

    def test_active_to_active_not_allowed(self):
        sm = ReservationStateMachine()

        result = sm.evaluate_transition(ReservationState.ACTIVE, ReservationState.ACTIVE)

        assert not result.allowed
        assert result.transition_reason == "transition_not_allowed"
