"""Reservation State Machine — допустимые переходы состояния бронирования.

States:
- ACTIVE: начальное состояние
- CANCELED: терминальное, выхода нет

Единственный переход ACTIVE → CANCELED; его допуск по времени решает
CancellationPolicy, машина состояний проверяет только структуру переходов.
"""

from dataclasses import dataclass
from typing import FrozenSet, Mapping

from src.core.domain.reservation import ReservationState


ALLOWED_TRANSITIONS: Mapping[ReservationState, FrozenSet[ReservationState]] = {
    ReservationState.ACTIVE: frozenset({ReservationState.CANCELED}),
    ReservationState.CANCELED: frozenset(),
}


@dataclass(frozen=True)
class ReservationTransitionResult:
    """Результат проверки перехода."""

    allowed: bool
    from_state: ReservationState
    to_state: ReservationState
    transition_reason: str
    details: str


class ReservationStateMachine:
    """Структурная проверка переходов бронирования."""

    def __init__(self, transitions: Mapping[ReservationState, FrozenSet[ReservationState]] = ALLOWED_TRANSITIONS):
        self.transitions = transitions

    def is_terminal(self, state: ReservationState) -> bool:
        return not self.transitions.get(state)

    def can_transition(self, from_state: ReservationState, to_state: ReservationState) -> bool:
        return to_state in self.transitions.get(from_state, frozenset())

    def evaluate_transition(
        self, from_state: ReservationState, to_state: ReservationState
    ) -> ReservationTransitionResult:
        if self.can_transition(from_state, to_state):
            return ReservationTransitionResult(
                allowed=True,
                from_state=from_state,
                to_state=to_state,
                transition_reason=f"{from_state.value.lower()}_to_{to_state.value.lower()}",
                details=f"Transition {from_state.value} → {to_state.value}",
            )

        if self.is_terminal(from_state):
            reason = f"terminal_state_{from_state.value.lower()}"
            details = f"{from_state.value} is terminal, no transition to {to_state.value}"
        else:
            reason = "transition_not_allowed"
            details = f"Transition {from_state.value} → {to_state.value} is not allowed"

        return ReservationTransitionResult(
            allowed=False,
            from_state=from_state,
            to_state=to_state,
            transition_reason=reason,
            details=details,
        )
