"""
Asthma Questionnaire Navigation

Multi-step wizard state for the asthma questionnaire. The current step is
an explicit immutable value passed in and returned, so several sessions
can be navigated side by side without shared state.

    state = WizardState()
    state = next_step(state, answers)   # validates the current step
    state = previous_step(state)
"""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Tuple

from lungstage.utils import MissingFieldError

# step number → (title, required answer keys, optional answer keys)
ASTHMA_STEPS: Dict[int, Tuple[str, Tuple[str, ...], Tuple[str, ...]]] = {
    1: ("Lung function", (), ("fev1",)),
    2: ("Daytime symptoms", ("daytime",), ()),
    3: ("Nighttime awakenings", ("nighttime",), ()),
    4: ("Activity limitation", ("activity",), ()),
    5: ("Inhaler use", (), ("inhalers", "frequency")),
}

TOTAL_STEPS = len(ASTHMA_STEPS)


@dataclass(frozen=True)
class WizardState:
    step: int = 1
    complete: bool = False
    total_steps: int = field(default=TOTAL_STEPS, init=False)

    def __post_init__(self):
        if self.step not in ASTHMA_STEPS:
            raise ValueError(f"step must be between 1 and {TOTAL_STEPS}, got {self.step}")

    @property
    def is_first(self) -> bool:
        return self.step == 1

    @property
    def is_last(self) -> bool:
        return self.step == self.total_steps

    @property
    def button_label(self) -> str:
        return "Submit" if self.is_last else "Next"

    @property
    def title(self) -> str:
        return ASTHMA_STEPS[self.step][0]


def missing_for_step(step: int, answers: Mapping[str, Any]) -> List[str]:
    """Required keys of `step` that are absent or blank in `answers`."""
    _, required, _ = ASTHMA_STEPS[step]
    missing = []
    for key in required:
        value = answers.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(key)
    return missing


def next_step(state: WizardState, answers: Mapping[str, Any]) -> WizardState:
    """
    Advance one step after checking the current step's required answers.

    On the final step the returned state is marked complete and the caller
    submits the answers for classification.

    Raises:
        MissingFieldError: the current step has unanswered required fields.
    """
    missing = missing_for_step(state.step, answers)
    if missing:
        raise MissingFieldError(missing, questionnaire="asthma", details={"step": state.step})
    if state.is_last:
        return replace(state, complete=True)
    return replace(state, step=state.step + 1)


def previous_step(state: WizardState) -> WizardState:
    if state.is_first:
        return state
    return replace(state, step=state.step - 1, complete=False)
