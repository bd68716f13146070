import logging
from typing import Any, Dict, List, Tuple

from src.application.errors import IncompleteAssessmentError
from src.application.use_cases import build_record
from src.domain.models import AssessmentRecord


logger = logging.getLogger(__name__)


# (step key, title, answer groups shown on the step, required (group, field) pairs)
STEPS: List[Tuple[str, str, Tuple[str, ...], Tuple[Tuple[str, str], ...]]] = [
    ("demographics", "About You", ("demographics",),
     (("demographics", "age"), ("demographics", "weight"))),
    ("history", "Seizure History", ("history",),
     (("history", "onset_age"), ("history", "seizure_frequency"))),
    ("medication", "Medication", ("medication",),
     (("medication", "current_drugs"),)),
    ("genetics", "Genetics & Other Conditions", ("genetics",), ()),
    ("lifestyle", "Lifestyle & Environment", ("lifestyle",),
     (("lifestyle", "sleep_last_24h"), ("lifestyle", "stress_level"))),
    ("context", "Current Situation", ("context", "physiology"), ()),
    ("diagnostics", "Diagnostic Tests", ("diagnostics",), ()),
]

GROUPS = ("demographics", "history", "medication", "genetics", "lifestyle", "physiology", "context", "diagnostics")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    if isinstance(value, (list, tuple)) and len(value) == 0:
        return True
    return False


class AssessmentWizard:
    """Collects answers over several steps and builds the assessment record."""

    def __init__(self):
        self.answers: Dict[str, Dict[str, Any]] = {group: {} for group in GROUPS}
        self.step_index = 0

    def reset(self):
        self.answers = {group: {} for group in GROUPS}
        self.step_index = 0

    @property
    def current_step(self) -> str:
        return STEPS[self.step_index][0]

    @property
    def current_title(self) -> str:
        return STEPS[self.step_index][1]

    @property
    def current_groups(self) -> Tuple[str, ...]:
        return STEPS[self.step_index][2]

    @property
    def is_last_step(self) -> bool:
        return self.step_index == len(STEPS) - 1

    @property
    def progress(self) -> float:
        return (self.step_index + 1) / len(STEPS)

    def set_answer(self, group: str, field: str, value: Any) -> None:
        if group not in self.answers:
            raise KeyError(f"Unknown answer group: {group}")
        self.answers[group][field] = value

    def get_answer(self, group: str, field: str, default: Any = None) -> Any:
        return self.answers.get(group, {}).get(field, default)

    def missing_fields(self, step: str) -> List[str]:
        for key, _title, _groups, required in STEPS:
            if key == step:
                return [
                    f"{group}.{field}" for group, field in required
                    if _is_missing(self.get_answer(group, field))
                ]
        raise KeyError(f"Unknown step: {step}")

    def can_advance(self) -> bool:
        return not self.missing_fields(self.current_step)

    def next_step(self) -> str:
        missing = self.missing_fields(self.current_step)
        if missing:
            raise IncompleteAssessmentError(missing)
        if not self.is_last_step:
            self.step_index += 1
            logger.debug("Wizard advanced to step %s", self.current_step)
        return self.current_step

    def previous_step(self) -> str:
        if self.step_index > 0:
            self.step_index -= 1
        return self.current_step

    def is_complete(self) -> bool:
        return all(not self.missing_fields(key) for key, _title, _groups, _required in STEPS)

    def build_record(self) -> AssessmentRecord:
        missing = [f for key, _t, _g, _r in STEPS for f in self.missing_fields(key)]
        if missing:
            raise IncompleteAssessmentError(missing)
        answers = {group: dict(values) for group, values in self.answers.items() if values}
        return build_record(answers)
