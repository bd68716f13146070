"""Unit tests for the multi-step assessment wizard."""
import pytest

from src.application.errors import IncompleteAssessmentError
from src.application.wizard import STEPS, AssessmentWizard


def fill_required(wizard: AssessmentWizard):
    wizard.set_answer("demographics", "age", 30)
    wizard.set_answer("demographics", "weight", 70.0)
    wizard.set_answer("history", "onset_age", "adulthood")
    wizard.set_answer("history", "seizure_frequency", "monthly")
    wizard.set_answer("medication", "current_drugs", ["none"])
    wizard.set_answer("lifestyle", "sleep_last_24h", "6-8h")
    wizard.set_answer("lifestyle", "stress_level", 0)


class TestNavigation:
    def test_starts_on_first_step(self):
        wizard = AssessmentWizard()

        assert wizard.current_step == "demographics"
        assert wizard.progress == pytest.approx(1 / len(STEPS))
        assert not wizard.can_advance()

    def test_next_refuses_missing_fields(self):
        wizard = AssessmentWizard()
        wizard.set_answer("demographics", "age", 30)

        with pytest.raises(IncompleteAssessmentError) as exc_info:
            wizard.next_step()

        assert exc_info.value.missing == ["demographics.weight"]
        assert wizard.current_step == "demographics"

    def test_walk_forward_and_back(self):
        wizard = AssessmentWizard()
        fill_required(wizard)

        for _ in range(len(STEPS) - 1):
            wizard.next_step()

        assert wizard.current_step == "diagnostics"
        assert wizard.is_last_step
        assert wizard.progress == 1.0
        assert wizard.next_step() == "diagnostics"

        assert wizard.previous_step() == "context"

    def test_previous_on_first_step_stays(self):
        assert AssessmentWizard().previous_step() == "demographics"

    def test_empty_list_counts_as_missing(self):
        wizard = AssessmentWizard()
        wizard.set_answer("medication", "current_drugs", [])
        assert wizard.missing_fields("medication") == ["medication.current_drugs"]

    def test_zero_stress_is_an_answer(self):
        wizard = AssessmentWizard()
        wizard.set_answer("lifestyle", "sleep_last_24h", "<4h")
        wizard.set_answer("lifestyle", "stress_level", 0)
        assert wizard.missing_fields("lifestyle") == []

    def test_unknown_group_rejected(self):
        with pytest.raises(KeyError):
            AssessmentWizard().set_answer("billing", "card", "1234")

    def test_reset(self):
        wizard = AssessmentWizard()
        fill_required(wizard)
        wizard.next_step()
        wizard.reset()

        assert wizard.step_index == 0
        assert wizard.get_answer("demographics", "age") is None


class TestBuildRecord:
    def test_incomplete_wizard_cannot_build(self):
        wizard = AssessmentWizard()
        wizard.set_answer("demographics", "age", 30)

        assert not wizard.is_complete()
        with pytest.raises(IncompleteAssessmentError):
            wizard.build_record()

    def test_builds_record_from_answers(self):
        wizard = AssessmentWizard()
        fill_required(wizard)
        wizard.set_answer("context", "postictal_symptoms", ["Confusion"])
        wizard.set_answer("physiology", "heart_rate", 88)

        record = wizard.build_record()

        assert wizard.is_complete()
        assert record.demographics.age == 30
        assert record.medication.current_drugs == ["none"]
        assert record.context.postictal_symptoms == ["Confusion"]
        assert record.physiology.heart_rate == 88
        assert record.diagnostics.veeg_diagnosis is None
