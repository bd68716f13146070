import logging
from typing import Any, Dict, Union

from pydantic import ValidationError

from src.application.errors import InvalidAssessmentError
from src.application.schemas import AssessmentReport, PatientSummary
from src.domain.catalogs import drug_name, seizure_type_name
from src.domain.models import AssessmentRecord
from src.domain.rules import assess


logger = logging.getLogger(__name__)


def build_record(answers: Dict[str, Any]) -> AssessmentRecord:
    """Validate nested wizard answers into an AssessmentRecord."""
    try:
        return AssessmentRecord(**answers)
    except ValidationError as e:
        logger.warning("Assessment answers failed validation: %s", e)
        raise InvalidAssessmentError("Assessment answers are invalid", errors=e.errors()) from e


def build_patient_summary(record: AssessmentRecord) -> PatientSummary:
    demo = record.demographics
    drugs = record.medication.active_drugs
    reported_type = record.history.seizure_type_id
    return PatientSummary(
        age=demo.age,
        weight=demo.weight,
        gender=demo.gender,
        seizure_type=seizure_type_name(reported_type) if reported_type else None,
        medication=", ".join(drug_name(d) for d in drugs) if drugs else "None",
    )


class AssessmentUseCase:
    def assess(self, answers: Union[AssessmentRecord, Dict[str, Any]]) -> AssessmentReport:
        record = answers if isinstance(answers, AssessmentRecord) else build_record(answers)

        result = assess(record)
        logger.info(
            "Assessment complete: probability=%.1f%% risk=%s confidence=%s seizure_type=%s",
            result.epilepsy_probability,
            result.seizure_risk,
            result.confidence_level,
            result.seizure_type_id or "-",
        )
        if result.emergency_warning:
            logger.info("High short-term seizure risk (score=%d)", result.risk_score)

        return AssessmentReport(result=result, patient=build_patient_summary(record))
