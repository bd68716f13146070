from typing import Optional
from pydantic import BaseModel

from src.domain.models import AssessmentResult


class PatientSummary(BaseModel):
    age: int
    weight: float
    gender: Optional[str] = None
    seizure_type: Optional[str] = None  # label of the type the patient reported, if any
    medication: str = "None"


class AssessmentReport(BaseModel):
    result: AssessmentResult
    patient: PatientSummary
