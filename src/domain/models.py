from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, validator


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Demographics(FrozenModel):
    age: int = Field(..., ge=1, le=120)
    gender: Optional[str] = Field("unspecified", description="male/female/other/unspecified")
    weight: float = Field(..., gt=0, le=500, description="kg")
    height: Optional[float] = Field(None, gt=0, le=250, description="cm")


class SeizureHistory(FrozenModel):
    onset_age: Optional[str] = Field(None, description="neonatal/childhood/adolescence/adulthood")
    seizure_frequency: Optional[str] = Field(
        None, description="multiple-daily/daily/weekly/monthly/yearly-or-less"
    )
    had_status_epilepticus: Optional[bool] = None
    family_history: Optional[bool] = None
    febrile_seizures: Optional[bool] = None
    brain_trauma: Optional[bool] = None
    surgical_intervention: Optional[str] = Field(
        None, description="none/resection/vns/rns/dbs/laser-ablation"
    )
    # Seizure type picked by the patient or carried over from an earlier visit
    seizure_type_id: Optional[str] = None

    @validator("seizure_type_id")
    def blank_seizure_type(cls, v: Optional[str]):
        if v is not None:
            v = v.strip()
            if len(v) == 0:
                return None
        return v


class Medication(FrozenModel):
    current_drugs: Optional[List[str]] = None
    last_dose: Optional[str] = Field(None, description="<6h/6-12h/12-24h/>24h")
    missed_doses: Optional[bool] = None
    drug_resistance: Optional[str] = Field(
        None, description="responsive/partially-responsive/drug-resistant/unknown"
    )
    side_effects: Optional[str] = Field(None, description="none/mild/moderate/severe")

    @property
    def active_drugs(self) -> List[str]:
        """Drug ids without the "none" sentinel and blanks."""
        return [d for d in (self.current_drugs or []) if d and d != "none"]


class GeneticProfile(FrozenModel):
    genetic_mutation: Optional[bool] = None
    comorbidities: Optional[List[str]] = None
    neurodevelopmental_condition: Optional[bool] = None


class Lifestyle(FrozenModel):
    sleep_last_24h: Optional[str] = Field(None, description="<4h/4-6h/6-8h/>8h")
    caffeine_alcohol_last_24h: Optional[bool] = None
    stress_level: int = Field(0, ge=0, le=10)
    triggers: Optional[List[str]] = None
    time_of_day: Optional[str] = Field(None, description="morning/afternoon/evening/night")
    weather: Optional[str] = Field(None, description="normal/hot/cold/humid/stormy")


class Physiology(FrozenModel):
    heart_rate: Optional[int] = Field(None, gt=0, le=300)
    blood_pressure: Optional[str] = Field(None, description="e.g. 120/80")
    blood_glucose: Optional[float] = Field(None, gt=0, description="mg/dL")


class EpisodeContext(FrozenModel):
    location: Optional[str] = Field(None, description="home/work/school/outdoors/driving/other")
    is_alone: Optional[bool] = None
    has_hospital_access: Optional[bool] = None
    had_episode_last_48h: Optional[bool] = None
    postictal_symptoms: Optional[List[str]] = None


class Diagnostics(FrozenModel):
    mri_eeg_results: Optional[str] = Field(None, description="normal/abnormal/not-done")
    veeg_diagnosis: Optional[bool] = None
    pet_spect_results: Optional[str] = Field(
        None, description="normal/abnormal-glucose-metabolism/not-done"
    )
    prolactin_level: Optional[str] = Field(None, description="normal/elevated/not-tested")


class AssessmentRecord(FrozenModel):
    demographics: Demographics
    history: SeizureHistory = SeizureHistory()
    medication: Medication = Medication()
    genetics: GeneticProfile = GeneticProfile()
    lifestyle: Lifestyle = Lifestyle()
    physiology: Physiology = Physiology()
    context: EpisodeContext = EpisodeContext()
    diagnostics: Diagnostics = Diagnostics()


class MedicationGuidance(FrozenModel):
    drug: str
    dosage: str
    warning: Optional[str] = None
    side_effects: List[str] = []


class AssessmentResult(FrozenModel):
    epilepsy_probability: float = Field(..., ge=0.0, le=98.0)
    seizure_type_id: Optional[str] = None
    seizure_type_name: Optional[str] = None
    seizure_type_description: Optional[str] = None
    seizure_risk: str  # "low" | "moderate" | "high"
    risk_score: int = 0
    suggested_dosage: Optional[MedicationGuidance] = None
    lifestyle_suggestions: List[str] = []
    emergency_warning: Optional[str] = None
    confidence_level: str  # "low" | "moderate" | "high"
