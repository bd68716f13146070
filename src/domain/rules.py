from typing import List, Optional, Tuple

from .catalogs import drugs_for_seizure_type, get_drug, get_seizure_type
from .models import AssessmentRecord, AssessmentResult, MedicationGuidance


# Probability below this (in percent) never yields a seizure type or drug suggestion.
DIAGNOSIS_THRESHOLD = 60.0
MAX_PROBABILITY = 98.0
PROBABILITY_SCALE = 120

DEFAULT_SEIZURE_TYPE = "mixed"

NOT_PERFORMED = {"not-done", "not-tested"}

GENERIC_SUGGESTIONS = [
    "Consult a neurologist for a professional evaluation of your symptoms.",
    "Maintain good sleep hygiene with regular sleep and wake times.",
    "Keep a symptom diary to track any unusual episodes, their duration and possible triggers.",
]

RISK_MESSAGES = {
    "missed_doses": "Take medication as prescribed. Missing doses significantly increases seizure risk.",
    "high_stress": "Your stress level is high. Try stress reduction techniques like deep breathing, meditation, or gentle exercise.",
    "moderate_stress": "Consider incorporating stress management into your daily routine.",
    "severe_sleep_loss": "You slept less than 4 hours. Severe sleep deprivation is a major seizure trigger; rest as soon as possible.",
    "low_sleep": "Try to improve your sleep by maintaining consistent sleep times and creating a restful environment.",
    "substances": "Caffeine and alcohol can lower the seizure threshold and interact with medications. Consider reducing them.",
    "recent_episode": "You had an episode in the last 48 hours. Be cautious, as the risk of another seizure is elevated.",
    "triggers": "Avoid your known seizure triggers wherever possible.",
    "driving": "URGENT: Stop driving as soon as it is safe to do so. Do not drive until cleared by your doctor.",
    "alone": "Avoid being alone for the next few hours. Let someone nearby know about your seizure risk.",
    "emergency_plan": "Have an emergency plan ready, including how to reach the nearest hospital quickly.",
    "general": "Regular exercise, proper hydration, and balanced nutrition can help with seizure control.",
}

EMERGENCY_WARNING = (
    "Your current risk factors suggest a high seizure risk. Consider contacting your healthcare provider."
)


def _answered(value) -> bool:
    return value is not None


def _tested(value: Optional[str]) -> bool:
    return value is not None and value not in NOT_PERFORMED


def score_epilepsy_probability(record: AssessmentRecord) -> Tuple[float, str]:
    """
    Additive evidence score for epilepsy.

    Returns:
        Tuple of (probability percentage capped at 98.0, confidence level)
    """
    history = record.history
    meds = record.medication
    genetics = record.genetics
    context = record.context
    diag = record.diagnostics

    comorbidities = genetics.comorbidities or []
    postictal = context.postictal_symptoms or []

    # (applicable, present, points, confidence weight)
    conditions = [
        (_answered(history.had_status_epilepticus), bool(history.had_status_epilepticus), 15, 1),
        (_answered(history.family_history), bool(history.family_history), 10, 1),
        (_answered(history.febrile_seizures), bool(history.febrile_seizures), 8, 1),
        (_answered(history.brain_trauma), bool(history.brain_trauma), 12, 1),
        (_answered(history.surgical_intervention),
         history.surgical_intervention not in (None, "", "none"), 15, 1),
        (_answered(meds.current_drugs), len(meds.active_drugs) > 0, 20, 1),
        (_answered(meds.missed_doses), bool(meds.missed_doses), 5, 1),
        (_answered(meds.drug_resistance), meds.drug_resistance == "drug-resistant", 10, 1),
        (_answered(genetics.genetic_mutation), bool(genetics.genetic_mutation), 12, 1),
        (_answered(genetics.comorbidities), len(comorbidities) > 0, min(3 * len(comorbidities), 12), 1),
        (_answered(genetics.neurodevelopmental_condition), bool(genetics.neurodevelopmental_condition), 8, 1),
        (_answered(context.had_episode_last_48h), bool(context.had_episode_last_48h), 15, 1),
        (_answered(context.postictal_symptoms), len(postictal) > 0, 10, 1),
        (_tested(diag.mri_eeg_results), diag.mri_eeg_results == "abnormal", 20, 2),
        (_answered(diag.veeg_diagnosis), bool(diag.veeg_diagnosis), 25, 2),
        (_tested(diag.pet_spect_results), diag.pet_spect_results == "abnormal-glucose-metabolism", 15, 1),
        (_tested(diag.prolactin_level), diag.prolactin_level == "elevated", 10, 1),
    ]

    prob_score = 0
    confidence_factors = 0
    max_confidence_factors = 0
    for applicable, present, points, weight in conditions:
        if applicable:
            max_confidence_factors += weight
        if present:
            prob_score += points
            confidence_factors += weight

    ratio = confidence_factors / max_confidence_factors if max_confidence_factors else 0.0
    probability = min(prob_score * 100 / PROBABILITY_SCALE, MAX_PROBABILITY)
    return probability, confidence_level_for(ratio)


def confidence_level_for(ratio: float) -> str:
    if ratio > 0.65:
        return "high"
    if ratio > 0.35:
        return "moderate"
    return "low"


def seizure_type_candidates(record: AssessmentRecord) -> List[Tuple[str, int]]:
    """All matching (seizure type id, score) pairs in rule order."""
    history = record.history
    postictal = record.context.postictal_symptoms or []
    comorbidities = record.genetics.comorbidities or []
    candidates: List[Tuple[str, int]] = []

    if "Aphasia" in postictal or "Automatisms" in postictal:
        candidates.append(("focal", 20))
        candidates.append(("temporal-lobe", 15))

    if history.had_status_epilepticus or "Fatigue" in postictal or "Confusion" in postictal:
        candidates.append(("generalized-tonic-clonic", 20))

    if history.seizure_frequency == "daily" and history.onset_age == "childhood":
        candidates.append(("generalized-absence", 15))

    if record.lifestyle.time_of_day == "morning":
        candidates.append(("generalized-myoclonic", 10))
        candidates.append(("juvenile-myoclonic", 20 if history.onset_age == "adolescence" else 5))

    if record.genetics.neurodevelopmental_condition and "intellectual-disability" in comorbidities:
        candidates.append(("lennox-gastaut", 15))

    if history.seizure_type_id:
        candidates.append((history.seizure_type_id, 30))

    return candidates


def classify_seizure_type(record: AssessmentRecord) -> str:
    candidates = seizure_type_candidates(record)
    if not candidates:
        return DEFAULT_SEIZURE_TYPE
    # sorted() is stable: on equal scores the earlier rule wins
    ranked = sorted(candidates, key=lambda candidate: -candidate[1])
    return ranked[0][0]


def score_seizure_risk(record: AssessmentRecord) -> Tuple[int, List[str]]:
    """
    Short-term seizure risk from current state and lifestyle.

    Returns:
        Tuple of (risk score, lifestyle suggestions in emission order)
    """
    meds = record.medication
    life = record.lifestyle
    context = record.context
    triggers = life.triggers or []

    risk = 0
    suggestions: List[str] = []

    if meds.missed_doses:
        risk += 3
        suggestions.append(RISK_MESSAGES["missed_doses"])

    if life.stress_level > 7:
        risk += 2
        suggestions.append(RISK_MESSAGES["high_stress"])
    elif life.stress_level > 4:
        risk += 1
        suggestions.append(RISK_MESSAGES["moderate_stress"])

    if life.sleep_last_24h == "<4h":
        risk += 3
        suggestions.append(RISK_MESSAGES["severe_sleep_loss"])
    elif life.sleep_last_24h == "4-6h":
        risk += 2
        suggestions.append(RISK_MESSAGES["low_sleep"])

    if life.caffeine_alcohol_last_24h:
        risk += 2
        suggestions.append(RISK_MESSAGES["substances"])

    if context.had_episode_last_48h:
        risk += 3
        suggestions.append(RISK_MESSAGES["recent_episode"])

    if triggers:
        risk += min(len(triggers), 3)
        suggestions.append(RISK_MESSAGES["triggers"])

    if context.location == "driving":
        risk += 3
        suggestions.append(RISK_MESSAGES["driving"])

    if context.is_alone and risk > 3:
        suggestions.append(RISK_MESSAGES["alone"])
    # Unanswered hospital access counts as no access
    if not context.has_hospital_access and risk > 4:
        suggestions.append(RISK_MESSAGES["emergency_plan"])

    suggestions.append(RISK_MESSAGES["general"])
    return risk, suggestions


def risk_level_for(risk_score: int) -> str:
    if risk_score >= 5:
        return "high"
    if risk_score >= 2:
        return "moderate"
    return "low"


def medication_guidance(record: AssessmentRecord, seizure_type_id: str) -> Optional[MedicationGuidance]:
    active = record.medication.active_drugs
    if active:
        drug = get_drug(active[0])
        if drug is None:
            return None
        warning = None
        if seizure_type_id not in drug.for_seizure_types:
            warning = (
                f"Note: {drug.name} is not typically a first-choice medication for your seizure type. "
                "Consult your doctor."
            )
        return MedicationGuidance(
            drug=drug.name,
            dosage=drug.dosage_range,
            warning=warning,
            side_effects=list(drug.side_effects),
        )

    candidates = drugs_for_seizure_type(seizure_type_id)
    if not candidates:
        return None
    drug = candidates[0]
    return MedicationGuidance(drug=drug.name, dosage=drug.dosage_range, side_effects=list(drug.side_effects))


def assess(record: AssessmentRecord) -> AssessmentResult:
    probability, confidence = score_epilepsy_probability(record)

    if probability < DIAGNOSIS_THRESHOLD:
        return AssessmentResult(
            epilepsy_probability=probability,
            seizure_risk="low",
            lifestyle_suggestions=list(GENERIC_SUGGESTIONS),
            confidence_level=confidence,
        )

    seizure_type_id = classify_seizure_type(record)
    seizure_type = get_seizure_type(seizure_type_id)
    risk_score, suggestions = score_seizure_risk(record)
    seizure_risk = risk_level_for(risk_score)

    return AssessmentResult(
        epilepsy_probability=probability,
        seizure_type_id=seizure_type_id,
        seizure_type_name=seizure_type.name if seizure_type else "Unknown",
        seizure_type_description=seizure_type.description if seizure_type else "",
        seizure_risk=seizure_risk,
        risk_score=risk_score,
        suggested_dosage=medication_guidance(record, seizure_type_id),
        lifestyle_suggestions=suggestions,
        emergency_warning=EMERGENCY_WARNING if seizure_risk == "high" else None,
        confidence_level=confidence,
    )
