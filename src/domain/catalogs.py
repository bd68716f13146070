"""Static reference tables: seizure types, drugs, comorbidities, triggers."""
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict


class _Entry(BaseModel):
    model_config = ConfigDict(frozen=True)


class SeizureType(_Entry):
    id: str
    name: str
    description: str
    common_drugs: Tuple[str, ...] = ()


class DrugInfo(_Entry):
    id: str
    name: str
    brand_names: Tuple[str, ...] = ()
    dosage_range: str
    for_seizure_types: Tuple[str, ...] = ()
    side_effects: Tuple[str, ...] = ()
    contraindications: Tuple[str, ...] = ()


class Comorbidity(_Entry):
    id: str
    name: str
    description: str
    impact: str  # "low" | "moderate" | "high"


class SeizureTrigger(_Entry):
    id: str
    name: str
    description: str


class LifestyleFactor(_Entry):
    id: str
    name: str
    description: str
    impact_level: str


class GeneticMutation(_Entry):
    id: str
    name: str
    associated_seizure_types: Tuple[str, ...] = ()


class EmergencyGuidance(_Entry):
    title: str
    description: str
    steps: Tuple[str, ...]
    call_emergency_if: Tuple[str, ...]
    do_not_do: Tuple[str, ...]


SEIZURE_TYPES: Tuple[SeizureType, ...] = (
    SeizureType(
        id="focal",
        name="Focal (Partial)",
        description="Seizures that begin in one area of the brain. May or may not involve impaired awareness.",
        common_drugs=("carbamazepine", "oxcarbazepine", "lamotrigine", "levetiracetam"),
    ),
    SeizureType(
        id="generalized-tonic-clonic",
        name="Generalized (Tonic-Clonic)",
        description="Seizures affecting the entire brain, causing muscle rigidity followed by convulsions and loss of consciousness.",
        common_drugs=("valproate", "levetiracetam", "lamotrigine"),
    ),
    SeizureType(
        id="generalized-absence",
        name="Generalized (Absence)",
        description="Brief lapses of awareness, often with staring spells, typically lasting less than 30 seconds.",
        common_drugs=("ethosuximide", "valproate", "lamotrigine"),
    ),
    SeizureType(
        id="generalized-myoclonic",
        name="Generalized (Myoclonic)",
        description="Brief, shock-like jerks of muscles, often in the arms or upper body.",
        common_drugs=("valproate", "levetiracetam", "clonazepam"),
    ),
    SeizureType(
        id="juvenile-myoclonic",
        name="Juvenile Myoclonic Epilepsy",
        description="Myoclonic jerks upon awakening, often with tonic-clonic seizures. Usually begins in adolescence.",
        common_drugs=("valproate", "levetiracetam", "topiramate"),
    ),
    SeizureType(
        id="lennox-gastaut",
        name="Lennox-Gastaut Syndrome",
        description="Severe form of epilepsy with multiple types of seizures, developmental delays, and abnormal EEG.",
        common_drugs=("rufinamide", "clobazam", "felbamate"),
    ),
    SeizureType(
        id="temporal-lobe",
        name="Temporal Lobe Epilepsy",
        description="Focal seizures originating in the temporal lobe, often with altered awareness and automatisms.",
        common_drugs=("carbamazepine", "lamotrigine", "levetiracetam"),
    ),
    SeizureType(
        id="mixed",
        name="Mixed / Unknown",
        description="Multiple seizure types or undetermined seizure types.",
        common_drugs=("valproate", "lamotrigine", "levetiracetam"),
    ),
)

# Order matters: the first drug indicated for a seizure type is the one suggested.
DRUGS: Tuple[DrugInfo, ...] = (
    DrugInfo(
        id="carbamazepine",
        name="Carbamazepine",
        brand_names=("Tegretol", "Carbatrol", "Epitol"),
        dosage_range="Adults: 400-1200 mg/day in divided doses; Children: 10-20 mg/kg/day",
        for_seizure_types=("focal", "temporal-lobe", "mixed"),
        side_effects=("Dizziness", "Drowsiness", "Nausea", "Vision changes", "Rash", "Hyponatremia",
                      "Bone marrow suppression (rare)"),
        contraindications=("Bone marrow depression", "MAOIs within 14 days", "Pregnancy"),
    ),
    DrugInfo(
        id="lamotrigine",
        name="Lamotrigine",
        brand_names=("Lamictal",),
        dosage_range="Adults: 100-400 mg/day; Children: 1-15 mg/kg/day",
        for_seizure_types=("focal", "generalized-tonic-clonic", "generalized-absence", "mixed"),
        side_effects=("Rash", "Dizziness", "Headache", "Blurred vision", "Nausea",
                      "Stevens-Johnson syndrome (rare)"),
        contraindications=("Previous hypersensitivity to lamotrigine",),
    ),
    DrugInfo(
        id="levetiracetam",
        name="Levetiracetam",
        brand_names=("Keppra", "Levroxa"),
        dosage_range="Adults: 1000-3000 mg/day in 2 doses; Children: 10-60 mg/kg/day",
        for_seizure_types=("focal", "generalized-tonic-clonic", "generalized-myoclonic", "juvenile-myoclonic"),
        side_effects=("Somnolence", "Fatigue", "Irritability", "Dizziness", "Behavioral changes",
                      "Depression", "Anxiety"),
        contraindications=("Severe kidney problems",),
    ),
    DrugInfo(
        id="valproate",
        name="Valproate",
        brand_names=("Depakote", "Depakene", "Epilim"),
        dosage_range="Adults: 15-60 mg/kg/day; Children: 15-60 mg/kg/day",
        for_seizure_types=("generalized-tonic-clonic", "generalized-absence", "generalized-myoclonic",
                           "juvenile-myoclonic", "mixed"),
        side_effects=("Nausea", "Sedation", "Weight gain", "Tremor", "Hair loss", "Liver toxicity",
                      "Pancreatitis (rare)"),
        contraindications=("Liver disease", "Urea cycle disorders", "Pregnancy"),
    ),
    DrugInfo(
        id="ethosuximide",
        name="Ethosuximide",
        brand_names=("Zarontin",),
        dosage_range="Adults: 500-1500 mg/day; Children: 20-40 mg/kg/day",
        for_seizure_types=("generalized-absence",),
        side_effects=("Nausea", "Vomiting", "Drowsiness", "Hiccups", "Headache", "Rash",
                      "Blood disorders (rare)"),
        contraindications=("Hypersensitivity to succinimides",),
    ),
    DrugInfo(
        id="oxcarbazepine",
        name="Oxcarbazepine",
        brand_names=("Trileptal", "Oxtellar XR"),
        dosage_range="Adults: 600-2400 mg/day; Children: 8-60 mg/kg/day",
        for_seizure_types=("focal", "temporal-lobe"),
        side_effects=("Dizziness", "Drowsiness", "Nausea", "Vomiting", "Low sodium levels",
                      "Allergic reactions"),
        contraindications=("Hypersensitivity to oxcarbazepine or carbamazepine",),
    ),
    DrugInfo(
        id="topiramate",
        name="Topiramate",
        brand_names=("Topamax", "Trokendi XR"),
        dosage_range="Adults: 200-400 mg/day; Children: 5-9 mg/kg/day",
        for_seizure_types=("focal", "generalized-tonic-clonic", "lennox-gastaut"),
        side_effects=("Cognitive slowing", "Word-finding difficulty", "Paresthesias", "Kidney stones",
                      "Weight loss", "Glaucoma"),
        contraindications=("Metabolic acidosis", "Glaucoma"),
    ),
    DrugInfo(
        id="clobazam",
        name="Clobazam",
        brand_names=("Onfi", "Sympazan"),
        dosage_range="Adults: 10-40 mg/day; Children: 0.1-1 mg/kg/day",
        for_seizure_types=("lennox-gastaut", "mixed"),
        side_effects=("Drowsiness", "Fatigue", "Ataxia", "Dependence", "Respiratory depression",
                      "Cognitive impairment"),
        contraindications=("Severe respiratory insufficiency", "Sleep apnea", "Myasthenia gravis"),
    ),
    DrugInfo(
        id="rufinamide",
        name="Rufinamide",
        brand_names=("Banzel",),
        dosage_range="Adults: 1600-3200 mg/day; Children: 10-45 mg/kg/day",
        for_seizure_types=("lennox-gastaut",),
        side_effects=("Headache", "Dizziness", "Fatigue", "Nausea", "QT shortening", "Coordination problems"),
        contraindications=("Familial Short QT syndrome",),
    ),
)

COMORBIDITIES: Tuple[Comorbidity, ...] = (
    Comorbidity(id="intellectual-disability", name="Intellectual Disability",
                description="Limitations in intellectual functioning and adaptive behavior", impact="high"),
    Comorbidity(id="adhd", name="ADHD",
                description="Attention-deficit/hyperactivity disorder", impact="moderate"),
    Comorbidity(id="autism", name="Autism Spectrum Disorder",
                description="Neurodevelopmental disorder affecting social interaction and communication",
                impact="moderate"),
    Comorbidity(id="depression", name="Depression",
                description="Mood disorder characterized by persistent feelings of sadness", impact="moderate"),
    Comorbidity(id="anxiety", name="Anxiety",
                description="Excessive worry or fear that interferes with daily activities", impact="moderate"),
    Comorbidity(id="migraine", name="Migraine",
                description="Recurrent headaches that can cause throbbing pain", impact="moderate"),
)

SEIZURE_TRIGGERS: Tuple[SeizureTrigger, ...] = (
    SeizureTrigger(id="flashing-lights", name="Flashing lights/screens",
                   description="Visual stimuli like flashing lights or patterns"),
    SeizureTrigger(id="loud-noise", name="Loud noise", description="Sudden or loud auditory stimuli"),
    SeizureTrigger(id="hot-water", name="Hot water/shower", description="Exposure to hot water or steam"),
    SeizureTrigger(id="stress", name="Stressful emotional events", description="Periods of high emotional stress"),
    SeizureTrigger(id="missing-meals", name="Missing meals",
                   description="Skipping meals leading to low blood sugar"),
)

GENETIC_MUTATIONS: Tuple[GeneticMutation, ...] = (
    GeneticMutation(id="scn1a", name="SCN1A",
                    associated_seizure_types=("generalized-tonic-clonic", "lennox-gastaut")),
    GeneticMutation(id="kcnq2", name="KCNQ2", associated_seizure_types=("focal",)),
    GeneticMutation(id="scn2a", name="SCN2A", associated_seizure_types=("focal", "generalized-tonic-clonic")),
    GeneticMutation(id="tsc1-tsc2", name="TSC1/TSC2", associated_seizure_types=("mixed",)),
)

LIFESTYLE_FACTORS: Tuple[LifestyleFactor, ...] = (
    LifestyleFactor(id="sleep", name="Sleep Deprivation",
                    description="Inadequate or poor quality sleep can trigger seizures.", impact_level="high"),
    LifestyleFactor(id="stress", name="Stress & Anxiety",
                    description="High levels of stress or anxiety can increase seizure risk.", impact_level="high"),
    LifestyleFactor(id="alcohol", name="Alcohol Consumption",
                    description="Alcohol can lower seizure threshold and interact with medications.",
                    impact_level="high"),
    LifestyleFactor(id="missed-medication", name="Missed Medication",
                    description="Missing medication doses can lead to breakthrough seizures.", impact_level="high"),
    LifestyleFactor(id="light-sensitivity", name="Light Sensitivity",
                    description="Flashing lights or certain visual patterns can trigger seizures in photosensitive individuals.",
                    impact_level="moderate"),
    LifestyleFactor(id="diet", name="Diet & Nutrition",
                    description="Poor nutrition or specific dietary factors can influence seizure control.",
                    impact_level="moderate"),
    LifestyleFactor(id="exercise", name="Physical Exercise",
                    description="Excessive exercise or dehydration can potentially trigger seizures in some people.",
                    impact_level="moderate"),
    LifestyleFactor(id="screen-time", name="Screen Time",
                    description="Extended screen time may affect sleep quality and trigger seizures in some individuals.",
                    impact_level="low"),
)

POSTICTAL_SYMPTOMS: Tuple[str, ...] = (
    "Confusion", "Fatigue", "Headache", "Aphasia", "Automatisms", "Muscle soreness", "Memory loss",
)

EMERGENCY_GUIDANCE = EmergencyGuidance(
    title="Emergency Response Guide for Epileptic Seizures",
    description="Know what to do if someone is having a seizure:",
    steps=(
        "Stay calm and time the seizure",
        "Remove dangerous objects from the area",
        "Don't restrain the person or put anything in their mouth",
        "Gently roll them to their side if possible",
        "Stay with them until they are fully conscious",
    ),
    call_emergency_if=(
        "The seizure lasts longer than 5 minutes",
        "The person doesn't wake up after the seizure ends",
        "Another seizure starts before the person recovers",
        "The person has difficulty breathing after the seizure",
        "The person is injured during the seizure",
        "The person has never had a seizure before",
        "The person is pregnant or has diabetes",
    ),
    do_not_do=(
        "Do not hold the person down or try to stop their movements",
        "Do not put anything in the person's mouth",
        "Do not offer food or water until the person is fully alert",
        "Do not leave the person alone until they are fully recovered",
    ),
)


def get_seizure_type(seizure_type_id: Optional[str]) -> Optional[SeizureType]:
    for seizure_type in SEIZURE_TYPES:
        if seizure_type.id == seizure_type_id:
            return seizure_type
    return None


def get_drug(drug_id: Optional[str]) -> Optional[DrugInfo]:
    for drug in DRUGS:
        if drug.id == drug_id:
            return drug
    return None


def seizure_type_name(seizure_type_id: Optional[str]) -> str:
    seizure_type = get_seizure_type(seizure_type_id)
    return seizure_type.name if seizure_type else "Unknown"


def drug_name(drug_id: Optional[str]) -> str:
    drug = get_drug(drug_id)
    return drug.name if drug else "Unknown"


def drugs_for_seizure_type(seizure_type_id: Optional[str]) -> List[DrugInfo]:
    """Drugs indicated for the seizure type, in catalog (priority) order."""
    return [drug for drug in DRUGS if seizure_type_id in drug.for_seizure_types]
