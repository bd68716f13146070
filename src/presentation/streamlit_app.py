import logging

import streamlit as st

from src.application.errors import AssessmentError
from src.application.use_cases import AssessmentUseCase
from src.application.wizard import GROUPS, AssessmentWizard
from src.domain import catalogs
from src.infrastructure.config import Settings
from src.presentation.results_screen import (
    format_result_markdown,
    humanize_label,
    show_emergency_guidance,
    show_results,
)


logger = logging.getLogger(__name__)


NOT_ANSWERED = "Not answered"

GENDERS = ["male", "female", "other", "unspecified"]
ONSET_AGES = ["neonatal", "childhood", "adolescence", "adulthood"]
FREQUENCIES = ["multiple-daily", "daily", "weekly", "monthly", "yearly-or-less"]
SURGERIES = ["none", "resection", "vns", "rns", "dbs", "laser-ablation"]
LAST_DOSE = ["<6h", "6-12h", "12-24h", ">24h"]
RESISTANCE = ["responsive", "partially-responsive", "drug-resistant", "unknown"]
SIDE_EFFECTS = ["none", "mild", "moderate", "severe"]
SLEEP = ["<4h", "4-6h", "6-8h", ">8h"]
TIMES_OF_DAY = ["morning", "afternoon", "evening", "night"]
WEATHER = ["normal", "hot", "cold", "humid", "stormy"]
LOCATIONS = ["home", "work", "school", "outdoors", "driving", "other"]
MRI_EEG = ["normal", "abnormal", "not-done"]
PET_SPECT = ["normal", "abnormal-glucose-metabolism", "not-done"]
PROLACTIN = ["normal", "elevated", "not-tested"]

YES_NO = {NOT_ANSWERED: None, "Yes": True, "No": False}


def _init_session_state():
    if "wizard" not in st.session_state:
        st.session_state.wizard = AssessmentWizard()
    if "report" not in st.session_state:
        st.session_state.report = None


def _select(wizard: AssessmentWizard, group: str, field: str, label: str, options: list, labels=None):
    choices = [NOT_ANSWERED] + options
    current = wizard.get_answer(group, field)
    index = choices.index(current) if current in choices else 0
    fmt = labels.get if labels else humanize_label
    value = st.selectbox(
        label,
        choices,
        index=index,
        format_func=lambda v: v if v == NOT_ANSWERED else fmt(v),
        key=f"{group}.{field}",
    )
    wizard.set_answer(group, field, None if value == NOT_ANSWERED else value)


def _yes_no(wizard: AssessmentWizard, group: str, field: str, label: str):
    current = wizard.get_answer(group, field)
    options = list(YES_NO.keys())
    index = [YES_NO[o] for o in options].index(current) if current in (True, False) else 0
    value = st.radio(label, options, index=index, horizontal=True, key=f"{group}.{field}")
    wizard.set_answer(group, field, YES_NO[value])


def _multi(wizard: AssessmentWizard, group: str, field: str, label: str, options: dict):
    current = [v for v in (wizard.get_answer(group, field) or []) if v in options]
    value = st.multiselect(label, list(options), default=current, format_func=options.get, key=f"{group}.{field}")
    wizard.set_answer(group, field, value)


def _render_demographics(wizard: AssessmentWizard):
    age = st.number_input("Age", min_value=1, max_value=120, value=wizard.get_answer("demographics", "age", 30),
                          key="demographics.age")
    weight = st.number_input(
        "Weight (kg)", min_value=1.0, max_value=500.0, value=float(wizard.get_answer("demographics", "weight", 70.0)),
        key="demographics.weight",
    )
    height = st.number_input(
        "Height (cm, optional)", min_value=0.0, max_value=250.0,
        value=float(wizard.get_answer("demographics", "height") or 0.0),
        key="demographics.height",
    )
    wizard.set_answer("demographics", "age", int(age))
    wizard.set_answer("demographics", "weight", float(weight))
    wizard.set_answer("demographics", "height", float(height) if height else None)
    _select(wizard, "demographics", "gender", "Gender", GENDERS)


def _render_history(wizard: AssessmentWizard):
    _select(wizard, "history", "onset_age", "Age when seizures started", ONSET_AGES)
    _select(wizard, "history", "seizure_frequency", "How often do seizures occur?", FREQUENCIES)
    seizure_types = {s.id: s.name for s in catalogs.SEIZURE_TYPES}
    _select(wizard, "history", "seizure_type_id", "Diagnosed seizure type (if known)",
            list(seizure_types), labels=seizure_types)
    selected = catalogs.get_seizure_type(wizard.get_answer("history", "seizure_type_id"))
    if selected:
        st.caption(selected.description)
    _yes_no(wizard, "history", "had_status_epilepticus", "Ever had a seizure lasting over 5 minutes?")
    _yes_no(wizard, "history", "family_history", "Family history of epilepsy?")
    _yes_no(wizard, "history", "febrile_seizures", "History of febrile seizures?")
    _yes_no(wizard, "history", "brain_trauma", "History of brain injury?")
    _select(wizard, "history", "surgical_intervention", "Epilepsy surgery or implant", SURGERIES)


def _render_medication(wizard: AssessmentWizard):
    drugs = {"none": "Not taking any medication"}
    drugs.update({d.id: d.name for d in catalogs.DRUGS})
    _multi(wizard, "medication", "current_drugs", "Current anti-seizure medication", drugs)
    for drug_id in wizard.get_answer("medication", "current_drugs") or []:
        drug = catalogs.get_drug(drug_id)
        if drug:
            st.caption(f"{drug.name} brand names: {', '.join(drug.brand_names)}")
    _select(wizard, "medication", "last_dose", "Time since last dose", LAST_DOSE)
    _yes_no(wizard, "medication", "missed_doses", "Missed any doses in the past week?")
    _select(wizard, "medication", "drug_resistance", "Response to medication", RESISTANCE)
    _select(wizard, "medication", "side_effects", "Side effects", SIDE_EFFECTS)


def _render_genetics(wizard: AssessmentWizard):
    _yes_no(wizard, "genetics", "genetic_mutation", "Known epilepsy-related genetic mutation?")
    st.caption("Examples: " + ", ".join(m.name for m in catalogs.GENETIC_MUTATIONS))
    _multi(wizard, "genetics", "comorbidities", "Other conditions",
           {c.id: c.name for c in catalogs.COMORBIDITIES})
    _yes_no(wizard, "genetics", "neurodevelopmental_condition", "Neurodevelopmental condition?")


def _render_lifestyle(wizard: AssessmentWizard):
    _select(wizard, "lifestyle", "sleep_last_24h", "Sleep in the last 24 hours", SLEEP)
    _yes_no(wizard, "lifestyle", "caffeine_alcohol_last_24h", "Caffeine or alcohol in the last 24 hours?")
    with st.expander("How lifestyle affects seizures"):
        for factor in catalogs.LIFESTYLE_FACTORS:
            st.markdown(f"- **{factor.name}** ({factor.impact_level} impact): {factor.description}")
    stress = st.slider("Current stress level", 0, 10, wizard.get_answer("lifestyle", "stress_level", 0),
                       key="lifestyle.stress_level")
    wizard.set_answer("lifestyle", "stress_level", int(stress))
    _multi(wizard, "lifestyle", "triggers", "Known seizure triggers",
           {t.id: t.name for t in catalogs.SEIZURE_TRIGGERS})
    _select(wizard, "lifestyle", "time_of_day", "Time of day", TIMES_OF_DAY)
    _select(wizard, "lifestyle", "weather", "Weather", WEATHER)


def _render_context(wizard: AssessmentWizard):
    _select(wizard, "context", "location", "Where are you now?", LOCATIONS)
    _yes_no(wizard, "context", "is_alone", "Are you alone?")
    _yes_no(wizard, "context", "has_hospital_access", "Can you reach a hospital quickly?")
    _yes_no(wizard, "context", "had_episode_last_48h", "Had an episode in the last 48 hours?")
    _multi(wizard, "context", "postictal_symptoms", "Symptoms after your last episode",
           {s: s for s in catalogs.POSTICTAL_SYMPTOMS})

    st.markdown("**Vital signs (optional)**")
    heart_rate = st.number_input("Heart rate (bpm)", min_value=0, max_value=300,
                                 value=wizard.get_answer("physiology", "heart_rate") or 0,
                                 key="physiology.heart_rate")
    blood_pressure = st.text_input("Blood pressure", value=wizard.get_answer("physiology", "blood_pressure") or "",
                                   placeholder="e.g. 120/80", key="physiology.blood_pressure")
    glucose = st.number_input("Blood glucose (mg/dL)", min_value=0.0,
                              value=float(wizard.get_answer("physiology", "blood_glucose") or 0.0),
                              key="physiology.blood_glucose")
    wizard.set_answer("physiology", "heart_rate", int(heart_rate) or None)
    wizard.set_answer("physiology", "blood_pressure", blood_pressure.strip() or None)
    wizard.set_answer("physiology", "blood_glucose", float(glucose) or None)


def _render_diagnostics(wizard: AssessmentWizard):
    _select(wizard, "diagnostics", "mri_eeg_results", "MRI / EEG results", MRI_EEG)
    _yes_no(wizard, "diagnostics", "veeg_diagnosis", "Diagnosed by video-EEG monitoring?")
    _select(wizard, "diagnostics", "pet_spect_results", "PET / SPECT results", PET_SPECT)
    _select(wizard, "diagnostics", "prolactin_level", "Post-seizure prolactin level", PROLACTIN)


STEP_RENDERERS = {
    "demographics": _render_demographics,
    "history": _render_history,
    "medication": _render_medication,
    "genetics": _render_genetics,
    "lifestyle": _render_lifestyle,
    "context": _render_context,
    "diagnostics": _render_diagnostics,
}


def _clear_answer_widgets():
    # Widget keys are "<group>.<field>"; stale ones would refill the new wizard
    for key in list(st.session_state.keys()):
        if isinstance(key, str) and key.split(".", 1)[0] in GROUPS:
            del st.session_state[key]


def _render_sidebar(settings: Settings):
    st.sidebar.title("⚙️ Assessment")
    st.sidebar.caption(f"Emergency number: **{settings.emergency_number}**")
    if st.sidebar.button("🔄 Start New Assessment", use_container_width=True):
        st.session_state.wizard.reset()
        _clear_answer_widgets()
        st.session_state.report = None
        st.rerun()


def _render_wizard(wizard: AssessmentWizard):
    st.progress(wizard.progress, text=f"Step {wizard.step_index + 1}: {wizard.current_title}")
    st.markdown(f"## {wizard.current_title}")
    STEP_RENDERERS[wizard.current_step](wizard)

    missing = wizard.missing_fields(wizard.current_step)
    if missing:
        st.caption("Required: " + ", ".join(humanize_label(m.split(".")[-1]) for m in missing))

    col1, col2 = st.columns(2)
    with col1:
        if wizard.step_index > 0 and st.button("Back", use_container_width=True):
            wizard.previous_step()
            st.rerun()
    with col2:
        if wizard.is_last_step:
            if st.button("Submit Assessment", disabled=not wizard.is_complete(), use_container_width=True):
                _submit(wizard)
        elif st.button("Next", disabled=bool(missing), use_container_width=True):
            wizard.next_step()
            st.rerun()


def _submit(wizard: AssessmentWizard):
    try:
        record = wizard.build_record()
        st.session_state.report = AssessmentUseCase().assess(record)
    except AssessmentError as e:
        logger.warning("Assessment submission rejected: %s", e)
        st.error(f"❌ {e}")
        return
    st.rerun()


def main():
    settings = Settings()
    logging.basicConfig(level=settings.log_level)

    st.set_page_config(
        page_title=settings.app_title,
        page_icon="🧠",
        layout="centered",
        initial_sidebar_state="expanded",
    )

    _init_session_state()
    _render_sidebar(settings)

    st.markdown(f"# 🧠 {settings.app_title}")

    report = st.session_state.report
    if report is None:
        st.caption(
            "Complete the assessment below to receive personalized insights and recommendations "
            "for managing epilepsy."
        )
        _render_wizard(st.session_state.wizard)
    else:
        show_results(report, decimals=settings.probability_decimals)
        st.download_button(
            "🖨️ Download Results",
            data=format_result_markdown(report, decimals=settings.probability_decimals),
            file_name="seizure-assessment.md",
            mime="text/markdown",
        )

    show_emergency_guidance(settings.emergency_number)


if __name__ == "__main__":
    main()
