"""Results and emergency guidance rendering."""
import re

import streamlit as st

from src.application.schemas import AssessmentReport
from src.domain.catalogs import EMERGENCY_GUIDANCE


DISCLAIMER = (
    "⚕️ **Disclaimer:** This assessment is not a substitute for professional medical advice. "
    "Always consult with your healthcare provider before making any changes to your treatment plan."
)

RISK_BADGES = {
    "high": "🔴 High Risk",
    "moderate": "🟡 Moderate Risk",
    "low": "🟢 Low Risk",
}

CONFIDENCE_BADGES = {
    "high": "High confidence",
    "moderate": "Moderate confidence",
    "low": "Low confidence",
}


def humanize_label(text: str) -> str:
    """Turn ids like 'drug-resistant' or 'hadStatusEpilepticus' into title case."""
    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", text)
    words = re.sub(r"[-_]+", " ", spaced).split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def format_probability(probability: float, decimals: int = 1) -> str:
    return f"{probability:.{decimals}f}%"


def format_result_markdown(report: AssessmentReport, decimals: int = 1) -> str:
    """Format an assessment report as markdown, e.g. for printing or download."""
    result = report.result
    patient = report.patient
    lines = ["# 📋 Assessment Results\n"]

    lines.append(f"**Seizure risk:** {RISK_BADGES.get(result.seizure_risk, result.seizure_risk)}")
    lines.append(f"**Estimate confidence:** {CONFIDENCE_BADGES.get(result.confidence_level, result.confidence_level)}")
    lines.append(
        f"**Probability that symptoms indicate epilepsy:** "
        f"{format_probability(result.epilepsy_probability, decimals)}\n"
    )

    if result.emergency_warning:
        lines.append(f"## ⚠️ Warning\n{result.emergency_warning}\n")

    lines.append("## Patient Information")
    lines.append(f"- Age: {patient.age} years")
    lines.append(f"- Weight: {patient.weight:g} kg")
    if patient.gender:
        lines.append(f"- Gender: {humanize_label(patient.gender)}")
    if patient.seizure_type:
        lines.append(f"- Reported seizure type: {patient.seizure_type}")
    lines.append(f"- Current medication: {patient.medication}")
    lines.append("")

    if result.seizure_type_name:
        lines.append("## Most Likely Seizure Type")
        lines.append(f"**{result.seizure_type_name}**")
        if result.seizure_type_description:
            lines.append(result.seizure_type_description)
        lines.append("")

    if result.suggested_dosage:
        guidance = result.suggested_dosage
        lines.append("## 💊 Medication Guidance")
        lines.append(f"**{guidance.drug}:** {guidance.dosage}")
        if guidance.warning:
            lines.append(f"> {guidance.warning}")
        if guidance.side_effects:
            lines.append("Possible side effects: " + ", ".join(guidance.side_effects))
        lines.append(
            "Note: This is general guidance based on typical dosing ranges. "
            "Always follow your doctor's specific prescription."
        )
        lines.append("")

    lines.append("## 📝 Lifestyle Recommendations")
    for i, suggestion in enumerate(result.lifestyle_suggestions, 1):
        lines.append(f"{i}. {suggestion}")
    lines.append("")

    lines.append("---")
    lines.append(DISCLAIMER)
    return "\n".join(lines)


def format_emergency_guidance(emergency_number: str = "911") -> str:
    guide = EMERGENCY_GUIDANCE
    lines = [f"## 🚑 {guide.title}", guide.description, "", "### Steps to Take"]
    lines.extend(f"- {step}" for step in guide.steps)
    lines.append(f"\n### Call Emergency Services ({emergency_number}) if:")
    lines.extend(f"- {condition}" for condition in guide.call_emergency_if)
    lines.append("\n### Important Don'ts")
    lines.extend(f"- {item}" for item in guide.do_not_do)
    return "\n".join(lines)


def show_results(report: AssessmentReport, decimals: int = 1) -> None:
    result = report.result

    st.markdown("# 📋 Assessment Results")
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Seizure risk", RISK_BADGES.get(result.seizure_risk, result.seizure_risk))
    with col2:
        st.metric("Confidence", CONFIDENCE_BADGES.get(result.confidence_level, result.confidence_level))

    st.markdown(
        "**Probability that symptoms indicate epilepsy:** "
        + format_probability(result.epilepsy_probability, decimals)
    )
    st.progress(min(result.epilepsy_probability / 100, 1.0))

    if result.emergency_warning:
        st.error(f"⚠️ {result.emergency_warning}")

    if result.seizure_type_name:
        st.markdown(f"### Most likely seizure type: {result.seizure_type_name}")
        if result.seizure_type_description:
            st.caption(result.seizure_type_description)

    if result.suggested_dosage:
        guidance = result.suggested_dosage
        st.markdown("### 💊 Medication Guidance")
        st.info(f"**{guidance.drug}:** {guidance.dosage}")
        if guidance.warning:
            st.warning(guidance.warning)
        if guidance.side_effects:
            st.caption("Possible side effects: " + ", ".join(guidance.side_effects))

    st.markdown("### 📝 Lifestyle Recommendations")
    for suggestion in result.lifestyle_suggestions:
        st.markdown(f"- ✅ {suggestion}")

    st.divider()
    st.caption(DISCLAIMER)


def show_emergency_guidance(emergency_number: str = "911") -> None:
    with st.expander("🚑 Emergency Response Guide", expanded=False):
        st.markdown(format_emergency_guidance(emergency_number))
