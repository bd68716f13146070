"""Tests for results formatting and rendering."""
from unittest.mock import MagicMock, patch

import pytest

from src.application.use_cases import AssessmentUseCase
from src.domain.rules import EMERGENCY_WARNING, GENERIC_SUGGESTIONS
from src.presentation.results_screen import (
    format_emergency_guidance,
    format_probability,
    format_result_markdown,
    humanize_label,
    show_results,
)


@pytest.fixture
def high_risk_report():
    return AssessmentUseCase().assess({
        "demographics": {"age": 17, "weight": 58, "gender": "male"},
        "history": {"had_status_epilepticus": True},
        "medication": {"current_drugs": ["ethosuximide"], "missed_doses": True},
        "diagnostics": {"veeg_diagnosis": True, "mri_eeg_results": "abnormal"},
        "lifestyle": {"stress_level": 9, "sleep_last_24h": "<4h"},
        "context": {"postictal_symptoms": ["Confusion"]},
    })


@pytest.fixture
def low_report():
    return AssessmentUseCase().assess({"demographics": {"age": 50, "weight": 90}})


@pytest.mark.parametrize("text,expected", [
    ("hadStatusEpilepticus", "Had Status Epilepticus"),
    ("drug-resistant", "Drug Resistant"),
    ("yearly-or-less", "Yearly Or Less"),
    ("sleep_last_24h", "Sleep Last 24h"),
    ("<4h", "<4h"),
])
def test_humanize_label(text, expected):
    assert humanize_label(text) == expected


def test_format_probability():
    assert format_probability(66.6666) == "66.7%"
    assert format_probability(98.0, decimals=0) == "98%"


def test_high_risk_markdown(high_risk_report):
    text = format_result_markdown(high_risk_report)

    assert "🔴 High Risk" in text
    assert EMERGENCY_WARNING in text
    assert "Generalized (Tonic-Clonic)" in text
    assert "**Ethosuximide:**" in text
    assert "not typically a first-choice medication" in text
    assert "- Current medication: Ethosuximide" in text
    assert "- Gender: Male" in text


def test_low_risk_markdown(low_report):
    text = format_result_markdown(low_report)

    assert "🟢 Low Risk" in text
    assert "0.0%" in text
    assert "Medication Guidance" not in text
    assert "Most Likely Seizure Type" not in text
    for i, suggestion in enumerate(GENERIC_SUGGESTIONS, 1):
        assert f"{i}. {suggestion}" in text


def test_emergency_guidance_uses_number():
    text = format_emergency_guidance("112")

    assert "Call Emergency Services (112) if:" in text
    assert "- Stay calm and time the seizure" in text


def test_show_results_renders_warning(high_risk_report):
    with patch("src.presentation.results_screen.st") as mock_st:
        mock_st.columns.return_value = (MagicMock(), MagicMock())
        show_results(high_risk_report)

    mock_st.error.assert_called_once()
    mock_st.warning.assert_called_once()
    progress_value = mock_st.progress.call_args[0][0]
    assert 0.6 <= progress_value <= 0.98


def test_show_results_low_risk_has_no_warning(low_report):
    with patch("src.presentation.results_screen.st") as mock_st:
        mock_st.columns.return_value = (MagicMock(), MagicMock())
        show_results(low_report)

    mock_st.error.assert_not_called()
    mock_st.info.assert_not_called()
