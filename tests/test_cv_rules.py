import pytest

from models.cv_models import SectionCoverage
from services import cv_rules as rules


def test_action_verbs():
    assert len(rules.ACTION_VERBS) == 23
    assert len(set(rules.ACTION_VERBS)) == 23
    assert rules.ACTION_VERB_PATTERN.findall("Spearheaded and AWARDED") == ["Spearheaded", "AWARDED"]


def test_section_table_matches_model():
    assert list(rules.SECTION_PATTERNS) == list(SectionCoverage.model_fields)


def test_section_table_is_read_only():
    with pytest.raises(TypeError):
        rules.SECTION_PATTERNS["hobbies"] = rules.SECTION_PATTERNS["skills"]


@pytest.mark.parametrize("section, sample", [
    ("education", "Relevant Coursework"),
    ("experience", "Summer Internship"),
    ("extracurriculars", "Debate Society"),
    ("leadership", "Student council chair"),
    ("volunteering", "NGO outreach"),
    ("awards", "Honor roll"),
    ("skills", "Languages: Spanish"),
    ("projects", "Capstone"),
    ("contact", "Phone 555"),
])
def test_section_samples(section, sample):
    assert rules.SECTION_PATTERNS[section].search(sample)


def test_mention_patterns_count_non_overlapping():
    assert len(rules.LEADERSHIP_MENTION_PATTERN.findall("leader lead founder")) == 3
    assert len(rules.AWARDS_MENTION_PATTERN.findall("Award winner, finalist")) == 3


def test_recommendation_copy_is_verbatim():
    assert rules.REC_LEADERSHIP == (
        "Seek leadership: start a club, captain a team, or lead an event—then quantify outcomes."
    )
    assert rules.REC_VOLUNTEERING == (
        "Include community service with consistent commitment (6–12+ months yields stronger signals)."
    )
    assert rules.REC_TEST_SCORES == (
        "If available, include SAT/ACT or AP/IB highlights to show academic rigor."
    )
