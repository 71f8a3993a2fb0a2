"""Static rule tables used by the CV analyzer.

Everything here is immutable module data so the ruleset can be audited and
tested without running an analysis.
"""
import re
from types import MappingProxyType

from models.cv_models import Severity

_FLAGS = re.IGNORECASE | re.ASCII

ACTION_VERBS = (
    "led", "launched", "built", "created", "organized", "founded",
    "improved", "increased", "reduced", "optimized", "designed", "developed",
    "coordinated", "taught", "mentored", "researched", "presented",
    "implemented", "collaborated", "spearheaded", "initiated", "achieved",
    "awarded",
)

ACTION_VERB_PATTERN = re.compile(r"\b(" + "|".join(ACTION_VERBS) + r")\b", _FLAGS)

# Keys follow SectionCoverage field order
SECTION_PATTERNS = MappingProxyType({
    "education": re.compile(r"(education|school|gpa|coursework)", _FLAGS),
    "experience": re.compile(r"(experience|internship|work|employment)", _FLAGS),
    "extracurriculars": re.compile(r"(extracurricular|club|team|organization|society)", _FLAGS),
    "leadership": re.compile(r"(leader|president|captain|founder|chair|lead)", _FLAGS),
    "volunteering": re.compile(r"(volunteer|community service|non-profit|ngo)", _FLAGS),
    "awards": re.compile(r"(award|honor|scholarship|recognition)", _FLAGS),
    "skills": re.compile(r"(skills|languages|tools|technologies|software)", _FLAGS),
    "projects": re.compile(r"(project|capstone|portfolio|build)", _FLAGS),
    "contact": re.compile(r"(email|phone|linkedin|github|portfolio|website)", _FLAGS),
})

CRITICAL_SECTIONS = frozenset({"education", "contact"})

WHITESPACE_PATTERN = re.compile(r"\s+")
LINE_BREAK_PATTERN = re.compile(r"\n|\r")
BULLET_PATTERN = re.compile(r"^(\s*[-•*]|\s*[0-9]+\.)\s+")
NUMBER_PATTERN = re.compile(r"[0-9]+")

GPA_PATTERN = re.compile(r"gpa\s*[:\s]?\s*([0-9]\.[0-9]{1,2}|[0-9]{1,2}%)", _FLAGS)
TEST_SCORE_PATTERN = re.compile(r"(sat|act)\s*[:\s]?\s*[0-9]{2,4}", _FLAGS)
PROFESSIONAL_LINK_PATTERN = re.compile(
    r"linkedin\.com|github\.com|portfolio|behance|personal site", _FLAGS
)

LEADERSHIP_MENTION_PATTERN = re.compile(r"president|captain|lead|leader|founder", _FLAGS)
AWARDS_MENTION_PATTERN = re.compile(r"award|honor|scholarship|finalist|winner", _FLAGS)


MISSING_SECTION_TITLE = "Missing section: {section}"
MISSING_SECTION_DETAIL = (
    "Add a clear {section} section with 3–5 concise bullets using action verbs "
    "and measurable results."
)

TOO_SHORT = (
    "Too short",
    "Your resume seems very brief. Aim for 0.5–1 page with focused bullets and strong outcomes.",
    Severity.HIGH,
)
TOO_LONG = (
    "Too long",
    "Trim to 1 page. Remove less impactful roles, merge similar bullets, and keep only "
    "your strongest evidence.",
    Severity.MEDIUM,
)
GPA_MISSING = (
    "GPA missing",
    "Include GPA (weighted and/or unweighted) if it strengthens your application. "
    "Add class rank if notable.",
    Severity.MEDIUM,
)
NO_BULLETS = (
    "No bullet points",
    "Use concise bullet points starting with strong action verbs. Keep them one to two lines each.",
    Severity.HIGH,
)
FEW_NUMBERS = (
    "Not enough measurable results",
    'Quantify impact (e.g., "raised $2,300", "grew membership 35%", "taught 20 peers").',
    Severity.MEDIUM,
)

REC_TEST_SCORES = "If available, include SAT/ACT or AP/IB highlights to show academic rigor."
REC_ACTION_VERBS = (
    "Start each bullet with a powerful verb (Led, Built, Organized, Improved, Designed, Taught)."
)
REC_PROFESSIONAL_LINK = "Add a professional link: LinkedIn, GitHub, or portfolio website."
REC_PROJECTS = (
    "Ship a small, real project. Publish it online and link to it. Admissions value initiative."
)
REC_VOLUNTEERING = (
    "Include community service with consistent commitment (6–12+ months yields stronger signals)."
)
REC_LEADERSHIP = (
    "Seek leadership: start a club, captain a team, or lead an event—then quantify outcomes."
)

SUMMARY_TEMPLATE = (
    "Coverage {coverage}%, Specificity {specificity}%, Impact {impact}%. "
    "Focus on measurable results, strong verbs, and clear sections."
)
