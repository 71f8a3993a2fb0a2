import math
from typing import Dict, List

from models.cv_models import Analysis, Issue, Metrics, Scores, SectionCoverage, Severity
from services import cv_rules as rules


def round_half_up(value: float) -> int:
    """Round halves up: 0.5 -> 1, 2.5 -> 3."""
    return int(math.floor(value + 0.5))


class CVAnalyzer:
    """
    Rule-based CV scorer.

    Stateless apart from the word-count thresholds, so one instance can be
    shared between concurrent callers.
    """

    def __init__(self, min_words: int = 200, max_words: int = 800):
        self.min_words = min_words
        self.max_words = max_words

    def analyze(self, raw: str) -> Analysis:
        """
        Score CV text and collect issues and recommendations
        """
        raw = raw or ""
        text = self.normalize(raw)

        words = self.count_words(text)
        bullets = self.count_bullets(raw)
        numbers = len(rules.NUMBER_PATTERN.findall(text))
        action_verbs = len(rules.ACTION_VERB_PATTERN.findall(text))
        sections = self.detect_sections(text)

        coverage = self.coverage_score(sections)
        specificity = self.specificity_score(words, bullets, numbers, action_verbs)

        leadership_mentions = len(rules.LEADERSHIP_MENTION_PATTERN.findall(text))
        awards_mentions = len(rules.AWARDS_MENTION_PATTERN.findall(text))
        impact = self.impact_score(
            leadership_mentions, awards_mentions, specificity, sections
        )

        issues = self.generate_issues(text, sections, words, bullets, numbers)
        recommendations = self.generate_recommendations(
            text, sections, bullets, action_verbs
        )

        return Analysis(
            scores=Scores(coverage=coverage, specificity=specificity, impact=impact),
            sections=SectionCoverage(**sections),
            metrics=Metrics(
                words=words,
                bullets=bullets,
                numbers=numbers,
                action_verbs=action_verbs,
                leadership_mentions=leadership_mentions,
                awards_mentions=awards_mentions,
            ),
            issues=tuple(issues),
            recommendations=tuple(recommendations),
            summary=rules.SUMMARY_TEMPLATE.format(
                coverage=coverage, specificity=specificity, impact=impact
            ),
        )

    @staticmethod
    def normalize(raw: str) -> str:
        return rules.WHITESPACE_PATTERN.sub(" ", raw).strip()

    @staticmethod
    def count_words(text: str) -> int:
        return len(text.split()) if text else 0

    @staticmethod
    def count_bullets(raw: str) -> int:
        """Count list-item lines; works on raw text so line breaks survive"""
        lines = rules.LINE_BREAK_PATTERN.split(raw)
        return sum(1 for line in lines if rules.BULLET_PATTERN.match(line))

    @staticmethod
    def detect_sections(text: str) -> Dict[str, bool]:
        return {
            section: pattern.search(text) is not None
            for section, pattern in rules.SECTION_PATTERNS.items()
        }

    @staticmethod
    def coverage_score(sections: Dict[str, bool]) -> int:
        present = sum(1 for found in sections.values() if found)
        return round_half_up(present / len(sections) * 100)

    @staticmethod
    def specificity_score(words: int, bullets: int, numbers: int, action_verbs: int) -> int:
        base = min(100, round_half_up(numbers / max(1, words) * 1400))
        boost = min(25, round_half_up(action_verbs / max(1, bullets) * 12))
        return min(100, base + boost)

    @staticmethod
    def impact_score(leadership_mentions: int, awards_mentions: int,
                     specificity: int, sections: Dict[str, bool]) -> int:
        raw_impact = (
            40 * math.tanh((leadership_mentions + awards_mentions) / 3)
            + 0.25 * specificity
            + (10 if sections["leadership"] else 0)
            + (10 if sections["awards"] else 0)
        )
        return max(5, min(100, round_half_up(raw_impact)))

    def generate_issues(self, text: str, sections: Dict[str, bool],
                        words: int, bullets: int, numbers: int) -> List[Issue]:
        issues = []

        for section, present in sections.items():
            if not present:
                issues.append(Issue(
                    title=rules.MISSING_SECTION_TITLE.format(section=section),
                    detail=rules.MISSING_SECTION_DETAIL.format(section=section),
                    severity=Severity.HIGH if section in rules.CRITICAL_SECTIONS else Severity.MEDIUM,
                ))

        if words < self.min_words:
            issues.append(_issue(rules.TOO_SHORT))
        elif words > self.max_words:
            issues.append(_issue(rules.TOO_LONG))

        if not rules.GPA_PATTERN.search(text):
            issues.append(_issue(rules.GPA_MISSING))

        if bullets == 0:
            issues.append(_issue(rules.NO_BULLETS))

        if numbers < max(2, round_half_up(words / 120)):
            issues.append(_issue(rules.FEW_NUMBERS))

        return issues

    @staticmethod
    def generate_recommendations(text: str, sections: Dict[str, bool],
                                 bullets: int, action_verbs: int) -> List[str]:
        recommendations = []

        if not rules.TEST_SCORE_PATTERN.search(text):
            recommendations.append(rules.REC_TEST_SCORES)
        if action_verbs < max(3, bullets):
            recommendations.append(rules.REC_ACTION_VERBS)
        if not rules.PROFESSIONAL_LINK_PATTERN.search(text):
            recommendations.append(rules.REC_PROFESSIONAL_LINK)
        if not sections["projects"]:
            recommendations.append(rules.REC_PROJECTS)
        if not sections["volunteering"]:
            recommendations.append(rules.REC_VOLUNTEERING)
        if not sections["leadership"]:
            recommendations.append(rules.REC_LEADERSHIP)

        return recommendations


def _issue(rule) -> Issue:
    title, detail, severity = rule
    return Issue(title=title, detail=detail, severity=severity)


_default_analyzer = CVAnalyzer()


def analyze(text: str) -> Analysis:
    """Analyze CV text with the default thresholds."""
    return _default_analyzer.analyze(text)
