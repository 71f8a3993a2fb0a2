from jinja2 import Template

from models.cv_models import Analysis

FEEDBACK_TITLE = "High School CV Coach — Feedback"

FEEDBACK_TEMPLATE = Template(
    "{{ title }}\n"
    "\n"
    "Summary: {{ analysis.summary }}\n"
    "\n"
    "Scores: Coverage {{ analysis.scores.coverage }}%, "
    "Specificity {{ analysis.scores.specificity }}%, "
    "Impact {{ analysis.scores.impact }}%\n"
    "\n"
    "Top Issues:\n"
    "{% for issue in issues %}{{ loop.index }}. {{ issue.title }} — {{ issue.detail }}\n{% endfor %}"
    "\n"
    "Recommendations:\n"
    "{% for recommendation in recommendations %}- {{ recommendation }}\n{% endfor %}"
)


def render_feedback(analysis: Analysis, limit: int = 8) -> str:
    """
    Render the shareable text version of an analysis: summary, scores and
    the first `limit` issues and recommendations
    """
    text = FEEDBACK_TEMPLATE.render(
        title=FEEDBACK_TITLE,
        analysis=analysis,
        issues=analysis.issues[:limit],
        recommendations=analysis.recommendations[:limit],
    )
    return text.rstrip("\n")
