"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def scenario_text() -> str:
    return (
        "Education: GPA 3.8. Experience: led robotics club, built 3 projects, "
        "increased membership 40%. Email: a@b.com"
    )


@pytest.fixture
def strong_resume() -> str:
    return """Jane Doe
Email: jane@example.com | linkedin.com/in/janedoe | github.com/janedoe

Education
Lincoln High School, GPA 3.9/4.0, SAT 1520
- Coursework: AP Calculus, AP Physics

Experience
- Built a tutoring app used by 120 students
- Increased club membership 40% in 2 semesters

Leadership
- President of the Robotics Club, led a team of 12

Volunteering
- Volunteer at the food bank for 18 months, 200 hours

Awards
- National Merit Scholarship finalist

Skills
- Python, Java, CAD tools

Projects
- Capstone project: solar tracker, reduced energy loss 15%
"""
