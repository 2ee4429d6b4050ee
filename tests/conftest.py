"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from skillquest.learning.models import LearnerProgress  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (engine, tracker and planner together)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture(scope="session")
def games_dir():
    """Directory holding the bundled game templates."""
    return PROJECT_ROOT / "data" / "games"


@pytest.fixture
def fixed_now():
    """A fixed local wall-clock time."""
    return datetime(2024, 3, 15, 10, 30)


@pytest.fixture
def fresh_progress():
    """A new learner with the default skills at zero."""
    return LearnerProgress.create()


@pytest.fixture
def mc_quiz():
    """Provide a four-question multiple-choice quiz (untimed)."""
    return {
        "gameId": "quiz-mc-4",
        "type": "quiz",
        "title": "Four Questions",
        "skillsTagged": ["DSA"],
        "xpReward": 10,
        "questions": [
            {"id": "q1", "type": "multiple-choice", "question": "2+2?", "options": ["3", "4"], "correctAnswer": "4"},
            {"id": "q2", "type": "multiple-choice", "question": "3+3?", "options": ["6", "7"], "correctAnswer": "6"},
            {"id": "q3", "type": "multiple-choice", "question": "Capital of France?", "correctAnswer": "Paris"},
            {"id": "q4", "type": "multiple-choice", "question": "Largest planet?", "correctAnswer": "Jupiter"},
        ],
    }


@pytest.fixture
def coding_game():
    """Provide a coding game with one pattern-checked challenge."""
    return {
        "gameId": "coding-sum",
        "type": "coding",
        "difficulty": "intermediate",
        "skillsTagged": ["DSA", "Backend"],
        "questions": [
            {
                "id": "c1",
                "description": "Return the sum of a list",
                "testCases": [
                    {"input": [1, 2, 3], "expectedOutput": 6},
                    {"input": [], "expectedOutput": 0},
                ],
                "expectedPattern": "return",
            }
        ],
    }


@pytest.fixture
def simulation_game():
    """Provide a two-scenario simulation game."""
    return {
        "gameId": "sim-incident",
        "type": "simulation",
        "difficulty": "advanced",
        "skillsTagged": ["DBMS"],
        "timeLimit": 100,
        "scenarios": [
            {"id": "s1", "description": "Slow queries", "options": ["restart", "explain"], "correctChoice": 1},
            {"id": "s2", "description": "Locked table", "correctChoice": "rollback"},
        ],
    }
