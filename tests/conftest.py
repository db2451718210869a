"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def rng():
    """Seeded random source so a failing statistical test can be replayed."""
    return random.Random(1337)


@pytest.fixture
def sample_question():
    """Provide a hand-built network address question."""
    from subnet_quiz.quiz.models import Question, QuestionArchetype

    return Question(
        id=1,
        prompt="What is the network address for the subnet containing 192.168.1.100/24?",
        options=("192.168.1.255", "192.168.1.0", "192.168.1.1", "192.168.1.254"),
        correct_index=1,
        archetype=QuestionArchetype.NETWORK_ADDRESS,
        points=15,
        explanation="192.168.1.100 AND 255.255.255.0 = 192.168.1.0.",
    )
