"""Shared pytest fixtures for the font_sampler test suite.

Fixtures:
    three_letter_drawing: Drawing of three well separated vertical strokes
    flask_client: Flask test client with the sample routes registered
    flask_app: The configured Flask app instance

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
    integration: Mark test as integration test
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sample_lib.domain import DrawingData, DrawingPoint  # noqa: E402


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# -----------------------------------------------------------------------------
# Drawing Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def three_letter_drawing():
    """Return a 400x400 drawing of three vertical strokes.

    Strokes sit at x = 50, 150 and 250, each running from y = 100 to
    y = 160 in steps of 5. They are drawn middle, left, right, so drawing
    order differs from reading order. Each stroke carries its own pressure
    (0.2 middle, 0.1 left, 0.3 right) so tests can tell them apart.

    Returns:
        DrawingData: The drawing.
    """
    points = []
    for x, pressure in ((150, 0.2), (50, 0.1), (250, 0.3)):
        points.extend(DrawingPoint(x, y, pressure) for y in range(100, 161, 5))
    return DrawingData(points, 400, 400)


# -----------------------------------------------------------------------------
# Flask Client Fixture
# -----------------------------------------------------------------------------

@pytest.fixture
def flask_client():
    """Create a Flask test client for the sample API.

    Returns:
        flask.testing.FlaskClient: Test client for making requests.

    Example:
        def test_charset(flask_client):
            response = flask_client.get('/api/charset')
            assert response.status_code == 200
    """
    from sample_flask import app
    import sample_routes  # noqa: F401 - registers routes

    app.config['TESTING'] = True

    with app.test_client() as client:
        yield client


@pytest.fixture
def flask_app():
    """Return the configured Flask app instance."""
    from sample_flask import app
    import sample_routes  # noqa: F401 - registers routes

    app.config['TESTING'] = True
    return app
