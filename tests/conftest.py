"""
Shared pytest fixtures for bracket engine tests.

Running tests:
    pytest tests/
"""
import pytest
import sys
import os
import yaml

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


@pytest.fixture
def client():
    """Create a test client for the preview app."""
    from app import app
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def write_tournament(tmp_path):
    """Write a tournament YAML file and return its path."""
    def _write(data, name='tournament.yaml'):
        path = tmp_path / name
        path.write_text(yaml.dump(data, default_flow_style=False))
        return str(path)
    return _write


@pytest.fixture
def temp_tournament_file(tmp_path, monkeypatch):
    """Point the app at a temporary tournament file."""
    import app as app_module

    tournament_file = tmp_path / "tournament.yaml"
    monkeypatch.setattr(app_module, 'DATA_DIR', str(tmp_path))
    monkeypatch.setattr(app_module, 'TOURNAMENT_FILE', str(tournament_file))
    return tournament_file
