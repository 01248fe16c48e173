"""
Root pytest configuration for backend tests.

Provides:
- backend/ on sys.path
- Contract mode pinned to warn (contracts read it when they register)
- Shared fixtures (app, client)
"""

import os
import sys
from pathlib import Path

# Add backend directory to Python path so imports like
# `from api.contracts import ...` and `from utils.normalize import ...` work
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Must happen before api.contracts is imported anywhere
os.environ["CONTRACT_MODE"] = "warn"
os.environ.pop("CONTRACT_STRICT_CONTRACTS", None)

import pytest


@pytest.fixture
def app():
    """Create test Flask application."""
    from app import create_app

    app = create_app()
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()
