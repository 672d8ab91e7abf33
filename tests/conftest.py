"""Pytest configuration and fixtures."""

import asyncio
import os
import sys

import pytest
import pytest_asyncio
from sqlalchemy.pool import NullPool

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app modules
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["INIT_DB_ON_STARTUP"] = "false"
os.environ.setdefault("STRICT_DECISIONS", "false")

from backoffice.core.storage import (  # noqa: E402
    SchoolStorage,
    build_engine,
    build_session_factory,
)


def _database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """Session factory bound to a fresh SQLite file with every table created."""
    engine = build_engine(_database_url(tmp_path), poolclass=NullPool)
    await SchoolStorage.init_models(engine)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest.fixture
def sync_session_factory(tmp_path):
    """Same as ``session_factory`` for synchronous tests (TestClient)."""
    engine = build_engine(_database_url(tmp_path), poolclass=NullPool)
    asyncio.run(SchoolStorage.init_models(engine))
    return build_session_factory(engine)


@pytest.fixture
def test_client(sync_session_factory):
    """TestClient whose routes use the temporary database."""
    from fastapi.testclient import TestClient

    from backoffice.core.storage import get_session_factory
    from backoffice.main import app

    app.dependency_overrides[get_session_factory] = lambda: sync_session_factory
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_candidate():
    """Candidate identity and motivation."""
    return {
        "nom": "Dupont",
        "prenom": "Alice",
        "email": "alice.dupont@email.com",
        "motivation": "Je souhaite devenir développeuse web.",
    }


@pytest.fixture
def sample_program():
    return {
        "nom": "Développement Web",
        "description": "Formation complète en développement web moderne",
        "objectifs": "Maîtriser les technologies web actuelles",
        "programme": "HTML, CSS, JavaScript, React, Node.js",
        "modalites": "Présentiel et distanciel",
        "accessibilite": "Formation accessible aux personnes en situation de handicap",
        "image": "https://example.org/web.jpeg",
    }


@pytest.fixture
def abc_questions():
    """Build three questions whose correct answers are A, B and C."""

    def _build(program_id: int) -> list[dict]:
        return [
            {
                "filiere_id": program_id,
                "question": f"Question {letter}",
                "bonne_reponse": letter,
                "mauvaise1": "X",
                "mauvaise2": "Y",
                "mauvaise3": "Z",
            }
            for letter in ("A", "B", "C")
        ]

    return _build
