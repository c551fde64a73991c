"""Deployment files — the container image and compose stack serve the API on 8080.

Tests:
    - Dockerfile installs the package, exposes 8080 and runs the user-service entry point
    - docker-compose.yml pairs the service with a mongo container and sets MONGOURI
    - The compose environment loads into Settings without a .env file
"""

from pathlib import Path

import pytest
import yaml

from user_service.config import Settings

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(scope="module")
def compose():
    with open(ROOT / "docker-compose.yml") as f:
        return yaml.safe_load(f)


def test_dockerfile_runs_entry_point_on_8080():
    lines = (ROOT / "Dockerfile").read_text().splitlines()
    assert "EXPOSE 8080" in lines
    assert 'CMD ["user-service"]' in lines
    assert any(line.startswith("RUN pip install") for line in lines)


def test_compose_has_mongo_and_service(compose):
    services = compose["services"]
    assert services["mongo"]["image"].startswith("mongo")
    service = services["user-service"]
    assert service["build"]["dockerfile"] == "Dockerfile"
    assert "8080:8080" in service["ports"]
    assert "mongo" in service["depends_on"]


def test_compose_mongouri_targets_mongo_service(compose):
    uri = compose["services"]["user-service"]["environment"]["MONGOURI"]
    assert uri.startswith("mongodb://")
    assert "@mongo:27017/" in uri


def test_compose_environment_loads_settings(compose, monkeypatch):
    for key, value in compose["services"]["user-service"]["environment"].items():
        monkeypatch.setenv(key, str(value))
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.mongo_database == "userDB"
    assert settings.log_format == "json"
