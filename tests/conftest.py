"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from fila_cli.config.manager import ConfigManager
from fila_cli.config.models import Profile


def pytest_addoption(parser):
    parser.addoption("--api-url", action="store", default=None)
    parser.addoption("--api-token", action="store", default=None)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("FILA_API_URL", "FILA_TOKEN", "FILA_PROFILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def cli_manager(config_manager: ConfigManager):
    """Make every CLI command use the temp config file."""
    with patch(
        "fila_cli.commands._common.get_manager", return_value=config_manager,
    ):
        yield config_manager


@pytest.fixture
def sample_profile() -> Profile:
    """Return a sample profile for testing."""
    return Profile(name="test", url="https://fila.test")


@pytest.fixture
def usuario_gestor() -> dict:
    """Sample /auth/me response for a manager."""
    return {
        "id": 1,
        "nome": "Maria Gestora",
        "cpf": "111.222.333-44",
        "email": "maria@example.gov.br",
        "email_verificado": True,
        "papel": "GESTOR",
        "pendencias": [],
    }


@pytest.fixture
def usuario_analista() -> dict:
    """Sample /auth/me response for an analyst with a pending action."""
    return {
        "id": 7,
        "nome": "João Analista",
        "cpf": "555.666.777-88",
        "email": "joao@example.gov.br",
        "email_verificado": True,
        "papel": "ANALISTA",
        "pendencias": [{"slug": "dados-analista", "title": "Complete analyst data"}],
    }


@pytest.fixture
def processo() -> dict:
    return {
        "id": "0b6c2f6e-4b1e-4d55-9c57-1f3f0c1f8a01",
        "numero": "1500.01.0000001/2025-01",
        "status": "ANALISADO",
        "link_acesso": "https://sei.example.gov.br/p/1",
        "sei_unidade_id": "110001",
        "sei_unidade_sigla": "SEPLAG/DCCTA",
        "aposentadoria": True,
        "analisado_em": "2025-03-01T10:00:00Z",
        "metadados_ia": {"judicial": False, "invalidez": False},
        "criado_em": "2025-02-28T09:00:00Z",
        "atualizado_em": "2025-03-01T10:00:00Z",
    }


@pytest.fixture
def caso_aposentadoria() -> dict:
    return {
        "id": 42,
        "processo_id": "0b6c2f6e-4b1e-4d55-9c57-1f3f0c1f8a01",
        "numero": "1500.01.0000001/2025-01",
        "data_requerimento": "2025-01-15T00:00:00Z",
        "cpf_requerente": "123.456.789-01",
        "data_nascimento_requerente": "1960-05-20T00:00:00Z",
        "invalidez": False,
        "judicial": True,
        "prioridade": True,
        "score": 87,
        "status": "EM_ANALISE",
        "analista_id": 7,
        "analise_ia": None,
        "criado_em": "2025-03-01T10:00:00Z",
        "atualizado_em": "2025-03-02T10:00:00Z",
    }
