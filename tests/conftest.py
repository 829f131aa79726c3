"""Shared fixtures: offering factory, a small catalog and an API client over it."""

import pytest
from fastapi.testclient import TestClient

from advisor.models import ActiveContext, Offering, ScoringConfig
from server.app import create_app
from server.config import ServerConfig
from server.services import InMemoryCatalogProvider
from server.state import AppState, set_state

CATALOG_ROWS = [
    {
        "id": "vivo-fibra",
        "nome": "Vivo Fibra 500",
        "categoria": "fibra",
        "operadora": "vivo",
        "tipoPessoa": "PF",
        "linhasInclusas": 1,
        "preco": 9990,
        "scoreBase": 80,
        "destaque": True,
        "velocidade": "500 Mega",
    },
    {
        "id": "claro-fibra",
        "nome": "Claro Fibra 1 Giga",
        "categoria": "fibra",
        "operadora": "claro",
        "tipoPessoa": "ambos",
        "linhasInclusas": 1,
        "preco": 14990,
        "scoreBase": 90,
        "velocidade": "1 Giga",
    },
    {
        "id": "vivo-movel",
        "nome": "Vivo Controle 20GB",
        "categoria": "movel",
        "operadora": "vivo",
        "tipoPessoa": "PF",
        "modalidade": "portabilidade",
        "linhasInclusas": 1,
        "preco": 5990,
        "scoreBase": 70,
        "franquia": "20GB",
    },
    {
        "id": "vivo-empresas",
        "nome": "Vivo Empresas Flex",
        "categoria": "movel",
        "operadora": "vivo",
        "tipoPessoa": "PJ",
        "linhasInclusas": 5,
        "permiteCalculadoraLinhas": True,
        "preco": 24990,
        "scoreBase": 80,
    },
    {
        "id": "claro-combo",
        "nome": "Claro Combo",
        "categoria": "combo",
        "operadora": "claro",
        "tipoPessoa": "ambos",
        "linhasInclusas": 3,
        "preco": 22990,
        "scoreBase": 75,
        "badgeTexto": "Combo por [preco]",
    },
    {
        "id": "oi-fibra-inativo",
        "nome": "Oi Fibra",
        "categoria": "fibra",
        "operadora": "oi",
        "tipoPessoa": "PF",
        "preco": 4990,
        "scoreBase": 100,
        "ativo": False,
    },
]


@pytest.fixture
def make_offering():
    """Build an Offering from storefront keys; only id is filled in by default."""

    def _make(offering_id: str = "o1", **fields) -> Offering:
        return Offering.model_validate({"id": offering_id, **fields})

    return _make


@pytest.fixture
def catalog_rows():
    return [dict(row) for row in CATALOG_ROWS]


@pytest.fixture
def catalog(catalog_rows):
    return [Offering.model_validate(row) for row in catalog_rows]


@pytest.fixture
def empty_context():
    return ActiveContext()


@pytest.fixture
def client(catalog_rows):
    """TestClient over a fresh AppState backed by the in-memory catalog."""
    state = AppState(
        ServerConfig(),
        catalog=InMemoryCatalogProvider(catalog_rows),
        scoring_config=ScoringConfig(),
    )
    set_state(state)
    try:
        yield TestClient(create_app())
    finally:
        set_state(None)
