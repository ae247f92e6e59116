"""Tests for the FastAPI service."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from bosloader.aggregator import Aggregator
from bosloader.models import ServeEntry
from bosloader.service import create_app


@pytest.fixture
def client(component_tree) -> TestClient:
    component_tree.write(
        {
            "HelloWorld.jsx": "return <>Hello World</>;",
            "ui/Button.jsx": "<button>${REPL_ACCOUNT}</button>",
        }
    )
    app = create_app(lambda: Aggregator([component_tree.entry("michaelpeter.near")]))
    return TestClient(app)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_components_endpoint(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {
        "components": {
            "michaelpeter.near/widget/HelloWorld": {"code": "return <>Hello World</>;"},
            "michaelpeter.near/widget/ui.Button": {"code": "<button>michaelpeter.near</button>"},
        }
    }


def test_components_endpoint_reflects_edits(client: TestClient, component_tree) -> None:
    client.get("/")
    component_tree.write({"HelloWorld.jsx": "return <>Edited</>;"})

    response = client.get("/")

    assert response.json()["components"]["michaelpeter.near/widget/HelloWorld"] == {
        "code": "return <>Edited</>;"
    }


def test_unreadable_directory_is_server_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing"
    app = create_app(lambda: Aggregator([ServeEntry(account="a.near", path=missing)]))

    response = TestClient(app).get("/")

    assert response.status_code == 500
    body = response.json()
    assert "components" not in body
    assert "a.near" in body["error"]


def test_replacements_and_web_engine(component_tree, tmp_path: Path) -> None:
    component_tree.write({"Greeting.tsx": "<div>${REPL_GREETING}</div>"})
    replacements = tmp_path / "replacements.json"
    replacements.write_text(json.dumps({"REPL_GREETING": "hi"}), encoding="utf-8")
    app = create_app(
        lambda: Aggregator(
            [component_tree.entry("a.near")], web_engine=True, replacements=replacements
        )
    )

    response = TestClient(app).get("/")

    assert response.status_code == 200
    assert response.json() == {
        "components": {"a.near/widget/Greeting": {"code": "<div>hi</div>", "type": "module"}}
    }


def test_cors_allows_any_origin(client: TestClient) -> None:
    response = client.get("/", headers={"Origin": "https://near.social"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_components_body_is_compact_json(component_tree) -> None:
    component_tree.write({"HelloWorld.jsx": "return <>Hello World</>;"})
    app = create_app(lambda: Aggregator([component_tree.entry("michaelpeter.near")]))

    response = TestClient(app).get("/")

    assert response.text == (
        '{"components":{"michaelpeter.near/widget/HelloWorld":'
        '{"code":"return <>Hello World</>;"}}}'
    )
