from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from api_notificaciones.main import app
import api_notificaciones.routes.notificaciones as notificaciones_routes

client = TestClient(app)

BASE = "/api-notificaciones/v1/notificaciones"


def _create(**overrides):
    payload = {"emitterId": 1, "title": "Incendio", "body": "Fuego en zona A", "receivers": [10, 11]}
    payload.update(overrides)
    resp = client.post(BASE, json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_ok():
    antes = datetime.now()
    data = _create()
    despues = datetime.now()

    assert data["id"] > 0
    assert data["active"] is True
    assert data["emitterId"] == 1
    assert data["title"] == "Incendio"
    assert data["body"] == "Fuego en zona A"
    assert data["receivers"] == [10, 11]
    created = datetime.fromisoformat(data["createdAt"])
    assert created.tzinfo is None
    assert antes <= created <= despues


def test_create_ignores_server_fields():
    data = _create(id=555, active=False, createdAt="2000-01-01T00:00:00")
    assert data["id"] != 555
    assert data["active"] is True
    assert not data["createdAt"].startswith("2000")


def test_create_empty_receivers_rejected():
    resp = client.post(BASE, json={"emitterId": 1, "title": "t", "body": "b", "receivers": []})
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert "receptores" in resp.text
    assert client.get(BASE).json() == []


def test_create_reports_all_errors_joined():
    resp = client.post(BASE, json={"title": "   ", "body": "b" * 501})
    assert resp.status_code == 400
    assert resp.text == "; ".join([
        "El ID del emisor no puede ser nulo",
        "El título no puede estar en blanco",
        "El contenido debe tener entre 1 y 500 caracteres",
        "La lista de receptores no puede estar vacía",
    ])


@pytest.mark.parametrize("length,status", [(0, 400), (1, 201), (50, 201), (51, 400)])
def test_create_title_boundaries(length, status):
    resp = client.post(BASE, json={"emitterId": 1, "title": "x" * length, "body": "b", "receivers": [1]})
    assert resp.status_code == status


@pytest.mark.parametrize("length,status", [(0, 400), (1, 201), (500, 201), (501, 400)])
def test_create_body_boundaries(length, status):
    resp = client.post(BASE, json={"emitterId": 1, "title": "t", "body": "x" * length, "receivers": [1]})
    assert resp.status_code == status


def test_create_accepts_legacy_field_names():
    resp = client.post(BASE, json={
        "idEmisor": 3,
        "tituloNotificacion": "Sismo",
        "contenidoNotificacion": "Evacuar edificio B",
        "receptores": [4, 4, 2],
    })
    assert resp.status_code == 201
    data = resp.json()
    assert data["emitterId"] == 3
    assert data["receivers"] == [4, 4, 2]


def test_create_wrong_types_is_bad_request():
    resp = client.post(BASE, json={"emitterId": "abc", "title": "t", "body": "b", "receivers": [1]})
    assert resp.status_code == 400
    assert "emitterId" in resp.text


def test_create_malformed_json_is_bad_request():
    resp = client.post(BASE, content=b"{no es json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_list_returns_all():
    a = _create(title="Uno")
    b = _create(title="Dos")
    resp = client.get(BASE)
    assert resp.status_code == 200
    ids = {n["id"] for n in resp.json()}
    assert ids == {a["id"], b["id"]}


def test_get_by_id():
    created = _create()
    resp = client.get(f"{BASE}/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_get_unknown_id_is_404_with_empty_body():
    resp = client.get(f"{BASE}/9999")
    assert resp.status_code == 404
    assert resp.content == b""


def test_get_non_numeric_id_is_bad_request():
    resp = client.get(f"{BASE}/abc")
    assert resp.status_code == 400


def test_patch_preserves_untouched_fields():
    created = _create()
    resp = client.patch(f"{BASE}/{created['id']}", json={"title": "Incendio mayor"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "Incendio mayor"
    for campo in ("id", "emitterId", "body", "createdAt", "active", "receivers"):
        assert data[campo] == created[campo]
    assert client.get(f"{BASE}/{created['id']}").json() == data


def test_patch_ignores_immutable_fields():
    created = _create()
    resp = client.patch(f"{BASE}/{created['id']}", json={
        "id": 77, "emitterId": 99, "createdAt": "2001-01-01T00:00:00", "active": False,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == created["id"]
    assert data["emitterId"] == 1
    assert data["createdAt"] == created["createdAt"]
    assert data["active"] is False


def test_put_is_alias_of_patch():
    created = _create()
    resp = client.put(f"{BASE}/{created['id']}", json={"body": "Fuego controlado"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["body"] == "Fuego controlado"
    assert data["title"] == created["title"]
    assert data["receivers"] == created["receivers"]


def test_patch_empty_receivers_rejected():
    created = _create()
    resp = client.patch(f"{BASE}/{created['id']}", json={"receivers": []})
    assert resp.status_code == 400
    assert resp.text == "La lista de receptores no puede quedar vacía al actualizar."
    assert client.get(f"{BASE}/{created['id']}").json()["receivers"] == [10, 11]


def test_patch_replaces_receivers():
    created = _create()
    resp = client.patch(f"{BASE}/{created['id']}", json={"receivers": [7]})
    assert resp.status_code == 200
    assert resp.json()["receivers"] == [7]
    assert client.get(f"{BASE}/{created['id']}").json()["receivers"] == [7]


@pytest.mark.parametrize("patch,mensaje", [
    ({"title": ""}, "El título no puede estar en blanco."),
    ({"title": "   "}, "El título no puede estar en blanco."),
    ({"title": "x" * 51}, "El título debe tener entre 1 y 50 caracteres."),
    ({"body": "\t\n"}, "El contenido no puede estar en blanco."),
    ({"body": "x" * 501}, "El contenido debe tener entre 1 y 500 caracteres."),
])
def test_patch_invalid_text_rejected(patch, mensaje):
    created = _create()
    resp = client.patch(f"{BASE}/{created['id']}", json=patch)
    assert resp.status_code == 400
    assert resp.text == mensaje
    assert client.get(f"{BASE}/{created['id']}").json() == created


def test_patch_failure_leaves_record_unchanged():
    created = _create()
    resp = client.patch(f"{BASE}/{created['id']}", json={"title": "Nuevo", "body": " "})
    assert resp.status_code == 400
    assert client.get(f"{BASE}/{created['id']}").json() == created


def test_patch_unknown_id_is_404():
    resp = client.patch(f"{BASE}/9999", json={"title": "x"})
    assert resp.status_code == 404
    assert resp.text == "Notificación no encontrada con ID: 9999"


def test_delete_flow():
    created = _create()
    resp = client.delete(f"{BASE}/{created['id']}")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get(f"{BASE}/{created['id']}").status_code == 404

    again = client.delete(f"{BASE}/{created['id']}")
    assert again.status_code == 404
    assert again.text == f"Notificación no encontrada con ID: {created['id']} para eliminar."


def test_unexpected_error_is_500(monkeypatch):
    def boom(db):
        raise RuntimeError("connection refused: secret-host:5432")

    monkeypatch.setattr(notificaciones_routes, "list_notificaciones", boom)
    local_client = TestClient(app, raise_server_exceptions=False)
    resp = local_client.get(BASE)
    assert resp.status_code == 500
    assert "secret-host" not in resp.text
