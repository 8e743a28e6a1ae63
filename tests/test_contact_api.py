import pytest


def test_contact_info_crud(client):
    r = client.post(
        "/api/contact",
        json={"email": "victor@example.com", "github": "https://github.com/victor"},
    )
    assert r.status_code == 201
    contact = r.json()
    assert contact["id"] == 1
    assert contact["email"] == "victor@example.com"
    assert contact["phone"] is None

    r = client.put("/api/contact/1", json={"email": "new@example.com", "phone": "+46 70 000 00 00"})
    assert r.status_code == 200
    assert r.json() == {
        "id": 1,
        "email": "new@example.com",
        "phone": "+46 70 000 00 00",
        "linkedin": None,
        "github": None,
    }

    assert client.get("/api/contact").json() == [r.json()]
    assert client.delete("/api/contact/1").status_code == 204
    assert client.get("/api/contact").json() == []


@pytest.mark.parametrize(
    "method, kwargs",
    [
        ("get", {}),
        ("put", {"json": {"email": "x@example.com"}}),
        ("delete", {}),
    ],
)
def test_missing_contact_info_is_404(client, method, kwargs):
    r = getattr(client, method)("/api/contact/11", **kwargs)
    assert r.status_code == 404
    assert r.json()["detail"] == "Contact info with id 11 not found."


def test_long_contact_values_are_accepted(client):
    body = {
        "email": "a" * 300 + "@example.com",
        "phone": "1" * 300,
        "linkedin": "https://www.linkedin.com/in/" + "v" * 600,
        "github": "https://github.com/" + "g" * 600,
    }
    r = client.post("/api/contact", json=body)
    assert r.status_code == 201, r.text
    assert r.json() == {"id": 1, **body}
