def _create(client, **body):
    payload = {"title": "Demo", "springBoot": False}
    payload.update(body)
    r = client.post("/api/projects", json=payload)
    assert r.status_code == 201, r.text
    return r.json()


def test_demo_project_lifecycle(client):
    created = _create(client, title="Demo", springBoot=True)
    assert created["id"] == 1

    r = client.get("/api/projects/1")
    assert r.status_code == 200
    assert r.json() == created

    r = client.get("/api/projects/spring-boot")
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == [1]

    r = client.delete("/api/projects/1")
    assert r.status_code == 204
    assert r.content == b""

    r = client.get("/api/projects/1")
    assert r.status_code == 404


def test_create_returns_camel_case_record(client):
    created = _create(
        client,
        title="Portfolio",
        description="Personal site",
        githubLink="https://github.com/example/portfolio",
        springBoot=True,
    )
    assert created == {
        "id": 1,
        "title": "Portfolio",
        "description": "Personal site",
        "githubLink": "https://github.com/example/portfolio",
        "springBoot": True,
    }


def test_create_ignores_client_supplied_id(client):
    created = _create(client, id=99)
    assert created["id"] == 1
    assert client.get("/api/projects/99").status_code == 404


def test_create_accepts_snake_case_fields(client):
    r = client.post(
        "/api/projects",
        json={"title": "x", "github_link": "https://github.com/x/y", "spring_boot": True},
    )
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["githubLink"] == "https://github.com/x/y"
    assert created["springBoot"] is True


def test_create_without_title_is_rejected(client):
    r = client.post("/api/projects", json={"description": "no title"})
    assert r.status_code == 422


def test_list_all_projects(client):
    _create(client, title="A")
    _create(client, title="B")
    r = client.get("/api/projects")
    assert r.status_code == 200
    assert [p["title"] for p in r.json()] == ["A", "B"]


def test_list_is_empty_without_records(client):
    r = client.get("/api/projects")
    assert r.status_code == 200
    assert r.json() == []


def test_update_forces_path_id(client, repositories):
    _create(client, title="Old")
    r = client.put(
        "/api/projects/1",
        json={"id": 42, "title": "New", "springBoot": True},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == 1
    assert body["title"] == "New"
    assert set(repositories["projects"].rows) == {1}


def test_update_replaces_whole_record(client):
    _create(client, title="Old", description="keep?", githubLink="https://x")
    r = client.put("/api/projects/1", json={"title": "New"})
    assert r.status_code == 200
    assert r.json() == {
        "id": 1,
        "title": "New",
        "description": None,
        "githubLink": None,
        "springBoot": False,
    }


def test_missing_project_is_404_for_id_operations(client):
    r = client.get("/api/projects/5")
    assert r.status_code == 404
    assert r.json()["detail"] == "Project with id 5 not found."

    r = client.put("/api/projects/5", json={"title": "X"})
    assert r.status_code == 404

    r = client.delete("/api/projects/5")
    assert r.status_code == 404


def test_put_on_missing_project_does_not_create_it(client, repositories):
    client.put("/api/projects/5", json={"title": "X"})
    assert repositories["projects"].rows == {}


def test_spring_boot_list_is_exactly_flagged_projects(client):
    _create(client, title="Flask app", springBoot=False)
    _create(client, title="Boot app", springBoot=True)
    _create(client, title="Another boot app", springBoot=True)

    everything = client.get("/api/projects").json()
    flagged = client.get("/api/projects/spring-boot").json()

    assert all(p["springBoot"] is True for p in flagged)
    assert [p["id"] for p in flagged] == [p["id"] for p in everything if p["springBoot"]]
    assert "Flask app" not in {p["title"] for p in flagged}


def test_non_integer_id_is_rejected(client):
    r = client.get("/api/projects/abc")
    assert r.status_code == 422


def test_long_project_fields_are_accepted(client):
    description = "d" * 5000
    link = "https://github.com/example/" + "r" * 600
    created = _create(client, title="x" * 500, description=description, githubLink=link)
    assert created["description"] == description
    assert created["githubLink"] == link
