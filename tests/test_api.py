from fastapi.testclient import TestClient

from tests.conftest import auth_headers, register


def _create_class(client: TestClient, headers: dict[str, str], name: str = "3B") -> str:
    response = client.post("/classes", headers=headers, json={"name": name, "description": "Year 3"})
    assert response.status_code == 201, response.text
    return response.json()["id"]


def _create_student(client: TestClient, headers: dict[str, str], class_id: str, name: str) -> str:
    response = client.post("/students", headers=headers, json={"name": name, "class_id": class_id})
    assert response.status_code == 201, response.text
    return response.json()["id"]


def _behavior_id(client: TestClient, headers: dict[str, str], name: str) -> str:
    behaviors = client.get("/behaviors", headers=headers).json()
    return next(item["id"] for item in behaviors if item["name"] == name)


def test_register_returns_teacher_and_token(app_client: TestClient):
    payload = register(app_client)
    assert payload["teacher"]["email"] == "ms.a@school.test"
    assert payload["token"]

    me = app_client.get("/teachers/me", headers={"Authorization": f"Bearer {payload['token']}"})
    assert me.status_code == 200
    assert me.json()["id"] == payload["teacher"]["id"]


def test_register_duplicate_email_conflicts(app_client: TestClient):
    register(app_client)
    response = app_client.post("/teachers", json={"name": "Other", "email": "MS.A@school.test", "password": "x"})
    assert response.status_code == 409
    assert response.json()["code"] == "conflict"


def test_login_and_invalid_credentials(app_client: TestClient):
    register(app_client)
    ok = app_client.put("/teachers", json={"email": "ms.a@school.test", "password": "secret123"})
    assert ok.status_code == 200
    assert ok.json()["token"]

    bad = app_client.put("/teachers", json={"email": "ms.a@school.test", "password": "wrong"})
    assert bad.status_code == 401
    assert bad.json()["error"] == "Invalid credentials"


def test_endpoints_require_auth(app_client: TestClient):
    assert app_client.get("/classes").status_code == 401
    response = app_client.get("/behaviors", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert "error" in response.json()


def test_missing_fields_are_reported_as_400(app_client: TestClient):
    response = app_client.post("/teachers", json={"email": "a@b.c"})
    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "validation_error"
    assert "name" in body["error"]
    assert "password" in body["error"]


def test_new_teacher_gets_default_behavior_copies(app_client: TestClient):
    headers = auth_headers(app_client)
    behaviors = app_client.get("/behaviors", headers=headers).json()

    individual = [item for item in behaviors if item["behavior_type"] == "INDIVIDUAL"]
    group_work = [item for item in behaviors if item["behavior_type"] == "GROUP_WORK"]
    assert len(individual) == 8
    assert len(group_work) == 8
    assert all(item["is_default"] is False for item in behaviors)

    filtered = app_client.get("/behaviors", headers=headers, params={"type": "GROUP_WORK"}).json()
    assert {item["id"] for item in filtered} == {item["id"] for item in group_work}

    defaults = app_client.get("/behaviors/defaults", headers=headers).json()
    assert sorted(item["name"] for item in defaults) == sorted(item["name"] for item in behaviors)


def test_behavior_crud_and_duplicate_name(app_client: TestClient):
    headers = auth_headers(app_client)
    created = app_client.post(
        "/behaviors",
        headers=headers,
        json={"name": "Tidy desk", "behavior_type": "INDIVIDUAL"},
    )
    assert created.status_code == 201, created.text
    behavior_id = created.json()["id"]

    duplicate = app_client.post("/behaviors", headers=headers, json={"name": "Tidy desk"})
    assert duplicate.status_code == 409

    updated = app_client.put(f"/behaviors/{behavior_id}", headers=headers, json={"praise": "So neat!"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Tidy desk"
    assert updated.json()["praise"] == "So neat!"

    deleted = app_client.delete(f"/behaviors/{behavior_id}", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json()["ok"] is True


def test_invalid_behavior_type_is_rejected(app_client: TestClient):
    headers = auth_headers(app_client)
    response = app_client.post("/behaviors", headers=headers, json={"name": "Odd", "behavior_type": "TEAM"})
    assert response.status_code == 400


def test_default_behavior_cannot_be_deleted(app_client: TestClient):
    headers = auth_headers(app_client)
    defaults = app_client.get("/behaviors/defaults", headers=headers).json()
    participating = next(item for item in defaults if item["name"] == "Participating")

    response = app_client.delete(f"/behaviors/{participating['id']}", headers=headers)
    assert response.status_code == 403
    assert response.json()["code"] == "forbidden"


def test_behavior_of_other_teacher_is_protected(app_client: TestClient):
    owner = auth_headers(app_client)
    other = auth_headers(app_client, email="mr.b@school.test", name="Mr. B")
    behavior_id = _behavior_id(app_client, owner, "Participating")

    assert app_client.put(f"/behaviors/{behavior_id}", headers=other, json={"name": "x"}).status_code == 404
    assert app_client.delete(f"/behaviors/{behavior_id}", headers=other).status_code == 403


def test_classes_are_scoped_to_owner(app_client: TestClient):
    owner = auth_headers(app_client)
    other = auth_headers(app_client, email="mr.b@school.test", name="Mr. B")
    class_id = _create_class(app_client, owner)

    assert [item["id"] for item in app_client.get("/classes", headers=owner).json()] == [class_id]
    assert app_client.get("/classes", headers=other).json() == []
    assert app_client.get(f"/classes/{class_id}", headers=other).status_code == 404

    renamed = app_client.put(f"/classes/{class_id}", headers=owner, json={"name": "3C"})
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "3C"
    assert renamed.json()["description"] == "Year 3"

    assert app_client.delete(f"/classes/{class_id}", headers=other).status_code == 404
    assert app_client.delete(f"/classes/{class_id}", headers=owner).status_code == 200
    assert app_client.get("/classes", headers=owner).json() == []


def test_individual_points_award_and_history(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = _create_class(app_client, headers)
    sam = _create_student(app_client, headers, class_id, "Sam")

    response = app_client.put(
        "/students/points",
        headers=headers,
        json={"student_ids": [sam], "points_to_add": 3, "reason": "Great focus"},
    )
    assert response.status_code == 200, response.text
    assert response.json()[0]["points"] == 3

    history = app_client.get(f"/students/{sam}/points", headers=headers).json()
    assert len(history) == 1
    assert history[0]["points"] == 3
    assert history[0]["reason"] == "Great focus"


def test_individual_points_validation_and_ownership(app_client: TestClient):
    owner = auth_headers(app_client)
    other = auth_headers(app_client, email="mr.b@school.test", name="Mr. B")
    class_id = _create_class(app_client, owner)
    sam = _create_student(app_client, owner, class_id, "Sam")

    zero = app_client.put("/students/points", headers=owner, json={"student_ids": [sam], "points_to_add": 0})
    assert zero.status_code == 400
    empty = app_client.put("/students/points", headers=owner, json={"student_ids": [], "points_to_add": 2})
    assert empty.status_code == 400

    foreign = app_client.put("/students/points", headers=other, json={"student_ids": [sam], "points_to_add": 2})
    assert foreign.status_code == 403
    assert app_client.delete(f"/students/{sam}", headers=other).status_code == 403


def test_repeated_awards_accumulate(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = _create_class(app_client, headers)
    sam = _create_student(app_client, headers, class_id, "Sam")

    for _ in range(2):
        response = app_client.put("/students/points", headers=headers, json={"student_ids": [sam], "points_to_add": 5})
        assert response.status_code == 200

    students = app_client.get("/students", headers=headers, params={"class_id": class_id}).json()
    assert students[0]["points"] == 10
    assert len(app_client.get(f"/students/{sam}/points", headers=headers).json()) == 2


def test_class_leaderboard_orders_by_points(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = _create_class(app_client, headers)
    sam = _create_student(app_client, headers, class_id, "Sam")
    alex = _create_student(app_client, headers, class_id, "Alex")
    app_client.put("/students/points", headers=headers, json={"student_ids": [alex], "points_to_add": 4})
    app_client.put("/students/points", headers=headers, json={"student_ids": [sam], "points_to_add": 1})

    leaderboard = app_client.get(f"/classes/{class_id}/leaderboard", headers=headers).json()
    assert [item["name"] for item in leaderboard] == ["Alex", "Sam"]


def test_group_work_award_flow(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = _create_class(app_client, headers)
    sam = _create_student(app_client, headers, class_id, "Sam")
    alex = _create_student(app_client, headers, class_id, "Alex")
    collaboration = _behavior_id(app_client, headers, "Collaboration")

    created = app_client.post(
        "/group-works",
        headers=headers,
        json={
            "name": "Science Fair",
            "class_id": class_id,
            "groups": [{"name": "Team 1", "student_ids": [sam, alex]}],
            "behavior_ids": [collaboration],
            "behavior_praises": {collaboration: "Amazing teamwork!"},
        },
    )
    assert created.status_code == 201, created.text
    group_work = created.json()
    group_id = group_work["groups"][0]["id"]
    assert group_work["behaviors"][0]["praise"] == "Amazing teamwork!"
    assert {member["student_id"] for member in group_work["groups"][0]["members"]} == {sam, alex}

    award = app_client.post(
        "/group-work-awards",
        headers=headers,
        json={"group_id": group_id, "behavior_id": collaboration, "points": 2, "praise": "ignored"},
    )
    assert award.status_code == 201, award.text
    body = award.json()
    assert body["praise"] == "Amazing teamwork!"
    assert body["badge"]["id"] == body["badge_id"]
    assert "GROUP_WORK" in body["badge"]["behavior_types"]

    students = app_client.get("/students", headers=headers, params={"class_id": class_id}).json()
    assert {item["name"]: item["points"] for item in students} == {"Sam": 2, "Alex": 2}
    sam_history = app_client.get(f"/students/{sam}/points", headers=headers).json()
    assert sam_history[0]["behavior_name"] == "Collaboration"
    assert sam_history[0]["reason"] == "Group work: Science Fair - Amazing teamwork!"

    awards = app_client.get("/group-work-awards", headers=headers, params={"group_id": group_id}).json()
    assert [item["id"] for item in awards] == [body["id"]]

    leaderboard = app_client.get(f"/group-works/{group_work['id']}/leaderboard", headers=headers).json()
    assert leaderboard == [{"group_id": group_id, "group_name": "Team 1", "total_points": 2, "awards_count": 1}]


def test_group_work_edit_replaces_roster(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = _create_class(app_client, headers)
    sam = _create_student(app_client, headers, class_id, "Sam")
    alex = _create_student(app_client, headers, class_id, "Alex")
    collaboration = _behavior_id(app_client, headers, "Collaboration")
    leadership = _behavior_id(app_client, headers, "Leadership")

    group_work = app_client.post(
        "/group-works",
        headers=headers,
        json={
            "name": "Science Fair",
            "class_id": class_id,
            "groups": [{"name": "Team 1", "student_ids": [sam, alex]}],
            "behavior_ids": [collaboration],
        },
    ).json()
    group_id = group_work["groups"][0]["id"]
    app_client.post("/group-work-awards", headers=headers, json={"group_id": group_id, "points": 2})

    updated = app_client.put(
        f"/group-works/{group_work['id']}",
        headers=headers,
        json={
            "name": "Science Fair 2",
            "groups": [{"name": "Team 1", "student_ids": [alex]}],
            "behavior_ids": [leadership],
            "behavior_praises": {leadership: "Great leading!"},
        },
    )
    assert updated.status_code == 200, updated.text

    fetched = app_client.get(f"/group-works/{group_work['id']}", headers=headers).json()
    assert fetched["name"] == "Science Fair 2"
    assert len(fetched["groups"]) == 1
    assert [member["student_id"] for member in fetched["groups"][0]["members"]] == [alex]
    assert [(item["behavior_id"], item["praise"]) for item in fetched["behaviors"]] == [(leadership, "Great leading!")]

    sam_history = app_client.get(f"/students/{sam}/points", headers=headers).json()
    assert len(sam_history) == 1
    assert sam_history[0]["points"] == 2


def test_group_work_requires_owned_class(app_client: TestClient):
    owner = auth_headers(app_client)
    other = auth_headers(app_client, email="mr.b@school.test", name="Mr. B")
    class_id = _create_class(app_client, owner)

    response = app_client.post(
        "/group-works",
        headers=other,
        json={"name": "Stolen", "class_id": class_id, "groups": [], "behavior_ids": []},
    )
    assert response.status_code == 404


def test_group_work_delete(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = _create_class(app_client, headers)
    group_work = app_client.post(
        "/group-works",
        headers=headers,
        json={"name": "Quiz", "class_id": class_id, "groups": [{"name": "A", "student_ids": []}], "behavior_ids": []},
    ).json()

    assert app_client.delete(f"/group-works/{group_work['id']}", headers=headers).status_code == 200
    assert app_client.get(f"/group-works/{group_work['id']}", headers=headers).status_code == 404
    assert app_client.get("/group-works", headers=headers).json() == []


def test_badges_catalog(app_client: TestClient):
    badges = app_client.get("/badges", params={"type": "INDIVIDUAL"}).json()
    assert badges
    assert all("INDIVIDUAL" in badge["behavior_types"] for badge in badges)
    assert app_client.get("/badges/collaboration-star").json()["name"] == "Collaboration Star"
    assert app_client.get("/badges/unknown").status_code == 404


def test_group_work_blank_name_is_rejected(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = _create_class(app_client, headers)

    response = app_client.post(
        "/group-works",
        headers=headers,
        json={"name": "   ", "class_id": class_id, "groups": [], "behavior_ids": []},
    )
    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"


def test_group_work_members_keep_submitted_order(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = _create_class(app_client, headers)
    students = [_create_student(app_client, headers, class_id, name) for name in ("Zoe", "Alex", "Morgan", "Casey")]
    ordered = [students[2], students[0], students[3], students[1]]

    created = app_client.post(
        "/group-works",
        headers=headers,
        json={"name": "Relay", "class_id": class_id, "groups": [{"name": "Red", "student_ids": ordered}], "behavior_ids": []},
    ).json()

    fetched = app_client.get(f"/group-works/{created['id']}", headers=headers).json()
    assert [member["student_id"] for member in fetched["groups"][0]["members"]] == ordered


def test_group_work_name_only_put_clears_groups_and_behaviors(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = _create_class(app_client, headers)
    sam = _create_student(app_client, headers, class_id, "Sam")
    created = app_client.post(
        "/group-works",
        headers=headers,
        json={
            "name": "Science Fair",
            "class_id": class_id,
            "groups": [{"name": "Team 1", "student_ids": [sam]}],
            "behavior_ids": [_behavior_id(app_client, headers, "Collaboration")],
        },
    ).json()

    response = app_client.put(f"/group-works/{created['id']}", headers=headers, json={"name": "Renamed"})
    assert response.status_code == 200, response.text

    fetched = app_client.get(f"/group-works/{created['id']}", headers=headers).json()
    assert fetched["name"] == "Renamed"
    assert fetched["groups"] == []
    assert fetched["behaviors"] == []


def test_large_point_awards_are_accepted(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = _create_class(app_client, headers)
    sam = _create_student(app_client, headers, class_id, "Sam")

    response = app_client.put("/students/points", headers=headers, json={"student_ids": [sam], "points_to_add": 5000})
    assert response.status_code == 200, response.text
    assert response.json()[0]["points"] == 5000
