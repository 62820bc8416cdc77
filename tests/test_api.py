from datetime import date


def _create_player(client, user="coach-1", **overrides):
    body = {
        "user_id": "owner-1",
        "name": "Marco Rossi",
        "date_of_birth": "1995-06-01",
        "gender": "Male",
    }
    body.update(overrides)
    return client.post("/api/players", json=body, headers={"X-User-Id": user})


def _create_assignment(client, player_id, **overrides):
    body = {
        "player_id": player_id,
        "team_name": "Lions",
        "championship_name": "Spring League",
        "joined_date": "2024-01-10",
    }
    body.update(overrides)
    return client.post("/api/team-players", json=body, headers={"X-User-Id": "coach-1"})


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_create_and_get_player(client):
    response = _create_player(client)
    assert response.status_code == 201
    created = response.json()
    assert created["created_by"] == "coach-1"
    assert created["age"] is not None

    fetched = client.get(f"/api/players/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Marco Rossi"

    listed = client.get("/api/players", params={"user_id": "owner-1"})
    assert [p["id"] for p in listed.json()] == [created["id"]]
    assert client.get("/api/players", params={"user_id": "someone-else"}).json() == []


def test_missing_header_uses_system_user(client):
    response = client.post(
        "/api/players",
        json={"user_id": "owner-1", "name": "Luca", "date_of_birth": "2001-01-01"},
    )
    assert response.status_code == 201
    assert response.json()["created_by"] == "system"


def test_validation_errors_returned_per_field(client):
    response = _create_player(client, name="", gender="Robot")
    assert response.status_code == 422
    errors = response.json()["errors"]
    assert set(errors) == {"name", "gender"}


def test_unknown_player_is_404(client):
    assert client.get("/api/players/999").status_code == 404
    assert client.delete("/api/players/999").status_code == 404


def test_update_player(client):
    player_id = _create_player(client).json()["id"]
    response = client.put(
        f"/api/players/{player_id}",
        json={"user_id": "owner-1", "name": "Marco Bianchi", "date_of_birth": "1995-06-01"},
        headers={"X-User-Id": "coach-2"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Marco Bianchi"
    assert body["updated_by"] == "coach-2"
    assert body["created_by"] == "coach-1"


def test_duplicate_assignment_is_409(client):
    player_id = _create_player(client).json()["id"]
    assert _create_assignment(client, player_id).status_code == 201

    response = _create_assignment(client, player_id, joined_date="2024-02-01")
    assert response.status_code == 409
    assert response.json()["team_name"] == "Lions"


def test_leave_team_and_history(client):
    player_id = _create_player(client).json()["id"]
    assignment_id = _create_assignment(client, player_id).json()["id"]

    response = client.post(f"/api/team-players/{assignment_id}/leave", json={"left_date": "2024-06-30"})
    assert response.status_code == 200
    assert response.json()["is_active"] is False

    again = client.post(f"/api/team-players/{assignment_id}/leave", json={"left_date": "2024-07-01"})
    assert again.status_code == 422
    assert "left_date" in again.json()["errors"]

    assert client.get(f"/api/players/{player_id}/teams").json() == []
    history = client.get(f"/api/players/{player_id}/teams", params={"include_inactive": True}).json()
    assert [tp["id"] for tp in history] == [assignment_id]


def test_statistics_flow_and_aggregates(client):
    player_id = _create_player(client).json()["id"]
    assignment_id = _create_assignment(client, player_id).json()["id"]

    games = [("2024-03-01", 90, 2, 1), ("2024-03-08", 45, 1, 2), ("2024-03-15", 60, 0, 3)]
    for game_date, minutes, goals, assists in games:
        response = client.post(
            "/api/statistics",
            json={
                "team_player_id": assignment_id,
                "game_date": game_date,
                "minutes_played": minutes,
                "jersey_number": 7,
                "goals": goals,
                "assists": assists,
            },
            headers={"X-User-Id": "coach-3"},
        )
        assert response.status_code == 201
        assert response.json()["created_by"] == "coach-3"

    aggregates = client.get(f"/api/players/{player_id}/aggregates").json()
    assert aggregates["game_count"] == 3
    assert aggregates["total_minutes_played"] == 195
    assert aggregates["average_minutes_played"] == 65
    assert aggregates["average_goals"] == 1
    assert aggregates["average_assists"] == 2

    ranged = client.get(
        f"/api/players/{player_id}/statistics",
        params={"start_date": "2024-03-01", "end_date": "2024-03-08"},
    ).json()
    assert [s["game_date"] for s in ranged] == ["2024-03-08", "2024-03-01"]

    bad_range = client.get(
        f"/api/players/{player_id}/statistics",
        params={"start_date": "2024-03-08", "end_date": "2024-03-01"},
    )
    assert bad_range.status_code == 400

    by_assignment = client.get(f"/api/team-players/{assignment_id}/statistics").json()
    assert len(by_assignment) == 3


def test_invalid_statistic_is_422(client):
    player_id = _create_player(client).json()["id"]
    assignment_id = _create_assignment(client, player_id).json()["id"]
    response = client.post(
        "/api/statistics",
        json={
            "team_player_id": assignment_id,
            "game_date": "2024-03-01",
            "minutes_played": -1,
            "jersey_number": 7,
        },
    )
    assert response.status_code == 422
    assert "minutes_played" in response.json()["errors"]
    assert client.get(f"/api/team-players/{assignment_id}/statistics").json() == []


def test_empty_aggregates_are_zero(client):
    player_id = _create_player(client).json()["id"]
    aggregates = client.get(f"/api/players/{player_id}/aggregates").json()
    assert aggregates["game_count"] == 0
    assert aggregates["average_goals"] == 0


def test_delete_player_cascades(client):
    player_id = _create_player(client).json()["id"]
    assignment_id = _create_assignment(client, player_id).json()["id"]
    statistic_id = client.post(
        "/api/statistics",
        json={"team_player_id": assignment_id, "game_date": str(date(2024, 3, 1)), "minutes_played": 90, "jersey_number": 7},
    ).json()["id"]

    assert client.delete(f"/api/players/{player_id}").status_code == 204
    assert client.get(f"/api/team-players/{assignment_id}").status_code == 404
    assert client.get(f"/api/statistics/{statistic_id}").status_code == 404
