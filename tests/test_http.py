def test_players_empty(client):
    response = client.get("/players")
    assert response.status_code == 200
    assert response.json() == []


def test_players_lists_connected_sessions(client):
    with client.websocket_connect("/ws") as ws:
        sync = ws.receive_json()
        (session_id,) = sync["data"]

        listed = client.get("/players").json()
        assert [p["id"] for p in listed] == [session_id]

        single = client.get(f"/players/{session_id}")
        assert single.status_code == 200
        assert single.json() == sync["data"][session_id]


def test_unknown_player_404(client):
    response = client.get("/players/nobody")
    assert response.status_code == 404
    assert response.json()["detail"] == "Player not found"


def test_static_client_served_without_cache(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "presence" in response.text
    assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"
