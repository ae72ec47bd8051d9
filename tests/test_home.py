from app import create_app


def test_home_lists_plugins():
    app = create_app("TestingConfig")
    client = app.test_client()
    response = client.get("/")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["data"]["title"] == "Unit Converter"
    titles = [item["title"] for item in payload["data"]["plugins"]]
    assert "Unit Converter" in titles
    assert response.headers.get("Content-Security-Policy")
    assert response.headers.get("X-Request-ID")


def test_unknown_route_returns_json_envelope():
    client = create_app("TestingConfig").test_client()
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "not_found"


def test_wrong_method_returns_405():
    client = create_app("TestingConfig").test_client()
    response = client.get("/api/unit_converter/convert")
    assert response.status_code == 405
    assert response.get_json()["error"]["code"] == "method_not_allowed"


def test_unknown_config_name_is_rejected():
    try:
        create_app("NoSuchConfig")
    except ValueError as exc:
        assert "NoSuchConfig" in str(exc)
    else:  # pragma: no cover
        raise AssertionError("Expected ValueError")
