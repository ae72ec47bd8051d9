import pytest

from app import create_app


def _client():
    app = create_app("TestingConfig")
    return app.test_client()


def test_categories_endpoint_lists_units():
    client = _client()
    response = client.get("/api/unit_converter/categories")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    categories = payload["data"]["categories"]
    assert [item["id"] for item in categories] == [
        "pressure",
        "volume",
        "speed",
        "temperature",
        "length",
        "mass",
    ]
    temperature = categories[3]
    assert [unit["symbol"] for unit in temperature["units"]] == ["°C", "°F", "K"]


def test_category_detail_includes_defaults():
    client = _client()
    response = client.get("/api/unit_converter/categories/temperature")
    assert response.status_code == 200
    defaults = response.get_json()["data"]["defaults"]
    assert defaults["selection"] == {
        "category": "temperature",
        "amount": "25",
        "from_unit": "c",
        "to_unit": "f",
    }
    assert defaults["result"] == "77"
    assert defaults["ratio"] == "1 °C = 33.80 °F"


def test_category_detail_unknown_id_is_404():
    client = _client()
    response = client.get("/api/unit_converter/categories/currency")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.unknown_category"


def test_convert_endpoint_success():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "pressure", "amount": "101325", "from_unit": "pa", "to_unit": "atm"},
    )
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["data"]["result"] == "1"
    assert payload["data"]["ratio"] == "1 Pa = 0.00001 atm"


def test_convert_endpoint_accepts_numeric_amount():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "temperature", "amount": 0, "from_unit": "c", "to_unit": "f"},
    )
    assert response.get_json()["data"]["result"] == "32"


def test_convert_endpoint_unparseable_amount_is_not_an_error():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "length", "amount": "abc", "from_unit": "m", "to_unit": "ft"},
    )
    assert response.status_code == 200
    assert response.get_json()["data"]["result"] == "---"


def test_convert_endpoint_rejects_bad_unit():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "length", "amount": "1", "from_unit": "m", "to_unit": "bogus"},
    )
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.unknown_unit"


def test_convert_endpoint_validates_payload():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert", json={"category": "length", "amount": "1"}
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_request"

    response = client.post(
        "/api/unit_converter/convert",
        json={
            "category": "length",
            "amount": "1",
            "from_unit": "m",
            "to_unit": "ft",
            "precision": 3,
        },
    )
    assert response.status_code == 400


@pytest.mark.parametrize("amount", [True, False, None, ["1"]])
def test_convert_endpoint_rejects_non_numeric_json_amount(amount):
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "length", "amount": amount, "from_unit": "m", "to_unit": "m"},
    )
    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.invalid_request"


def test_convert_endpoint_keeps_float_amount():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "length", "amount": 1.5, "from_unit": "km", "to_unit": "m"},
    )
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["result"] == "1500"
    assert data["selection"]["amount"] == "1.5"


def test_swap_endpoint_exchanges_units():
    client = _client()
    response = client.post(
        "/api/unit_converter/swap",
        json={"category": "length", "amount": "1", "from_unit": "m", "to_unit": "ft"},
    )
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["selection"]["from_unit"] == "ft"
    assert data["selection"]["to_unit"] == "m"
    assert data["selection"]["amount"] == "1"
    assert data["result"] == "0.3048"
    assert data["ratio"] == "1 ft = 0.3048 m"


def test_ratio_endpoint():
    client = _client()
    response = client.get(
        "/api/unit_converter/ratio",
        query_string={"category": "length", "from_unit": "m", "to_unit": "ft"},
    )
    assert response.status_code == 200
    assert response.get_json()["data"]["ratio"] == "1 m = 3.28084 ft"

    response = client.get("/api/unit_converter/ratio", query_string={"category": "length"})
    assert response.status_code == 400
