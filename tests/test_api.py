"""API tests for the conversion and unit endpoints"""


class TestHealth:
    """Tests for service endpoints"""

    def test_root(self, client):
        """Test root endpoint reports running"""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        """Test health endpoint"""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestConvertEndpoint:
    """Tests for GET /api/v1/conversions"""

    def test_convert_success(self, client):
        """Test a valid conversion"""
        response = client.get(
            "/api/v1/conversions",
            params={"from_unit": "feet", "to_unit": "inches", "quantity": "5", "precision": 3}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["result"] == "60.000"
        assert data["source_unit"] == "foot"
        assert data["target_unit"] == "inch"
        assert data["dimension"] == "length"

    def test_convert_quote_symbol(self, client):
        """Test quote-mark units pass through the query string"""
        response = client.get(
            "/api/v1/conversions",
            params={"from_unit": "'", "to_unit": "inches", "quantity": "1", "precision": 0}
        )
        assert response.status_code == 200
        assert response.json()["result"] == "12"

    def test_convert_default_precision(self, client):
        """Test precision defaults to two places"""
        response = client.get(
            "/api/v1/conversions",
            params={"from_unit": "celsius", "to_unit": "fahrenheit", "quantity": "100"}
        )
        assert response.status_code == 200
        assert response.json()["result"] == "212.00"

    def test_convert_dimension_mismatch(self, client):
        """Test cross-dimension conversion returns 400"""
        response = client.get(
            "/api/v1/conversions",
            params={"from_unit": "kilogram", "to_unit": "meter", "quantity": "5"}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "DimensionMismatchError"

    def test_convert_unknown_unit_suggests(self, client):
        """Test unknown unit returns 400 with suggestions"""
        response = client.get(
            "/api/v1/conversions",
            params={"from_unit": "kilometr", "to_unit": "meter", "quantity": "5"}
        )
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == "UnresolvedUnitError"
        assert "kilometer" in detail["suggestions"]

    def test_convert_negative_precision(self, client):
        """Test negative precision returns 400"""
        response = client.get(
            "/api/v1/conversions",
            params={"from_unit": "meter", "to_unit": "foot", "quantity": "5", "precision": -1}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "InvalidPrecisionError"

    def test_convert_missing_quantity(self, client):
        """Test missing quantity fails request validation"""
        response = client.get(
            "/api/v1/conversions",
            params={"from_unit": "meter", "to_unit": "foot"}
        )
        assert response.status_code == 422


class TestBatchEndpoint:
    """Tests for POST /api/v1/conversions/batch"""

    def test_batch(self, client):
        """Test batch results and summary"""
        response = client.post(
            "/api/v1/conversions/batch",
            json={
                "conversions": [
                    {"from_unit": "feet", "to_unit": "inches", "quantity": "5", "precision": 3},
                    {"from_unit": "kelvin", "to_unit": "celsius", "quantity": "-5"},
                    {"from_unit": "meter", "to_unit": "centimeter", "quantity": 2.5, "precision": 1},
                ]
            }
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["succeeded"] == 2
        assert data["failed"] == 1
        assert data["results"][0]["result"] == "60.000"
        assert data["results"][1]["error"] == "NegativeValueError"
        assert data["results"][2]["result"] == "250.0"
        assert data["dimensions_used"] == {"length": 2}

    def test_batch_over_limit(self, client):
        """Test batches over the limit return 400"""
        item = {"from_unit": "m", "to_unit": "cm", "quantity": "1"}
        response = client.post(
            "/api/v1/conversions/batch",
            json={"conversions": [item] * 6}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "BatchLimitError"


class TestUnitsEndpoints:
    """Tests for /api/v1/units"""

    def test_list_units(self, client, catalog):
        """Test listing every unit"""
        response = client.get("/api/v1/units")
        assert response.status_code == 200
        assert len(response.json()) == len(catalog)

    def test_list_units_by_dimension(self, client):
        """Test filtering units by dimension"""
        response = client.get("/api/v1/units", params={"dimension": "temperature"})
        assert response.status_code == 200
        names = [unit["name"] for unit in response.json()]
        assert names == ["fahrenheit", "celsius", "kelvin", "rankine", "reaumur"]
        assert response.json()[0]["allows_negative"] is True

    def test_list_units_unknown_dimension(self, client):
        """Test unknown dimension returns 404"""
        response = client.get("/api/v1/units", params={"dimension": "speed"})
        assert response.status_code == 404

    def test_list_dimensions(self, client):
        """Test dimension overview"""
        response = client.get("/api/v1/units/dimensions")
        assert response.status_code == 200
        data = {item["dimension"]: item for item in response.json()}
        assert len(data) == 9
        assert data["length"]["base_unit"] == "meter"
        assert data["angle"]["unit_count"] == 6

    def test_resolve_unique(self, client):
        """Test resolving an unambiguous alias"""
        response = client.get("/api/v1/units/resolve/kg")
        assert response.status_code == 200
        data = response.json()
        assert data["unit"]["name"] == "kilogram"
        assert data["ambiguous"] is False

    def test_resolve_ambiguous(self, client):
        """Test resolving a shared alias lists every candidate"""
        response = client.get("/api/v1/units/resolve/n")
        assert response.status_code == 200
        data = response.json()
        assert data["unit"]["name"] == "nautical mile"
        assert [unit["name"] for unit in data["matches"]] == ["nautical mile", "newton"]
        assert data["ambiguous"] is True

    def test_resolve_token_with_slash(self, client):
        """Test tokens containing a slash"""
        response = client.get("/api/v1/units/resolve/lbs/inch^2")
        assert response.status_code == 200
        assert response.json()["unit"]["name"] == "pounds per square inch"

    def test_resolve_unknown(self, client):
        """Test unknown token returns 404"""
        response = client.get("/api/v1/units/resolve/gronk")
        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "UnresolvedUnitError"
