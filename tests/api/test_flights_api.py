"""
Tests for the HTTP endpoints.

Tests cover:
- Route listing and lookup (wire field names, 404 body)
- Direct flight search (200 list / 404 body / 400 on bad hints)
- Connecting flight search (payload shape, empty 200)
- Booking (200 confirmation, 404, 400 capacity, 400 malformed body)
- Health endpoint
"""

import pytest


# =============================================================================
# ROUTES
# =============================================================================


class TestRoutes:
    """GET /routes and GET /routes/{route_id}."""

    def test_list_routes(self, client):
        response = client.get("/routes")

        assert response.status_code == 200
        body = response.json()
        assert [r["route_id"] for r in body] == ["R1", "R2"]

    def test_route_wire_format(self, client):
        route = client.get("/routes/R1").json()

        assert route["departureDestination"] == "X"
        assert route["arrivalDestination"] == "Y"
        flight = route["itineraries"][0]
        assert flight == {
            "flight_id": "F1",
            "departureAt": "2024-01-01T08:00:00Z",
            "arrivalAt": "2024-01-01T10:00:00Z",
            "availableSeats": 5,
            "prices": {"currency": "EUR", "adult": 100, "child": 50},
        }

    def test_whole_prices_serialize_as_integers(self, client):
        body = client.get("/routes/R1").text

        assert '"adult":100,' in body
        assert '"adult":100.0' not in body

    def test_unknown_route(self, client):
        response = client.get("/routes/R404")

        assert response.status_code == 404
        assert response.json() == {"error": "Route not found"}


# =============================================================================
# DIRECT FLIGHTS
# =============================================================================


class TestDirectFlights:
    """GET /direct-flights/{departure}/{arrival}."""

    def test_direct_flights_found(self, client):
        response = client.get("/direct-flights/X/Y")

        assert response.status_code == 200
        assert [f["flight_id"] for f in response.json()] == ["F1"]

    def test_direct_flights_with_hint(self, client):
        response = client.get(
            "/direct-flights/X/Y", params={"departureTime": "2024-01-01T20:00:00Z"}
        )
        assert response.status_code == 200

    def test_direct_flights_outside_window(self, client):
        response = client.get(
            "/direct-flights/X/Y", params={"departureTime": "2024-01-03T00:00:00Z"}
        )
        assert response.status_code == 404
        assert response.json() == {"error": "No direct flights available"}

    def test_no_direct_flights(self, client):
        response = client.get("/direct-flights/X/Z")

        assert response.status_code == 404
        assert response.json() == {"error": "No direct flights available"}

    def test_invalid_hint(self, client):
        response = client.get("/direct-flights/X/Y", params={"arrivalTime": "noon"})

        assert response.status_code == 400
        assert "arrivalTime" in response.json()["error"]


# =============================================================================
# CONNECTING FLIGHTS
# =============================================================================


class TestConnectionFlights:
    """GET /connection-flights/{departureDestination}/{arrivalDestination}."""

    def test_connection_payload(self, client):
        response = client.get("/connection-flights/X/Z")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 1
        connection = body[0]
        assert connection["departureFlight"]["flight_id"] == "F1"
        assert connection["arrivalFlight"]["flight_id"] == "F2"
        assert connection["arrivalFlight"]["departureAt"] == "2024-01-01T11:00:00Z"
        assert connection["layoverTime"] == "60 minutes"
        assert connection["route"] == {
            "departureRoute": {"departureDestination": "X", "arrivalDestination": "Y"},
            "arrivalRoute": {"departureDestination": "Y", "arrivalDestination": "Z"},
        }

    def test_no_connections_is_empty_200(self, client):
        response = client.get("/connection-flights/Z/X")

        assert response.status_code == 200
        assert response.json() == []

    def test_arrival_hint(self, client):
        matched = client.get(
            "/connection-flights/X/Z", params={"arrivalTime": "2024-01-01T13:00:00Z"}
        )
        missed = client.get(
            "/connection-flights/X/Z", params={"arrivalTime": "2024-01-01T13:05:00Z"}
        )
        assert len(matched.json()) == 1
        assert missed.json() == []

    def test_invalid_hint(self, client):
        response = client.get(
            "/connection-flights/X/Z", params={"departureTime": "someday"}
        )
        assert response.status_code == 400


# =============================================================================
# BOOKING
# =============================================================================


class TestBook:
    """POST /book."""

    def test_successful_booking(self, client):
        response = client.post("/book", json={"name": "Ada", "flightId": "F1", "numSeats": 2})

        assert response.status_code == 200
        assert response.json() == {
            "name": "Ada",
            "flightId": "F1",
            "numSeats": 2,
            "totalPrice": 200,
            "departure": "X",
            "arrival": "Y",
            "departureTime": "2024-01-01T08:00:00Z",
            "arrivalTime": "2024-01-01T10:00:00Z",
        }

    def test_total_price_serializes_as_integer(self, client):
        response = client.post("/book", json={"name": "Ada", "flightId": "F1", "numSeats": 2})

        assert '"totalPrice":200,' in response.text

    def test_booking_decrements_seats(self, client):
        client.post("/book", json={"name": "Ada", "flightId": "F1", "numSeats": 2})

        flight = client.get("/routes/R1").json()["itineraries"][0]
        assert flight["availableSeats"] == 3

    def test_not_enough_seats(self, client):
        response = client.post("/book", json={"name": "Ada", "flightId": "F1", "numSeats": 10})

        assert response.status_code == 400
        assert response.json() == {"error": "Not enough seats available"}
        flight = client.get("/routes/R1").json()["itineraries"][0]
        assert flight["availableSeats"] == 5

    def test_unknown_flight(self, client):
        response = client.post("/book", json={"name": "Ada", "flightId": "F9", "numSeats": 1})

        assert response.status_code == 404
        assert response.json() == {"error": "Flight not found"}

    def test_sold_out_after_bookings_hides_direct_flight(self, client):
        client.post("/book", json={"name": "Ada", "flightId": "F1", "numSeats": 5})

        response = client.get("/direct-flights/X/Y")
        assert response.status_code == 404

    @pytest.mark.parametrize(
        "body",
        [
            {"flightId": "F1", "numSeats": 1},
            {"name": "Ada", "numSeats": 1},
            {"name": "Ada", "flightId": "F1"},
            {"name": "Ada", "flightId": "F1", "numSeats": "many"},
            {"name": "Ada", "flightId": "F1", "numSeats": 0},
            {"name": "Ada", "flightId": "F1", "numSeats": -1},
        ],
    )
    def test_malformed_body(self, client, body):
        response = client.post("/book", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"
        assert response.json()["details"]
        flight = client.get("/routes/R1").json()["itineraries"][0]
        assert flight["availableSeats"] == 5


# =============================================================================
# HEALTH
# =============================================================================


class TestHealth:
    """GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "routes": 2, "flights": 2}
