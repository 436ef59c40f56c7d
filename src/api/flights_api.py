from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import List, Optional, Union

from fastapi import Depends, FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from src.flight_booking.application import FlightBookingApp
from src.flight_booking.config import Config
from src.flight_booking.exceptions import (
    CapacityExceededError,
    FlightBookingError,
    InvalidRequestError,
    NotFoundError,
)
from src.flight_booking.logging_config import setup_logging
from src.flight_booking.schemas.connection import ConnectionResult


# --- Pydantic Schemas (The JSON Contract) ---
# Field names follow the domain dataclasses; aliases give the wire names.
# Prices stay int when whole so they serialize as stored.


class _WireModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class PricesSchema(_WireModel):
    currency: str
    adult: Union[int, float]
    child: Union[int, float]


class FlightSchema(_WireModel):
    flight_id: str
    departure_at: str = Field(alias="departureAt")
    arrival_at: str = Field(alias="arrivalAt")
    available_seats: int = Field(alias="availableSeats")
    prices: PricesSchema


class RouteSchema(_WireModel):
    route_id: str
    departure_destination: str = Field(alias="departureDestination")
    arrival_destination: str = Field(alias="arrivalDestination")
    itineraries: List[FlightSchema]


class RouteLegSchema(_WireModel):
    departure_destination: str = Field(alias="departureDestination")
    arrival_destination: str = Field(alias="arrivalDestination")


class ConnectionRouteSchema(_WireModel):
    departure_route: RouteLegSchema = Field(alias="departureRoute")
    arrival_route: RouteLegSchema = Field(alias="arrivalRoute")


class ConnectionSchema(_WireModel):
    departure_flight: FlightSchema = Field(alias="departureFlight")
    arrival_flight: FlightSchema = Field(alias="arrivalFlight")
    layover_time: str = Field(alias="layoverTime")
    route: ConnectionRouteSchema


class BookingRequest(_WireModel):
    name: str
    flight_id: str = Field(alias="flightId")
    num_seats: int = Field(alias="numSeats", ge=1)


class BookingConfirmationSchema(_WireModel):
    name: str
    flight_id: str = Field(alias="flightId")
    num_seats: int = Field(alias="numSeats")
    total_price: Union[int, float] = Field(alias="totalPrice")
    departure: str
    arrival: str
    departure_time: str = Field(alias="departureTime")
    arrival_time: str = Field(alias="arrivalTime")


class HealthSchema(BaseModel):
    status: str
    routes: int
    flights: int


# --- App wiring ---


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The store is built once per process unless one was injected
    if getattr(app.state, "booking_app", None) is None:
        app.state.booking_app = FlightBookingApp(data_path=Config.FLIGHT_DATA_PATH)
    yield


def get_booking_app(request: Request) -> FlightBookingApp:
    return request.app.state.booking_app


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse({"error": message, **extra}, status_code=status_code)


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(404, exc.message)


async def _bad_request_handler(request: Request, exc: FlightBookingError) -> JSONResponse:
    return _error(400, exc.message)


async def _validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(400, "Invalid request", details=jsonable_encoder(exc.errors()))


def _connection_payload(result: ConnectionResult) -> dict:
    return {
        "departure_flight": asdict(result.departure_flight),
        "arrival_flight": asdict(result.arrival_flight),
        "layover_time": result.layover_time,
        "route": {
            "departure_route": asdict(result.departure_route),
            "arrival_route": asdict(result.arrival_route),
        },
    }


def create_app(booking_app: Optional[FlightBookingApp] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        booking_app: Engine to serve. If None, one is created from
            Config.FLIGHT_DATA_PATH at startup.
    """
    app = FastAPI(title="Flight Booking API", lifespan=lifespan)
    app.state.booking_app = booking_app

    # Enable CORS for browser clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials="*" not in Config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(CapacityExceededError, _bad_request_handler)
    app.add_exception_handler(InvalidRequestError, _bad_request_handler)
    app.add_exception_handler(RequestValidationError, _validation_handler)

    # --- API Endpoints ---

    @app.get("/routes", response_model=List[RouteSchema])
    def list_routes(engine: FlightBookingApp = Depends(get_booking_app)):
        return engine.list_routes()

    @app.get("/routes/{route_id}", response_model=RouteSchema)
    def get_route(route_id: str, engine: FlightBookingApp = Depends(get_booking_app)):
        return engine.get_route(route_id)

    @app.get("/direct-flights/{departure}/{arrival}", response_model=List[FlightSchema])
    def direct_flights(
        departure: str,
        arrival: str,
        departure_time: Optional[str] = Query(None, alias="departureTime"),
        arrival_time: Optional[str] = Query(None, alias="arrivalTime"),
        engine: FlightBookingApp = Depends(get_booking_app),
    ):
        return engine.find_direct_flights(
            departure, arrival, departure_time=departure_time, arrival_time=arrival_time
        )

    @app.get(
        "/connection-flights/{departure_destination}/{arrival_destination}",
        response_model=List[ConnectionSchema],
    )
    def connection_flights(
        departure_destination: str,
        arrival_destination: str,
        departure_time: Optional[str] = Query(None, alias="departureTime"),
        arrival_time: Optional[str] = Query(None, alias="arrivalTime"),
        engine: FlightBookingApp = Depends(get_booking_app),
    ):
        results = engine.find_connecting_flights(
            departure_destination,
            arrival_destination,
            departure_time=departure_time,
            arrival_time=arrival_time,
        )
        return [_connection_payload(r) for r in results]

    @app.post("/book", response_model=BookingConfirmationSchema)
    def book(request: BookingRequest, engine: FlightBookingApp = Depends(get_booking_app)):
        return engine.book(request.name, request.flight_id, request.num_seats)

    @app.get("/health", response_model=HealthSchema)
    def health(engine: FlightBookingApp = Depends(get_booking_app)):
        return {
            "status": "healthy" if engine.is_ready else "starting",
            "routes": engine.route_count,
            "flights": engine.flight_count,
        }

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn on the configured host and port."""
    import uvicorn

    setup_logging(Config.LOG_LEVEL)
    uvicorn.run(app, host=Config.API_HOST, port=Config.API_PORT)


if __name__ == "__main__":
    main()
