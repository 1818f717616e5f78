from typing import Dict, List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, ConfigDict

# Load environment variables from .env file
load_dotenv()

from src.airline_router.application import AirlineNetwork
from src.network.exceptions import UnknownAirportError, ValidationError


# --- Response models ---
# Read from the result dataclasses, @property fields included.


class RouteLegSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    leg_index: int
    departure_airport: str
    arrival_airport: str
    distance: int
    cost: int


class RouteResultSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    origin: str
    destination: str
    route_cities: List[str]
    legs: List[RouteLegSchema]
    total_distance: int
    total_cost: int
    num_legs: int
    num_stops: int


class TreeEdgeSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    a: str
    b: str
    cost: int


class SpanningTreeSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    algorithm: str
    edges: List[TreeEdgeSchema]
    total_cost: int
    num_edges: int
    vertex_count: int
    is_spanning: bool


class ConnectionSchema(BaseModel):
    airport: str
    inbound: int
    outbound: int
    total: int


# --- App factory ---


def create_app(network: Optional[AirlineNetwork] = None) -> FastAPI:
    """
    Build the HTTP API around an AirlineNetwork.

    The network is created with default configuration when not given; its
    graph loads lazily on the first request.
    """
    network = network or AirlineNetwork()
    app = FastAPI(title="Airline Routing API")

    @app.get("/airports", response_model=List[str])
    def list_airports():
        return network.airports()

    @app.get("/states", response_model=Dict[str, List[str]])
    def list_states():
        return {state: list(codes) for state, codes in network.states().items()}

    @app.get("/connections", response_model=List[ConnectionSchema])
    def list_connections():
        return [
            ConnectionSchema(airport=code, inbound=inbound, outbound=outbound, total=total)
            for code, inbound, outbound, total in network.connections()
        ]

    @app.get("/routes/{origin}/states/{state}", response_model=Dict[str, RouteResultSchema])
    def routes_to_state(origin: str, state: str):
        try:
            routes = network.routes_to_state(origin, state)
        except UnknownAirportError as e:
            raise HTTPException(status_code=404, detail=str(e))

        return {code: RouteResultSchema.model_validate(r) for code, r in routes.items()}

    @app.get("/routes/{origin}/{destination}", response_model=RouteResultSchema)
    def shortest_route(origin: str, destination: str):
        try:
            route = network.shortest_route(origin, destination)
        except UnknownAirportError as e:
            raise HTTPException(status_code=404, detail=str(e))

        if route is None:
            raise HTTPException(status_code=404, detail="No route found")
        return RouteResultSchema.model_validate(route)

    @app.get("/routes/{origin}/{destination}/stops/{stops}", response_model=RouteResultSchema)
    def route_with_stops(origin: str, destination: str, stops: int):
        try:
            route = network.route_with_stops(origin, destination, stops)
        except UnknownAirportError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))

        if route is None:
            raise HTTPException(
                status_code=404, detail=f"No route found with {stops} stops"
            )
        return RouteResultSchema.model_validate(route)

    @app.get("/mst", response_model=SpanningTreeSchema)
    def minimum_spanning_tree(algorithm: Optional[str] = Query(default=None)):
        try:
            result = network.minimum_spanning_tree(algorithm)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

        return SpanningTreeSchema.model_validate(result)

    return app


# Served by: uvicorn src.api.network_api:app
app = create_app()
