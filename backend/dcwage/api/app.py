"""FastAPI application — create_app factory with the /api/wage endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from pydantic import ValidationError

from dcwage.api.page import ESTIMATOR_PAGE
from dcwage.exceptions import InvalidRequestBodyError
from dcwage.models.wage import ErrorResponse, WageQuery, WageResponse

if TYPE_CHECKING:
    from pydantic import BaseModel

    from dcwage.engine import WageEngine

logger = logging.getLogger(__name__)

API_PATH = "/api/wage"

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,HEAD,POST,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

LOCATION_REQUIRED = "Location is required"
LOCATION_NOT_FOUND = "Location not found"
INTERNAL_ERROR = "Internal Server Error"

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def parse_wage_query(body: Any) -> WageQuery:
    """Validate a decoded POST body into a WageQuery.

    Raises InvalidRequestBodyError if the body is not a JSON object or
    its ``location`` is not a string.
    """
    if not isinstance(body, dict):
        msg = f"Request body must be a JSON object, got {type(body).__name__}"
        raise InvalidRequestBodyError(msg)
    try:
        return WageQuery.model_validate(body)
    except ValidationError as exc:
        msg = "Request body field 'location' must be a string"
        raise InvalidRequestBodyError(msg) from exc


def _api_response(payload: BaseModel, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        payload.model_dump(mode="json", by_alias=True),
        status_code=status_code,
        headers=CORS_HEADERS,
    )


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return _api_response(ErrorResponse(error=error, message=message), status_code)


def create_app(*, engine: WageEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built wage engine for dependency injection (e.g. tests).
        If not provided, one is created via create_default_engine on the
        first wage request.
    """
    # Every path outside the wage API serves the estimator page, so the
    # generated docs routes are switched off.
    app = FastAPI(
        title="dcwage",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Store on app state so tests can inject mocks
    app.state.engine = engine

    def _get_engine() -> WageEngine:
        eng: WageEngine | None = app.state.engine
        if eng is not None:
            return eng
        from dcwage.factory import create_default_engine

        eng = create_default_engine()
        app.state.engine = eng
        return eng

    def _lookup(location: str) -> JSONResponse:
        location = location.strip()
        if not location:
            return _error_response(
                400,
                LOCATION_REQUIRED,
                "Please provide a specific city, state/province, or country",
            )

        estimate = _get_engine().estimate(location)
        if estimate is None:
            return _error_response(
                404,
                LOCATION_NOT_FOUND,
                f"No wage data available for {location}. "
                "Try a different location or level of detail.",
            )
        return _api_response(WageResponse.from_estimate(estimate))

    def _internal_error(exc: Exception) -> JSONResponse:
        # The raw failure text goes back to the caller unfiltered.
        logger.exception("Unexpected error during wage lookup")
        return _error_response(500, INTERNAL_ERROR, str(exc))

    # ------------------------------------------------------------------
    # OPTIONS /api/wage
    # ------------------------------------------------------------------

    @app.options(API_PATH)
    def wage_preflight() -> Response:
        return Response(status_code=200, headers=CORS_HEADERS)

    # ------------------------------------------------------------------
    # GET /api/wage
    # ------------------------------------------------------------------

    @app.get(API_PATH)
    def wage_from_query(location: str = "") -> JSONResponse:
        try:
            return _lookup(location)
        except Exception as exc:
            return _internal_error(exc)

    # ------------------------------------------------------------------
    # POST /api/wage
    # ------------------------------------------------------------------

    @app.post(API_PATH)
    async def wage_from_body(request: Request) -> JSONResponse:
        try:
            query = parse_wage_query(await request.json())
            return _lookup(query.location or "")
        except Exception as exc:
            return _internal_error(exc)

    # ------------------------------------------------------------------
    # Other methods on /api/wage carry no location
    # ------------------------------------------------------------------

    @app.api_route(API_PATH, methods=["HEAD", "PUT", "PATCH", "DELETE"])
    def wage_without_location() -> JSONResponse:
        return _lookup("")

    # ------------------------------------------------------------------
    # Everything else: the estimator page
    # ------------------------------------------------------------------

    @app.api_route("/{path:path}", methods=_ALL_METHODS, response_class=HTMLResponse)
    def estimator_page(path: str) -> HTMLResponse:
        return HTMLResponse(ESTIMATOR_PAGE)

    return app
