"""
FastAPI backend for Fairway Lab.

This provides REST API endpoints for shot planning, equipment catalogs and
course data, so the map UI can stay a thin client.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Any, Dict, List, Optional
import logging
import sys
import os

# Add parent directory to path to import our modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.settings import (
    APP_DESCRIPTION, APP_NAME, APP_VERSION, LOGGING_CONFIG,
    DEFAULT_CLUB_ID, DEFAULT_COURSE, DEFAULT_SHAPE_ID, DEFAULT_TRAJECTORY_ID,
    DEFAULT_WIND_BEARING_DEGREES, DEFAULT_WIND_SPEED_MPH,
    WIND_BEARING_RANGE, WIND_SPEED_RANGE,
    GeodesyConfig, ShotModelConfig, WindConfig,
)

# Initialize logging
logging.basicConfig(level=LOGGING_CONFIG["level"], format=LOGGING_CONFIG["format"])
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=f"{APP_NAME} API",
    description=APP_DESCRIPTION,
    version=APP_VERSION
)

# Add CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",  # Vite/Next dev server
        "http://localhost:5173",  # Vite dev server (default port)
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Import our services
from core.models.course import holes_to_dataframe
from core.models.equipment import catalog_to_dataframe
from core.models.shot import ShotInputs, ShotResult, WindComponents, WindVector
from core.validation import UnknownProfile, ValidationError
from services.shot_service import (
    build_advisor_context, get_shot_planner, yardage_book,
)
from services.wind_service import get_wind_resolver
from utils.geo import bearing_to_compass_degrees

COURSE = DEFAULT_COURSE
planner = get_shot_planner()


# Pydantic models for API requests/responses
class Point(BaseModel):
    latitude: float
    longitude: float


class Wind(BaseModel):
    speed_mph: float = DEFAULT_WIND_SPEED_MPH
    bearing_degrees: float = DEFAULT_WIND_BEARING_DEGREES


class ShotRequest(BaseModel):
    player: Point
    target: Point
    wind: Wind = Wind()
    club: str = DEFAULT_CLUB_ID
    shape: str = DEFAULT_SHAPE_ID
    trajectory: str = DEFAULT_TRAJECTORY_ID


class HoleShotRequest(BaseModel):
    player: Optional[Point] = None  # Defaults to the tee
    wind: Wind = Wind()
    club: str = DEFAULT_CLUB_ID
    shape: str = DEFAULT_SHAPE_ID
    trajectory: str = DEFAULT_TRAJECTORY_ID


class ShotResponse(BaseModel):
    distance_to_target_yards: int
    carry_yards: int
    lateral_drift_yards: int
    target_bearing_degrees: float
    headwind_mph: float
    crosswind_mph: float
    wind_labels: Dict[str, str]
    advisor_context: Optional[Dict[str, Any]] = None


def _to_response(result: ShotResult, advisor_context: Optional[Dict[str, Any]] = None) -> ShotResponse:
    return ShotResponse(
        distance_to_target_yards=result.distance_to_target_yards,
        carry_yards=result.carry_yards,
        lateral_drift_yards=result.lateral_drift_yards,
        target_bearing_degrees=bearing_to_compass_degrees(result.target_bearing_radians),
        headwind_mph=result.headwind_mph,
        crosswind_mph=result.crosswind_mph,
        wind_labels=get_wind_resolver().describe(
            WindComponents(headwind=result.headwind_mph, crosswind=result.crosswind_mph)
        ),
        advisor_context=advisor_context,
    )


def _raise_http(e: Exception, action: str):
    """Translate a failure into an HTTPException."""
    if isinstance(e, HTTPException):
        raise e
    if isinstance(e, UnknownProfile):
        raise HTTPException(status_code=404, detail=str(e))
    if isinstance(e, ValidationError):
        raise HTTPException(status_code=400, detail=str(e))
    logger.error(f"Error {action}: {str(e)}")
    raise HTTPException(status_code=500, detail=f"Error {action}: {str(e)}")


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": f"{APP_NAME} API",
        "version": APP_VERSION,
        "endpoints": {
            "POST /api/shot": "Plan a shot between two points",
            "POST /api/holes/{number}/shot": "Plan a shot to a hole's green",
            "GET /api/catalog": "Clubs, shapes and trajectories",
            "GET /api/course": "Holes of the current course",
            "GET /api/yardage-book": "Per-hole carry table for a wind",
            "GET /api/health": "Health check endpoint"
        }
    }


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "fairway-lab-api"}


@app.get("/api/config")
async def get_config():
    """Get default configuration values."""
    return {
        "defaults": {
            "wind_speed_mph": DEFAULT_WIND_SPEED_MPH,
            "wind_bearing_degrees": DEFAULT_WIND_BEARING_DEGREES,
            "club": DEFAULT_CLUB_ID,
            "shape": DEFAULT_SHAPE_ID,
            "trajectory": DEFAULT_TRAJECTORY_ID,
            "course": DEFAULT_COURSE.name,
        },
        "ranges": {
            "wind_speed_mph": WIND_SPEED_RANGE,
            "wind_bearing_degrees": WIND_BEARING_RANGE,
        },
        "model": ShotModelConfig.as_dict(),
        "wind": WindConfig.as_dict(),
        "geodesy": GeodesyConfig.as_dict(),
    }


@app.get("/api/catalog")
async def get_catalog():
    """Equipment catalogs in display order."""
    tables = catalog_to_dataframe()
    return {name: table.to_dict(orient="records") for name, table in tables.items()}


@app.get("/api/course")
async def get_course():
    """Holes of the current course."""
    return {
        "name": COURSE.name,
        "total_par": COURSE.total_par,
        "holes": holes_to_dataframe(COURSE).to_dict(orient="records"),
    }


@app.post("/api/shot", response_model=ShotResponse)
async def plan_shot(request: ShotRequest):
    """
    Plan a shot from the player's position to a target.

    Returns:
        Distance to target, wind-adjusted carry and lateral drift
    """
    try:
        inputs = ShotInputs.build(
            player=(request.player.latitude, request.player.longitude),
            target=(request.target.latitude, request.target.longitude),
            wind=WindVector(request.wind.speed_mph, request.wind.bearing_degrees),
            club=request.club,
            shape=request.shape,
            trajectory=request.trajectory,
        )
        return _to_response(planner.plan(inputs))
    except Exception as e:
        _raise_http(e, "planning shot")


@app.post("/api/holes/{number}/shot", response_model=ShotResponse)
async def plan_hole_shot(number: int, request: HoleShotRequest):
    """
    Plan a shot to a hole's green.

    The player defaults to the tee. The response includes the values handed to
    the caddie advisor.
    """
    try:
        hole = COURSE.hole(number)
        player = hole.tee if request.player is None else (request.player.latitude, request.player.longitude)
        inputs = ShotInputs.build(
            player=player,
            target=hole.green,
            wind=WindVector(request.wind.speed_mph, request.wind.bearing_degrees),
            club=request.club,
            shape=request.shape,
            trajectory=request.trajectory,
        )
        result = planner.plan(inputs)
        return _to_response(result, build_advisor_context(hole, inputs, result))
    except Exception as e:
        _raise_http(e, f"planning shot on hole {number}")


@app.get("/api/yardage-book")
async def get_yardage_book(
    wind_speed_mph: float = DEFAULT_WIND_SPEED_MPH,
    wind_bearing_degrees: float = DEFAULT_WIND_BEARING_DEGREES,
    shape: str = DEFAULT_SHAPE_ID,
    trajectory: str = DEFAULT_TRAJECTORY_ID
) -> Dict[str, Any]:
    """Per-hole distance and carry for every club under one wind."""
    try:
        book = yardage_book(
            COURSE,
            WindVector(wind_speed_mph, wind_bearing_degrees),
            shape=shape,
            trajectory=trajectory,
            planner=planner,
        )
        rows: List[Dict[str, Any]] = book.to_dict(orient="records")
        return {"course": COURSE.name, "holes": rows}
    except Exception as e:
        _raise_http(e, "building yardage book")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
