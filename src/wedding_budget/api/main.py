"""
Wedding Budget API - FastAPI app exposing the cost calculation.
"""
import logging

from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from wedding_budget import __version__
from wedding_budget.config import configure_logging
from wedding_budget.engine import (
    PricingEngine, WeddingInput,
    LocationType, CateringLevel, VenueType,
)

configure_logging()
logger = logging.getLogger(__name__)

engine = PricingEngine()

app = FastAPI(
    title="Wedding Budget API",
    description="Backend API for the Wedding Budget Calculator",
    version=__version__,
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CalcRequest(BaseModel):
    guest_count: int = 120
    location_type: LocationType = LocationType.SUBURBAN
    catering_level: CateringLevel = CateringLevel.STANDARD
    venue_type: VenueType = VenueType.BANQUET
    misc_budget: int = 5000


@app.get("/")
async def root():
    return {"status": "online", "message": "Wedding Budget API Active"}


@app.post("/calculate")
async def calculate_budget(req: CalcRequest):
    try:
        wedding = WeddingInput(
            guest_count=req.guest_count,
            location_type=req.location_type,
            catering_level=req.catering_level,
            venue_type=req.venue_type,
            misc_budget=req.misc_budget,
        )
        breakdown = engine.calculate(wedding)
        rows = engine.breakdown_rows(breakdown)
        return jsonable_encoder({
            "input": wedding,
            "breakdown": breakdown.to_dict(),
            "formatted": {row.label: row.value for row in rows},
            "rows": rows,
            "trace": breakdown.trace,
        })
    except Exception as e:
        logger.exception("Budget calculation failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/options")
async def get_options():
    return engine.options()


@app.get("/tips")
async def get_tips():
    return {"tips": engine.tips()}
