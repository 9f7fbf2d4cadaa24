# app/schemas/car.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional


class CarCreate(BaseModel):
    license_plate: str = Field(..., min_length=1, max_length=50)
    seat_count: Optional[int] = Field(None, ge=1)     # falls back to DEFAULT_SEAT_COUNT
    convertible: bool = False
    rating: Optional[float] = Field(None, ge=0, le=5)
    engine_type: Literal["ELECTRIC", "GAS", "HYBRID"] = "GAS"
    manufacturer: Optional[str] = None


class CarOut(BaseModel):
    id: int
    license_plate: str
    seat_count: int
    convertible: bool
    rating: Optional[float]
    engine_type: str
    manufacturer: Optional[str]
    date_created: datetime
    is_available: bool
    deleted: bool

    class Config:
        from_attributes = True
