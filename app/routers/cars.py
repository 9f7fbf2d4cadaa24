# app/routers/cars.py
"""Car management: lookup, registration, soft delete and driver assignment."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.models.car import Car
from app.repositories.car_repository import SqlAlchemyCarRepository
from app.schemas.car import CarCreate, CarOut
from app.services.car_service import CarService

router = APIRouter()


def get_car_service(db: Session = Depends(get_db)) -> CarService:
    return CarService(SqlAlchemyCarRepository(db))


@router.get("/cars", response_model=list[CarOut], summary="List cars by availability")
def list_cars(is_available: bool = True, service: CarService = Depends(get_car_service)):
    return service.find_by_availability(is_available)


@router.get("/cars/{car_id}", response_model=CarOut, summary="Get a car")
def get_car(car_id: int, service: CarService = Depends(get_car_service)):
    return service.find(car_id)


@router.post("/cars", response_model=CarOut, status_code=status.HTTP_201_CREATED, summary="Register a new car")
def create_car(body: CarCreate, service: CarService = Depends(get_car_service)):
    data = body.model_dump()
    if data["seat_count"] is None:
        data["seat_count"] = settings.DEFAULT_SEAT_COUNT
    return service.create(Car(**data))


@router.delete("/cars/{car_id}", summary="Soft-delete a car")
def delete_car(car_id: int, service: CarService = Depends(get_car_service)):
    service.delete(car_id)
    return {"status": "deleted", "car_id": car_id}


@router.put("/cars/{car_id}/select", summary="Assign a car to a driver")
def select_car(car_id: int, service: CarService = Depends(get_car_service)):
    service.select(car_id)
    return {"status": "selected", "car_id": car_id}


@router.put("/cars/{car_id}/deselect", summary="Release a car")
def deselect_car(car_id: int, service: CarService = Depends(get_car_service)):
    service.deselect(car_id)
    return {"status": "deselected", "car_id": car_id}
