# app/services/car_service.py
"""
Car lookup, registration, soft delete and driver assignment.
Persistence goes through a CarRepository; storage integrity errors are
translated into ConstraintsViolation. Used by the cars router.

Soft-deleted cars are still returned by find() and find_by_availability().
"""

from typing import List

from sqlalchemy.exc import IntegrityError
from app.exceptions import CarAlreadyInUse, ConstraintsViolation, EntityNotFound
from app.models.car import Car
from app.repositories.car_repository import CarRepository
from app.utils.logger import get_logger

logger = get_logger(__name__)


class CarService:
    def __init__(self, repository: CarRepository):
        self.repository = repository

    def find(self, car_id: int) -> Car:
        """Return the car with this id. Raises EntityNotFound."""
        return self._find_car_checked(car_id)

    def create(self, car: Car) -> Car:
        """Persist a new car. Raises ConstraintsViolation if the store rejects it."""
        try:
            saved = self.repository.save(car)
        except IntegrityError as e:
            logger.warning(f"Constraint violated while creating car {car.license_plate}: {e.orig}", exc_info=True)
            raise ConstraintsViolation(str(e.orig)) from e
        logger.info(f"Car {saved.id} created (plate={saved.license_plate})")
        return saved

    def delete(self, car_id: int) -> None:
        with self.repository.transaction():
            car = self._find_car_checked(car_id)
            car.deleted = True
        logger.info(f"Car {car_id} marked deleted")

    def select(self, car_id: int) -> None:
        """Mark the car as assigned to a driver. Raises CarAlreadyInUse if it already is."""
        with self.repository.transaction():
            car = self._find_car_checked(car_id)
            if not car.is_available:
                logger.warning(f"Car {car_id} selected while already in use")
                raise CarAlreadyInUse(f"Car with id: {car_id} is already mapped to another driver")
            car.is_available = False
        logger.info(f"Car {car_id} selected")

    def deselect(self, car_id: int) -> None:
        """Release the car. No check on its current state."""
        with self.repository.transaction():
            car = self._find_car_checked(car_id)
            car.is_available = True
        logger.info(f"Car {car_id} deselected")

    def find_by_availability(self, is_available: bool) -> List[Car]:
        return self.repository.find_by_is_available(is_available)

    def _find_car_checked(self, car_id: int) -> Car:
        car = self.repository.find_by_id(car_id)
        if car is None:
            raise EntityNotFound(f"Could not find entity with id: {car_id}")
        return car
