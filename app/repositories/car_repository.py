# app/repositories/car_repository.py
"""
Storage collaborator for CarService.
CarRepository is the interface the service depends on; SqlAlchemyCarRepository
backs it with a request-scoped SQLAlchemy session.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import ContextManager, Iterator, List, Optional

from sqlalchemy.orm import Session
from app.database import transaction
from app.models.car import Car


class CarRepository(ABC):
    """Point lookup, insert and availability query over cars."""

    @abstractmethod
    def save(self, car: Car) -> Car:
        """Insert or update a car. Raises sqlalchemy.exc.IntegrityError on constraint failure."""

    @abstractmethod
    def find_by_id(self, car_id: int) -> Optional[Car]:
        """Return the car with this id, or None."""

    @abstractmethod
    def find_by_is_available(self, is_available: bool) -> List[Car]:
        """Return every car whose availability flag matches."""

    @abstractmethod
    def transaction(self) -> ContextManager[None]:
        """Context manager: commit on clean exit, roll back on exception."""


class SqlAlchemyCarRepository(CarRepository):
    def __init__(self, db: Session):
        self.db = db

    def save(self, car: Car) -> Car:
        with transaction(self.db):
            self.db.add(car)
        self.db.refresh(car)
        return car

    def find_by_id(self, car_id: int) -> Optional[Car]:
        return self.db.get(Car, car_id)

    def find_by_is_available(self, is_available: bool) -> List[Car]:
        return self.db.query(Car).filter(Car.is_available == is_available).all()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with transaction(self.db):
            yield
