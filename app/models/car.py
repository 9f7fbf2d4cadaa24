# app/models/car.py
"""
Cars table. Holds the vehicles drivers can pick up.
Rows are never physically removed: delete only sets the `deleted` flag.
`is_available` is False while the car is assigned to a driver.
"""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from app.database import Base


class Car(Base):
    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, autoincrement=True)
    license_plate = Column(String(50), unique=True, nullable=False, index=True)
    seat_count = Column(Integer, nullable=False, default=4)
    convertible = Column(Boolean, nullable=False, default=False)
    rating = Column(Float)
    engine_type = Column(String(20), nullable=False, default="GAS")  # ELECTRIC | GAS | HYBRID
    manufacturer = Column(String(100))
    date_created = Column(DateTime, nullable=False, default=datetime.utcnow)
    is_available = Column(Boolean, nullable=False, default=True, index=True)
    deleted = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<Car {self.id} plate={self.license_plate} available={self.is_available} deleted={self.deleted}>"
