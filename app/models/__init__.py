# Car service — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.car import Car   # noqa
