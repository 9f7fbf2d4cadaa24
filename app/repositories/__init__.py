from app.repositories.car_repository import CarRepository, SqlAlchemyCarRepository   # noqa
