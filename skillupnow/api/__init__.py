# skillupnow/api/__init__.py
from fastapi import FastAPI

from skillupnow.api.routers import health, users, carts, courses


def include_routers(app: FastAPI):
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(carts.router)
    app.include_router(courses.router)
