# salon/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session

from .config import get_settings
from .data import seed_defaults
from .db import create_db_and_tables, engine
from .routers import (
    auth_routes,
    availability_routes,
    bookings_routes,
    clients_routes,
    services_routes,
    settings_routes,
    staff_routes,
)

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    with Session(engine) as session:
        seed_defaults(session)
    logger.info("Salon booking API ready")
    yield


app = FastAPI(title="Salon Booking API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_routes.router)
app.include_router(services_routes.router)
app.include_router(staff_routes.router)
app.include_router(clients_routes.router)
app.include_router(bookings_routes.router)
app.include_router(availability_routes.router)
app.include_router(settings_routes.router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
