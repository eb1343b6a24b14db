from fastapi import APIRouter
from app.api.routes.providers import router as providers_router
from app.api.routes.home import router as home_router
from app.api.routes.trips import router as trips_router
from app.api.routes.bookings import router as bookings_router

api_router = APIRouter(prefix="/api")
api_router.include_router(providers_router)
api_router.include_router(home_router)
api_router.include_router(trips_router)
api_router.include_router(bookings_router)
