"""Main API router that includes all endpoint routers."""

from fastapi import APIRouter

from taxi_booking.api.v1 import bookings, customers, taxis

api_router = APIRouter()

# Customers
api_router.include_router(customers.router, prefix="/customers", tags=["Customers"])

# Taxis
api_router.include_router(taxis.router, prefix="/taxis", tags=["Taxis"])

# Bookings
api_router.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])
