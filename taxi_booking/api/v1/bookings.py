"""Booking endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from taxi_booking.api.deps import IdPath, get_booking_service
from taxi_booking.models.booking import Booking
from taxi_booking.schemas.booking import BookingCreate, BookingResponse, BookingUpdate
from taxi_booking.services.booking_service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter()

Service = Annotated[BookingService, Depends(get_booking_service)]


@router.get("/", response_model=list[BookingResponse])
async def list_bookings(service: Service) -> list[Booking]:
    """All bookings ordered by date."""
    return await service.find_all_ordered_by_date()


@router.get("/customer/{customer_id}", response_model=list[BookingResponse])
async def list_bookings_by_customer(customer_id: IdPath, service: Service) -> list[Booking]:
    """Bookings made by a customer."""
    return await service.find_by_customer(customer_id)


@router.get("/taxi/{taxi_id}", response_model=list[BookingResponse])
async def list_bookings_by_taxi(taxi_id: IdPath, service: Service) -> list[Booking]:
    """Bookings of a taxi."""
    return await service.find_by_taxi(taxi_id)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(booking_id: IdPath, service: Service) -> Booking:
    """Get a booking by ID."""
    booking = await service.get(booking_id)
    logger.info(f"findById {booking_id}: found {booking!r}")
    return booking


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(booking_data: BookingCreate, service: Service) -> Booking:
    """Create a new booking."""
    return await service.create(booking_data)


@router.put("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: IdPath, booking_data: BookingUpdate, service: Service
) -> Booking:
    """Update a booking; the payload id must match the path."""
    return await service.update(booking_id, booking_data)


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_booking(booking_id: IdPath, service: Service) -> Response:
    """Delete a booking."""
    await service.delete(booking_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
