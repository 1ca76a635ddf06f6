"""Taxi endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from taxi_booking.api.deps import IdPath, get_taxi_service
from taxi_booking.core.exceptions import NotFoundError
from taxi_booking.models.taxi import Taxi
from taxi_booking.schemas.taxi import TaxiCreate, TaxiResponse, TaxiUpdate
from taxi_booking.services.taxi_service import TaxiService

router = APIRouter()

Service = Annotated[TaxiService, Depends(get_taxi_service)]


@router.get("/", response_model=list[TaxiResponse])
async def list_taxis(service: Service) -> list[Taxi]:
    """All taxis ordered by registration."""
    return await service.find_all_ordered_by_reg()


@router.get("/reg/{reg}", response_model=TaxiResponse)
async def get_taxi_by_reg(reg: str, service: Service) -> Taxi:
    """Get a taxi by registration."""
    taxi = await service.find_by_reg(reg)
    if taxi is None:
        raise NotFoundError("Taxi", reg)
    return taxi


@router.get("/{taxi_id}", response_model=TaxiResponse)
async def get_taxi(taxi_id: IdPath, service: Service) -> Taxi:
    """Get a taxi by ID."""
    return await service.get(taxi_id)


@router.post("/", response_model=TaxiResponse, status_code=status.HTTP_201_CREATED)
async def create_taxi(taxi_data: TaxiCreate, service: Service) -> Taxi:
    """Register a taxi."""
    return await service.create(taxi_data)


@router.put("/{taxi_id}", response_model=TaxiResponse)
async def update_taxi(taxi_id: IdPath, taxi_data: TaxiUpdate, service: Service) -> Taxi:
    """Update a taxi; the payload id must match the path."""
    return await service.update(taxi_id, taxi_data)


@router.delete("/{taxi_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_taxi(taxi_id: IdPath, service: Service) -> Response:
    """Delete a taxi that has no bookings."""
    await service.delete(taxi_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
