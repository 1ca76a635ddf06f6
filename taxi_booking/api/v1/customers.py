"""Customer endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from taxi_booking.api.deps import IdPath, get_customer_service
from taxi_booking.core.exceptions import NotFoundError
from taxi_booking.models.customer import Customer
from taxi_booking.schemas.customer import CustomerCreate, CustomerResponse, CustomerUpdate
from taxi_booking.services.customer_service import CustomerService

router = APIRouter()

Service = Annotated[CustomerService, Depends(get_customer_service)]


@router.get("/", response_model=list[CustomerResponse])
async def list_customers(service: Service) -> list[Customer]:
    """All customers ordered by name."""
    return await service.find_all_ordered_by_name()


@router.get("/email/{email}", response_model=CustomerResponse)
async def get_customer_by_email(email: str, service: Service) -> Customer:
    """Get a customer by email."""
    customer = await service.find_by_email(email)
    if customer is None:
        raise NotFoundError("Customer", email)
    return customer


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: IdPath, service: Service) -> Customer:
    """Get a customer by ID."""
    return await service.get(customer_id)


@router.post("/", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(customer_data: CustomerCreate, service: Service) -> Customer:
    """Register a customer."""
    return await service.create(customer_data)


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: IdPath, customer_data: CustomerUpdate, service: Service
) -> Customer:
    """Update a customer; the payload id must match the path."""
    return await service.update(customer_id, customer_data)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: IdPath, service: Service) -> Response:
    """Customers are kept; this only confirms the customer exists."""
    await service.delete(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
