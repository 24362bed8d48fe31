from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import CurrentUser
from src.app.use_cases.bookings import (
    BookingChangedResponse,
    BookingListResponse,
    BookingResponse,
    CancelBookingUseCase,
    CreateBookingCommand,
    CreateBookingUseCase,
    GetBookingUseCase,
    ListBookingsUseCase,
    UpdateBookingStatusUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import Frequency, ServiceType

router = APIRouter(prefix="/bookings", tags=["Bookings"])

OWNED_BOOKING_ERRORS = {
    "BOOKING_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
}


class CreateBookingRequest(BaseModel):
    """
    Create booking HTTP request payload (camelCase, as sent by the client)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    bedrooms: int = Field(..., ge=1, le=4)
    bathrooms: int = Field(..., ge=1, le=4)
    service_type: Optional[ServiceType] = None
    frequency: Optional[Frequency] = None
    price: float = Field(..., ge=0)
    scheduled_date: Optional[datetime] = None


class UpdateStatusRequest(BaseModel):
    status: Optional[str] = None


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=BookingChangedResponse
)
async def create_booking(
    request: CreateBookingRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Booking

    Raises:
        - 400 Bad Request: Missing name/email or service type/frequency
        - 401 Unauthorized: Not logged in
        - 403 Forbidden: Email does not match the logged-in user
    """
    command = CreateBookingCommand(**request.model_dump())

    result = await CreateBookingUseCase(uow).execute(current_user, command)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
                "EMAIL_MISMATCH": status.HTTP_403_FORBIDDEN,
            },
        )

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=BookingListResponse)
async def list_bookings(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the caller's bookings, newest first."""
    result = await ListBookingsUseCase(uow).execute(current_user)

    if result.is_err():
        raise_for_error(result.error, {})

    return result.value


@router.get(
    "/{booking_id}", status_code=status.HTTP_200_OK, response_model=BookingResponse
)
async def get_booking(
    booking_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Booking

    Raises:
        - 403 Forbidden: Booking belongs to another user
        - 404 Not Found: No such booking
    """
    result = await GetBookingUseCase(uow).execute(current_user, booking_id)

    if result.is_err():
        raise_for_error(result.error, OWNED_BOOKING_ERRORS)

    return result.value


async def _update_status(
    booking_id: UUID, request: UpdateStatusRequest, current_user: CurrentUser, uow: UnitOfWork
):
    result = await UpdateBookingStatusUseCase(uow).execute(
        current_user, booking_id, request.status
    )

    if result.is_err():
        raise_for_error(
            result.error,
            {**OWNED_BOOKING_ERRORS, "INVALID_STATUS": status.HTTP_400_BAD_REQUEST},
        )

    return result.value


@router.put(
    "/{booking_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=BookingChangedResponse,
)
async def update_booking_status(
    booking_id: UUID,
    request: UpdateStatusRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Booking Status

    Raises:
        - 400 Bad Request: Status not one of pending, done, cancelled
        - 403 Forbidden: Booking belongs to another user
        - 404 Not Found: No such booking
    """
    return await _update_status(booking_id, request, current_user, uow)


@router.put(
    "/{booking_id}", status_code=status.HTTP_200_OK, response_model=BookingChangedResponse
)
async def update_booking(
    booking_id: UUID,
    request: UpdateStatusRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Booking

    Same contract as PUT /bookings/{id}/status, including the ownership check.
    """
    return await _update_status(booking_id, request, current_user, uow)


@router.delete(
    "/{booking_id}", status_code=status.HTTP_200_OK, response_model=BookingChangedResponse
)
async def cancel_booking(
    booking_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Cancel Booking

    Marks the booking as cancelled; the record is kept.

    Raises:
        - 403 Forbidden: Booking belongs to another user
        - 404 Not Found: No such booking
    """
    result = await CancelBookingUseCase(uow).execute(current_user, booking_id)

    if result.is_err():
        raise_for_error(result.error, OWNED_BOOKING_ERRORS)

    return result.value
