from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel

from libs.contracts.student_payment_v1 import LoginResult, PaymentRecord, PaymentResult, StudentsResult
from payment_portal.app.client import StudentPaymentClient
from payment_portal.app.dates import format_date_for_input

router = APIRouter()


def get_client(request: Request) -> StudentPaymentClient:
    client = getattr(request.app.state, "client", None)
    if client is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Client not started")
    return client


class LoginForm(BaseModel):
    # authenticate() stringifies and trims
    username: Any = ""
    pin: Any = ""


# Results are always 200; the page shows `message` on failure.

@router.post("/api/login", response_model=LoginResult, response_model_exclude_none=True)
async def login(body: LoginForm, client: StudentPaymentClient = Depends(get_client)) -> LoginResult:
    return await client.authenticate(body.username, body.pin)


@router.get("/api/students", response_model=StudentsResult, response_model_exclude_none=True)
async def students(
    class_filter: Optional[str] = Query(default=None, alias="class"),
    client: StudentPaymentClient = Depends(get_client),
) -> StudentsResult:
    return await client.list_students(class_filter)


@router.post("/api/payments", response_model=PaymentResult, response_model_exclude_none=True)
async def add_payment(body: PaymentRecord, client: StudentPaymentClient = Depends(get_client)) -> PaymentResult:
    # Same as the form: date input is pre-filled with today
    if not body.date:
        body.date = format_date_for_input()
    return await client.record_payment(body)


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}
