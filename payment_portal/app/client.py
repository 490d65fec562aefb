from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from libs.http import RemoteCallClient, INVALID_RESPONSE
from libs.contracts.student_payment_v1 import (
    AddPaymentRequest,
    GetStudentsRequest,
    LoginRequest,
    LoginResult,
    PaymentRecord,
    PaymentResult,
    RemoteEnvelope,
    StudentsResult,
)
from payment_portal.app.settings import settings

logger = logging.getLogger(__name__)

PaymentInput = Union[PaymentRecord, Mapping[str, Any], None]


def _envelope(resp: Optional[Dict[str, Any]]) -> RemoteEnvelope:
    """Wrap the generic call result; an empty result is a failure without message."""
    return RemoteEnvelope.model_validate(resp or {})


def _message(env: RemoteEnvelope, default: str) -> str:
    return str(env.message) if env.message else default


def _as_payment_dict(record: PaymentInput) -> Dict[str, Any]:
    if isinstance(record, PaymentRecord):
        return record.model_dump(by_alias=True, exclude_none=True)
    return dict(record or {})


class StudentPaymentClient:
    """login / getStudents / addPayment against the remote sheet endpoint.

    Every method resolves to a result model, never an exception.
    """

    def __init__(self, url: Optional[str] = None, *, client: httpx.AsyncClient | None = None) -> None:
        self._remote = RemoteCallClient(url or settings.API_URL, client=client)

    async def authenticate(self, username: Any, pin: Any) -> LoginResult:
        username = str(username or "").strip()
        pin = str(pin or "").strip()
        if not username or not pin:
            return LoginResult(success=False, message="Username and PIN required")

        req = LoginRequest(username=username, pin=pin)
        env = _envelope(await self._remote.call(req.model_dump()))
        if not env.success:
            logger.info("login rejected username=%s", username)
            return LoginResult(success=False, message=_message(env, "Invalid credentials"))

        # class is e.g. 'A' or 'ALL'; passed through as the remote sent it
        return LoginResult(success=True, class_=env.class_)

    async def list_students(self, class_filter: Optional[str] = None) -> StudentsResult:
        req = GetStudentsRequest(class_=class_filter or "ALL")
        env = _envelope(await self._remote.call(req.model_dump(by_alias=True)))
        if not env.success:
            return StudentsResult(success=False, message=_message(env, "Failed to fetch students"))
        if env.students is not None and not isinstance(env.students, list):
            logger.warning("students rejected type=%s", type(env.students).__name__)
            return StudentsResult(success=False, message=INVALID_RESPONSE)
        return StudentsResult(success=True, students=env.students or [])

    async def record_payment(self, record: PaymentInput) -> PaymentResult:
        payment = _as_payment_dict(record)
        if not payment or not payment.get("name") or not payment.get("amount"):
            return PaymentResult(success=False, message="Missing payment data")

        req = AddPaymentRequest(payment=payment)
        env = _envelope(await self._remote.call(req.model_dump()))
        if not env.success:
            return PaymentResult(success=False, message=_message(env, "Failed to add payment"))

        logger.info("payment recorded name=%s amount=%s", payment.get("name"), payment.get("amount"))
        return PaymentResult(success=True)

    async def aclose(self) -> None:
        await self._remote.aclose()

    async def __aenter__(self) -> "StudentPaymentClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def make_student_payment_client() -> StudentPaymentClient:
    return StudentPaymentClient(settings.API_URL)
