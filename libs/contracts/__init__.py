"""Request/response contracts (Pydantic models) for the remote action endpoint."""

__all__ = [
    "student_payment_v1",
]
