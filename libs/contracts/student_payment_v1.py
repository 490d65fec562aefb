from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


#login
class LoginRequest(BaseModel):
    action: Literal["login"] = "login"
    username: str
    pin: str

#getStudents
class GetStudentsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    action: Literal["getStudents"] = "getStudents"
    class_: str = Field(default="ALL", alias="class")

#addPayment
class AddPaymentRequest(BaseModel):
    action: Literal["addPayment"] = "addPayment"
    payment: Dict[str, Any]


class PaymentRecord(BaseModel):
    """Payment row as entered on the page. Only name and amount are required
    before sending; the rest is passed through to the remote sheet as-is."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[Any] = None
    class_: Optional[Any] = Field(default=None, alias="class")
    amount: Optional[Any] = None
    mode: Optional[Any] = None
    date: Optional[Any] = None


class RemoteEnvelope(BaseModel):
    """Whatever the remote endpoint answered. Nothing is type-checked here:
    each operation reads only the fields it needs, `success` by truthiness."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    success: Any = False
    message: Optional[Any] = None
    class_: Optional[Any] = Field(default=None, alias="class")
    students: Optional[Any] = None


class LoginResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    class_: Optional[Any] = Field(default=None, alias="class")
    message: Optional[str] = None


class StudentsResult(BaseModel):
    success: bool
    students: Optional[List[Any]] = None
    message: Optional[str] = None


class PaymentResult(BaseModel):
    success: bool
    message: Optional[str] = None
