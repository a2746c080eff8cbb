from pydantic import BaseModel


class FieldMessage(BaseModel):
    field: str
    message: str


class FieldValidationResponse(BaseModel):
    status: str
    message: str
    details: list[FieldMessage]


class BasicResponse(BaseModel):
    status: str
    message: str | None


class CompleteResponse(BaseModel):
    status: str
    message: str | None
    details: str | None
    path: str
    timestamp: str


ErrorResponse = FieldValidationResponse | BasicResponse | CompleteResponse
