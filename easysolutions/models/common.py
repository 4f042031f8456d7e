from pydantic import BaseModel


class InsertAck(BaseModel):
    acknowledged: bool
    insertedId: str


class HealthStatus(BaseModel):
    status: str
    message: str
    timestamp: str
