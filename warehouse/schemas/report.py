"""Outcome reports returned by WarehouseManager operations."""


from pydantic import BaseModel

class OperationReport(BaseModel):
    operation: str
    ok: bool
    message: str
    item_id: int | None = None
    quantity: int | None = None
    code: str | None = None  # error code; None on success
