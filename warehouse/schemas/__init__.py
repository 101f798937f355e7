from warehouse.schemas.report import OperationReport

__all__ = ["OperationReport"]
