from .order_status import OrderStatus
from .error_code import ErrorCode, Severity

__all__ = ["OrderStatus", "ErrorCode", "Severity"]
