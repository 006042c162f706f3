from enum import Enum


class OrderStatus(str, Enum):
    PROCESSED = "Processed"
    DISPUTED = "Disputed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    PENDING = "Pending"
    CANCELLED = "Cancelled"
    DISPATCHED = "Dispatched"

    def __str__(self) -> str:
        return self.value


class NotificationType(str, Enum):
    COMMENT = "Comment"
    ORDER_STATUS_CHANGED = "OrderStatusChanged"
    ORDER_SHIPPED = "OrderShipped"
    TRACKING_NUMBER = "TrackingNumber"
    INVOICE = "Invoice"

    def __str__(self) -> str:
        return self.value
