from typing import TypedDict, NotRequired, List, Dict, Any, Optional, Union

from .enums import OrderStatus, NotificationType


class Address(TypedDict, total=False):
    fullName: str
    firstName: str
    name: str
    company: str
    address1: str
    address2: str
    fullAddress: str
    city: str
    country: str
    postalCode: str
    province: str
    phone: str
    vatNumber: NotRequired[str]


class CustomField(TypedDict, total=False):
    name: str
    value: str
    type: NotRequired[str]
    options: NotRequired[str]
    required: bool


class Item(TypedDict, total=False):
    uniqueId: str
    id: str
    name: str
    quantity: int
    customFields: List[CustomField]
    totalWeight: NotRequired[float]
    totalPrice: NotRequired[float]
    length: NotRequired[float]
    width: NotRequired[float]
    height: NotRequired[float]
    weight: NotRequired[float]
    shippable: NotRequired[bool]


class Order(TypedDict, total=False):
    token: str
    creationDate: str
    modificationDate: str
    invoiceNumber: str
    email: NotRequired[str]
    status: str
    paymentStatus: NotRequired[str]
    currency: NotRequired[str]
    subtotal: NotRequired[float]
    grandTotal: NotRequired[float]
    totalWeight: float
    shippingFees: float
    shippingProvider: NotRequired[str]
    shippingMethod: NotRequired[str]
    shippingRateUserDefinedId: NotRequired[str]
    trackingNumber: str
    trackingUrl: str
    billingAddress: NotRequired[Address]
    shippingAddress: NotRequired[Address]
    items: List[Item]
    customFields: NotRequired[List[CustomField]]
    metadata: Any


class Orders(TypedDict, total=False):
    totalItems: int
    offset: int
    limit: int
    items: List[Order]


class OrderUpdate(TypedDict, total=False):
    status: str
    paymentStatus: NotRequired[str]
    trackingNumber: NotRequired[str]
    trackingUrl: NotRequired[str]
    shippingRateUserDefinedId: NotRequired[str]
    metadata: NotRequired[Any]


class Notification(TypedDict, total=False):
    type: str
    deliveryMethod: str
    message: NotRequired[str]


class NotificationResponse(TypedDict, total=False):
    id: str
    creationDate: str
    type: str
    deliveryMethod: str
    body: str
    message: str
    subject: str
    sentOn: str


class Notifications(TypedDict, total=False):
    totalItems: int
    offset: int
    limit: int
    items: List[NotificationResponse]


class ProductVariant(TypedDict, total=False):
    stock: int
    variation: List[Any]
    allowOutOfStockPurchases: bool


class Product(TypedDict, total=False):
    id: str
    userDefinedId: str
    name: str
    stock: int
    totalStock: int
    allowOutOfStockPurchases: bool
    variants: List[ProductVariant]


class ProductsResponse(TypedDict, total=False):
    keywords: str
    userDefinedId: str
    archived: bool
    # "from" is a keyword so it has no annotation here; the key still passes through
    to: str
    orderBy: str
    hasMoreResults: bool
    totalItems: int
    offset: int
    limit: int
    sort: List[Any]
    items: List[Product]


class TaxShippingInfo(TypedDict, total=False):
    fees: float
    method: str


class TaxContent(TypedDict, total=False):
    creationDate: str
    modificationDate: str
    token: str
    email: str
    shipToBillingAddress: bool
    billingAddress: Address
    shippingAddress: Address
    invoiceNumber: str
    shippingInformation: TaxShippingInfo
    items: List[Item]
    discounts: List[Any]
    customFields: List[CustomField]
    plans: List[Any]
    refunds: List[Any]
    taxes: List[Any]
    currency: str
    total: float
    discountsTotal: float
    itemsTotal: float
    taxesTotal: float
    plansTotal: float
    taxProvider: Any
    metadata: Any


class TaxWebhook(TypedDict, total=False):
    eventName: NotRequired[str]
    mode: NotRequired[str]
    createdOn: NotRequired[str]
    content: TaxContent


class Tax(TypedDict, total=False):
    name: str
    amount: float
    numberForInvoice: str
    rate: float


class TaxResponse(TypedDict):
    taxes: List[Tax]


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def build_order_update(
    status: Union[OrderStatus, str],
    payment_status: Optional[str] = None,
    tracking_number: Optional[str] = None,
    tracking_url: Optional[str] = None,
    shipping_rate_id: Optional[str] = None,
    metadata: Optional[Any] = None,
) -> OrderUpdate:
    update: OrderUpdate = {"status": str(status)}
    if not _is_empty(payment_status):
        update["paymentStatus"] = payment_status  # type: ignore[typeddict-item]
    if not _is_empty(tracking_number):
        update["trackingNumber"] = tracking_number  # type: ignore[typeddict-item]
    if not _is_empty(tracking_url):
        update["trackingUrl"] = tracking_url  # type: ignore[typeddict-item]
    if not _is_empty(shipping_rate_id):
        update["shippingRateUserDefinedId"] = shipping_rate_id  # type: ignore[typeddict-item]
    if metadata is not None:
        update["metadata"] = metadata
    return update


def compact_order_update(update: Dict[str, Any]) -> Dict[str, Any]:
    """Drop empty optional fields so they are omitted on the wire."""
    body: Dict[str, Any] = {}
    for key, value in update.items():
        if key == "status":
            body[key] = str(value) if value is not None else ""
        elif not _is_empty(value):
            body[key] = value
    return body


def compact_notification(notification: Dict[str, Any]) -> Dict[str, Any]:
    """Drop an empty ``message``; ``type`` and ``deliveryMethod`` are always sent."""
    body: Dict[str, Any] = {}
    for key, value in notification.items():
        if key == "message" and _is_empty(value):
            continue
        body[key] = str(value) if key == "type" and value is not None else value
    return body


def build_notification(
    type: Union[NotificationType, str],
    delivery_method: str = "Email",
    message: Optional[str] = None,
) -> Notification:
    notification: Notification = {"type": str(type), "deliveryMethod": delivery_method}
    if message:
        notification["message"] = message
    return notification
