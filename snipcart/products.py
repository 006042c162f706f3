from typing import Optional, cast
import logging

from .client import SnipcartClient
from .config import PRODUCTS_PATH
from .errors import ValidationError
from .http import QueryParams
from .models import Product, ProductsResponse

logger = logging.getLogger(__name__)


def get_products(client: SnipcartClient, queries: Optional[QueryParams] = None) -> ProductsResponse:
    data = client.request(
        "GET",
        client.url(PRODUCTS_PATH),
        queries=client.paged(queries),
    )
    return cast(ProductsResponse, data)


def get_product_by_id(client: SnipcartClient, product_id: str) -> Product:
    """Find a product by its ``userDefinedId`` (the id set in the storefront markup).

    The API answers a lookup with a list; an empty list is reported as a
    :class:`ValidationError` rather than an empty result.
    """
    if not product_id:
        raise ValidationError("id is not set")
    data = client.request(
        "GET",
        client.url(PRODUCTS_PATH),
        queries=[("userDefinedId", product_id)],
    )
    items = data.get("items") or []
    if len(items) < 1:
        raise ValidationError(f"no products with id '{product_id}'")
    if len(items) > 1:
        logger.debug(f"{len(items)} products matched id '{product_id}', using the first")
    return cast(Product, items[0])
