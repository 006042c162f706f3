from typing import List

from .models import Order, Product


def display_orders_table(orders: List[Order], total: int = 0) -> None:
    """
    Display orders as a fixed-width summary table.
    """
    if not orders:
        print("No orders found to display.")
        return

    print(f"\n=== ORDERS ({len(orders)} shown) ===")
    print("=" * 110)
    print(f"{'#':<3} {'Token':<38} {'Invoice':<12} {'Status':<11} {'Total':>10} {'Cur':<4} {'Email':<28}")
    print("-" * 110)

    for i, order in enumerate(orders, 1):
        token = str(order.get("token", ""))[:38]
        invoice = str(order.get("invoiceNumber", ""))[:12]
        status = str(order.get("status", ""))[:11]
        grand_total = order.get("grandTotal")
        total_text = f"{grand_total:.2f}" if isinstance(grand_total, (int, float)) else "N/A"
        currency = str(order.get("currency", ""))[:4]
        email = str(order.get("email", ""))[:28]
        print(f"{i:<3} {token:<38} {invoice:<12} {status:<11} {total_text:>10} {currency:<4} {email:<28}")

    print("=" * 110)
    if total:
        print(f"Total: {total} orders")

    statuses = {}
    for order in orders:
        status = order.get("status") or "Unknown"
        statuses[status] = statuses.get(status, 0) + 1
    print("By status:")
    for status, count in sorted(statuses.items(), key=lambda x: x[1], reverse=True):
        print(f"  {status}: {count}")


def display_products_table(products: List[Product]) -> None:
    if not products:
        print("No products found to display.")
        return

    print(f"\n=== PRODUCTS ({len(products)} shown) ===")
    print("=" * 96)
    print(f"{'#':<3} {'ID':<20} {'Name':<40} {'Stock':>7} {'Total':>7} {'Backorder':<9}")
    print("-" * 96)
    for i, product in enumerate(products, 1):
        product_id = str(product.get("userDefinedId", ""))[:20]
        name = str(product.get("name", ""))[:40]
        stock = str(product.get("stock", "N/A"))
        total_stock = str(product.get("totalStock", "N/A"))
        backorder = "yes" if product.get("allowOutOfStockPurchases") else "no"
        print(f"{i:<3} {product_id:<20} {name:<40} {stock:>7} {total_stock:>7} {backorder:<9}")
    print("=" * 96)

    out_of_stock = [p for p in products if not p.get("totalStock") and not p.get("allowOutOfStockPurchases")]
    if out_of_stock:
        print(f"Out of stock: {len(out_of_stock)} products")
