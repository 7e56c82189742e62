from order_placement.domain.orders.complementary import (
    ComplementaryAccumulator,
    ComplementaryAggregator,
    calculate_complementary_orders,
)
from order_placement.domain.orders.models import (
    WIPING_CLOTH_PRODUCT_ID,
    CleanedOrder,
    InputOrder,
    ParsedSkuItem,
    Product,
)

__all__ = [
    "WIPING_CLOTH_PRODUCT_ID",
    "CleanedOrder",
    "ComplementaryAccumulator",
    "ComplementaryAggregator",
    "InputOrder",
    "ParsedSkuItem",
    "Product",
    "calculate_complementary_orders",
]
