from order_placement.domain.pricing.allocator import ALLOCATION_TOLERANCE, PriceAllocation, PriceAllocator
from order_placement.domain.pricing.price import Price

__all__ = [
    "ALLOCATION_TOLERANCE",
    "Price",
    "PriceAllocation",
    "PriceAllocator",
]
