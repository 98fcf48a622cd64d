"""Engine subpackage - core pricing logic and cost breakdown."""
from .pricing_engine import PricingEngine, compute_breakdown
from .models import WeddingInput, CostBreakdown, BreakdownRow
from .pricing_tables import LocationType, CateringLevel, VenueType

__all__ = [
    'PricingEngine', 'compute_breakdown',
    'WeddingInput', 'CostBreakdown', 'BreakdownRow',
    'LocationType', 'CateringLevel', 'VenueType',
]
