"""
Pricing tables for the wedding cost estimator.

All three tables are process-wide constants wrapped in read-only mappings.
Keys are the enumeration members below. Enum members hash by name, so raw
form strings must be coerced (LocationType("rural")) before lookup.
"""
from enum import Enum
from types import MappingProxyType


class LocationType(str, Enum):
    """Regional cost-of-living category."""
    RURAL = "rural"
    SUBURBAN = "suburban"
    URBAN = "urban"
    DESTINATION = "destination"

    @property
    def label(self) -> str:
        return LOCATION_LABELS[self]


class CateringLevel(str, Enum):
    """Catering tier, priced per guest."""
    BUDGET = "budget"
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"

    @property
    def label(self) -> str:
        return CATERING_LABELS[self]


class VenueType(str, Enum):
    """Venue category, priced as a flat base cost."""
    BACKYARD = "backyard"
    RESTAURANT = "restaurant"
    BANQUET = "banquet"
    RESORT = "resort"
    ESTATE = "estate"

    @property
    def label(self) -> str:
        return VENUE_LABELS[self]


LOCATION_MULTIPLIER = MappingProxyType({
    LocationType.RURAL: 0.7,
    LocationType.SUBURBAN: 1.0,
    LocationType.URBAN: 1.4,
    LocationType.DESTINATION: 1.8,
})

CATERING_COST = MappingProxyType({
    CateringLevel.BUDGET: 45,
    CateringLevel.STANDARD: 85,
    CateringLevel.PREMIUM: 150,
    CateringLevel.LUXURY: 250,
})

VENUE_BASE = MappingProxyType({
    VenueType.BACKYARD: 500,
    VenueType.RESTAURANT: 3000,
    VenueType.BANQUET: 6000,
    VenueType.RESORT: 12000,
    VenueType.ESTATE: 18000,
})

# Form labels, in display order
LOCATION_LABELS = MappingProxyType({
    LocationType.RURAL: "Rural",
    LocationType.SUBURBAN: "Suburban",
    LocationType.URBAN: "Urban / Metro",
    LocationType.DESTINATION: "Destination",
})

CATERING_LABELS = MappingProxyType({
    CateringLevel.BUDGET: "Budget (~$45/guest)",
    CateringLevel.STANDARD: "Standard (~$85/guest)",
    CateringLevel.PREMIUM: "Premium (~$150/guest)",
    CateringLevel.LUXURY: "Luxury (~$250/guest)",
})

VENUE_LABELS = MappingProxyType({
    VenueType.BACKYARD: "Backyard / DIY",
    VenueType.RESTAURANT: "Restaurant",
    VenueType.BANQUET: "Banquet Hall",
    VenueType.RESORT: "Resort / Hotel",
    VenueType.ESTATE: "Estate / Mansion",
})

WEDDING_TIPS = (
    "Guest count has the biggest impact on total cost",
    "Off-peak seasons and weekdays often cost less",
    "Prioritize what matters most to you as a couple",
    "Build in a 10-15% buffer for unexpected expenses",
)

DISCLAIMER = (
    "This calculator provides estimates of wedding costs based on general "
    "industry averages and the selections made. Actual costs vary significantly "
    "by region, vendor, season, and specific choices. The figures shown are "
    "estimates only and should be used as a starting point for budget planning. "
    "Get quotes from local vendors for accurate pricing in your area."
)
