"""
Pricing Engine - wedding cost breakdown with traceability.

compute_breakdown() is the pure pricing formula. PricingEngine wraps it with:
- Step-by-step execution trace of every lookup and derived figure
- Breakdown table rows with formatted USD values
- pandas DataFrame output for display and CSV export
- Option catalog (enumerations, labels, table values) for form builders
"""
import logging

import pandas as pd

from .formatting import format_usd, round_half_up
from .models import WeddingInput, CostBreakdown, BreakdownRow
from .pricing_tables import (
    LocationType, CateringLevel, VenueType,
    LOCATION_MULTIPLIER, CATERING_COST, VENUE_BASE,
    WEDDING_TIPS,
)

logger = logging.getLogger(__name__)


def compute_breakdown(wedding: WeddingInput) -> CostBreakdown:
    """
    Compute the cost breakdown for one set of planning parameters.

    Each component is rounded on its own and the total is the sum of the
    rounded components, so total_cost can differ by a unit or two from
    rounding the unrounded sum.
    """
    multiplier = LOCATION_MULTIPLIER[wedding.location_type]
    catering_per_guest = CATERING_COST[wedding.catering_level]
    venue_base = VENUE_BASE[wedding.venue_type]

    venue_cost = round_half_up(venue_base * multiplier)
    catering_cost = round_half_up(wedding.guest_count * catering_per_guest * multiplier)
    other_costs = wedding.misc_budget

    total_cost = venue_cost + catering_cost + other_costs
    if wedding.guest_count > 0:
        cost_per_guest = round_half_up(total_cost / wedding.guest_count)
    else:
        cost_per_guest = 0

    return CostBreakdown(
        venue_cost=venue_cost,
        catering_cost=catering_cost,
        other_costs=other_costs,
        total_cost=total_cost,
        cost_per_guest=cost_per_guest,
    )


class PricingEngine:
    """
    Stateless wedding pricing engine.

    Resolution order:
    1. Look up location multiplier, catering cost per guest, venue base cost
    2. Venue = base × multiplier (rounded)
    3. Catering = guests × per-guest cost × multiplier (rounded)
    4. Other costs = misc budget as entered
    5. Total = sum of the rounded components
    6. Per guest = total / guests (rounded), 0 when there are no guests
    """

    def calculate(self, wedding: WeddingInput) -> CostBreakdown:
        """
        Calculate the breakdown with full traceability.

        Args:
            wedding: WeddingInput dataclass with planning parameters

        Returns:
            CostBreakdown dataclass with figures and trace
        """
        breakdown = compute_breakdown(wedding)

        multiplier = LOCATION_MULTIPLIER[wedding.location_type]
        catering_per_guest = CATERING_COST[wedding.catering_level]
        venue_base = VENUE_BASE[wedding.venue_type]

        breakdown.add_trace("Location Lookup", f"{wedding.location_type.label} multiplier", f"×{multiplier}")
        breakdown.add_trace("Catering Lookup", f"{wedding.catering_level.label} per guest", format_usd(catering_per_guest))
        breakdown.add_trace("Venue Lookup", f"{wedding.venue_type.label} base cost", format_usd(venue_base))
        breakdown.add_trace("Venue", f"{format_usd(venue_base)} × {multiplier}", format_usd(breakdown.venue_cost))
        breakdown.add_trace(
            "Catering",
            f"{wedding.guest_count} guests × {format_usd(catering_per_guest)} × {multiplier}",
            format_usd(breakdown.catering_cost),
        )
        breakdown.add_trace("Other Costs", "Miscellaneous budget", format_usd(breakdown.other_costs))
        breakdown.add_trace("Total", "Venue + Catering + Other Costs", format_usd(breakdown.total_cost))

        if wedding.guest_count > 0:
            breakdown.add_trace(
                "Per Guest",
                f"{format_usd(breakdown.total_cost)} ÷ {wedding.guest_count} guests",
                format_usd(breakdown.cost_per_guest),
            )
        else:
            breakdown.add_trace("Per Guest", "No guests, per-guest cost not applicable", format_usd(0))

        logger.debug(
            "Computed breakdown for %s guests (%s/%s/%s): total=%s",
            wedding.guest_count,
            wedding.location_type.value,
            wedding.catering_level.value,
            wedding.venue_type.value,
            breakdown.total_cost,
        )
        return breakdown

    @staticmethod
    def breakdown_rows(breakdown: CostBreakdown) -> list[BreakdownRow]:
        """Rows of the budget breakdown table, total last."""
        items = [
            ("Venue", breakdown.venue_cost, False),
            ("Catering", breakdown.catering_cost, False),
            ("Other Costs", breakdown.other_costs, False),
            ("Estimated Total", breakdown.total_cost, True),
        ]
        return [
            BreakdownRow(label=label, amount=amount, value=format_usd(amount), is_total=is_total)
            for label, amount, is_total in items
        ]

    def breakdown_frame(self, breakdown: CostBreakdown) -> pd.DataFrame:
        """Breakdown table as a DataFrame with Item / Amount / Formatted columns."""
        return pd.DataFrame([
            {'Item': row.label, 'Amount': row.amount, 'Formatted': row.value}
            for row in self.breakdown_rows(breakdown)
        ])

    @staticmethod
    def options() -> dict:
        """Enumerations with labels and table values, in display order."""
        return {
            "location_type": [
                {"value": m.value, "label": m.label, "multiplier": LOCATION_MULTIPLIER[m]}
                for m in LocationType
            ],
            "catering_level": [
                {"value": m.value, "label": m.label, "cost_per_guest": CATERING_COST[m]}
                for m in CateringLevel
            ],
            "venue_type": [
                {"value": m.value, "label": m.label, "base_cost": VENUE_BASE[m]}
                for m in VenueType
            ],
        }

    @staticmethod
    def tips() -> list[str]:
        """Budget planning tips shown beside the results."""
        return list(WEDDING_TIPS)
