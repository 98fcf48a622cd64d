"""
Data models for the pricing engine.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field
from typing import Optional

from .pricing_tables import LocationType, CateringLevel, VenueType


@dataclass
class TraceStep:
    """A single step in the cost calculation trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class WeddingInput:
    """
    Planning parameters for one estimate.

    Enumeration fields accept either the enum member or its raw string
    value; unknown strings raise ValueError.
    """
    guest_count: int = 120
    location_type: LocationType = LocationType.SUBURBAN
    catering_level: CateringLevel = CateringLevel.STANDARD
    venue_type: VenueType = VenueType.BANQUET
    misc_budget: int = 5000

    def __post_init__(self):
        # Frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, 'location_type', LocationType(self.location_type))
        object.__setattr__(self, 'catering_level', CateringLevel(self.catering_level))
        object.__setattr__(self, 'venue_type', VenueType(self.venue_type))


@dataclass
class BreakdownRow:
    """A single row of the budget breakdown table."""
    label: str
    amount: int
    value: str  # formatted USD
    is_total: bool = False


@dataclass
class CostBreakdown:
    """Complete result of a cost calculation."""
    venue_cost: int
    catering_cost: int
    other_costs: int
    total_cost: int
    cost_per_guest: int
    trace: list[TraceStep] = field(default_factory=list, compare=False)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the calculation trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Plain figures without the trace."""
        return {
            "venue_cost": self.venue_cost,
            "catering_cost": self.catering_cost,
            "other_costs": self.other_costs,
            "total_cost": self.total_cost,
            "cost_per_guest": self.cost_per_guest,
        }
