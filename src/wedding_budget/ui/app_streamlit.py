"""
Streamlit UI for the Wedding Budget Calculator.

Features:
- Planning form (guests, location, venue, catering, misc budget)
- Results panel with total, cost per guest and catering total
- Budget planning tips
- Breakdown table with CSV export
- Calculation trace
"""
import streamlit as st
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from wedding_budget.engine import (
    PricingEngine, WeddingInput,
    LocationType, CateringLevel, VenueType,
)
from wedding_budget.engine.formatting import format_usd, parse_int_or_zero
from wedding_budget.engine.pricing_tables import DISCLAIMER
from wedding_budget.config import get_settings, configure_logging


st.set_page_config(
    page_title="Wedding Budget Calculator (2026)",
    layout="centered",
)


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return PricingEngine()


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    configure_logging()
    return get_settings()


try:
    engine = get_engine()
    settings = get_settings_cached()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()

defaults = settings.default_input


# ============================================================================
# CUSTOM CSS & STYLING
# ============================================================================
st.markdown("""
    <style>
        .block-container {
            padding-top: 2rem;
            padding-bottom: 2rem;
        }
        .result-hero {
            font-size: 2.5rem;
            font-weight: 700;
            color: #0284C7;
            text-align: center;
        }
        .stMetric {
            background-color: #F0F9FF;
            padding: 10px;
            border-radius: 5px;
            border-left: 5px solid #0284C7;
        }
    </style>
""", unsafe_allow_html=True)


# ============================================================================
# HEADER
# ============================================================================
st.title("Wedding Budget Calculator (2026)")
st.caption("Estimate total wedding cost based on your preferences")


# ============================================================================
# INPUT FORM
# ============================================================================
with st.container(border=True):
    guest_text = st.text_input(
        "Guest Count",
        value=str(defaults.guest_count),
        placeholder=str(defaults.guest_count),
        key="guest_count",
        help=settings.guest_count_hint(),
    )
    guest_count = parse_int_or_zero(guest_text)

    c1, c2 = st.columns(2)
    with c1:
        location_type = st.selectbox(
            "Location Type",
            options=list(LocationType),
            index=list(LocationType).index(defaults.location_type),
            format_func=lambda m: m.label,
        )
    with c2:
        venue_type = st.selectbox(
            "Venue Type",
            options=list(VenueType),
            index=list(VenueType).index(defaults.venue_type),
            format_func=lambda m: m.label,
        )

    c3, c4 = st.columns(2)
    with c3:
        catering_level = st.selectbox(
            "Catering Level",
            options=list(CateringLevel),
            index=list(CateringLevel).index(defaults.catering_level),
            format_func=lambda m: m.label,
        )
    with c4:
        misc_budget = st.number_input(
            "Miscellaneous Budget ($)",
            min_value=settings.min_misc_budget,
            max_value=settings.max_misc_budget,
            value=defaults.misc_budget,
            step=settings.misc_budget_step,
        )

    # Results recompute on every change; the button only triggers a rerun
    st.button("Calculate Budget", type="primary", width="stretch")


wedding = WeddingInput(
    guest_count=guest_count,
    location_type=location_type,
    catering_level=catering_level,
    venue_type=venue_type,
    misc_budget=parse_int_or_zero(misc_budget),
)
breakdown = engine.calculate(wedding)

if not settings.min_guests <= guest_count <= settings.max_guests:
    st.caption(f"{settings.guest_count_hint()}.")


# ============================================================================
# RESULTS
# ============================================================================
with st.container(border=True):
    st.markdown("<p style='text-align:center'>Estimated Total Wedding Cost</p>", unsafe_allow_html=True)
    st.markdown(f"<div class='result-hero'>{format_usd(breakdown.total_cost)}</div>", unsafe_allow_html=True)
    st.markdown(f"<p style='text-align:center'><small>for {guest_count} guests</small></p>", unsafe_allow_html=True)

    st.divider()
    m1, m2 = st.columns(2)
    m1.metric("Cost Per Guest", format_usd(breakdown.cost_per_guest))
    m2.metric("Catering Total", format_usd(breakdown.catering_cost))


# ============================================================================
# TIPS
# ============================================================================
with st.container(border=True):
    st.subheader("Budget Planning Tips")
    for tip in engine.tips():
        st.markdown(f"- {tip}")


# ============================================================================
# BREAKDOWN TABLE
# ============================================================================
with st.container(border=True):
    st.subheader("Budget Breakdown")
    breakdown_df = engine.breakdown_frame(breakdown)
    st.dataframe(
        breakdown_df[['Item', 'Formatted']].rename(columns={'Formatted': 'Amount'}),
        width="stretch",
        hide_index=True,
    )

    st.download_button(
        "📥 CSV",
        data=breakdown_df[['Item', 'Amount']].to_csv(index=False),
        file_name=f"wedding_budget_{guest_count}_guests.csv",
        mime="text/csv",
    )

    with st.expander("🔍 Calculation Details"):
        for step in breakdown.trace:
            if step.value:
                st.caption(f"**{step.step}**: {step.description} = `{step.value}`")
            else:
                st.caption(f"**{step.step}**: {step.description}")


st.caption(DISCLAIMER)
st.divider()
st.caption("• Estimates only  • Simplified assumptions  • Free to use")
st.caption("© 2026 Wedding Budget Calculator")
