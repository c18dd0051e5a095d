#!/usr/bin/env python3
"""Streamlit destination page: pick a departure city, month and day to see the dated itinerary."""

import sys
import os
import streamlit as st

# Add src to path
_current_dir = os.path.dirname(os.path.abspath(__file__))
_src_dir = os.path.join(_current_dir, 'src')
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from app.settings import Settings
from domain.catalog import filter_destinations, list_categories
from domain.destinations.loader import DestinationSource
from state.selection import SelectionCoordinator

settings = Settings()

# Page config
st.set_page_config(
    page_title=settings.app_name,
    page_icon="🧭",
    layout="wide"
)


@st.cache_resource
def initialize_source():
    """Load destinations once and cache them."""
    return DestinationSource()


source = initialize_source()
destinations = source.all()

# Sidebar: catalog search
with st.sidebar:
    st.title("🧭 Destinations")
    category = st.selectbox("Category", list_categories(destinations))
    search = st.text_input("Search by name")
    results = filter_destinations(destinations, category=category, search=search)
    if not results:
        st.info("No destinations match your search.")
        st.stop()
    chosen = st.radio("Destination", results, format_func=lambda d: d.name)

# One coordinator per destination, kept across reruns
key = f"selection:{chosen.id}"
if key not in st.session_state:
    st.session_state[key] = SelectionCoordinator(
        chosen,
        year=settings.default_year,
        auto_select=settings.auto_select_defaults
    )
selection: SelectionCoordinator = st.session_state[key]

st.title(chosen.name)
if chosen.subtitle:
    st.caption(chosen.subtitle)
st.write(chosen.long_description)

stats = chosen.key_stats
col1, col2, col3, col4 = st.columns(4)
col1.metric("Duration", stats.duration or "-")
col2.metric("Difficulty", stats.difficulty)
col3.metric("Age group", stats.age_group or "-")
col4.metric("Max altitude", stats.max_altitude or "-")

st.divider()


def _index_of(options, value):
    return options.index(value) if value in options else None


# Selectors: each change resets the ones below it
cities = selection.departure_cities
city = st.radio(
    "Departure city",
    cities,
    index=_index_of(cities, selection.city),
    horizontal=True
)
if city != selection.city:
    selection.select_city(city)

months = selection.months
month = st.radio(
    "Month",
    months,
    index=_index_of(months, selection.month),
    horizontal=True
) if months else None
if month is not None and month != selection.month:
    selection.select_month(month)

days = selection.days
day = st.radio(
    "Start day",
    days,
    index=_index_of(days, selection.day),
    horizontal=True
) if days else None
if day is not None and day != selection.day:
    selection.select_day(day)

package = selection.resolved_package
if package is None:
    st.info("Please complete your selection to see the itinerary.")
    st.stop()

st.subheader(f"{package.name} · ₹{package.price:,}")
st.caption(f"{selection.selected_date_label} ({package.duration})")

projected_days = selection.itinerary_dates()
if not projected_days:
    st.write("Itinerary coming soon.")
for projected in projected_days:
    with st.expander(f"Day {projected.day.day} · {projected.display}: {projected.day.title}"):
        st.write(projected.day.description)
        if projected.day.image:
            st.image(projected.day.image)
