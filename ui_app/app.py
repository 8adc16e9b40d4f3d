"""Main Streamlit application."""

import streamlit as st

from ui_app.client import WeatherAPIClient
from ui_app.config import ui_settings
from ui_app.panel import WeatherPanel, search_weather
from ui_app.tiles import weather

# Page configuration
st.set_page_config(
    page_title="Weather Lookup",
    page_icon="🌤️",
    layout="centered",
)


def run_search(panel: WeatherPanel, city: str) -> None:
    """Look up a city while the spinner covers the loading state."""
    client = WeatherAPIClient(ui_settings.api_base_url, timeout=ui_settings.request_timeout_seconds)
    with st.spinner("Loading weather data..."):
        search_weather(panel, city, client)


def main():
    """Search form and weather tile."""

    st.title("🌤️ Weather Lookup")

    # First run of a session: pre-fill the default city and look it up
    first_load = "panel" not in st.session_state
    if first_load:
        st.session_state.panel = WeatherPanel()
        st.session_state.city_input = ui_settings.default_city
    panel: WeatherPanel = st.session_state.panel

    # Enter inside the form submits it, same as clicking Search
    with st.form("search_form"):
        st.text_input("City", key="city_input", placeholder="Enter city name")
        submitted = st.form_submit_button("Search")

    if first_load or submitted:
        run_search(panel, st.session_state.city_input)

    weather.render_tile(panel)


if __name__ == "__main__":
    main()
