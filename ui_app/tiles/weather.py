"""Weather tile for displaying the lookup result or its error."""

import streamlit as st

from ui_app.panel import DisplayState, WeatherCard, WeatherPanel


def render_card(card: WeatherCard) -> None:
    """Render the result card.

    Args:
        card: Formatted weather values.
    """
    st.subheader(card.location)
    st.caption(card.date_time)

    col1, col2 = st.columns([1, 2])

    with col1:
        st.image(card.icon_url, caption=card.icon_alt, width=100)

    with col2:
        # Temperature is formatted from a number, never from provider text
        st.markdown(
            f"<h1 style='margin: 0; line-height: 1;'>{card.temperature}°C</h1>",
            unsafe_allow_html=True,
        )
        st.markdown(f"**{card.description}**")

    feels, humidity, wind, pressure = st.columns(4)
    feels.metric("Feels like", card.feels_like)
    humidity.metric("Humidity", card.humidity)
    wind.metric("Wind", card.wind_speed)
    pressure.metric("Pressure", card.pressure)


def render_tile(panel: WeatherPanel) -> None:
    """Render whichever panel state is current; idle and loading show nothing here.

    Args:
        panel: Panel holding the current display state.
    """
    if panel.state is DisplayState.ERROR:
        st.error(panel.error)
    elif panel.state is DisplayState.RESULT and panel.card is not None:
        render_card(panel.card)
