import os
import uuid

import requests
import streamlit as st

# Page configuration
st.set_page_config(
    page_title="WeatherFlow",
    page_icon="🌤️",
    layout="centered"
)

# Backend API configuration
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")
DEFAULT_BACKGROUND = "linear-gradient(135deg, #667eea, #764ba2)"

# Initialize session state
if "session_id" not in st.session_state:
    st.session_state.session_id = str(uuid.uuid4())

if "view" not in st.session_state:
    st.session_state.view = {"status": "idle", "background": DEFAULT_BACKGROUND, "placeholder": True}

def call_backend(query: str) -> dict:
    """Submit a search for this session and return the rendered view."""
    try:
        response = requests.post(
            f"{BACKEND_URL}/lookup",
            json={
                "session_id": st.session_state.session_id,
                "query": query
            },
            timeout=30
        )
        response.raise_for_status()
        return response.json()["view"]
    except requests.exceptions.ConnectionError:
        return {"status": "failure", "background": DEFAULT_BACKGROUND,
                "error": "Cannot connect to backend. Make sure the backend is running on port 8000."}
    except requests.exceptions.Timeout:
        return {"status": "failure", "background": DEFAULT_BACKGROUND,
                "error": "Request timed out. Please try again."}
    except requests.exceptions.RequestException as e:
        return {"status": "failure", "background": DEFAULT_BACKGROUND,
                "error": f"An error occurred: {str(e)}"}

def display_card(card: dict):
    """Draw the weather card for a successful lookup."""
    st.markdown(f"## {card['heading']} {card['icon']}")
    st.markdown(f"# {card['temperature']}")
    st.write(card["description"])

    cols = st.columns(4)
    cols[0].metric("Feels like", card["feels_like"])
    cols[1].metric("Humidity", card["humidity"])
    cols[2].metric("Wind", card["wind"])
    cols[3].metric("Pressure", card["pressure"])

    st.write(f"{card['high']}  {card['low']}")

view = st.session_state.view

st.markdown(
    f"<style>.stApp {{ background: {view.get('background', DEFAULT_BACKGROUND)}; }}</style>",
    unsafe_allow_html=True
)

# Header
st.title("🌤️ WeatherFlow")
st.caption("Get real-time weather information · Using Open-Meteo API")

# The input is only cleared after a successful search
if st.session_state.pop("clear_city", False):
    st.session_state.city = ""

with st.form("search-form"):
    city = st.text_input("City", key="city", placeholder="Enter city name (e.g., London, New York, Tokyo)")
    submitted = st.form_submit_button("Search")

# /lookup answers once the run has finished, so the spinner is the only loading cue
if submitted and city.strip():
    with st.spinner("Searching..."):
        st.session_state.view = call_backend(city)
    st.session_state.clear_city = st.session_state.view.get("status") == "success"
    st.rerun()

status = view.get("status")
if status == "success":
    display_card(view["card"])
elif status == "failure":
    st.error(f"⚠️ {view['error']}")
else:
    st.markdown("### 🌎 Welcome to WeatherFlow")
    st.write("Enter a city name above to get started!")
    st.caption("Try: London, Paris, New York, Tokyo")
