import math
from weatherflow.models.weather_model import WeatherRecord
from weatherflow.models.state_model import RequestState, Idle, Loading, Success, Failure, WeatherCard, StateView

DEFAULT_ICON = "🌈"
MISSING_VALUE = "--"
DEFAULT_BACKGROUND = "linear-gradient(135deg, #667eea, #764ba2)"

ICONS = {
    "Clear": "☀️",
    "Clouds": "☁️",
    "Rain": "🌧️",
    "Drizzle": "🌦️",
    "Thunderstorm": "⛈️",
    "Snow": "❄️",
    "Mist": "🌫️",
    "Fog": "🌫️",
}


def round_half_up(value: float) -> int:
    """Rounds .5 towards positive infinity, the way the UI always has."""
    return int(math.floor(value + 0.5))


def _format_number(value: float = None) -> str:
    if value is None:
        return MISSING_VALUE
    return str(int(value)) if float(value).is_integer() else str(value)


def _format_rounded(value: float = None) -> str:
    return MISSING_VALUE if value is None else str(round_half_up(value))


def get_weather_icon(condition: str) -> str:
    return ICONS.get(str(getattr(condition, "value", condition)), DEFAULT_ICON)


def get_background_gradient(temp: float = None) -> str:
    """Picks the page background from the current temperature."""
    # 0 °C shares the "no data" background
    if not temp:
        return DEFAULT_BACKGROUND
    if temp < 0:
        return "linear-gradient(135deg, #74b9ff, #0984e3)"
    if temp < 15:
        return "linear-gradient(135deg, #81ecec, #00cec9)"
    if temp < 25:
        return "linear-gradient(135deg, #55efc4, #00b894)"
    return "linear-gradient(135deg, #ffeaa7, #fdcb6e)"


def build_card(record: WeatherRecord) -> WeatherCard:
    return WeatherCard(
        heading=f"{record.place_name}, {record.country}",
        icon=get_weather_icon(record.condition),
        temperature=f"{_format_rounded(record.temperature)}°C",
        description=record.description,
        feels_like=f"{_format_rounded(record.feels_like)}°C",
        humidity=f"{_format_number(record.humidity)}%",
        wind=f"{_format_number(record.wind_speed)} m/s",
        pressure=f"{_format_number(record.pressure_hpa)} hPa",
        high=f"H: {_format_rounded(record.temp_max)}°C",
        low=f"L: {_format_rounded(record.temp_min)}°C",
    )


def render_state(state: RequestState) -> StateView:
    """Turns the current request state into what the page should show."""
    if isinstance(state, Idle):
        return StateView(status=state.status, background=DEFAULT_BACKGROUND, placeholder=True)
    if isinstance(state, Loading):
        return StateView(
            status=state.status,
            background=DEFAULT_BACKGROUND,
            loading=True,
            button_label="Searching..."
        )
    if isinstance(state, Success):
        return StateView(
            status=state.status,
            background=get_background_gradient(state.record.temperature),
            card=build_card(state.record)
        )
    if isinstance(state, Failure):
        return StateView(status=state.status, background=DEFAULT_BACKGROUND, error=state.message)
    raise TypeError(f"Unhandled request state: {type(state).__name__}")
