from pydantic import BaseModel, Field
from typing import Annotated, Literal, Optional, Union

from weatherflow.models.weather_model import WeatherRecord

# --- Request State (tagged union on "status") ---
class Idle(BaseModel):
    status: Literal["idle"] = "idle"

class Loading(BaseModel):
    status: Literal["loading"] = "loading"
    query: str

class Success(BaseModel):
    status: Literal["success"] = "success"
    record: WeatherRecord

class Failure(BaseModel):
    status: Literal["failure"] = "failure"
    message: str

RequestState = Annotated[
    Union[Idle, Loading, Success, Failure],
    Field(discriminator="status"),
]

# --- Display Models ---
class WeatherCard(BaseModel):
    """What the frontend draws for a Success state."""
    heading: str
    icon: str
    temperature: str
    description: str
    feels_like: str
    humidity: str
    wind: str
    pressure: str
    high: str
    low: str

class StateView(BaseModel):
    status: str
    background: str
    loading: bool = False
    button_label: str = "Search"
    card: Optional[WeatherCard] = None
    error: Optional[str] = None
    placeholder: bool = False

# --- API Request/Response Models ---
class LookupRequest(BaseModel):
    session_id: str = Field(..., description="Unique identifier for the user session")
    query: str = Field(..., description="Free-text city name typed by the user")

class LookupResponse(BaseModel):
    session_id: str
    state: RequestState
    view: StateView
