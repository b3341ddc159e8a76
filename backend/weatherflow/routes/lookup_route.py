from fastapi import APIRouter, Depends

from weatherflow.models.state_model import LookupRequest, LookupResponse
from weatherflow.services.session_state import SessionStateManager, session_manager
from weatherflow.services.display import render_state

router = APIRouter()

# --- Dependency Injection Helper ---
def get_session_manager() -> SessionStateManager:
    return session_manager

# --- The Endpoints ---
@router.post("/lookup", response_model=LookupResponse)
async def lookup_endpoint(
    request: LookupRequest, 
    manager: SessionStateManager = Depends(get_session_manager)
):
    """
    Receives a search from Streamlit and runs it through the session's
    state machine. Failures come back as a Failure state, never as an error.
    """
    state = await manager.submit(request.session_id, request.query)
    return LookupResponse(session_id=request.session_id, state=state, view=render_state(state))

@router.get("/state/{session_id}", response_model=LookupResponse)
async def state_endpoint(
    session_id: str,
    manager: SessionStateManager = Depends(get_session_manager)
):
    state = manager.get_state(session_id)
    return LookupResponse(session_id=session_id, state=state, view=render_state(state))
