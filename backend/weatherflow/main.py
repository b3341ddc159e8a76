from fastapi import FastAPI
from weatherflow.routes.weather_route import router as weather_router
from weatherflow.routes.lookup_route import router as lookup_router

app = FastAPI(title="WeatherFlow")
app.include_router(weather_router)
app.include_router(lookup_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to WeatherFlow API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "weather": "/weather",
            "lookup": "/lookup",
            "state": "/state/{session_id}",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "WeatherFlow"}

def run():
    """Entry point for the `weatherflow-api` script."""
    import uvicorn
    uvicorn.run("weatherflow.main:app", host="0.0.0.0", port=8000)

if __name__ == "__main__":
    run()
