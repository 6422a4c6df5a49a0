import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.settings import get_settings
from .routers import auth, clients, projects, time_entries

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

app = FastAPI(
    title="Timetrack API",
    description="Time recording for freelance projects",
    version="1.0.0",
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router)
app.include_router(clients.router)
app.include_router(projects.router)
app.include_router(time_entries.router)

@app.get("/health")
def health_check():
    return {"status": "healthy", "message": "Timetrack API is running"}

@app.get("/")
def root():
    return {"message": "Welcome to Timetrack API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("timetrack.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
