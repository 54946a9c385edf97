# vikfit/main.py
import time
import logging
import uuid
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from vikfit.errors import ParseError, PersistenceError
from vikfit.routers.workouts import router as workouts_router
from vikfit.routers.schedule import router as schedule_router
from vikfit.routers.logs import router as logs_router
from vikfit.routers.stats import router as stats_router
from vikfit.routers.meals import router as meals_router
from vikfit.routers.weight import router as weight_router
from vikfit.db import SessionLocal  # for healthz DB check
from vikfit.settings import get_settings

log = logging.getLogger("uvicorn")

app = FastAPI(
    title="VikFit API",
    openapi_tags=[
        {"name": "workouts", "description": "Workout library and exercises"},
        {"name": "schedule", "description": "Day-of-week assignments (Sunday=0)"},
        {"name": "logs", "description": "Workout sessions and logged sets"},
        {"name": "stats", "description": "Weekly completions, breakdowns and progress"},
        {"name": "meals", "description": "Meal templates, meal logs and macro goals"},
        {"name": "weight", "description": "Daily body weight entries"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = get_settings().ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.exception_handler(ParseError)
async def parse_error_handler(request: Request, exc: ParseError):
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": str(exc)})

@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    # details stay in the server log; the client only learns the write did not happen
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                        content={"detail": "storage unavailable, nothing was saved"})

@app.get("/")
def root():
    return {"ok": True, "name": "VikFit API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": get_settings().API_VERSION}

# Routers
app.include_router(workouts_router)
app.include_router(schedule_router)
app.include_router(logs_router)
app.include_router(stats_router)
app.include_router(meals_router)
app.include_router(weight_router)
