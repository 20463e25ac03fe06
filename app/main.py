# app/main.py
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.core.logging import get_logger
from app.core.observability import ObservabilityMiddleware, metrics_router
from app.db.core import init_db
from app.api.v1.routers import recommend

log = get_logger("main")

app = FastAPI(title="Skill→Business Recommender")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(ObservabilityMiddleware)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # client-input errors are 400 with the offending fields, never 500
    details = [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
        for e in exc.errors()
    ]
    log.info("invalid input path=%s errors=%d", request.url.path, len(details))
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid input data", "details": details},
    )


@app.on_event("startup")
def on_startup():
    init_db()

# Routers
app.include_router(recommend.router, prefix="/api/v1")
app.include_router(metrics_router)

@app.get("/health")
def health():
    return {"ok": True}
