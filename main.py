import os
import logging
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from models import create_all_tables, SessionLocal, add_default_categories
from services import StoreUnavailable, InvalidBudget, InvalidCategory, DuplicateCategory, CategoryInUse, DuplicateUser
from handlers import user_router, category_router, expense_router, budget_router

# Load environment variables from .env file
load_dotenv()

# Configure logging
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=os.getenv("LOG_LEVEL", "INFO").upper()
)
logger = logging.getLogger(__name__)

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if origin.strip()]

# --- FastAPI App Initialization ---
app = FastAPI(title="Expense Tracker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(user_router)
app.include_router(category_router)
app.include_router(expense_router)
app.include_router(budget_router)

# --- Error Responses ---
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=getattr(exc, "headers", None))

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"message": message})

@app.exception_handler(StoreUnavailable)
async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
    logger.error(f"Store unavailable while handling {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"message": "Expense data is temporarily unavailable"})

@app.exception_handler(DuplicateUser)
async def duplicate_user_handler(request: Request, exc: DuplicateUser):
    return JSONResponse(status_code=409, content={"message": str(exc)})

async def bad_request_handler(request: Request, exc: ValueError):
    return JSONResponse(status_code=400, content={"message": str(exc)})

for exc_class in (InvalidBudget, InvalidCategory, DuplicateCategory, CategoryInUse):
    app.add_exception_handler(exc_class, bad_request_handler)

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "An error occurred"})

# --- FastAPI Lifecycle Events ---
@app.on_event("startup")
async def startup_event():
    logger.info("Expense Tracker API starting up...")

    # --- Database Initialization ---
    create_all_tables()
    db_session = SessionLocal()
    try:
        add_default_categories(db_session)
    finally:
        db_session.close()
    logger.info("Database ready, system categories seeded.")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Expense Tracker API shutting down.")

@app.get("/health")
async def health_check():
    return {"status": "ok"}

# To run this FastAPI app: uvicorn main:app --host 0.0.0.0 --port 8000
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
