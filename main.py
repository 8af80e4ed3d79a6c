from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from app.core.config import settings
from app.modules.loans.store import LoanStore
from app.modules.loans.router import router as loans_router
from app.modules.stats.router import router as stats_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

LOAN_OPERATIONS = [
    {
        "name": "create_loan_request",
        "method": "POST",
        "path": "/api/v1/loans",
        "description": "Create a new loan request with borrower, amount, collateral amount, interest rate and duration.",
    },
    {
        "name": "get_loan_request",
        "method": "GET",
        "path": "/api/v1/loans/{loan_id}",
        "description": "Retrieve a specific loan by ID, including its status and terms.",
    },
    {
        "name": "get_all_loans",
        "method": "GET",
        "path": "/api/v1/loans",
        "description": "List every loan request with its current status.",
    },
    {
        "name": "approve_loan",
        "method": "POST",
        "path": "/api/v1/loans/{loan_id}/approve",
        "description": "Approve a pending loan request.",
    },
    {
        "name": "activate_loan",
        "method": "POST",
        "path": "/api/v1/loans/{loan_id}/activate",
        "description": "Activate an approved loan once funds have been disbursed.",
    },
    {
        "name": "repay_loan",
        "method": "POST",
        "path": "/api/v1/loans/{loan_id}/repay",
        "description": "Mark a loan as repaid, releasing the collateral back to the borrower.",
    },
    {
        "name": "get_platform_stats",
        "method": "GET",
        "path": "/api/v1/stats",
        "description": "Counts of total, pending, active and repaid loans.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    # Startup: the store lives for the life of the process
    app.state.loan_store = LoanStore(
        id_prefix=settings.LOAN_ID_PREFIX,
        enforce_transitions=settings.ENFORCE_TRANSITIONS
    )
    logger.info(
        f"Loan store ready (enforce_transitions={settings.ENFORCE_TRANSITIONS})"
    )

    yield

    # Shutdown
    logger.info(f"Shutting down with {len(app.state.loan_store)} loans in memory")


app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Collateral-backed loan request tracking",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(loans_router)
app.include_router(stats_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to the {settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "operations": LOAN_OPERATIONS
    }
