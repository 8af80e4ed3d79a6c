from fastapi import APIRouter, Depends

from app.core.dependencies import get_loan_store
from app.modules.loans.store import LoanStore
from app.modules.stats.schemas import PlatformStats
from app.modules.stats.services import StatsAggregator

router = APIRouter(prefix="/api/v1/stats", tags=["stats"])


@router.get("", response_model=PlatformStats)
async def get_platform_stats(store: LoanStore = Depends(get_loan_store)):
    """Get total, pending, active and repaid loan counts"""
    return StatsAggregator.aggregate(store)
