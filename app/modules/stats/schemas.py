from pydantic import BaseModel


class PlatformStats(BaseModel):
    """Loan counts over the current store contents"""
    total_loans: int = 0
    pending_loans: int = 0
    active_loans: int = 0
    repaid_loans: int = 0
