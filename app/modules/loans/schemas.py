from pydantic import BaseModel, Field

from app.modules.loans.models import LoanStatus

UINT64_MAX = 2**64 - 1
UINT32_MAX = 2**32 - 1


class LoanBase(BaseModel):
    borrower: str
    amount: int = Field(..., ge=0, le=UINT64_MAX, description="Principal in the smallest unit")
    collateral_amount: int = Field(..., ge=0, le=UINT64_MAX)
    interest_rate: float = Field(..., allow_inf_nan=False, description="Fraction, e.g. 0.05 for 5%")
    duration_days: int = Field(..., ge=0, le=UINT32_MAX)


class LoanCreate(LoanBase):
    pass


class LoanCreatedResponse(BaseModel):
    loan_id: str


class LoanResponse(LoanBase):
    id: str
    status: LoanStatus

    class Config:
        from_attributes = True


class LoanActionResponse(BaseModel):
    message: str
    loan_id: str
    status: LoanStatus
