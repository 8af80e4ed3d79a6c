from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from app.core.dependencies import get_loan_service
from app.core.exceptions import LoanNotFoundError, InvalidTransitionError
from app.modules.loans.schemas import (
    LoanCreate, LoanCreatedResponse, LoanResponse, LoanActionResponse
)
from app.modules.loans.services import LoanService

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


@router.post("", response_model=LoanCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_loan_request(
    loan: LoanCreate,
    service: LoanService = Depends(get_loan_service)
):
    """
    Create a new loan request.

    - The loan starts in `pending` status
    - Amounts are accepted as given; no collateral ratio is enforced
    """
    loan_id = service.create_loan_request(loan)
    return LoanCreatedResponse(loan_id=loan_id)


@router.get("", response_model=List[LoanResponse])
async def get_all_loans(service: LoanService = Depends(get_loan_service)):
    """Get all loan requests (order is not guaranteed)"""
    return service.get_all_loans()


@router.get("/{loan_id}", response_model=LoanResponse)
async def get_loan_request(
    loan_id: str,
    service: LoanService = Depends(get_loan_service)
):
    """Get loan details by ID"""
    try:
        return service.get_loan_request(loan_id)
    except LoanNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{loan_id}/approve", response_model=LoanActionResponse)
async def approve_loan(
    loan_id: str,
    service: LoanService = Depends(get_loan_service)
):
    """Approve a loan request"""
    return _run_transition(service.approve_loan, loan_id)


@router.post("/{loan_id}/activate", response_model=LoanActionResponse)
async def activate_loan(
    loan_id: str,
    service: LoanService = Depends(get_loan_service)
):
    """Activate an approved loan"""
    return _run_transition(service.activate_loan, loan_id)


@router.post("/{loan_id}/repay", response_model=LoanActionResponse)
async def repay_loan(
    loan_id: str,
    service: LoanService = Depends(get_loan_service)
):
    """Mark a loan as repaid"""
    return _run_transition(service.repay_loan, loan_id)


def _run_transition(action, loan_id: str) -> LoanActionResponse:
    try:
        return action(loan_id)
    except LoanNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
