from fastapi import Depends, Request

from app.modules.loans.store import LoanStore
from app.modules.loans.services import LoanService


def get_loan_store(request: Request) -> LoanStore:
    """Return the loan store owned by the running application"""
    return request.app.state.loan_store


def get_loan_service(store: LoanStore = Depends(get_loan_store)) -> LoanService:
    """Build a loan service bound to the application's store"""
    return LoanService(store)
