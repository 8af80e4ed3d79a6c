from typing import List
import logging

from app.core.exceptions import LoanNotFoundError, InvalidTransitionError
from app.modules.loans.models import LoanRecord
from app.modules.loans.schemas import LoanCreate, LoanActionResponse
from app.modules.loans.store import LoanStore

logger = logging.getLogger(__name__)


class LoanService:
    """Service layer for the loan request lifecycle"""

    def __init__(self, store: LoanStore):
        self.store = store

    def create_loan_request(self, loan: LoanCreate) -> str:
        return self.store.create(
            borrower=loan.borrower,
            amount=loan.amount,
            collateral_amount=loan.collateral_amount,
            interest_rate=loan.interest_rate,
            duration_days=loan.duration_days,
        )

    def get_loan_request(self, loan_id: str) -> LoanRecord:
        try:
            return self.store.get(loan_id)
        except LoanNotFoundError:
            logger.warning(f"Lookup of unknown loan {loan_id}")
            raise

    def get_all_loans(self) -> List[LoanRecord]:
        return self.store.list()

    def approve_loan(self, loan_id: str) -> LoanActionResponse:
        return self._apply(self.store.approve, loan_id, "Loan approved successfully")

    def activate_loan(self, loan_id: str) -> LoanActionResponse:
        return self._apply(self.store.activate, loan_id, "Loan activated successfully")

    def repay_loan(self, loan_id: str) -> LoanActionResponse:
        return self._apply(self.store.repay, loan_id, "Loan repaid successfully")

    def _apply(self, action, loan_id: str, message: str) -> LoanActionResponse:
        try:
            loan = action(loan_id)
        except LoanNotFoundError:
            logger.warning(f"Transition requested for unknown loan {loan_id}")
            raise
        except InvalidTransitionError as e:
            logger.warning(f"Rejected transition: {str(e)}")
            raise
        return LoanActionResponse(message=message, loan_id=loan.id, status=loan.status)
