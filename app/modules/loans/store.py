"""
In-memory loan record store.

Owns the id -> LoanRecord mapping and the monotonic counter used to mint
identifiers. A single lock covers counter increment plus insertion, and
each status change, so concurrent callers never collide on an id or lose
an update.
"""
from typing import Dict, List
import logging
import threading

from app.core.exceptions import LoanNotFoundError, InvalidTransitionError
from app.modules.loans.models import LoanRecord, LoanStatus, TRANSITIONS

logger = logging.getLogger(__name__)


class LoanStore:
    """Process-wide loan store, constructed once and injected where needed"""

    def __init__(self, id_prefix: str = "loan_", enforce_transitions: bool = False):
        self.id_prefix = id_prefix
        self.enforce_transitions = enforce_transitions
        self._loans: Dict[str, LoanRecord] = {}
        self._counter = 0
        self._lock = threading.Lock()

    @property
    def counter(self) -> int:
        """Last counter value used to mint an identifier"""
        return self._counter

    def __len__(self) -> int:
        with self._lock:
            return len(self._loans)

    def create(
        self,
        borrower: str,
        amount: int,
        collateral_amount: int,
        interest_rate: float,
        duration_days: int,
    ) -> str:
        """Insert a new Pending loan and return its identifier"""
        with self._lock:
            self._counter += 1
            loan_id = f"{self.id_prefix}{self._counter}"
            self._loans[loan_id] = LoanRecord(
                id=loan_id,
                borrower=borrower,
                amount=amount,
                collateral_amount=collateral_amount,
                interest_rate=interest_rate,
                duration_days=duration_days,
                status=LoanStatus.PENDING,
            )
        logger.info(f"Created loan {loan_id} for borrower {borrower}")
        return loan_id

    def get(self, loan_id: str) -> LoanRecord:
        with self._lock:
            loan = self._loans.get(loan_id)
            if loan is None:
                raise LoanNotFoundError(loan_id)
            return loan.snapshot()

    def list(self) -> List[LoanRecord]:
        """All records, in no particular order"""
        with self._lock:
            return [loan.snapshot() for loan in self._loans.values()]

    def statuses(self) -> List[LoanStatus]:
        """Current status of every record, read under one lock"""
        with self._lock:
            return [loan.status for loan in self._loans.values()]

    def approve(self, loan_id: str) -> LoanRecord:
        return self._transition(loan_id, LoanStatus.APPROVED)

    def activate(self, loan_id: str) -> LoanRecord:
        return self._transition(loan_id, LoanStatus.ACTIVE)

    def repay(self, loan_id: str) -> LoanRecord:
        return self._transition(loan_id, LoanStatus.REPAID)

    def _transition(self, loan_id: str, target: LoanStatus) -> LoanRecord:
        with self._lock:
            loan = self._loans.get(loan_id)
            if loan is None:
                raise LoanNotFoundError(loan_id)

            previous = loan.status
            if self.enforce_transitions and previous != TRANSITIONS[target]:
                raise InvalidTransitionError(
                    loan_id, previous, target, terminal=loan.is_terminal
                )

            loan.status = target
            result = loan.snapshot()

        logger.info(f"Loan {loan_id} moved from {previous.value} to {target.value}")
        return result
