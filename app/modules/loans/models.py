from dataclasses import dataclass, replace
import enum


class LoanStatus(str, enum.Enum):
    """Loan lifecycle status"""
    PENDING = "pending"
    APPROVED = "approved"
    ACTIVE = "active"
    REPAID = "repaid"
    DEFAULTED = "defaulted"  # no operation produces this yet


# target status -> status the loan must be in when transitions are enforced
TRANSITIONS = {
    LoanStatus.APPROVED: LoanStatus.PENDING,
    LoanStatus.ACTIVE: LoanStatus.APPROVED,
    LoanStatus.REPAID: LoanStatus.ACTIVE,
}

TERMINAL_STATUSES = frozenset({LoanStatus.REPAID, LoanStatus.DEFAULTED})


@dataclass
class LoanRecord:
    """
    One collateral-backed loan request and its current lifecycle status.
    Only `status` changes after creation.
    """
    id: str
    borrower: str
    amount: int
    collateral_amount: int
    interest_rate: float
    duration_days: int
    status: LoanStatus = LoanStatus.PENDING

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def snapshot(self) -> "LoanRecord":
        """Detached copy safe to hand out to callers"""
        return replace(self)

    def __repr__(self):
        return f"<LoanRecord(id={self.id}, borrower={self.borrower}, status={self.status.value})>"
