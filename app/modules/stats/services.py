from typing import Dict

from app.modules.loans.models import LoanStatus
from app.modules.loans.store import LoanStore


class StatsAggregator:
    """Read-only summary of the loan store by status"""

    # Approved and defaulted loans are counted in the total only
    REPORTED_STATUSES = {
        "pending_loans": LoanStatus.PENDING,
        "active_loans": LoanStatus.ACTIVE,
        "repaid_loans": LoanStatus.REPAID,
    }

    @staticmethod
    def aggregate(store: LoanStore) -> Dict[str, int]:
        """
        Count loans per reported status.

        Returns a mapping with `total_loans`, `pending_loans`, `active_loans`
        and `repaid_loans`. An empty store yields all zeros.
        """
        statuses = store.statuses()
        stats = {"total_loans": len(statuses)}
        for label, loan_status in StatsAggregator.REPORTED_STATUSES.items():
            stats[label] = sum(1 for s in statuses if s == loan_status)
        return stats
