# Loans module
# The router and service are imported from their own modules; they depend
# on app.core.dependencies, which itself imports the store from here.
from app.modules.loans.models import LoanRecord, LoanStatus, TRANSITIONS
from app.modules.loans.store import LoanStore

__all__ = ["LoanRecord", "LoanStatus", "TRANSITIONS", "LoanStore"]
