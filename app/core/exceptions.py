"""
Domain errors raised by the loan store and services.

Routers translate these into HTTP responses; the store never returns
partial results when one is raised.
"""


class LoanPlatformError(Exception):
    """Base class for loan platform errors"""


class LoanNotFoundError(LoanPlatformError, LookupError):
    """Raised when a loan identifier is absent from the store"""

    def __init__(self, loan_id: str):
        self.loan_id = loan_id
        super().__init__("Loan not found")


class InvalidTransitionError(LoanPlatformError, ValueError):
    """Raised in guarded mode when a loan is not in the required predecessor status"""

    def __init__(self, loan_id: str, current, target, terminal: bool = False):
        self.loan_id = loan_id
        self.current = current
        self.target = target
        self.terminal = terminal
        if terminal:
            message = f"Loan {loan_id} is already {current.value} and cannot become {target.value}"
        else:
            message = f"Cannot move loan {loan_id} from {current.value} to {target.value}"
        super().__init__(message)
