"""
Verdict: the outcome of one matcher call.
"""

from typing import Any, Dict, NamedTuple


class Verdict(NamedTuple):
    """
    Pass/fail result of a single assertion.

    The message describes the expectation and, on failure, the concrete
    discrepancy. It reads the same whether the assertion is used plainly
    or negated.
    """

    passed: bool
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Render as the {"message", "pass"} object test frameworks expect."""
        return {"message": self.message, "pass": self.passed}

    def __bool__(self) -> bool:
        return self.passed

    def __str__(self) -> str:
        return f"{'PASS' if self.passed else 'FAIL'}: {self.message}"


__all__ = ["Verdict"]
