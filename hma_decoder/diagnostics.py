"""Reporting helpers for equipment a decode could not place."""
import logging
from collections import Counter
from typing import Dict, Iterable, Optional

from .model.descriptor import UnitDescriptor, UnresolvedSymbol

logger = logging.getLogger(__name__)


def summarize_unresolved(unresolved: Iterable[UnresolvedSymbol]) -> Dict[str, int]:
    """Count unresolved entries by description, in first-seen order."""
    return dict(Counter(symbol.description for symbol in unresolved))


def report_unresolved(
    unit: UnitDescriptor,
    log: Optional[logging.Logger] = None
) -> int:
    """Log a "failed to load N items" summary for a unit.

    Returns:
        Number of unresolved entries
    """
    log = log or logger
    total = len(unit.unresolved)
    if not total:
        return 0

    log.warning(f"{unit.name}: failed to load {total} equipment items")
    for description, count in summarize_unresolved(unit.unresolved).items():
        suffix = f" (x{count})" if count > 1 else ""
        log.warning(f"  {description}{suffix}")
    return total
