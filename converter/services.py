# converter/services.py
from __future__ import annotations

import logging
from typing import Any, Dict

from .conversions import conversions
from .currency import currency_spellings
from .facts import facts
from .numerals import check_range, to_words

logger = logging.getLogger(__name__)


def analyze(n: int) -> Dict[str, Any]:
    """
    Everything the number page shows for n.
    Raises NumberOutOfRangeError before doing any arithmetic if n is too large.
    """
    check_range(n)
    logger.debug("Analyzing %s", n)
    return {
        "number": n,
        "words": to_words(n),
        "facts": facts(n),
        "currencies": currency_spellings(n),
        "conversions": conversions(n),
    }
