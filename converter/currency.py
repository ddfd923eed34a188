# converter/currency.py
from typing import Dict

from .numerals import to_words

# The noun is always plural, even for one.
CURRENCY_NAMES = {
    "USD": "U.S. dollars",
    "EUR": "euros",
    "GBP": "British pounds",
    "CAD": "Canadian dollars",
    "AUD": "Australian dollars",
    "JPY": "Japanese yen",
}


def currency_spellings(n: int) -> Dict[str, str]:
    words = to_words(n)
    return {code: f"{words} {name}" for code, name in CURRENCY_NAMES.items()}
