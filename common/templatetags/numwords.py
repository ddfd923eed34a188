from django import template

from converter.numerals import to_words

register = template.Library()


@register.filter
def in_words(value):
    """
    Spells an integer in English words.
    e.g. {{ 21|in_words }} -> "twenty one"
    Returns "" for values that are not integers.
    Out of range numbers raise NumberOutOfRangeError.
    """
    try:
        n = int(value)
    except (TypeError, ValueError):
        return ""
    return to_words(n)


@register.filter
def yes_no(value):
    return "Yes" if value else "No"


@register.filter
def join_numbers(values, sep=", "):
    return sep.join(str(v) for v in values or [])
