# converter/forms.py
import re

from django import forms

from .numerals import MAX_MAGNITUDE

SLUG_RE = re.compile(r"^(-?\d+)-in-words$")


def parse_slug(slug: str):
    """'123-in-words' -> 123, anything else -> None."""
    m = SLUG_RE.match(slug or "")
    if not m:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        # more digits than int() accepts
        return None


class NumberForm(forms.Form):
    number = forms.CharField(
        label="Number",
        max_length=24,
        widget=forms.TextInput(attrs={
            "inputmode": "numeric",
            "placeholder": "Enter a number (e.g., 12345)",
            "autofocus": "autofocus",
        }),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["number"].widget.attrs.update({"class": "form-control form-control-lg"})

    def clean_number(self):
        # Accept '12,345' and ' 12 345 ' as typed by people
        raw = (self.cleaned_data.get("number") or "").strip().replace(",", "").replace(" ", "")
        if not re.fullmatch(r"[-+]?\d+", raw):
            raise forms.ValidationError("Enter a whole number, e.g. 12345.")

        n = int(raw)
        if abs(n) >= MAX_MAGNITUDE:
            raise forms.ValidationError(
                "Numbers must be smaller than one quintillion (10^18) in magnitude."
            )
        return n
