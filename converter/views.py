# converter/views.py
import logging

from django.http import Http404, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET

from .forms import NumberForm, parse_slug
from .numerals import NumberOutOfRangeError
from .recent import get_recent, remember
from .services import analyze
from .sharing import share_links, share_text

logger = logging.getLogger(__name__)

POPULAR_NUMBERS = [
    "100", "1000", "10000", "100000", "1000000",
    "123", "456", "789", "2024", "12345",
]


def number_page_context(result: dict, page_url: str, recent=None) -> dict:
    """Context for converter/number.html, also used by render_numbers."""
    return {
        "result": result,
        "share": share_links(page_url, share_text(result["number"], result["words"])),
        "page_url": page_url,
        "recent": recent or [],
        "popular": POPULAR_NUMBERS,
        "form": NumberForm(),
    }


# ============================================================
# Pages
# ============================================================

@require_GET
def home(request):
    status = 200
    if "number" in request.GET:
        form = NumberForm(request.GET)
        if form.is_valid():
            n = form.cleaned_data["number"]
            return redirect("converter:number", slug=f"{n}-in-words")
        logger.info("Rejected input %r: %s", request.GET.get("number"), form.errors.get("number"))
        status = 400
    else:
        form = NumberForm()

    return render(request, "converter/home.html", {
        "form": form,
        "recent": get_recent(request),
        "popular": POPULAR_NUMBERS,
    }, status=status)


@require_GET
def number_page(request, slug):
    n = parse_slug(slug)
    if n is None:
        raise Http404("Invalid number format")

    try:
        result = analyze(n)
    except NumberOutOfRangeError as e:
        logger.warning("Out of range number page requested: %s", slug)
        return render(request, "converter/invalid.html", {
            "error": str(e),
            "form": NumberForm(),
        }, status=400)

    recent = remember(request, n)
    ctx = number_page_context(result, request.build_absolute_uri(), recent)
    return render(request, "converter/number.html", ctx)


# ============================================================
# API
# ============================================================

@require_GET
def number_api(request, number):
    form = NumberForm({"number": number})
    if not form.is_valid():
        return JsonResponse({"ok": False, "error": form.errors["number"][0]}, status=400)

    return JsonResponse({"ok": True, **analyze(form.cleaned_data["number"])})
