from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.template.loader import render_to_string

from converter.numerals import NumberOutOfRangeError
from converter.services import analyze
from converter.views import number_page_context

COMMON_NUMBERS = (
    list(range(1, 21))
    + [25, 30, 40, 50, 60, 70, 80, 90]
    + list(range(100, 1001, 100))
    + [2000, 3000, 4000, 5000, 10000, 100000, 1000000]
)


class Command(BaseCommand):
    help = "Pre-renders the number pages of common numbers as static HTML"

    def add_arguments(self, parser):
        parser.add_argument("--output", default=None, help="Destination folder (default: STATIC_PAGES_DIR)")
        parser.add_argument("--number", type=int, action="append", dest="numbers",
                            help="Number to render, repeatable (default: common numbers)")

    def handle(self, *args, **opts):
        output = Path(opts["output"] or settings.STATIC_PAGES_DIR)
        numbers = opts["numbers"] or COMMON_NUMBERS
        site_url = settings.SITE_URL.rstrip("/")

        written = 0
        for n in numbers:
            try:
                result = analyze(n)
            except NumberOutOfRangeError as e:
                raise CommandError(str(e))

            slug = f"{n}-in-words"
            ctx = number_page_context(result, f"{site_url}/{slug}/")
            html = render_to_string("converter/number.html", ctx)

            page = output / slug / "index.html"
            page.parent.mkdir(parents=True, exist_ok=True)
            page.write_text(html, encoding="utf-8")
            written += 1

        self.stdout.write(self.style.SUCCESS(f"{written} pages written to {output}"))
