# converter/sharing.py
from urllib.parse import quote

# Same set of characters encodeURIComponent leaves alone
_SAFE = "-_.!~*'()"


def _enc(value: str) -> str:
    return quote(str(value), safe=_SAFE)


def share_text(number, words: str) -> str:
    return f"{number} in words: {words}"


def share_links(url: str, text: str) -> dict:
    u, t = _enc(url), _enc(text)
    return {
        "twitter": f"https://twitter.com/intent/tweet?text={t}&url={u}",
        "facebook": f"https://www.facebook.com/sharer/sharer.php?u={u}",
        "linkedin": f"https://www.linkedin.com/sharing/share-offsite/?url={u}",
        "email": f"mailto:?subject=Number to Words&body={_enc(text + ' - ' + url)}",
    }
