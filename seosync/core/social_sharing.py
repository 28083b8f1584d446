"""Social Sharing — share-intent URLs for the supported platforms."""

from urllib.parse import quote

from seosync.core.result import Result, from_try

SHARING_PLATFORMS = ("twitter", "facebook", "linkedin", "reddit", "email")
TWITTER_VIA = "cryptoversus"


def _encode(value: str) -> str:
    # encodeURIComponent semantics
    return quote(value, safe="-_.!~*'()")


def _sharing_urls(title: str, description: str, url: str) -> dict[str, str]:
    u, t, d = _encode(url), _encode(title), _encode(description)
    return {
        "twitter": f"https://twitter.com/intent/tweet?url={u}&text={t}&via={TWITTER_VIA}",
        "facebook": f"https://www.facebook.com/sharer/sharer.php?u={u}",
        "linkedin": f"https://www.linkedin.com/sharing/share-offsite/?url={u}",
        "reddit": f"https://www.reddit.com/submit?url={u}&title={t}",
        "email": f"mailto:?subject={t}&body={d}%0A%0A{u}",
    }


def generate_sharing_urls(title: str, description: str, url: str) -> Result:
    return from_try(_sharing_urls, title, description, url, component="social.urls")
