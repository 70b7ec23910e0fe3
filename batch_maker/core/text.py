import re

_SCRIPT_RE = re.compile(r"<script[^>]*>[\s\S]*?</script>", flags=re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[^>]*>[\s\S]*?</style>", flags=re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_BLANK_RUN_RE = re.compile(r"\n\s*\n")

# Only the handful of entities recipe pages actually lean on; anything else stays literal.
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def strip_scripts(html: str) -> str:
    html = _SCRIPT_RE.sub("", html or "")
    return _STYLE_RE.sub("", html)


def html_to_text(html: str) -> str:
    """Visible text of a page, one tag boundary per line."""
    text = _TAG_RE.sub("\n", strip_scripts(html))
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return _BLANK_RUN_RE.sub("\n", text).strip()
