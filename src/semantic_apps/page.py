"""Full HTML page wrapping widgets with the Semantic UI assets."""

from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from .markup import TagList

SEMANTIC_VERSION = "2.4.1"
SEMANTIC_CDN = f"https://cdnjs.cloudflare.com/ajax/libs/semantic-ui/{SEMANTIC_VERSION}"
SEMANTIC_CSS = f"{SEMANTIC_CDN}/semantic.min.css"
SEMANTIC_JS = f"{SEMANTIC_CDN}/semantic.min.js"
THEME_CDN = f"{SEMANTIC_CDN}/themes"
JQUERY_JS = "https://code.jquery.com/jquery-3.7.1.min.js"
STATIC_PREFIX = "/semantic-apps-static"
CLIENT_SCRIPT = f"{STATIC_PREFIX}/semantic_apps.js"

env = Environment(
    loader=PackageLoader("semantic_apps", "templates"),
    autoescape=select_autoescape(["html", "j2"]),
)


def semantic_page(
    *children: Any,
    title: str = "Semantic App",
    theme: str | None = None,
    session_id: str | None = None,
) -> Markup:
    """Render a complete HTML document around ``children``.

    ``theme`` selects an alternative Semantic UI theme stylesheet. When
    ``session_id`` is given, the client script connects to the app's
    WebSocket for that session.
    """
    body = TagList(*children)
    return Markup(
        env.get_template("page.html.j2").render(
            title=title,
            body=body,
            semantic_css=SEMANTIC_CSS,
            theme_css=f"{THEME_CDN}/{theme}/semantic.min.css" if theme else None,
            semantic_js=SEMANTIC_JS,
            jquery_js=JQUERY_JS,
            client_script=CLIENT_SCRIPT,
            session_id=session_id,
        )
    )
