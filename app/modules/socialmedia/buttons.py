"""HTML snippets for the individual social media buttons."""

from html import escape
from typing import Optional, Tuple
from urllib.parse import quote


def paragraph(align: Optional[str]) -> str:
    if align:
        return f'<p align="{escape(align)}">'
    return "<p>"


def facebook_sdk(locale: str, app_id: str, version: str) -> str:
    """Loader for the locale-specific Facebook SDK."""
    return (
        '<div id="fb-root"></div>\n'
        "<script>(function(d, s, id) {\n"
        "\tvar js, fjs = d.getElementsByTagName(s)[0];\n"
        "\tif (d.getElementById(id)) return;\n"
        "\tjs = d.createElement(s); js.id = id;\n"
        f'\tjs.src = "//connect.facebook.com/{escape(locale)}/sdk.js'
        f'#xfbml=1&version={escape(version)}&appId={escape(app_id)}";\n'
        "\tfjs.parentNode.insertBefore(js, fjs);\n"
        "}(document, 'script', 'facebook-jssdk'));\n"
        "</script>\n"
    )


def x_follow(account: str, language: Optional[str] = None) -> str:
    """Follow button; ``language`` sets data-lang for non-English visitors."""
    account = escape(account)
    lang = f' data-lang="{escape(language)}"' if language else ""
    return (
        f'<a href="//x.com/{account}" class="twitter-follow-button"{lang}>'
        f"Follow @{account}</a>"
    )


def x_tweet(account: str, related: Optional[Tuple[str, str]] = None) -> str:
    """Tweet-this-page button crediting ``account``."""
    data_related = ""
    if related:
        data_related = f' data-related="{escape(related[0])}:{escape(related[1])}"'
    return (
        '<script type="text/javascript">\n'
        "window.twttr = (function(d, s, id) {\n"
        "\tvar js, fjs = d.getElementsByTagName(s)[0],\n"
        "\tt = window.twttr || {};\n"
        "\tif (d.getElementById(id)) return t;\n"
        "\tjs = d.createElement(s);\n"
        "\tjs.id = id;\n"
        '\tjs.src = "https://platform.x.com/widgets.js";\n'
        "\tfjs.parentNode.insertBefore(js, fjs);\n"
        "\tt._e = [];\n"
        "\tt.ready = function(f) {\n"
        "\t\tt._e.push(f);\n"
        "\t};\n"
        "\treturn t;\n"
        '}(document, "script", "twitter-wjs"));\n'
        "</script>\n"
        '<a href="//x.com/intent/tweet" class="twitter-share-button" '
        f'data-count="horizontal" data-via="{escape(account)}"{data_related}>Tweet</a>'
        '<script type="text/javascript" src="//platform.x.com/widgets.js"></script>'
    )


def facebook_like(host_name: str) -> str:
    return (
        f'<div class="fb-like" data-href="//{escape(host_name)}" '
        'data-layout="standard" data-action="like" data-size="small" '
        'data-show-faces="false" data-share="false"></div>'
    )


def facebook_share(host_name: str) -> str:
    return (
        f'<div class="fb-share-button" data-href="//{escape(host_name)}" '
        'data-layout="button_count" data-size="small" data-mobile-iframe="false">'
        '<a class="fb-xfbml-parse-ignore" target="_blank" '
        f'href="//www.facebook.com/sharer/sharer.php?u={quote("//" + host_name, safe="")}'
        '&amp;src=sdkpreparse">Share</a></div>'
    )


def linkedin_share() -> str:
    return (
        '<script src="//platform.linkedin.com/in.js" type="text/javascript"></script>\n'
        '<script type="IN/Share" data-counter="right"></script>\n'
    )


def google_plusone(language: Optional[str], protocol: str) -> str:
    """+1 button; ``language`` is a BCP 47 tag such as "en-GB"."""
    config = f"window.___gcfg = {{lang: '{escape(language)}'}};\n" if language else ""
    return (
        '<g:plusone></g:plusone><script type="text/javascript">'
        f"{config}"
        "(function() {\n"
        "\tvar po = document.createElement('script'); po.type = 'text/javascript'; po.async = true;\n"
        f"\tpo.src = '{escape(protocol)}://apis.google.com/js/plusone.js';\n"
        "\tvar s = document.getElementsByTagName('script')[0]; s.parentNode.insertBefore(po, s);\n"
        "})();\n"
        "</script>\n"
    )


def reddit() -> str:
    return (
        '<script type="text/javascript" '
        'src="//www.reddit.com/static/button/button1.js"></script>'
    )
