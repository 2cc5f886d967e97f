"""Fixed boilerplate and tag templates.

Every template is a plain ``str.format`` pattern with a single ``{}`` slot.
Values are interpolated verbatim, nothing is escaped.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Boilerplate
# ---------------------------------------------------------------------------

DOCTYPE = "<!DOCTYPE html>"
HTML_OPEN = '<html lang="{}">'
HTML_CLOSE = "</html>"
HEAD_OPEN = "<head>"
HEAD_CLOSE = "</head>"
CHARSET = '<meta charset="utf-8">'
VIEWPORT = '<meta name="viewport" content="width=device-width, initial-scale=1.0">'

DEFAULT_LANG = "en-US"


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

TITLE = "<title>{}</title>"
DESCRIPTION = '<meta name="description" content="{}">'
THEME_COLOR = '<meta name="theme-color" content="{}">'
FAVICON = '<link rel="icon" type="image/x-icon" href="{}">'
MANIFEST = '<link rel="manifest" href="{}">'


# ---------------------------------------------------------------------------
# Scripts
# ---------------------------------------------------------------------------

SCRIPT_DEFER = '<script src="{}" defer></script>'
SCRIPT_BLOCKING = '<script src="{}"></script>'
SCRIPT_INLINE = "<script>{}</script>"
SCRIPT_PREFETCH = '<link rel="prefetch" href="{}">'


# ---------------------------------------------------------------------------
# Styles & fonts
# ---------------------------------------------------------------------------

STYLE_ASYNC = (
    '<link rel="preload" as="style" href="{}" '
    "onload=\"this.rel='stylesheet'\" onerror=\"this.rel='stylesheet'\">"
)
STYLE_INLINE = "<style>{}</style>"
STYLE_BLOCKING = '<link rel="stylesheet" href="{}">'
FONT_PRELOAD = '<link rel="preload" as="font" crossorigin href="{}">'


# ---------------------------------------------------------------------------
# Async-style polyfill
# ---------------------------------------------------------------------------

# Flips rel=preload stylesheets to rel=stylesheet in browsers without native
# preload support. Runs from <head>, so it waits for the links to be parsed.
ASYNC_STYLE_POLYFILL = (
    '(function(w){"use strict";var d=w.document;'
    'try{if(d.createElement("link").relList.supports("preload"))return}catch(e){}'
    'function f(){var l=d.getElementsByTagName("link");'
    'for(var i=0;i<l.length;i++){'
    'if(l[i].rel==="preload"&&l[i].getAttribute("as")==="style"){l[i].rel="stylesheet"}}}'
    'if(d.readyState==="loading"){d.addEventListener("DOMContentLoaded",f)}else{f()}'
    "})(window);"
)
