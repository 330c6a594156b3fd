APP_NAME = "staticdoc"

DEFAULT_STYLESHEET_HREF = "../styles.css"
STYLESHEET_FILENAME = "styles.css"
PAGE_FILENAME = "index"

DEFAULT_STYLESHEET = """
:root { --bg:#ffffff; --fg:#111; --muted:#555; --code:#f4f6f8; --border:#ddd; --link:#0b6bfd; }
@media (prefers-color-scheme: dark) {
  :root { --bg:#0f1115; --fg:#e7e9ee; --muted:#a0a4ae; --code:#1a1d24; --border:#2a2f3a; --link:#7aa2ff; }
}
html,body { background:var(--bg); color:var(--fg); }
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 0; line-height: 1.55; }
.container { max-width: 46rem; margin: 0 auto; padding: 1.25rem; }
article h1 { margin-bottom: .25em; }
article time.published { display:block; color:var(--muted); margin-bottom: 1.5em; }
pre { padding:.75rem; overflow:auto; border-radius:8px; background:var(--code); }
code { background:var(--code); padding:.15rem .3rem; border-radius:6px; }
pre code { padding:0; background:none; }
a { color:var(--link); text-decoration:none; } a:hover { text-decoration:underline; }
"""

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="{lang}">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<title>{title}</title>
<link rel="stylesheet" href="{stylesheet}" />
</head>
<body>
<div class="container">
<article>
<h1>{title}</h1>
<time class="published">{published}</time>
{body}
</article>
</div>
</body>
</html>
"""
