"""Root landing page with API links."""

from html import escape


def render_root_page(app_name: str, app_version: str) -> str:
    """Return HTML for the root landing page."""
    name = escape(app_name)
    version = escape(app_version)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <style>
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            background: #fafafa;
            color: #222;
            padding: 2rem 1rem;
        }}
        .wrap {{ max-width: 560px; margin: 0 auto; }}
        h1 {{ font-weight: 600; margin: 0 0 0.25rem 0; }}
        .muted {{ color: #777; }}
        code {{ background: #eee; padding: 0.1rem 0.3rem; }}
        a.btn {{
            display: inline-block;
            margin: 1rem 0.5rem 0 0;
            padding: 0.5rem 1rem;
            border: 1px solid #333;
            color: #222;
            text-decoration: none;
        }}
    </style>
</head>
<body>
    <div class="wrap">
        <h1>{name}</h1>
        <p class="muted">v{version} · product search with typo correction</p>
        <p>Search active products with <code>GET /api/v1/search?q=galaxy+phone</code>.
        When nothing matches, the query is retried once with spelling corrections
        and the response carries a <code>suggestion</code>.</p>
        <p>Admins rebuild the correction dictionary with
        <code>POST /api/v1/search/update-dictionary</code>.</p>
        <a href="/docs" class="btn">Open API docs (Swagger)</a>
        <a href="/redoc" class="btn">ReDoc</a>
    </div>
</body>
</html>
""".strip()
