# md_to_html/markdown/document.py

HTML_MAX_WIDTH = "800px"
DOCUMENT_TITLE = "Converted Markdown"

_DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Arial, sans-serif;
            max-width: {max_width};
            margin: 0 auto;
            padding: 20px;
            line-height: 1.6;
            color: #24292e;
            background-color: #ffffff;
        }}
        h1, h2, h3, h4, h5, h6 {{
            margin-top: 1.5em;
            margin-bottom: 0.5em;
            font-weight: 600;
            line-height: 1.25;
        }}
        h1 {{
            font-size: 2em;
            border-bottom: 1px solid #eaecef;
            padding-bottom: 0.3em;
        }}
        h2 {{
            font-size: 1.5em;
            border-bottom: 1px solid #eaecef;
            padding-bottom: 0.3em;
        }}
        code:not(pre code) {{
            background-color: #f4f4f4;
            padding: 2px 6px;
            border-radius: 3px;
            font-family: 'SFMono-Regular', Consolas, 'Liberation Mono', Menlo, monospace;
            font-size: 0.9em;
        }}
        pre {{
            background-color: #f6f8fa;
            padding: 16px;
            border-radius: 6px;
            overflow-x: auto;
            line-height: 1.45;
        }}
        .highlight pre {{
            font-size: 0.9em;
        }}
        table {{
            border-collapse: collapse;
            width: 100%;
            margin: 1em 0;
        }}
        th, td {{
            border: 1px solid #dfe2e5;
            padding: 8px 13px;
            text-align: left;
        }}
        th {{
            background-color: #f6f8fa;
            font-weight: 600;
        }}
        tr:nth-child(2n) {{
            background-color: #f6f8fa;
        }}
        img {{
            max-width: 100%;
        }}
        svg {{
            max-width: 100%;
            height: auto;
            margin: 1em 0;
            display: block;
        }}
{styles}
    </style>
</head>
<body>
{content}
</body>
</html>"""


def wrap_in_html_document(content: str, styles: str = "", title: str = DOCUMENT_TITLE) -> str:
    """
    Wrap an HTML fragment in a complete, self-contained document.

    Args:
        content: HTML body fragment
        styles: Extra CSS, e.g. the highlighter's stylesheet
        title: Document title

    Returns:
        Complete HTML document
    """
    return _DOCUMENT_TEMPLATE.format(
        title=title,
        max_width=HTML_MAX_WIDTH,
        styles=styles,
        content=content,
    )
