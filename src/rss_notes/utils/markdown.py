import html2text


def html_to_markdown(html: str) -> str:
    """Convert an HTML fragment from a feed into markdown."""
    converter = html2text.HTML2Text()
    # Keep paragraphs on one line; the vault's editor wraps them.
    converter.body_width = 0
    return converter.handle(html).strip()
