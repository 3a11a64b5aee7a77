import markdown


def render_markdown(text: str) -> str:
    """Model answers come back as Markdown; callers asking for HTML get it rendered."""
    return markdown.markdown(text or "", extensions=["extra", "sane_lists"])
