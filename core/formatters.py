# core/formatters.py

# all pure text utilities
# must never import from models!


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text

    return text[: max(width - 3, 0)] + "..."
