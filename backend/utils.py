"""Helper utilities for DocChat."""


def truncate_text(text: str, max_length: int = 80) -> str:
    """Shorten text for log lines."""
    text = " ".join(text.split())
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def format_file_size(size_bytes: int) -> str:
    """Format a byte count the way the document list shows it.

    Sizes are always reported in kilobytes with two decimals
    (e.g., "1.50 KB" for 1536 bytes).
    """
    return f"{size_bytes / 1024:.2f} KB"
