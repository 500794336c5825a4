"""Plain text, slug and HTML-to-Markdown formatting operations."""

__version__ = "1.0.0"

from .config import AppConfig, load_config
from .core import FormattingError, FormattingService
from .models import FormattedText, MarkdownDocument

__all__ = [
    "AppConfig",
    "load_config",
    "FormattedText",
    "FormattingError",
    "FormattingService",
    "MarkdownDocument",
    "__version__",
]
