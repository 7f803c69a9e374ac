from .line_protocol import extract_field, handle_line, serve

__all__ = ["extract_field", "handle_line", "serve"]
