"""Custom exceptions for the voice relay bot."""

from typing import Any, Dict, List, Optional

from fastapi import HTTPException


class CustomHTTPException(HTTPException):
    """HTTP exception with a JSON message body.
    
    Attributes:
        message: The error message
        status_code: HTTP status code
        headers: Optional HTTP headers
    """
    
    def __init__(
        self,
        status_code: int,
        message: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None
    ) -> None:
        self.message = message
        super().__init__(status_code=status_code, detail=message)
        self.headers = headers

    def to_json(self) -> Dict[str, str]:
        return self.headers if self.headers else {}


class ConfigurationError(Exception):
    """Raised when the service settings cannot be loaded.
    
    Attributes:
        errors: One line per missing or invalid setting
    """
    
    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors)
        super().__init__(self.render())

    def render(self) -> str:
        lines = ["Configuration errors:"]
        lines.extend(f"  - {error}" for error in self.errors)
        lines.append("")
        lines.append("Please check your environment variables and .env file.")
        lines.append("See .env.example for required variables.")
        return "\n".join(lines)
