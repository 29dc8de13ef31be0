from typing import Optional, Dict, Any, Protocol


class AuditLogger(Protocol):
    def log(self, action: str, phone: str, success: bool = True, request_id: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        ...
