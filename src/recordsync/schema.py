from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class FindingDTO(BaseModel):
    type_name: str
    verdict: str
    span_start: int
    span_end: int
    diagnostic_id: Optional[str] = None
    severity: Optional[str] = None
    fixes: List[str] = []


class CheckResponse(BaseModel):
    path: str
    findings: List[FindingDTO]
    errors: List[str] = []


class FixResponse(BaseModel):
    document: Dict[str, Any]
    applied: List[FindingDTO] = []
    errors: List[str] = []
