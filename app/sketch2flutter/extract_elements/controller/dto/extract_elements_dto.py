from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ExtractElementsRequestDTO:
    image: str
    viewId: str
    description: str = ""


@dataclass(frozen=True)
class ExtractElementsResponseDTO:
    success: bool
    message: str
    figuresCount: int = 0
    data: List[Dict[str, Any]] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)
    error: Optional[str] = None
