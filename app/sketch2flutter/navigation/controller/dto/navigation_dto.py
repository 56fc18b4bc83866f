from dataclasses import dataclass
from typing import Dict, List, Optional

from sketch2flutter.common.domain.artifact import NavigationBundle


@dataclass(frozen=True)
class RouteDTO:
    name: str
    screenName: str
    path: str
    isInitial: bool
    description: str
    figureCount: int


@dataclass(frozen=True)
class NavigationDataDTO:
    routes: List[RouteDTO]
    files: Dict[str, str]


@dataclass(frozen=True)
class NavigationResponseDTO:
    success: bool
    message: str
    data: Optional[NavigationDataDTO] = None
    error: Optional[str] = None


def to_navigation_data(
    bundle: Optional[NavigationBundle],
) -> Optional[NavigationDataDTO]:
    if bundle is None:
        return None
    return NavigationDataDTO(
        routes=[
            RouteDTO(
                name=route.name,
                screenName=route.screen_name,
                path=route.path,
                isInitial=route.is_initial,
                description=route.description,
                figureCount=route.element_count,
            )
            for route in bundle.routes
        ],
        files=dict(bundle.files),
    )
