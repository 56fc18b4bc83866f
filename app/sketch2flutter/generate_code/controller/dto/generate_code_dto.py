from dataclasses import dataclass
from typing import List, Optional

from sketch2flutter.common.domain.artifact import FlutterArtifact, GenerationBundle
from sketch2flutter.navigation.controller.dto.navigation_dto import (
    NavigationDataDTO,
    to_navigation_data,
)


@dataclass(frozen=True)
class GenerateFromScreenshotRequestDTO:
    image: str
    pageName: str
    description: Optional[str] = None
    projectId: Optional[str] = None


@dataclass(frozen=True)
class GenerateFromPromptRequestDTO:
    prompt: str
    pageName: str
    description: Optional[str] = None
    projectId: Optional[str] = None


@dataclass(frozen=True)
class ArtifactDTO:
    name: str
    code: str


@dataclass(frozen=True)
class GeneratedCodeDTO:
    screens: List[ArtifactDTO]
    widgets: List[ArtifactDTO]
    models: List[ArtifactDTO]
    services: List[ArtifactDTO]
    main: Optional[str] = None
    navigation: Optional[NavigationDataDTO] = None


@dataclass(frozen=True)
class GenerateCodeResponseDTO:
    success: bool
    message: str
    data: Optional[GeneratedCodeDTO] = None
    error: Optional[str] = None
    generatedAt: Optional[str] = None


def _to_artifacts(artifacts: List[FlutterArtifact]) -> List[ArtifactDTO]:
    return [ArtifactDTO(name=a.name, code=a.code) for a in artifacts]


def to_generated_code(bundle: GenerationBundle) -> GeneratedCodeDTO:
    return GeneratedCodeDTO(
        screens=_to_artifacts(bundle.screens),
        widgets=_to_artifacts(bundle.widgets),
        models=_to_artifacts(bundle.models),
        services=_to_artifacts(bundle.services),
        main=bundle.main_entry.code if bundle.main_entry else None,
        navigation=to_navigation_data(bundle.navigation),
    )
