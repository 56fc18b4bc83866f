import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Set, Tuple

from sketch2flutter.common.domain.artifact import (
    ArtifactCategory,
    CodeBlock,
    GenerationBundle,
)
from sketch2flutter.common.flutter.naming import strip_dart_extension
from sketch2flutter.common.flutter.signatures import (
    CONTENT_SIGNATURES,
    MAIN_ENTRY_FILENAME,
)

logger = logging.getLogger("sketch2flutter.classifier")


@dataclass(frozen=True)
class ClassificationRule:
    label: str
    matches: Callable[[CodeBlock], bool]
    category: ArtifactCategory


def _filename_has(block: CodeBlock, *markers: str) -> bool:
    filename = block.filename.lower()
    return any(marker in filename for marker in markers)


def _content_rule(
    predicate: Callable[[str], bool], category: ArtifactCategory
) -> ClassificationRule:
    return ClassificationRule(
        label=f"content:{category.value}",
        matches=lambda block: predicate(block.content),
        category=category,
    )


# 위에서부터 평가하여 처음 일치한 규칙의 카테고리를 사용
CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(
        "filename:main",
        lambda block: block.filename == MAIN_ENTRY_FILENAME,
        ArtifactCategory.MAIN,
    ),
    ClassificationRule(
        "filename:screen",
        lambda block: _filename_has(block, "screen", "page"),
        ArtifactCategory.SCREEN,
    ),
    ClassificationRule(
        "filename:widget",
        lambda block: _filename_has(block, "widget")
        and not _filename_has(block, "screen"),
        ArtifactCategory.WIDGET,
    ),
    ClassificationRule(
        "filename:model",
        lambda block: _filename_has(block, "model"),
        ArtifactCategory.MODEL,
    ),
    ClassificationRule(
        "filename:service",
        lambda block: _filename_has(block, "service", "provider"),
        ArtifactCategory.SERVICE,
    ),
    *(
        _content_rule(predicate, category)
        for predicate, category in CONTENT_SIGNATURES
    ),
)


def classify_block(
    block: CodeBlock,
    rules: Tuple[ClassificationRule, ...] = CLASSIFICATION_RULES,
) -> Optional[ArtifactCategory]:
    for rule in rules:
        if rule.matches(block):
            return rule.category
    return None


def classify_blocks(
    code_blocks: Mapping[str, str],
    bundle: Optional[GenerationBundle] = None,
    processed_files: Optional[Set[str]] = None,
) -> GenerationBundle:
    """
    파일명 -> 코드 매핑을 screen/widget/model/service/main 으로 분류합니다.

    어떤 규칙에도 맞지 않는 블록은 처리된 것으로만 표시하고 결과에서 제외합니다.
    processed_files 를 넘기면 이미 처리한 파일명은 다시 분류하지 않습니다.
    """
    if bundle is None:
        bundle = GenerationBundle()
    if processed_files is None:
        processed_files = set()

    for filename, content in code_blocks.items():
        if filename in processed_files:
            continue
        processed_files.add(filename)

        category = classify_block(CodeBlock(filename=filename, content=content))
        if category is None:
            logger.info(f"분류되지 않은 파일 제외: {filename}")
            continue

        name = strip_dart_extension(filename)
        if bundle.add(category, name, content):
            logger.info(f"{category.value} 처리: {name}")

    return bundle
