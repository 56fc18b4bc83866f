"""
LLM 응답 텍스트 -> GenerationBundle 추출 파이프라인.

각 단계는 결과가 채워졌으면 Populated, 다음 단계로 넘기려면 TryNext 를 반환합니다.
단계 순서:
  1. named-blocks        `// xxx.dart` 주석 펜스 추출 + 분류
  2. content-signatures  (1에서 이름 있는 블록이 하나도 없을 때만) 모든 펜스를 내용으로 분류
  3. class-signatures    클래스 정의 시그니처 기반 추출
  4. placeholder         오류 위젯으로 대체 (항상 Populated)
마지막에 main 엔트리가 없으면 entry_point 로 생성합니다.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Tuple, Union

from sketch2flutter.common.domain.artifact import GenerationBundle
from sketch2flutter.common.flutter.block_classifier import classify_blocks
from sketch2flutter.common.flutter.code_extractor import (
    extract_named_blocks,
    extract_unnamed_blocks,
)
from sketch2flutter.common.flutter.entry_point import generate_main_app
from sketch2flutter.common.flutter.fallback_extractor import (
    add_error_widget,
    extract_with_class_signatures,
)

logger = logging.getLogger("sketch2flutter.pipeline")


@dataclass(frozen=True)
class Populated:
    bundle: GenerationBundle


@dataclass(frozen=True)
class TryNext:
    reason: str
    carry: Optional[GenerationBundle] = None


StageOutcome = Union[Populated, TryNext]


@dataclass
class ExtractionContext:
    response_text: str
    named_block_count: int = 0
    carry: Optional[GenerationBundle] = None
    trail: list = field(default_factory=list)


Stage = Callable[[ExtractionContext], StageOutcome]


def named_block_stage(context: ExtractionContext) -> StageOutcome:
    blocks = extract_named_blocks(context.response_text)
    context.named_block_count = len(blocks)
    logger.info(f"추출된 코드 블록: {len(blocks)}")
    if not blocks:
        return TryNext("파일명 주석이 있는 블록 없음")

    bundle = classify_blocks(blocks)
    if bundle.is_empty():
        return TryNext("파일명 블록을 분류하지 못함")
    return Populated(bundle)


def content_signature_stage(context: ExtractionContext) -> StageOutcome:
    if context.named_block_count:
        return TryNext("파일명 블록이 있어 내용 기반 추출 생략")

    blocks = extract_unnamed_blocks(context.response_text)
    if not blocks:
        return TryNext("코드 펜스 없음")

    bundle = classify_blocks(blocks)
    if bundle.is_empty():
        return TryNext("내용 기반 분류 결과 없음")
    return Populated(bundle)


def class_signature_stage(context: ExtractionContext) -> StageOutcome:
    bundle = extract_with_class_signatures(context.response_text)
    if bundle.has_artifacts():
        return Populated(bundle)
    # main 만 찾은 경우에도 다음 단계로 넘겨 오류 위젯과 함께 반환
    return TryNext("클래스 시그니처 결과 없음", carry=bundle)


def placeholder_stage(context: ExtractionContext) -> StageOutcome:
    bundle = context.carry if context.carry is not None else GenerationBundle()
    return Populated(add_error_widget(bundle, context.response_text))


DEFAULT_STAGES: Tuple[Tuple[str, Stage], ...] = (
    ("named-blocks", named_block_stage),
    ("content-signatures", content_signature_stage),
    ("class-signatures", class_signature_stage),
    ("placeholder", placeholder_stage),
)


def run_extraction_pipeline(
    response_text: str,
    stages: Sequence[Tuple[str, Stage]] = DEFAULT_STAGES,
) -> GenerationBundle:
    context = ExtractionContext(response_text=response_text or "")
    bundle: Optional[GenerationBundle] = None

    for stage_name, stage in stages:
        try:
            outcome = stage(context)
        except Exception as e:
            logger.error(f"{stage_name} 단계 처리 중 오류: {e}")
            outcome = TryNext(f"{stage_name} 오류: {e}")

        if isinstance(outcome, Populated):
            context.trail.append(stage_name)
            bundle = outcome.bundle
            break

        context.trail.append(f"{stage_name}: {outcome.reason}")
        if outcome.carry is not None:
            context.carry = outcome.carry
        logger.warning(f"{stage_name} -> 다음 단계: {outcome.reason}")

    if bundle is None:
        bundle = context.carry if context.carry is not None else GenerationBundle()

    if bundle.main_entry is None:
        bundle.main_entry = generate_main_app(bundle.screens)
        logger.info("main.dart 자동 생성")

    logger.info(f"처리 결과: {bundle.summary()} (경로: {' > '.join(context.trail)})")
    return bundle
