import logging
import re
from typing import Dict, List, Pattern, Tuple

from sketch2flutter.common.flutter.fence import Fence, iter_fences
from sketch2flutter.common.flutter.signatures import (
    MAIN_ENTRY_FILENAME,
    NAMING_SIGNATURES,
    is_main_entry,
)

logger = logging.getLogger("sketch2flutter.extractor")

# 파일명 규칙 우선순위: screen > widget > model > service > 기타 .dart
NAMED_BLOCK_PASSES: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("screen", re.compile(r"^[\w-]+_screen\.dart$")),
    ("widget", re.compile(r"^[\w-]+_widget\.dart$")),
    ("model", re.compile(r"^[\w-]+_model\.dart$")),
    ("service", re.compile(r"^[\w-]+_service\.dart$")),
    ("dart", re.compile(r"^[\w.-]+\.dart$")),
)


def _basename(filename: str) -> str:
    return filename.rsplit("/", 1)[-1]


def _named_fences(text: str) -> List[Tuple[str, Fence]]:
    named: List[Tuple[str, Fence]] = []
    for fence in iter_fences(text):
        if not fence.is_dart:
            continue
        filename = fence.filename
        if filename:
            named.append((_basename(filename), fence))
    return named


def extract_named_blocks(text: str) -> Dict[str, str]:
    """
    `// 파일명.dart` 주석이 달린 펜스를 파일명 규칙 우선순위대로 추출합니다.
    같은 파일명이 여러 번 나오면 처음 것만 사용합니다.
    """
    blocks: Dict[str, str] = {}
    named = _named_fences(text)

    # 1. main.dart 는 예약 파일명으로 먼저 확보
    for filename, fence in named:
        if filename == MAIN_ENTRY_FILENAME:
            blocks[MAIN_ENTRY_FILENAME] = fence.content
            logger.info(
                f"블록 발견: {MAIN_ENTRY_FILENAME} ({len(blocks[MAIN_ENTRY_FILENAME])} 문자)"
            )
            break

    # 2. 나머지는 접미사 규칙 순서대로
    for _, pattern in NAMED_BLOCK_PASSES:
        for filename, fence in named:
            if filename in blocks or not pattern.match(filename):
                continue
            blocks[filename] = fence.content
            logger.info(f"블록 발견: {filename} ({len(blocks[filename])} 문자)")

    return blocks


def infer_file_name_from_content(content: str, index: int) -> str:
    if is_main_entry(content):
        return MAIN_ENTRY_FILENAME
    for predicate, category in NAMING_SIGNATURES:
        if predicate(content):
            return f"{category.value}_{index}.dart"
    return f"file_{index}.dart"


def extract_unnamed_blocks(text: str) -> Dict[str, str]:
    """파일명 주석과 무관하게 모든 dart/무표기 펜스를 내용 시그니처로 이름 붙여 추출"""
    blocks: Dict[str, str] = {}
    dart_fences = [fence for fence in iter_fences(text) if fence.is_dart]

    for index, fence in enumerate(dart_fences):
        content = fence.content
        if not content:
            continue
        filename = infer_file_name_from_content(content, index)
        if filename in blocks:
            filename = f"file_{index}.dart"
        blocks[filename] = content
        logger.info(f"일반 dart 블록을 {filename} 으로 연결")

    return blocks


def extract_file_blocks(text: str) -> Dict[str, str]:
    """파일명 규칙으로 먼저 찾고, 하나도 없으면 모든 펜스를 내용 기반으로 추출"""
    blocks = extract_named_blocks(text)
    if blocks:
        return blocks
    return extract_unnamed_blocks(text)
