import logging
import re
from typing import Iterator, Optional, Tuple

from sketch2flutter.common.domain.artifact import ArtifactCategory, GenerationBundle
from sketch2flutter.common.flutter.fence import iter_fences
from sketch2flutter.common.flutter.naming import escape_dart_string, to_snake_case

logger = logging.getLogger("sketch2flutter.fallback")

ERROR_WIDGET_NAME = "error_widget"
EXCERPT_LENGTH = 500
MATERIAL_IMPORT = "import 'package:flutter/material.dart';"

_MAIN_RE = re.compile(r"\bvoid\s+main\s*\([\s\S]*?runApp")
_UI_CLASS_RE = re.compile(
    r"\bclass\s+(\w+)\s+extends\s+(?:StatelessWidget|StatefulWidget)\b"
    r"[\s\S]*?(?=```|\bclass\s+\w+\s+extends\s+(?:StatelessWidget|StatefulWidget)\b|\Z)"
)
# 상속/믹스인/구현 절 없이 바로 본문이 시작되는 클래스
_PLAIN_CLASS_RE = re.compile(
    r"\bclass\s+(\w+)\s*(?:<[^>{]*>)?\s*\{[\s\S]*?(?=```|\bclass\s+\w+|\Z)"
)
_SERVICE_CLASS_RE = re.compile(
    r"\bclass\s+(\w+(?:Service|Provider|Repository|Client|Api))\b[^{;]*\{"
    r"[\s\S]*?(?=```|\bclass\s+\w+|\Z)"
)
_SERVICE_NAME_RE = re.compile(r"(?:Service|Provider|Repository|Client|Api)$")


def _find_all(text: str, pattern: re.Pattern) -> Iterator[Tuple[str, str]]:
    for match in pattern.finditer(text):
        if match.group(0) and match.group(1):
            yield match.group(0), match.group(1)


def _extract_relevant_code(block_text: str) -> str:
    """조각 안에 코드 펜스가 있으면 그 본문, 없으면 조각 전체"""
    for fence in iter_fences(block_text):
        return fence.content
    return block_text.strip()


def _with_material_import(code: str) -> str:
    if "package:flutter/" in code:
        return code
    return f"{MATERIAL_IMPORT}\n\n{code}"


def find_main_entry(text: str) -> Optional[str]:
    """main 시그니처(void main ... runApp)를 가진 가장 가까운 펜스, 없으면 본문 텍스트에서 추출"""
    for fence in iter_fences(text):
        if fence.is_dart and _MAIN_RE.search(fence.body):
            return fence.content

    match = _MAIN_RE.search(text)
    if not match:
        return None
    end = text.find("```", match.start())
    snippet = text[match.start() : end if end >= 0 else len(text)]
    return snippet.strip()


def extract_widgets_and_screens(text: str, bundle: GenerationBundle) -> None:
    for block_text, class_name in _find_all(text, _UI_CLASS_RE):
        code = _with_material_import(_extract_relevant_code(block_text))
        if "Screen" in class_name or "Page" in class_name:
            if bundle.add(ArtifactCategory.SCREEN, to_snake_case(class_name), code):
                logger.info(f"화면 추출: {class_name}")
        else:
            if bundle.add(ArtifactCategory.WIDGET, to_snake_case(class_name), code):
                logger.info(f"위젯 추출: {class_name}")


def extract_models(text: str, bundle: GenerationBundle) -> None:
    for block_text, class_name in _find_all(text, _PLAIN_CLASS_RE):
        if _SERVICE_NAME_RE.search(class_name):
            continue
        # 필드나 생성자가 있는 클래스만 모델로 본다
        if (
            "final" in block_text
            or "const" in block_text
            or f"{class_name}(" in block_text[len("class") :]
        ):
            code = _extract_relevant_code(block_text)
            if bundle.add(ArtifactCategory.MODEL, to_snake_case(class_name), code):
                logger.info(f"모델 추출: {class_name}")


def extract_services(text: str, bundle: GenerationBundle) -> None:
    for block_text, class_name in _find_all(text, _SERVICE_CLASS_RE):
        code = _extract_relevant_code(block_text)
        if bundle.add(ArtifactCategory.SERVICE, to_snake_case(class_name), code):
            logger.info(f"서비스 추출: {class_name}")


def extract_with_class_signatures(response_text: str) -> GenerationBundle:
    """파일명 주석 대신 클래스 정의 시그니처로 산출물을 찾는 느슨한 추출"""
    logger.info("클래스 시그니처 기반 대체 추출 사용")
    bundle = GenerationBundle()

    main_code = find_main_entry(response_text)
    if main_code:
        bundle.add(ArtifactCategory.MAIN, "main", main_code)
        logger.info("main.dart 를 대체 방식으로 추출")

    extract_widgets_and_screens(response_text, bundle)
    extract_models(response_text, bundle)
    extract_services(response_text, bundle)
    return bundle


def build_error_widget_code(response_text: str) -> str:
    excerpt = escape_dart_string(response_text[:EXCERPT_LENGTH] + "...")
    return f"""import 'package:flutter/material.dart';

class GenerationErrorWidget extends StatelessWidget {{
  const GenerationErrorWidget({{Key? key}}) : super(key: key);

  @override
  Widget build(BuildContext context) {{
    return Scaffold(
      appBar: AppBar(
        title: const Text('Generation Error'),
      ),
      body: Padding(
        padding: const EdgeInsets.all(16.0),
        child: Column(
          crossAxisAlignment: CrossAxisAlignment.start,
          children: [
            const Text(
              'Could not generate code',
              style: TextStyle(fontSize: 20, fontWeight: FontWeight.bold),
            ),
            const SizedBox(height: 16),
            const Text(
              'The AI response could not be processed. Please try another screenshot or contact support.',
            ),
            const SizedBox(height: 16),
            Container(
              padding: const EdgeInsets.all(8),
              color: Colors.grey[200],
              child: const Text(
                '{excerpt}',
                style: TextStyle(fontFamily: 'monospace', fontSize: 12),
              ),
            ),
          ],
        ),
      ),
    );
  }}
}}"""


def add_error_widget(bundle: GenerationBundle, response_text: str) -> GenerationBundle:
    logger.warning("응답에서 유효한 코드를 추출하지 못해 오류 위젯으로 대체")
    bundle.add(
        ArtifactCategory.WIDGET, ERROR_WIDGET_NAME, build_error_widget_code(response_text)
    )
    return bundle
