from sketch2flutter.common.flutter.fallback_extractor import ERROR_WIDGET_NAME
from sketch2flutter.common.flutter.pipeline import (
    ExtractionContext,
    TryNext,
    placeholder_stage,
    run_extraction_pipeline,
)

LOGIN_SCREEN_BLOCK = """```dart
// login_screen.dart
import 'package:flutter/material.dart';

class LoginScreen extends StatelessWidget {
  const LoginScreen({super.key});
}
```
"""

MAIN_BLOCK = """```dart
// main.dart
import 'package:flutter/material.dart';
import 'login_screen.dart';

void main() {
  runApp(const MyApp());
}
```
"""


class TestNamedBlockPath:
    def test_named_blocks_with_main(self) -> None:
        # When
        bundle = run_extraction_pipeline(LOGIN_SCREEN_BLOCK + MAIN_BLOCK)

        # Then
        assert [s.name for s in bundle.screens] == ["login_screen"]
        assert "runApp(const MyApp());" in bundle.main_entry.code
        assert "import 'login_screen.dart';" in bundle.main_entry.code

    def test_main_is_synthesized_when_missing(self) -> None:
        bundle = run_extraction_pipeline(LOGIN_SCREEN_BLOCK)

        assert bundle.main_entry is not None
        assert "home: LoginScreen()," in bundle.main_entry.code


class TestFallbackPaths:
    def test_unnamed_fences_are_classified_by_content(self) -> None:
        text = "```dart\nclass HomeScreen extends StatelessWidget {}\n```"

        bundle = run_extraction_pipeline(text)

        assert [s.name for s in bundle.screens] == ["screen_0"]
        assert "home: Screen0()," in bundle.main_entry.code

    def test_content_stage_is_skipped_when_named_blocks_exist(self) -> None:
        # Given: 이름은 있지만 어떤 규칙에도 맞지 않는 블록
        text = "```dart\n// helpers.dart\nclass X extends Y {}\n```"

        # When
        bundle = run_extraction_pipeline(text)

        # Then
        assert [w.name for w in bundle.widgets] == [ERROR_WIDGET_NAME]

    def test_class_signatures_without_fences(self) -> None:
        text = "class ProfilePage extends StatefulWidget {\n}\n"

        bundle = run_extraction_pipeline(text)

        assert [s.name for s in bundle.screens] == ["profile_page"]
        assert bundle.widgets == []

    def test_main_only_response_keeps_main_and_adds_error_widget(self) -> None:
        text = "void main() {\n  runApp(App());\n}\n"

        bundle = run_extraction_pipeline(text)

        assert bundle.main_entry.code.startswith("void main()")
        assert [w.name for w in bundle.widgets] == [ERROR_WIDGET_NAME]

    def test_response_without_code_gets_error_widget_and_placeholder_main(self) -> None:
        bundle = run_extraction_pipeline("Sorry, I cannot help with that.")

        assert [w.name for w in bundle.widgets] == [ERROR_WIDGET_NAME]
        assert bundle.screens == []
        assert 'Text("Home screen")' in bundle.main_entry.code

    def test_empty_response(self) -> None:
        bundle = run_extraction_pipeline("")

        assert [w.name for w in bundle.widgets] == [ERROR_WIDGET_NAME]


class TestStageFailures:
    def test_raising_stage_is_treated_as_try_next(self) -> None:
        def broken_stage(context: ExtractionContext) -> TryNext:
            raise ValueError("boom")

        bundle = run_extraction_pipeline(
            LOGIN_SCREEN_BLOCK,
            stages=(("broken", broken_stage), ("placeholder", placeholder_stage)),
        )

        assert [w.name for w in bundle.widgets] == [ERROR_WIDGET_NAME]
        assert bundle.screens == []
