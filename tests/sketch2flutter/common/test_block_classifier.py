from sketch2flutter.common.domain.artifact import ArtifactCategory, CodeBlock
from sketch2flutter.common.flutter.block_classifier import classify_block, classify_blocks

WIDGET_CODE = "class Card extends StatelessWidget {}"


class TestClassifyBlock:
    def test_filename_rules(self) -> None:
        cases = {
            "main.dart": ArtifactCategory.MAIN,
            "home_page.dart": ArtifactCategory.SCREEN,
            "Login_Screen.dart": ArtifactCategory.SCREEN,
            "screen_widget.dart": ArtifactCategory.SCREEN,
            "button_widget.dart": ArtifactCategory.WIDGET,
            "user_model.dart": ArtifactCategory.MODEL,
            "auth_provider.dart": ArtifactCategory.SERVICE,
            "api_service.dart": ArtifactCategory.SERVICE,
        }
        for filename, expected in cases.items():
            assert classify_block(CodeBlock(filename, "")) is expected, filename

    def test_filename_rule_beats_content(self) -> None:
        # 파일명이 model 이면 내용이 위젯이어도 model
        block = CodeBlock("user_model.dart", WIDGET_CODE)

        assert classify_block(block) is ArtifactCategory.MODEL

    def test_content_rules_when_filename_is_neutral(self) -> None:
        assert (
            classify_block(CodeBlock("a.dart", "class A extends StatefulWidget { // Page"))
            is ArtifactCategory.SCREEN
        )
        assert classify_block(CodeBlock("b.dart", WIDGET_CODE)) is ArtifactCategory.WIDGET
        assert classify_block(CodeBlock("c.dart", "class C {}")) is ArtifactCategory.MODEL
        assert (
            classify_block(CodeBlock("d.dart", "class D extends ChangeNotifier with Provider"))
            is ArtifactCategory.SERVICE
        )

    def test_unmatched_block_returns_none(self) -> None:
        assert classify_block(CodeBlock("helpers.dart", "class X extends Y {}")) is None


class TestClassifyBlocks:
    def test_blocks_are_sorted_into_bundle(self) -> None:
        # Given
        blocks = {
            "main.dart": "void main() { runApp(App()); }",
            "login_screen.dart": "class LoginScreen extends StatelessWidget {}",
            "card_widget.dart": WIDGET_CODE,
            "misc.dart": "class X extends Y {}",
        }

        # When
        bundle = classify_blocks(blocks)

        # Then
        assert bundle.main_entry is not None
        assert bundle.main_entry.code.startswith("void main()")
        assert [s.name for s in bundle.screens] == ["login_screen"]
        assert [w.name for w in bundle.widgets] == ["card_widget"]
        assert bundle.models == [] and bundle.services == []

    def test_processed_files_are_skipped(self) -> None:
        processed = {"login_screen.dart"}

        bundle = classify_blocks(
            {"login_screen.dart": "class LoginScreen {}", "user_model.dart": "class User {}"},
            processed_files=processed,
        )

        assert bundle.screens == []
        assert [m.name for m in bundle.models] == ["user_model"]
        assert processed == {"login_screen.dart", "user_model.dart"}

    def test_distinct_named_blocks_map_one_to_one(self) -> None:
        blocks = {
            "login_screen.dart": "class LoginScreen {}",
            "home_screen.dart": "class HomeScreen {}",
            "user_model.dart": "class User {}",
        }

        bundle = classify_blocks(blocks)

        assert [s.name for s in bundle.screens] == ["login_screen", "home_screen"]
        assert [m.name for m in bundle.models] == ["user_model"]

    def test_classification_is_idempotent(self) -> None:
        blocks = {
            "main.dart": "void main() {}",
            "card_widget.dart": WIDGET_CODE,
            "api.dart": "class ApiService extends Base {}",
        }

        first = classify_blocks(blocks)
        second = classify_blocks(blocks)

        assert first == second
        # 같은 bundle/processed_files 로 다시 돌려도 변화 없음
        processed = set(blocks)
        assert classify_blocks(blocks, first, processed) == second

    def test_service_content_words_differ_from_naming_words(self) -> None:
        # 분류는 Provider 를 서비스로 보고 소문자 service 는 보지 않음
        assert (
            classify_block(CodeBlock("a.dart", "abstract class Provider extends Base {}"))
            is ArtifactCategory.SERVICE
        )
        assert classify_block(CodeBlock("b.dart", "final service = locator();")) is None
