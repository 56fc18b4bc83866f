from sketch2flutter.common.domain.artifact import FlutterArtifact
from sketch2flutter.common.flutter.entry_point import PLACEHOLDER_HOME, generate_main_app


class TestGenerateMainApp:
    def test_first_screen_becomes_home(self) -> None:
        screens = [
            FlutterArtifact("login_screen", "class LoginScreen {}"),
            FlutterArtifact("home_screen", "class HomeScreen {}"),
        ]

        code = generate_main_app(screens).code

        assert "import 'login_screen.dart';" in code
        assert "home: LoginScreen()," in code
        assert "home_screen" not in code

    def test_placeholder_home_without_screens(self) -> None:
        code = generate_main_app([]).code

        assert f"home: {PLACEHOLDER_HOME}," in code
        assert "runApp(const MyApp());" in code
        assert "MaterialApp(" in code
