from typing import Sequence

from sketch2flutter.common.domain.artifact import FlutterArtifact, MainEntry
from sketch2flutter.common.flutter.naming import to_pascal_case, to_snake_case

PLACEHOLDER_HOME = 'const Center(child: Text("Home screen"))'


def generate_main_app(screens: Sequence[FlutterArtifact]) -> MainEntry:
    """첫 번째 화면을 home 으로 하는 기본 main.dart 를 생성. 화면이 없으면 고정 placeholder 사용"""
    home_import = ""
    home_widget = PLACEHOLDER_HOME

    if screens:
        home_screen = screens[0]
        home_import = f"import '{to_snake_case(home_screen.name)}.dart';"
        home_widget = f"{to_pascal_case(home_screen.name)}()"

    code = f"""import 'package:flutter/material.dart';
{home_import}

void main() {{
  runApp(const MyApp());
}}

class MyApp extends StatelessWidget {{
  const MyApp({{Key? key}}) : super(key: key);

  @override
  Widget build(BuildContext context) {{
    return MaterialApp(
      title: 'Flutter Demo',
      theme: ThemeData(
        primarySwatch: Colors.blue,
        visualDensity: VisualDensity.adaptivePlatformDensity,
      ),
      home: {home_widget},
    );
  }}
}}"""
    return MainEntry(code=code)
