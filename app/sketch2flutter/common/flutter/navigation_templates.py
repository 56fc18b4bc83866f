"""라우트 테이블로부터 Flutter 네비게이션 파일들을 만드는 순수 함수 모음"""

from typing import Dict, Sequence, Tuple

from sketch2flutter.common.domain.artifact import RouteEntry
from sketch2flutter.common.flutter.naming import escape_dart_string, to_pascal_case

ROUTES_FILE = "app_routes.dart"
NAVIGATION_FILE = "app_navigation.dart"
DRAWER_FILE = "app_drawer.dart"
MAIN_FILE = "main.dart"

DEFAULT_ICON = "pages"

ICON_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("home", "home"),
    ("login", "login"),
    ("register", "person_add"),
    ("profile", "person"),
    ("settings", "settings"),
    ("dashboard", "dashboard"),
    ("lista", "list"),
    ("principal", "home"),
    ("usuario", "person"),
    ("registro", "person_add"),
)


def icon_for_route(route_name: str) -> str:
    lowered = route_name.lower()
    for keyword, icon in ICON_KEYWORDS:
        if keyword in lowered:
            return icon
    return DEFAULT_ICON


def _initial_path(routes: Sequence[RouteEntry]) -> str:
    for route in routes:
        if route.is_initial:
            return route.path
    return routes[0].path if routes else "/"


def generate_routes_file(routes: Sequence[RouteEntry]) -> str:
    imports = "\n".join(
        f"import 'screens/{route.name}_screen.dart';" for route in routes
    )
    constants = "\n".join(
        f"  static const String {route.name} = '{route.path}';" for route in routes
    )
    route_map = "\n".join(
        f"    {route.name}: (context) => {route.screen_name}()," for route in routes
    )
    return f"""// lib/{ROUTES_FILE}
import 'package:flutter/material.dart';
{imports}

class AppRoutes {{
{constants}

  static const String initial = '{_initial_path(routes)}';

  static Map<String, WidgetBuilder> get routes => {{
{route_map}
  }};
}}
"""


def generate_navigation_file(routes: Sequence[RouteEntry]) -> str:
    items = "\n".join(
        f"    NavigationItem('{escape_dart_string(route.description)}', "
        f"AppRoutes.{route.name}, Icons.{icon_for_route(route.name)}),"
        for route in routes
    )
    return f"""// lib/{NAVIGATION_FILE}
import 'package:flutter/material.dart';
import '{ROUTES_FILE}';

class NavigationItem {{
  final String title;
  final String route;
  final IconData icon;
  const NavigationItem(this.title, this.route, this.icon);
}}

class AppNavigation {{
  static void goTo(BuildContext context, String route) {{
    Navigator.pushNamed(context, route);
  }}

  static void goBack(BuildContext context) {{
    if (Navigator.canPop(context)) {{
      Navigator.pop(context);
    }}
  }}

  static List<NavigationItem> get allRoutes => const [
{items}
  ];
}}
"""


def generate_drawer_file() -> str:
    return f"""// lib/{DRAWER_FILE}
import 'package:flutter/material.dart';
import '{NAVIGATION_FILE}';

class AppDrawer extends StatelessWidget {{
  const AppDrawer({{super.key}});

  @override
  Widget build(BuildContext context) {{
    return Drawer(
      child: ListView(
        padding: EdgeInsets.zero,
        children: [
          const DrawerHeader(
            decoration: BoxDecoration(color: Colors.blue),
            child: Text(
              'Navigation',
              style: TextStyle(color: Colors.white, fontSize: 24),
            ),
          ),
          ...AppNavigation.allRoutes.map((item) => ListTile(
                leading: Icon(item.icon),
                title: Text(item.title),
                onTap: () {{
                  Navigator.pop(context);
                  AppNavigation.goTo(context, item.route);
                }},
              )),
        ],
      ),
    );
  }}
}}
"""


def generate_main_file(project_name: str) -> str:
    class_name = to_pascal_case(project_name) or "MyApp"
    return f"""// lib/{MAIN_FILE}
import 'package:flutter/material.dart';
import '{ROUTES_FILE}';

void main() {{
  runApp(const {class_name}App());
}}

class {class_name}App extends StatelessWidget {{
  const {class_name}App({{super.key}});

  @override
  Widget build(BuildContext context) {{
    return MaterialApp(
      title: '{escape_dart_string(project_name)}',
      theme: ThemeData(
        primarySwatch: Colors.blue,
        visualDensity: VisualDensity.adaptivePlatformDensity,
      ),
      initialRoute: AppRoutes.initial,
      routes: AppRoutes.routes,
      debugShowCheckedModeBanner: false,
    );
  }}
}}
"""


def generate_navigation_files(
    routes: Sequence[RouteEntry], project_name: str
) -> Dict[str, str]:
    return {
        ROUTES_FILE: generate_routes_file(routes),
        NAVIGATION_FILE: generate_navigation_file(routes),
        DRAWER_FILE: generate_drawer_file(),
        MAIN_FILE: generate_main_file(project_name),
    }
