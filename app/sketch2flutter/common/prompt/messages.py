from typing import Any, Dict, List, Optional

from sketch2flutter.common.image import to_png_data_uri

CODE_GENERATION_SYSTEM_PROMPT = """You are an expert Flutter developer who analyzes visual designs and produces precise Flutter code. Your task is to generate complete code that implements the requested interface.

IMPORTANT INSTRUCTIONS:
1. Generate all the Flutter code needed (widgets, screens, models, services), complete and working.
2. MAKE SURE TO INCLUDE THE COMPLETE DART CODE for every file. The code must reflect the interface exactly.
3. Put every file in its own fenced block whose first line is a comment with the file name:

FOR FLUTTER SCREENS:
```dart
// screen_name_screen.dart
[complete code here]
```

FOR FLUTTER WIDGETS:
```dart
// widget_name_widget.dart
[complete code here]
```

FOR MODELS:
```dart
// model_name_model.dart
[complete code here]
```

FOR SERVICES:
```dart
// service_name_service.dart
[complete code here]
```

FOR THE MAIN APP (MANDATORY):
```dart
// main.dart
[complete code here]
```

4. Keep each kind of file clearly separated and labeled.
5. Organize the answer in sections (Screens, Widgets, Models, Services, Main).
6. DO NOT OMIT ANY CODE under any circumstance.
7. Use the most appropriate Flutter widgets to recreate the UI exactly.
8. Use a clean state-management architecture such as Provider, Bloc or GetX when needed.
9. Include pubspec.yaml dependencies if you use third-party packages."""

CODE_GENERATION_CHECKLIST = """Please include:
1. Screen and widget structure (a .dart file for every screen and reusable widget)
2. Data models (a .dart file for every model)
3. Required services (if any)
4. A main.dart file that wires everything together
5. Any pubspec.yaml or extra configuration needed

Remember: generate clean, well-structured Flutter code that faithfully implements the interface."""

ELEMENT_EXTRACTION_SYSTEM_PROMPT = """You are a user-interface design expert who can identify UI elements in sketches or hand drawings.

Your task is to analyze the image and detect every UI element (buttons, text boxes, images, etc.)
including their approximate positions and sizes. Convert that information into JSON specifications
that can be used to recreate the elements on a canvas.

IMPORTANT INSTRUCTIONS:
1. Identify every visible element in the image (rectangles, circles, texts, etc.).
2. For each element give: type, position (x, y), dimensions (width/height or radius) and extra properties such as text or color.
3. Use coordinates relative to a {width}x{height} pixel canvas.
4. Return a JSON array with all the elements found.
5. Make sure every element has all the properties required by its type.

SUPPORTED FIGURE TYPES:
- rectangle: requires x, y, width, height, fill (color), stroke, strokeWidth
- circle: requires x, y, radius, fill, stroke, strokeWidth
- text: requires x, y, text, fontSize, fontFamily, fill
- line: requires x, y, points (array of coordinates [x1, y1, x2, y2])

EXAMPLE ANSWER:
[
  {{"type": "rectangle", "x": 100, "y": 50, "width": 200, "height": 80, "fill": "#4285F4", "stroke": "#000000", "strokeWidth": 1}},
  {{"type": "text", "x": 130, "y": 80, "text": "Save button", "fontSize": 18, "fontFamily": "Arial", "fill": "#FFFFFF"}},
  {{"type": "circle", "x": 400, "y": 200, "radius": 40, "fill": "#FBBC05", "stroke": "#000000", "strokeWidth": 2}}
]"""


def _page_sentence(page_name: str, description: Optional[str]) -> str:
    sentence = f'This is a screen called "{page_name}"'
    if description:
        sentence += f" that {description}"
    return sentence + "."


def build_code_generation_messages(
    image_base64: str, page_name: str, description: Optional[str] = None
) -> List[Dict[str, Any]]:
    user_text = (
        "Please generate the complete Flutter code that implements the user interface "
        f"shown in the image. {_page_sentence(page_name, description)}\n\n"
        "Analyze the image carefully and generate the Flutter code needed to implement "
        f"this interface in a working way.\n\n{CODE_GENERATION_CHECKLIST}"
    )
    return [
        {"role": "system", "content": CODE_GENERATION_SYSTEM_PROMPT},
        {
            "role": "user",
            "content": [
                {"type": "text", "text": user_text},
                {"type": "image_url", "image_url": {"url": to_png_data_uri(image_base64)}},
            ],
        },
    ]


def build_prompt_generation_messages(
    prompt: str, page_name: str, description: Optional[str] = None
) -> List[Dict[str, Any]]:
    user_text = (
        "Please generate the complete Flutter code for the user interface described "
        f"below. {_page_sentence(page_name, description)}\n\n"
        f"Interface description:\n{prompt}\n\n{CODE_GENERATION_CHECKLIST}"
    )
    return [
        {"role": "system", "content": CODE_GENERATION_SYSTEM_PROMPT},
        {"role": "user", "content": user_text},
    ]


def build_element_extraction_messages(
    image_base64: str,
    description: str = "",
    canvas_width: int = 1200,
    canvas_height: int = 800,
) -> List[Dict[str, Any]]:
    subject = "Please analyze this image of a user-interface sketch/drawing"
    if description:
        subject += f" that {description}"
    user_text = (
        f"{subject}.\n\n"
        "Identify all the UI elements and generate the JSON specifications to recreate "
        f"them on a canvas. Use coordinates relative to a {canvas_width}x{canvas_height} "
        "pixel canvas.\n\nReturn ONLY the JSON array with the elements, without any extra text."
    )
    return [
        {
            "role": "system",
            "content": ELEMENT_EXTRACTION_SYSTEM_PROMPT.format(
                width=canvas_width, height=canvas_height
            ),
        },
        {
            "role": "user",
            "content": [
                {"type": "text", "text": user_text},
                {"type": "image_url", "image_url": {"url": to_png_data_uri(image_base64)}},
            ],
        },
    ]
