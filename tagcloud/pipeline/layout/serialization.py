"""Layout serialization — JSON conversion."""

from __future__ import annotations

from tagcloud.geometry import Point, Rectangle, Size

from .models import WordRectangle


def layout_to_dict(center: Point, words: list[WordRectangle]) -> dict:
    """Serialize a finished layout to a JSON-safe dict."""
    return {
        "center": {"x": center.x, "y": center.y},
        "words": [
            {
                "word": w.word,
                "x": w.rectangle.location.x,
                "y": w.rectangle.location.y,
                "width": w.rectangle.size.width,
                "height": w.rectangle.size.height,
            }
            for w in words
        ],
    }


def parse_layout(data: dict) -> tuple[Point, list[WordRectangle]]:
    """Parse a layout dict back into its center and word rectangles."""
    center = Point(float(data["center"]["x"]), float(data["center"]["y"]))
    words = [
        WordRectangle(
            word=w["word"],
            rectangle=Rectangle(
                Point(float(w["x"]), float(w["y"])),
                Size(float(w["width"]), float(w["height"])),
            ),
        )
        for w in data["words"]
    ]
    return center, words
