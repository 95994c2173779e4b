from .primitives import (
    Point,
    Size,
    Rectangle,
    rectangle_centered_at,
    cloud_bounds,
)
