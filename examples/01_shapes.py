"""
Shapes Example
==============

A small geometry union demonstrating:
- Defining arms with free-form constructors
- Constructing variants by name
- Exhaustive matching bound to the union
- Serializing values to JSON and back
"""

import math

from tagunion import from_json, match, to_json, union

# ============================================================================
# Define the Union
# ============================================================================

Shape = (
    union("Shape")
    .of("Circle", lambda radius: {"radius": radius})
    .of("Rect", lambda width, height: {"width": width, "height": height})
    .of("Point", lambda: None)
    .render()
)


# ============================================================================
# Consume Values
# ============================================================================


def area(shape):
    return (
        match(shape, union=Shape)
        .on("Circle", lambda c: math.pi * c["radius"] ** 2)
        .on("Rect", lambda r: r["width"] * r["height"])
        .on("Point", lambda _: 0.0)
        .result()
    )


if __name__ == "__main__":
    shapes = [Shape.Circle(1.0), Shape.Rect(2, 3), Shape.Point()]

    for shape in shapes:
        print(f"{shape!r}: area {area(shape):.2f}")

    encoded = to_json(shapes[1], indent=None)
    print(encoded)
    assert from_json(encoded, Shape) == shapes[1]
