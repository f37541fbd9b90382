"""Tests for shape encoding and parsing."""

import json

import pytest
from kittik_shapes.shapes.shape import Shape
from kittik_shapes.shapes.variants import Rectangle, Text, load_shape, register_variant, SHAPE_VARIANTS
from kittik_shapes.shapes.encoder import ShapeEncoder
from kittik_shapes.shapes.parser import ShapeParser
from kittik_shapes.shapes.errors import FormatError, ParseError, TypeMismatchError


class TestShapeEncoder:
    """Tests for ShapeEncoder."""

    def test_to_object_defaults(self):
        assert Shape().to_object() == {
            "name": "Shape",
            "options": {
                "text": "",
                "width": 15,
                "height": 5,
                "x": 10,
                "y": 10,
                "alignX": "none",
                "alignY": "none",
                "background": None,
                "foreground": None,
                "animation": None,
            },
        }

    def test_to_object_custom(self):
        shape = Shape({"text": "test", "x": 0, "y": 0, "width": 30, "height": 50,
                       "animation": {"name": "print"}})
        options = shape.to_object()["options"]
        assert options["text"] == "test"
        assert options["x"] == 0
        assert options["width"] == 30
        assert options["animation"] == {"name": "print"}

    def test_to_object_keeps_symbolic_values(self):
        shape = Shape({"width": "50%", "x": "center", "y": "bottom"})
        options = ShapeEncoder.to_object(shape)["options"]
        assert options["width"] == "50%"
        assert options["x"] == "center"
        assert options["y"] == "bottom"

    def test_to_object_is_a_snapshot(self):
        shape = Shape({"animation": {"name": "print", "options": {"interval": 100}}})
        obj = shape.to_object()
        obj["options"]["animation"]["options"]["interval"] = 1
        assert shape.get_animation_options() == {"interval": 100}

    def test_variant_tag(self):
        assert Rectangle().to_object()["name"] == "Rectangle"

    def test_to_json_defaults(self):
        assert Shape().to_json() == (
            '{"name":"Shape","options":{"text":"","width":15,"height":5,'
            '"x":10,"y":10,"alignX":"none","alignY":"none"}}'
        )

    def test_to_json_custom(self):
        shape = Shape({"text": "test", "x": 0, "y": 0, "width": 30, "height": 50})
        assert shape.to_json() == (
            '{"name":"Shape","options":{"text":"test","width":30,"height":50,'
            '"x":0,"y":0,"alignX":"none","alignY":"none"}}'
        )

    def test_to_json_omits_none(self):
        shape = Shape({"background": "red", "animation": {"name": "print", "options": None}})
        options = json.loads(shape.to_json())["options"]
        assert "foreground" not in options
        assert options["background"] == "red"
        assert options["animation"] == {"name": "print"}

    def test_format_for_display(self):
        shape = Shape({"text": "hi", "background": "red"})
        line = ShapeEncoder.format_for_display(shape)
        assert line.startswith("Shape(text='hi', width=15")
        assert "foreground" not in line

        lines = ShapeEncoder.format_for_display(shape, multiline=True).splitlines()
        assert lines[0] == "Shape:"
        assert any("background" in l and "'red'" in l for l in lines)


class TestShapeParser:
    """Tests for ShapeParser and the Shape.from_* constructors."""

    def test_from_object(self):
        obj = {
            "name": "Shape",
            "options": {
                "text": "test",
                "width": 30,
                "height": 50,
                "x": 1,
                "y": 1,
                "alignX": "center",
                "alignY": "middle",
                "background": 1,
                "foreground": 16,
                "animation": {"name": "print", "options": {"interval": 100}},
            },
        }
        shape = Shape.from_object(obj)
        assert isinstance(shape, Shape)
        assert shape.get_text() == "test"
        assert shape.get_width() == 30
        assert shape.get_height() == 50
        assert shape.get_x() == 1
        assert shape.get_y() == 1
        assert shape.get_align_x() == "center"
        assert shape.get_align_y() == "middle"
        assert shape.get_background() == 1
        assert shape.get_foreground() == 16
        assert shape.get_animation_name() == "print"
        assert shape.get_animation_options() == {"interval": 100}
        assert shape.is_aligned()
        assert shape.is_animated()

    def test_from_object_does_not_share_input(self):
        animation = {"name": "print", "options": {"interval": 100}}
        obj = {"name": "Shape", "options": {"animation": animation}}
        shape = Shape.from_object(obj)
        shape.set_animation_name("slide").set("animation.options.interval", 5)
        assert animation == {"name": "print", "options": {"interval": 100}}
        assert obj["options"]["animation"] is animation

    def test_from_json(self):
        text = '{"name":"Shape","options":{"text":"test","width":30,"height":50,"x":0,"y":0,"alignX":"center"}}'
        shape = Shape.from_json(text)
        assert shape.get_text() == "test"
        assert shape.get_x() == 0
        assert shape.get_align_x() == "center"
        assert shape.get_align_y() == "none"
        assert shape.get_background() is None
        assert shape.get_foreground() is None

    @pytest.mark.parametrize("obj", [
        {},
        {"name": "Shape"},
        {"options": {}},
        {"name": "", "options": {}},
        {"name": "Shape", "options": None},
        ["Shape", {}],
        None,
    ])
    def test_not_a_representation(self, obj):
        with pytest.raises(FormatError, match="It looks like it is not an Object representation of the shape"):
            Shape.from_object(obj)

    def test_type_mismatch(self):
        with pytest.raises(TypeMismatchError, match="Rectangle is not an Object representation of the Shape") as exc:
            Shape.from_object({"name": "Rectangle", "options": {}})
        assert exc.value.actual == "Rectangle"
        assert exc.value.expected == "Shape"

    def test_subclass_rejects_base(self):
        with pytest.raises(TypeMismatchError):
            Rectangle.from_object({"name": "Shape", "options": {}})

    def test_malformed_json(self):
        with pytest.raises(ParseError) as exc:
            Shape.from_json('{"name": "Shape", ')
        assert isinstance(exc.value.__cause__, json.JSONDecodeError)

    def test_wrong_variant_json(self):
        with pytest.raises(TypeMismatchError):
            Text.from_json(Rectangle().to_json())

    def test_validate(self):
        assert ShapeParser.validate(Shape().to_json()) == (True, None)
        valid, error = ShapeParser.validate('{"name":"Shape","options":{"alignX":"up"}}')
        assert not valid
        assert "Unknown align type: up" in error
        valid, error = ShapeParser.validate("not json")
        assert not valid

    def test_normalize(self):
        assert ShapeParser.normalize('{"name":"Text","options":{"text":"hi"}}') == (
            '{"name":"Text","options":{"text":"hi","width":15,"height":5,'
            '"x":10,"y":10,"alignX":"none","alignY":"none"}}'
        )


class TestRoundTrip:
    """Tests for to_object/from_object fidelity."""

    def test_explicit_options(self):
        shape = Shape({"text": "hi", "x": 5, "y": 5, "width": 10, "height": 2})
        restored = Shape.from_object(shape.to_object())
        assert restored.get_text() == "hi"
        assert restored.get_x() == 5
        assert restored.get_y() == 5
        assert restored.get_width() == 10
        assert restored.get_height() == 2
        assert restored == shape

    def test_json_with_symbolic_geometry(self):
        shape = Rectangle({"text": "Hello there", "x": "center", "y": "10%",
                           "width": "50%", "height": "10%",
                           "background": "dark_green", "foreground": "navy_blue",
                           "alignY": "top"})
        restored = Rectangle.from_json(shape.to_json())
        assert isinstance(restored, Rectangle)
        assert restored == shape


class TestLoadShape:
    """Tests for the variant registry."""

    def test_registered_variants(self):
        assert SHAPE_VARIANTS["Shape"] is Shape
        assert SHAPE_VARIANTS["Rectangle"] is Rectangle
        assert SHAPE_VARIANTS["Text"] is Text

    def test_load_by_tag(self):
        shape = load_shape(Text({"text": "hi"}).to_object())
        assert isinstance(shape, Text)
        assert shape.get_text() == "hi"

    def test_load_json(self):
        assert isinstance(load_shape(Rectangle().to_json()), Rectangle)

    def test_unknown_variant(self):
        with pytest.raises(FormatError, match="Circle is not a registered shape variant") as exc:
            load_shape({"name": "Circle", "options": {}})
        assert not isinstance(exc.value, TypeMismatchError)

    def test_register_variant(self):
        @register_variant
        class Frame(Shape):
            pass

        try:
            assert isinstance(load_shape({"name": "Frame", "options": {}}), Frame)
        finally:
            del SHAPE_VARIANTS["Frame"]
