"""
Tests for validation error rendering on store-backed routes.
"""

from product_pricing_api.app.api.routing import format_validation_errors


class TestFormatValidationErrors:
    def test_field_messages_joined(self):
        errors = [
            {"loc": ("body", "name"), "msg": "Field required"},
            {"loc": ("body", "sellingPrice"), "msg": "Input should be a valid number"},
        ]

        assert format_validation_errors(errors) == (
            "name: Field required; sellingPrice: Input should be a valid number"
        )

    def test_whole_body_error(self):
        errors = [{"loc": ("body",), "msg": "Field required"}]

        assert format_validation_errors(errors) == "body: Field required"
