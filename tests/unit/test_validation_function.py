"""Unit tests for the validation function entry point and result emitter

Covers the checkout scenarios end to end through the host schemas:
- Capability mismatch, geographic mismatch, past consultation
- Malformed metadata
- Missing metadata under the optional policy
"""

import json

import pytest

from dealer_checkout.domain.validation.models import ValidationError, ValidationIssueType
from dealer_checkout.function import MALFORMED_ASSIGNMENT_MESSAGE, emit_result, run_validation
from dealer_checkout.schemas.function import RunInput


@pytest.fixture
def run(engine, directory, run_payload):
    """Run the validation function on a cart built from run_payload arguments."""
    def _run(*args, **kwargs):
        run_input = RunInput.model_validate(run_payload(*args, **kwargs))
        return run_validation(run_input, engine=engine, reference_data=directory)
    return _run


def error_messages(result):
    return [error.message for operation in result.operations for error in operation.hide.errors]


class TestEmitResult:
    """Test mapping of error lists onto the host result"""

    def test_no_errors_means_no_operations(self):
        assert emit_result([]).model_dump() == {"operations": []}

    def test_errors_in_single_hide_operation(self):
        """Test messages and targets are kept verbatim and in order"""
        errors = [
            ValidationError(message="second first", target="cart"),
            ValidationError(message="second first", target="cart"),
            ValidationError(message="last", target="$.cart.deliveryGroups[0]"),
        ]

        assert emit_result(errors).model_dump() == {
            "operations": [{
                "hide": {
                    "errors": [
                        {"message": "second first", "target": "cart"},
                        {"message": "second first", "target": "cart"},
                        {"message": "last", "target": "$.cart.deliveryGroups[0]"},
                    ]
                }
            }]
        }


class TestCheckoutScenarios:
    """Test the documented checkout scenarios"""

    def test_windsurf_cart_with_sup_dealer(self, run):
        result = run(("Windsurf Board",), {"dealerId": "dealer_2"}, province="CA")

        assert error_messages(result) == [
            "Selected dealer does not support windsurf products. Please choose a different dealer."
        ]

    def test_sup_cart_delivered_outside_dealer_area(self, run):
        result = run(("SUP Paddle",), {"dealerId": "dealer_2"}, province="TX")

        assert error_messages(result) == [
            "Selected dealer does not service deliveries to TX. Please choose a dealer in your area."
        ]

    def test_past_consultation_date(self, run, yesterday):
        assignment = {
            "dealerId": "dealer_3",
            "consultation": {
                "type": "product_selection",
                "preferredDate": yesterday,
                "preferredTime": "10:00",
                "contactMethod": "phone",
            },
        }

        result = run(
            ("Windsurf Board", "SUP Paddle", "Wingfoil Wing"), assignment, province="CA",
        )

        assert error_messages(result) == ["Consultation date must be in the future."]

    def test_malformed_metadata(self, run):
        result = run(("Windsurf Board",), "{not json", province="CA")

        assert error_messages(result) == [MALFORMED_ASSIGNMENT_MESSAGE]
        assert result.operations[0].hide.errors[0].target == "cart"

    def test_missing_metadata_proceeds(self, run):
        result = run(("Windsurf Board",), None, province="TX")

        assert result.operations == []


class TestRunValidation:
    """Test attribute lookup and logging in run_validation"""

    def test_empty_attribute_value_is_absent(self, run):
        """Test an empty attribute behaves like a missing one"""
        result = run(("Windsurf Board",), "", province="TX")

        assert result.operations == []

    def test_custom_attribute_key(self, engine, directory, run_payload):
        """Test the attribute key is configurable"""
        run_input = RunInput.model_validate(run_payload(
            ("Windsurf Board",), {"dealerId": ""}, attribute_key="dealer_choice",
        ))

        default_key = run_validation(run_input, engine=engine, reference_data=directory)
        custom_key = run_validation(
            run_input, engine=engine, reference_data=directory, attribute_key="dealer_choice",
        )

        assert default_key.operations == []
        assert error_messages(custom_key) == [
            "No dealer selected. Please choose an authorized Starboard dealer."
        ]

    def test_province_code_fallback(self, run):
        """Test the province code is used when the province is blank"""
        result = run(
            ("SUP Paddle",), {"dealerId": "dealer_2"},
            province=" ", province_code="TX",
        )

        assert error_messages(result) == [
            "Selected dealer does not service deliveries to TX. Please choose a dealer in your area."
        ]

    def test_parse_failure_is_logged_not_shown(self, run, caplog):
        """Test the decoder message goes to the log, not to the shopper"""
        with caplog.at_level("WARNING", logger="dealer_checkout.function.entrypoint"):
            result = run((), "[1, 2")

        assert error_messages(result) == [MALFORMED_ASSIGNMENT_MESSAGE]
        assert "Error parsing dealer assignment data" in caplog.text
        assert "JSON" not in error_messages(result)[0]

    @pytest.mark.parametrize("payload", [
        {"dealerId": None},
        {"dealerId": False},
        {"dealerId": 0},
        {"dealerName": "Bay Area SUP Shop"},
    ])
    def test_assignment_without_dealer(self, run, payload):
        result = run(("Windsurf Board",), payload, province="CA")

        assert error_messages(result) == [
            "No dealer selected. Please choose an authorized Starboard dealer."
        ]

    def test_host_payload_with_extra_fields(self, engine, directory):
        """Test fields the host adds beyond the schema are ignored"""
        run_input = RunInput.model_validate({
            "cart": {
                "cost": {"totalAmount": {"amount": "899.0"}},
                "attributes": [
                    {"key": "gift_note", "value": None},
                    {"key": "dealer_assignment_data", "value": json.dumps({"dealerId": "dealer_1"})},
                ],
                "lines": [{
                    "quantity": 1,
                    "merchandise": {"__typename": "ProductVariant", "product": {"productType": "Windsurf Sail"}},
                }],
                "deliveryGroups": [{"deliveryAddress": {"provinceCode": "OR", "countryCode": "US"}}],
            }
        })

        result = run_validation(run_input, engine=engine, reference_data=directory)

        assert result.operations == []


class TestIssueTypes:
    """Test malformed metadata is tagged for metrics"""

    def test_malformed_outcome_is_tagged(self, run, caplog):
        """Test the malformed error reaches the outcome log with its issue type"""
        with caplog.at_level("INFO", logger="dealer_checkout.function.entrypoint"):
            run(("SUP Paddle",), "{not json")

        outcome = [record for record in caplog.records if hasattr(record, "outcome")][-1]
        assert outcome.outcome == "malformed"
        assert outcome.issue_types == [ValidationIssueType.MALFORMED_ASSIGNMENT.value]

    def test_blocked_outcome_lists_issue_types(self, run, caplog):
        with caplog.at_level("INFO", logger="dealer_checkout.function.entrypoint"):
            run(("Windsurf Board",), {"dealerId": "dealer_2"}, province="TX")

        outcome = [record for record in caplog.records if hasattr(record, "outcome")][-1]
        assert outcome.outcome == "blocked"
        assert outcome.issue_types == [
            ValidationIssueType.CAPABILITY_MISMATCH.value,
            ValidationIssueType.GEOGRAPHIC_MISMATCH.value,
        ]
