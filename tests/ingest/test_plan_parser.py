"""Tests for plan parsing and validation."""

import json
import sys
import pytest
from tfsummary.ingest.models import Plan, ResourceChange
from tfsummary.ingest.plan_parser import parse_plan, try_parse_plan
from tfsummary.utils.errors import ErrorKind, InvalidJsonError, InvalidStructureError


def _plan_json(**overrides):
    """Build plan JSON text from a valid base plan."""
    plan_data = {
        "format_version": "1.0",
        "terraform_version": "1.5.0",
        "resource_changes": [],
    }
    plan_data.update(overrides)
    return json.dumps(plan_data)


def _resource(address="aws_s3_bucket.example", actions=None, **change):
    """Build a resource_changes element."""
    change.setdefault("before", None)
    change.setdefault("after", {"bucket": "example"})
    return {
        "address": address,
        "type": address.split(".")[-2],
        "name": address.split(".")[-1],
        "change": {"actions": actions if actions is not None else ["create"], **change},
    }


class TestParseValidPlan:
    """Test parsing well-formed plans."""
    
    def test_parse_empty_plan(self):
        """Empty resource_changes parses to a Plan with no changes."""
        plan = parse_plan(_plan_json())
        
        assert isinstance(plan, Plan)
        assert plan.format_version == "1.0"
        assert plan.terraform_version == "1.5.0"
        assert plan.resource_changes == ()
    
    def test_parse_resource_change(self):
        """Resource change fields and before/after are carried through."""
        plan = parse_plan(_plan_json(resource_changes=[
            _resource("aws_s3_bucket.example", ["create"], before=None, after={"key": "value"})
        ]))
        
        assert len(plan.resource_changes) == 1
        rc = plan.resource_changes[0]
        assert isinstance(rc, ResourceChange)
        assert rc.address == "aws_s3_bucket.example"
        assert rc.type == "aws_s3_bucket"
        assert rc.name == "example"
        assert rc.actions == ("create",)
        assert rc.before is None
        assert rc.after == {"key": "value"}
    
    def test_parse_missing_before_after_become_none(self):
        """Absent before/after keys parse as None."""
        resource = {
            "address": "aws_instance.web",
            "type": "aws_instance",
            "name": "web",
            "change": {"actions": ["no-op"]},
        }
        plan = parse_plan(_plan_json(resource_changes=[resource]))
        
        assert plan.resource_changes[0].before is None
        assert plan.resource_changes[0].after is None
    
    def test_parse_preserves_order(self):
        """Resource changes keep plan order."""
        addresses = ["aws_vpc.main", "aws_subnet.a", "aws_subnet.b"]
        plan = parse_plan(_plan_json(resource_changes=[_resource(a) for a in addresses]))
        
        assert [rc.address for rc in plan.resource_changes] == addresses
    
    def test_parse_allows_empty_actions(self):
        """An empty actions list is still an array."""
        plan = parse_plan(_plan_json(resource_changes=[_resource(actions=[])]))
        assert plan.resource_changes[0].actions == ()
    
    def test_plan_is_immutable(self):
        """Parsed plans cannot be mutated."""
        plan = parse_plan(_plan_json())
        with pytest.raises(Exception):
            plan.format_version = "2.0"

    def test_plan_containers_are_immutable(self):
        """resource_changes and actions are tuples, so they cannot be appended to."""
        plan = parse_plan(_plan_json(resource_changes=[_resource(actions=["delete", "create"])]))

        assert isinstance(plan.resource_changes, tuple)
        assert isinstance(plan.resource_changes[0].actions, tuple)
        with pytest.raises(AttributeError):
            plan.resource_changes.append("aws_s3_bucket.extra")
        with pytest.raises(AttributeError):
            plan.resource_changes[0].actions.append("update")
        assert len(plan.resource_changes) == 1
        assert plan.resource_changes[0].actions == ("delete", "create")


class TestParseErrors:
    """Test parse failures and their exact messages."""
    
    def test_malformed_json(self):
        """Malformed JSON raises InvalidJsonError with the decoder message."""
        with pytest.raises(InvalidJsonError) as exc_info:
            parse_plan("{ invalid json }")
        
        assert str(exc_info.value).startswith("Invalid JSON in plan file: ")
        assert exc_info.value.kind == ErrorKind.INVALID_JSON
        assert "Expecting property name" in str(exc_info.value)

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"),
        reason="integer digit limit not enforced by this interpreter",
    )
    def test_oversized_integer(self):
        """Integer literals over the interpreter's digit limit are invalid JSON."""
        content = (
            '{"format_version": "1.0", "terraform_version": "1.5.0", '
            '"resource_changes": [], "x": ' + "1" * 5000 + '}'
        )
        with pytest.raises(InvalidJsonError, match="^Invalid JSON in plan file: "):
            parse_plan(content)

    def test_excessive_nesting(self):
        """Nesting deep enough to exhaust the decoder's recursion is invalid JSON."""
        with pytest.raises(InvalidJsonError, match="^Invalid JSON in plan file: "):
            parse_plan("[" * 100000)

    def test_excessive_nesting_outcome(self):
        """The non-raising parse reports deep nesting as InvalidJson."""
        outcome = try_parse_plan("[" * 100000)

        assert not outcome.ok
        assert outcome.error_kind == ErrorKind.INVALID_JSON

    @pytest.mark.parametrize("content", ["[]", "\"plan\"", "42", "null"])
    def test_non_object(self, content):
        """Top-level values other than objects are rejected."""
        with pytest.raises(InvalidStructureError, match="^Invalid plan structure: expected an object$"):
            parse_plan(content)
    
    @pytest.mark.parametrize("field", ["format_version", "terraform_version"])
    @pytest.mark.parametrize("value", [None, "", "   ", 1.0, ["1.0"]])
    def test_invalid_version_fields(self, field, value):
        """Missing, blank or non-string versions fail with the field name."""
        plan_data = json.loads(_plan_json())
        if value is None:
            del plan_data[field]
        else:
            plan_data[field] = value
        
        with pytest.raises(InvalidStructureError) as exc_info:
            parse_plan(json.dumps(plan_data))
        
        assert str(exc_info.value) == (
            f"Invalid plan structure: missing or invalid required field '{field}'"
        )
        assert exc_info.value.kind == ErrorKind.INVALID_STRUCTURE
    
    @pytest.mark.parametrize("value", [None, {}, "[]"])
    def test_invalid_resource_changes(self, value):
        """resource_changes must be present and a list."""
        plan_data = json.loads(_plan_json())
        if value is None:
            del plan_data["resource_changes"]
        else:
            plan_data["resource_changes"] = value
        
        with pytest.raises(InvalidStructureError, match="missing required field 'resource_changes'"):
            parse_plan(json.dumps(plan_data))
    
    def test_validation_order(self):
        """format_version is checked before terraform_version and resource_changes."""
        with pytest.raises(InvalidStructureError, match="'format_version'"):
            parse_plan("{}")
        with pytest.raises(InvalidStructureError, match="'terraform_version'"):
            parse_plan('{"format_version": "1.0"}')
    
    @pytest.mark.parametrize("missing", ["address", "type", "name", "change"])
    def test_resource_change_missing_fields(self, missing):
        """Each resource change needs address, type, name and change."""
        resource = _resource()
        del resource[missing]
        
        with pytest.raises(InvalidStructureError) as exc_info:
            parse_plan(_plan_json(resource_changes=[resource]))
        
        assert str(exc_info.value) == (
            "Invalid plan structure: resource change missing required fields "
            "(address, type, name, or change)"
        )
    
    def test_resource_change_empty_address(self):
        """Empty strings are treated as missing."""
        resource = _resource()
        resource["address"] = ""
        with pytest.raises(InvalidStructureError, match="missing required fields"):
            parse_plan(_plan_json(resource_changes=[resource]))
    
    def test_resource_change_not_object(self):
        """Non-object elements fail the required-fields check."""
        with pytest.raises(InvalidStructureError, match="missing required fields"):
            parse_plan(_plan_json(resource_changes=["aws_s3_bucket.example"]))
    
    def test_change_not_object(self):
        """change must be an object."""
        resource = _resource()
        resource["change"] = ["create"]
        with pytest.raises(InvalidStructureError, match="missing required fields"):
            parse_plan(_plan_json(resource_changes=[resource]))
    
    @pytest.mark.parametrize("actions", [None, "create", {"create": True}])
    def test_actions_not_array(self, actions):
        """change.actions must be an array."""
        resource = _resource()
        if actions is None:
            del resource["change"]["actions"]
        else:
            resource["change"]["actions"] = actions
        
        with pytest.raises(InvalidStructureError) as exc_info:
            parse_plan(_plan_json(resource_changes=[resource]))
        
        assert str(exc_info.value) == "Invalid plan structure: resource change actions must be an array"
    
    def test_malformed_resource_field_types(self):
        """Non-string actions are reported as structure errors, not validation crashes."""
        with pytest.raises(InvalidStructureError, match="malformed fields: actions"):
            parse_plan(_plan_json(resource_changes=[_resource(actions=[1])]))

    @pytest.mark.parametrize("field, value", [
        ("address", 123),
        ("type", ["aws_s3_bucket"]),
        ("name", {"name": "example"}),
    ])
    def test_non_string_identity_fields(self, field, value):
        """Truthy non-string address, type or name are reported by field name."""
        resource = _resource()
        resource[field] = value

        with pytest.raises(InvalidStructureError) as exc_info:
            parse_plan(_plan_json(resource_changes=[resource]))

        assert str(exc_info.value).startswith("Invalid plan structure: resource change ")
        assert str(exc_info.value).endswith(f"has malformed fields: {field}")

    @pytest.mark.parametrize("field", ["before", "after"])
    @pytest.mark.parametrize("value", [[], "state", 1])
    def test_non_mapping_state(self, field, value):
        """before and after must be objects or null."""
        resource = _resource(**{field: value})

        with pytest.raises(InvalidStructureError) as exc_info:
            parse_plan(_plan_json(resource_changes=[resource]))

        assert str(exc_info.value) == (
            "Invalid plan structure: resource change 'aws_s3_bucket.example' "
            f"has malformed fields: {field}"
        )


class TestTryParsePlan:
    """Test the non-raising parse."""
    
    def test_success_outcome(self):
        """Valid content yields ok outcome with the plan."""
        outcome = try_parse_plan(_plan_json())
        
        assert outcome.ok
        assert outcome.plan.terraform_version == "1.5.0"
        assert outcome.error_kind is None
    
    def test_failure_outcome(self):
        """Invalid content yields the error kind and message."""
        outcome = try_parse_plan('{"format_version": "1.0", "terraform_version": "1.5.0"}')
        
        assert not outcome.ok
        assert outcome.plan is None
        assert outcome.error_kind == ErrorKind.INVALID_STRUCTURE
        assert outcome.message == "Invalid plan structure: missing required field 'resource_changes'"
    
    def test_json_failure_outcome(self):
        """Syntax errors are reported as InvalidJson."""
        outcome = try_parse_plan("not json")
        
        assert outcome.error_kind == ErrorKind.INVALID_JSON
        assert outcome.message.startswith("Invalid JSON in plan file:")
