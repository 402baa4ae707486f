"""Parse and validate Terraform plan JSON into a Plan."""

import json
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ValidationError
from .models import Plan, ResourceChange
from ..utils.errors import ErrorKind, InvalidJsonError, InvalidStructureError, PlanLoadError
from ..utils.logging import get_logger

logger = get_logger("ingest.plan_parser")

STRUCTURE_PREFIX = "Invalid plan structure: "


class ParseOutcome(BaseModel):
    """Result of a non-raising parse: either a plan or an error kind and message."""
    ok: bool
    plan: Optional[Plan] = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None


def _structure_error(detail: str) -> InvalidStructureError:
    return InvalidStructureError(STRUCTURE_PREFIX + detail)


def _require_version(plan_data: Dict[str, Any], field: str) -> str:
    """Return a required, non-blank version string field."""
    value = plan_data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise _structure_error(f"missing or invalid required field '{field}'")
    return value


def _parse_resource_change(resource: Any) -> ResourceChange:
    """Validate a single resource_changes element and map it to a ResourceChange."""
    if not isinstance(resource, dict):
        raise _structure_error("resource change missing required fields (address, type, name, or change)")
    
    change = resource.get("change")
    if not (resource.get("address") and resource.get("type") and resource.get("name")) or not isinstance(change, dict):
        raise _structure_error("resource change missing required fields (address, type, name, or change)")
    
    actions = change.get("actions")
    if not isinstance(actions, list):
        raise _structure_error("resource change actions must be an array")
    
    try:
        return ResourceChange(
            address=resource["address"],
            type=resource["type"],
            name=resource["name"],
            actions=actions,
            before=change.get("before"),
            after=change.get("after"),
        )
    except ValidationError as e:
        raise _structure_error(
            f"resource change '{resource['address']}' has malformed fields: "
            f"{', '.join(str(err['loc'][0]) for err in e.errors())}"
        )


def parse_plan(content: str) -> Plan:
    """
    Parse Terraform plan JSON text into a validated Plan.
    
    Checks run in a fixed order: JSON syntax, top-level object, format_version,
    terraform_version, resource_changes, then each resource change.
    
    Args:
        content: Raw plan file content
        
    Returns:
        Validated, immutable Plan
        
    Raises:
        InvalidJsonError: If content is not valid JSON
        InvalidStructureError: If the JSON does not look like a Terraform plan
    """
    try:
        plan_data = json.loads(content)
    except (ValueError, RecursionError) as e:
        # ValueError also covers integer literals over the int digit limit
        raise InvalidJsonError(f"Invalid JSON in plan file: {e}") from e
    
    if not isinstance(plan_data, dict):
        raise _structure_error("expected an object")
    
    format_version = _require_version(plan_data, "format_version")
    terraform_version = _require_version(plan_data, "terraform_version")
    
    raw_changes = plan_data.get("resource_changes")
    if not isinstance(raw_changes, list):
        raise _structure_error("missing required field 'resource_changes'")
    
    resource_changes: List[ResourceChange] = [_parse_resource_change(rc) for rc in raw_changes]
    
    logger.debug(
        f"Parsed plan (format: {format_version}, terraform: {terraform_version}, "
        f"resource changes: {len(resource_changes)})"
    )
    return Plan(
        format_version=format_version,
        terraform_version=terraform_version,
        resource_changes=resource_changes,
    )


def try_parse_plan(content: str) -> ParseOutcome:
    """Parse plan JSON, returning a ParseOutcome instead of raising on bad input."""
    try:
        plan = parse_plan(content)
    except PlanLoadError as e:
        return ParseOutcome(ok=False, error_kind=e.kind, message=str(e))
    return ParseOutcome(ok=True, plan=plan)
