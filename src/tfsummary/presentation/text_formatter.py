"""Plain-text plan summary in the style of `terraform plan` output."""

from typing import List
from pydantic import BaseModel, Field
from ..ingest.models import Plan, ResourceAction, ResourceChange

# Bucket priority: a change is classified by the first of these its actions contain.
_BUCKET_PRIORITY = (ResourceAction.CREATE, ResourceAction.UPDATE, ResourceAction.DELETE)

_SECTIONS = (
    (ResourceAction.CREATE, "Resources to be created:", "+"),
    (ResourceAction.UPDATE, "Resources to be updated:", "~"),
    (ResourceAction.DELETE, "Resources to be destroyed:", "-"),
)


class ChangeBuckets(BaseModel):
    """Resource changes partitioned by their rendered action."""
    to_create: List[ResourceChange] = Field(default_factory=list)
    to_update: List[ResourceChange] = Field(default_factory=list)
    to_destroy: List[ResourceChange] = Field(default_factory=list)

    @property
    def add_count(self) -> int:
        return len(self.to_create)

    @property
    def change_count(self) -> int:
        return len(self.to_update)

    @property
    def destroy_count(self) -> int:
        return len(self.to_destroy)

    @property
    def has_changes(self) -> bool:
        return bool(self.to_create or self.to_update or self.to_destroy)

    def for_action(self, action: ResourceAction) -> List[ResourceChange]:
        return {
            ResourceAction.CREATE: self.to_create,
            ResourceAction.UPDATE: self.to_update,
            ResourceAction.DELETE: self.to_destroy,
        }[action]


def classify_resource_changes(plan: Plan) -> ChangeBuckets:
    """
    Partition plan resource changes into create/update/delete buckets.
    
    Each change goes to exactly one bucket, picked by scanning
    create -> update -> delete; a ["update", "delete"] change is an update.
    Changes with none of the three (read, no-op) are left out.
    """
    buckets = ChangeBuckets()
    for resource in plan.resource_changes:
        for action in _BUCKET_PRIORITY:
            if action.value in resource.actions:
                buckets.for_action(action).append(resource)
                break
    return buckets


def format_plan_summary(plan: Plan) -> str:
    """
    Render a plan as a human-readable change summary.
    
    Args:
        plan: Parsed Terraform plan
        
    Returns:
        Multi-line summary ending with the "Plan: ..." totals line
    """
    buckets = classify_resource_changes(plan)
    lines: List[str] = []
    
    if not buckets.has_changes:
        lines.append("No changes. Infrastructure is up-to-date.\n")
    else:
        lines.append("Terraform will perform the following actions:\n\n")
    
    for action, title, symbol in _SECTIONS:
        resources = buckets.for_action(action)
        if not resources:
            continue
        lines.append(f"{title}\n")
        for resource in resources:
            lines.append(f"  {symbol} {resource.address} ({', '.join(resource.actions)})\n")
        lines.append("\n")
    
    lines.append(
        f"Plan: {buckets.add_count} to add, {buckets.change_count} to change, "
        f"{buckets.destroy_count} to destroy.\n"
    )
    return "".join(lines)
