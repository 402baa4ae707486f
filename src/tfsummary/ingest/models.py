"""Pydantic models for parsed Terraform plans."""

from enum import Enum
from typing import Tuple, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class ResourceAction(str, Enum):
    """Terraform resource action strings."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    READ = "read"
    NO_OP = "no-op"


class ResourceChange(BaseModel):
    """One resource's proposed actions and before/after state."""
    model_config = ConfigDict(frozen=True)

    address: str = Field(..., description="Full resource address, e.g. module.vpc.aws_vpc.main")
    type: str = Field(..., description="Resource type, e.g. aws_vpc")
    name: str = Field(..., description="Resource name within its module")
    actions: Tuple[str, ...] = Field(default_factory=tuple, description="Terraform actions, authoritative over before/after")
    before: Optional[Dict[str, Any]] = Field(None, description="State before the change (None when created)")
    after: Optional[Dict[str, Any]] = Field(None, description="State after the change (None when destroyed)")


class Plan(BaseModel):
    """Parsed Terraform plan."""
    model_config = ConfigDict(frozen=True)

    format_version: str = Field(..., description="Plan JSON format version")
    terraform_version: str = Field(..., description="Terraform version that produced the plan")
    resource_changes: Tuple[ResourceChange, ...] = Field(default_factory=tuple, description="Resource changes in plan order")


class PlanFile(BaseModel):
    """Raw plan file content as read from disk."""
    model_config = ConfigDict(frozen=True)

    path: str
    content: str
