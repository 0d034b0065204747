from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class SearchRules(BaseModel):
    threshold: float = Field(0.3, ge=0.0, le=1.0)
    ignore_case: bool = True
    min_query_length: int = Field(1, ge=1)
    scorer: Literal["edit_distance", "trigram"] = "edit_distance"


class RbacRules(BaseModel):
    default_role: str
    # role -> resource -> actions ("*" grants every action the resource declares)
    roles: dict[str, dict[str, list[str]]]
    # resource -> every action it supports
    resources: dict[str, list[str]]

    @model_validator(mode="after")
    def _default_role_exists(self) -> "RbacRules":
        if self.default_role not in self.roles:
            raise ValueError(f"default_role '{self.default_role}' is not a defined role")
        return self

    @model_validator(mode="after")
    def _actions_are_declared(self) -> "RbacRules":
        for role, grants in self.roles.items():
            for resource, actions in grants.items():
                if resource not in self.resources:
                    raise ValueError(f"role '{role}' grants unknown resource '{resource}'")
                unknown = set(actions) - set(self.resources[resource]) - {"*"}
                if unknown:
                    raise ValueError(
                        f"role '{role}' grants unknown {resource} actions: {sorted(unknown)}"
                    )
        return self


class DisplayRules(BaseModel):
    date_format: str | None = None
    missing_date_label: str = "N/A"


class DashboardRules(BaseModel):
    statuses: list[str] = Field(default_factory=lambda: ["published", "draft", "scheduled"])
    trailing_days: int = Field(7, ge=1, le=90)

    @field_validator("statuses")
    @classmethod
    def _lowercase(cls, value: list[str]) -> list[str]:
        return [s.strip().lower() for s in value]


class Rules(BaseModel):
    project: ProjectRules
    search: SearchRules = Field(default_factory=SearchRules)
    rbac: RbacRules
    display: DisplayRules = Field(default_factory=DisplayRules)
    dashboard: DashboardRules = Field(default_factory=DashboardRules)
