from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .values import ValueType, is_yaml_value, matches, value_type_of


class ModelVariable(BaseModel):
    model_config = ConfigDict(frozen=True)

    variable: str
    type: ValueType = ValueType.ANY


class DefaultModelValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    variable: str
    value: Any = None

    @field_validator("value")
    @classmethod
    def _yaml_value(cls, v: Any) -> Any:
        if not is_yaml_value(v):
            raise ValueError(f"default value of type {type(v).__name__} cannot be stored in YAML")
        return v


class ModelOptions(BaseModel):
    """
    Optional schema for a store:
      {
        "variables": [{"variable": "alive", "type": "boolean"}, ...],
        "setValuesOnReady": true,
        "defaultModelValues": [{"variable": "alive", "value": true}, ...],
        "enforceOnWrite": false
      }

    Declarations are advisory unless enforceOnWrite is set; defaults are always checked
    against them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    variables: list[ModelVariable] = Field(default_factory=list)
    set_values_on_ready: bool = Field(default=False, alias="setValuesOnReady")
    default_model_values: list[DefaultModelValue] = Field(default_factory=list, alias="defaultModelValues")
    enforce_on_write: bool = Field(default=False, alias="enforceOnWrite")

    @model_validator(mode="after")
    def _check_declarations(self) -> "ModelOptions":
        seen: set[str] = set()
        for decl in self.variables:
            if decl.variable in seen:
                raise ValueError(f"variable {decl.variable!r} is declared more than once")
            seen.add(decl.variable)

        if not self.variables:
            return self
        for default in self.default_model_values:
            problem = self.check(default.variable, default.value)
            if problem is not None:
                raise ValueError(f"default value rejected: {problem}")
        return self

    def declared_type(self, variable: str) -> ValueType | None:
        for decl in self.variables:
            if decl.variable == variable:
                return decl.type
        return None

    def check(self, variable: str, value: Any) -> str | None:
        """Return why the model rejects `variable = value`, or None when it is allowed."""
        expected = self.declared_type(variable)
        if expected is None:
            return f"variable {variable!r} is not declared in the model"
        if not matches(value, expected):
            actual = value_type_of(value)
            got = actual.value if actual is not None else type(value).__name__
            return f"variable {variable!r} expects {expected.value}, got {got}"
        return None

    def pending_defaults(self, doc: Mapping[str, Any]) -> list[DefaultModelValue]:
        """Defaults to seed into `doc`: only when enabled, only for absent variables, first entry wins."""
        if not self.set_values_on_ready:
            return []
        pending: list[DefaultModelValue] = []
        taken = set(doc)
        for default in self.default_model_values:
            if default.variable in taken:
                continue
            taken.add(default.variable)
            pending.append(default)
        return pending


class StoreOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: ModelOptions | None = None
    # None defers to Settings.cache_enabled
    cache: bool | None = None


class VariableEntry(BaseModel):
    """A labeled (variable, value) pair returned by find() and pick()."""

    variable: str
    value: Any = None
    exists: bool = True
