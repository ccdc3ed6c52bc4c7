"""Public result models for sbomvalidator."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sbomvalidator.codes import Dialect


class SchemaDocument(BaseModel):
    """A schema selected from the corpus, plus the siblings its $refs may need."""
    model_config = ConfigDict(frozen=True)

    dialect: Optional[Dialect] = None
    version: Optional[str] = None
    key: str = "<inline>"  # "<namespace>/<file name>"
    content: str  # Schema JSON text, exactly as stored in the corpus
    resources: Dict[str, str] = Field(default_factory=dict)  # file name -> JSON text


class ValidationResult(BaseModel):
    """Verdict of a structural validation run."""
    model_config = ConfigDict(frozen=True)

    valid: bool
    violations: List[str] = Field(default_factory=list)  # engine traversal order, not deduplicated
    dialect: Optional[Dialect] = None
    version: Optional[str] = None
    schema_key: Optional[str] = None

    @model_validator(mode="after")
    def _verdict_matches_violations(self) -> "ValidationResult":
        if self.valid == bool(self.violations):
            raise ValueError("valid must be True exactly when violations is empty")
        return self
