"""Core type definitions for UI tree path queries."""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, field_validator


class EngineSettings(BaseModel):
    """Settings shared by the evaluator and synthesizer."""
    verbose: int = Field(default=0, ge=0, le=3)
    max_descendants: int = Field(default=100_000, gt=0)  # ceiling for `**` expansion


class NodeSnapshot(BaseModel):
    """A node of an in-memory tree, usually loaded from JSON."""
    name: str = ""
    parameters: Dict[str, str] = Field(default_factory=dict)
    children: List['NodeSnapshot'] = Field(default_factory=list)

    @field_validator('parameters', mode='before')
    @classmethod
    def normalize_parameters(cls, v: Any) -> Dict[str, str]:
        """Lower-case parameter names and stringify values."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError('parameters must be a mapping')
        return {str(key).lower(): "" if value is None else str(value) for key, value in v.items()}


class NodeInfo(BaseModel):
    """Name and all parameters of a node."""
    name: str
    parameters: Dict[str, str] = Field(default_factory=dict)

    def non_empty(self) -> Dict[str, str]:
        """Return only the parameters that have a value."""
        return {key: value for key, value in self.parameters.items() if value}


class QueryResult(BaseModel):
    """Result of a CLI query."""
    path: str
    count: int
    nodes: List[NodeInfo] = Field(default_factory=list)
    single: Optional[bool] = None


NodeSnapshot.model_rebuild()
