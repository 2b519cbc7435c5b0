"""Kubernetes-style object metadata shared by PodAutoscalers, Deciders and Metrics."""

from typing import Optional

from pydantic import BaseModel, Field


class OwnerReference(BaseModel):
    api_version: str
    kind: str
    name: str
    uid: str
    controller: Optional[bool] = None
    block_owner_deletion: Optional[bool] = None


class ObjectMeta(BaseModel):
    """
    Identity and bookkeeping for a namespaced resource.
    resource_version and generation are populated by the registry that stores the object.
    """

    namespace: str
    name: str
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    owner_references: list[OwnerReference] = Field(default_factory=list)
    uid: Optional[str] = None
    generation: int = 0
    resource_version: str = ""

    @property
    def key(self) -> str:
        return f"{self.namespace}/{self.name}"

    def deep_copy(self) -> "ObjectMeta":
        """Independent copy; labels, annotations and owner references are copied too."""
        return self.model_copy(deep=True)
