"""Network isolation policy stored as a namespace annotation."""

from pydantic import BaseModel, Field

from namespace_demo.constants import Config


class IngressPolicy(BaseModel):
    isolation: str = Field("", description="Ingress isolation mode, e.g. 'DefaultDeny'")


class NamespacePolicy(BaseModel):
    """Policy serialized under the network-policy annotation of a namespace.

    Example:
        {"ingress": {"isolation": "DefaultDeny"}}
    """
    ingress: IngressPolicy = Field(default_factory=IngressPolicy)

    @classmethod
    def with_isolation(cls, isolation: str) -> "NamespacePolicy":
        return cls(ingress=IngressPolicy(isolation=isolation))

    def to_annotations(self) -> dict[str, str]:
        """Render the policy as namespace annotations.

        Returns:
            Mapping of the network-policy annotation key to compact JSON
        """
        return {Config.NETWORK_POLICY_ANNOTATION: self.model_dump_json()}
