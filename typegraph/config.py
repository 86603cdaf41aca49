"""Build configuration."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ROOT_NAME = "Mu"
DEFAULT_BASE_NAME = "Any"


class GraphConfig(BaseModel):
    """Names of the two distinguished types in a graph.

    root_name is the absolute root, which never receives a default parent.
    base_name is the universal base attached to every rootless non-role type.
    """

    model_config = ConfigDict(frozen=True)

    root_name: str = Field(default=DEFAULT_ROOT_NAME, min_length=1)
    base_name: str = Field(default=DEFAULT_BASE_NAME, min_length=1)
