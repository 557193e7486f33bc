"""Root model for OntoUML projects."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from ontouml_to_alloy.models.common import MultilingualText, new_element_id
from ontouml_to_alloy.models.elements import Package


class Project(BaseModel):
    """Root model for OntoUML JSON/YAML project files.

    This is the top-level model of the interchange format. Only the model
    package is used; diagrams and other views are ignored.

    Example:
    -------
        ```json
        {
          "type": "Project",
          "id": "p1",
          "name": "Car Rental",
          "model": {"type": "Package", "id": "m1", "contents": []}
        }
        ```

    """

    model_config = ConfigDict(
        # Allow population by field name AND alias
        populate_by_name=True,
        # Diagrams and tool metadata are not part of the conceptual model
        extra="ignore",
    )

    type: Literal["Project"] = "Project"
    id: Annotated[str, Field(default_factory=new_element_id)]
    name: Annotated[MultilingualText, Field(default=None, description="Project name")]
    model: Annotated[
        Package,
        Field(default_factory=Package, description="Root package of the model"),
    ]
