"""Script Content Schemas — pydantic models for the Apps Script `projects.getContent` payload.

Invariants:
    - Read-only views of remote data; unknown remote fields are ignored
    - functionSet and functionSet.values are optional — absent means "no functions"
    - Field names follow Python style; camelCase remote keys accepted via aliases
"""

from pydantic import BaseModel, ConfigDict, Field


class FunctionDescriptor(BaseModel):
    """One callable declared in a script file."""
    model_config = ConfigDict(extra="ignore")

    name: str


class FunctionSet(BaseModel):
    model_config = ConfigDict(extra="ignore")

    values: list[FunctionDescriptor] | None = None


class FileContent(BaseModel):
    """Metadata of one remote script file."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str | None = None
    type: str | None = None
    function_set: FunctionSet | None = Field(None, alias="functionSet")


class ScriptContent(BaseModel):
    """Body of a successful content read."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    script_id: str | None = Field(None, alias="scriptId")
    files: list[FileContent] | None = None
