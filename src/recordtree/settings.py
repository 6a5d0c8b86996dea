"""
Reader configuration for recordtree.
"""

from pydantic import BaseModel, ConfigDict, Field

from recordtree.exceptions import ErrorLevel


class ReaderSettings(BaseModel):
    """
    Settings controlling how a document's records are read.

    Params:
        use_variables: Substitute $(name) references in values; when False
            raw values are used verbatim
        max_depth: Maximum nesting of command and variable scopes below a
            records element
        error_level: Detail level of element locations in error messages
    """

    model_config = ConfigDict(frozen=True)

    use_variables: bool = True
    max_depth: int = Field(default=256, ge=1)
    error_level: ErrorLevel = ErrorLevel.USER
