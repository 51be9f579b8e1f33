"""Plugin configuration schema.

The host book carries the plugin's options under
``pluginsConfig.doxme`` in ``book.json``:

    {
      "pluginsConfig": {
        "doxme": {"src": "lib/**/*.js", "articles_policy": "merge"}
      }
    }
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class DoxConfig(BaseModel):
    """Options for one documentation-generation run.

    Attributes:
        src: Glob pattern selecting the source files to document
        output_dir: Output directory name beneath the book root; also the
            path prefix of generated summary entries
        extension: File extension for generated documents
        concurrency: Maximum number of file reads or writes in flight
        articles_policy: "replace" overwrites the last chapter's articles,
            "merge" keeps existing ones and appends new entries
        template_name: Jinja2 template used to render each document
    """

    src: str
    output_dir: str = "dox"
    extension: str = ".md"
    concurrency: int = Field(default=16, ge=1)
    articles_policy: Literal["replace", "merge"] = "replace"
    template_name: str = "api.md.j2"

    model_config = {"extra": "ignore"}

    @field_validator("extension")
    @classmethod
    def extension_has_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError("extension must start with '.'")
        return value

    @field_validator("src", "output_dir")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value
