"""
Runtime settings for localctx.

Values come from the environment (optionally seeded from a .env file by
python-dotenv) and can be overridden by command line flags.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from localctx.file_utils import (DEFAULT_CONTEXT_DIR, DEFAULT_CONTEXT_FILE_NAME,
                                 DEFAULT_IMAGES_DIR_NAME)

DEFAULT_MODEL = "gpt-4o-mini"

TRUE_VALUES = {"1", "true", "yes", "on"}


class ContextSettings(BaseModel):
    """Schema for the local context store location with validation."""
    context_dir: str = Field(
        default=DEFAULT_CONTEXT_DIR,
        description="Root directory of the local context store"
    )
    context_file_name: str = Field(
        default=DEFAULT_CONTEXT_FILE_NAME,
        description="Name of the markdown file injected into prompts"
    )
    images_dir_name: str = Field(
        default=DEFAULT_IMAGES_DIR_NAME,
        description="Name of the directory holding downloaded images"
    )
    enabled_by_default: bool = Field(
        default=False,
        description="Whether local context is injected when the session starts"
    )

    @field_validator("context_dir")
    @classmethod
    def expand_context_dir(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("context_dir must not be empty")
        return os.path.abspath(os.path.expanduser(value))

    @field_validator("context_file_name", "images_dir_name")
    @classmethod
    def plain_name(cls, value: str) -> str:
        if not value or value in (".", "..") or os.sep in value or (os.altsep and os.altsep in value):
            raise ValueError(f"'{value}' must be a plain file name")
        return value

    @property
    def context_file_path(self) -> str:
        return os.path.join(self.context_dir, self.context_file_name)

    @property
    def images_dir_path(self) -> str:
        return os.path.join(self.context_dir, self.images_dir_name)


class Settings(BaseModel):
    """Top level settings: context store plus model access."""
    context: ContextSettings = Field(default_factory=ContextSettings)
    model: str = Field(default=DEFAULT_MODEL, description="Chat model name")
    api_key: Optional[str] = Field(default=None, description="OpenAI compatible API key")
    base_url: Optional[str] = Field(default=None, description="Override for the API endpoint")


def load_settings(env: Optional[Mapping[str, str]] = None,
                  context_dir: Optional[str] = None,
                  model: Optional[str] = None,
                  enable_context: Optional[bool] = None) -> Settings:
    """
    Build Settings from environment variables and explicit overrides.

    Args:
        env: Mapping to read from, defaults to os.environ
        context_dir: Overrides LOCALCTX_CONTEXT_DIR
        model: Overrides LOCALCTX_MODEL
        enable_context: Overrides LOCALCTX_ENABLE_CONTEXT

    Raises:
        pydantic.ValidationError: if a value is invalid
    """
    if env is None:
        env = os.environ

    context_kwargs = {}
    if context_dir or env.get("LOCALCTX_CONTEXT_DIR"):
        context_kwargs["context_dir"] = context_dir or env["LOCALCTX_CONTEXT_DIR"]
    if env.get("LOCALCTX_CONTEXT_FILE"):
        context_kwargs["context_file_name"] = env["LOCALCTX_CONTEXT_FILE"]
    if env.get("LOCALCTX_IMAGES_DIR"):
        context_kwargs["images_dir_name"] = env["LOCALCTX_IMAGES_DIR"]
    if enable_context is not None:
        context_kwargs["enabled_by_default"] = enable_context
    elif env.get("LOCALCTX_ENABLE_CONTEXT"):
        context_kwargs["enabled_by_default"] = env["LOCALCTX_ENABLE_CONTEXT"].strip().lower() in TRUE_VALUES

    return Settings(
        context=ContextSettings(**context_kwargs),
        model=model or env.get("LOCALCTX_MODEL") or DEFAULT_MODEL,
        api_key=env.get("OPENAI_API_KEY") or None,
        base_url=env.get("OPENAI_BASE_URL") or None,
    )
