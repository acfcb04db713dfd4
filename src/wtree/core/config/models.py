"""
Configuration data models for wtree.

These models define the structure of .wtree.json and ~/.config/wtree/config.json
files, with validation and type safety via Pydantic.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorktreeConfig(BaseModel):
    """
    Naming and placement of task worktrees.

    Worktrees live next to the repository, under a shared directory, each on
    its own prefixed branch.
    """
    base_branch: str = Field(
        default="main",
        min_length=1,
        description="Branch new task branches are forked from"
    )
    branch_prefix: str = Field(
        default="feature/",
        description="Prefix prepended to the task name to form the branch name"
    )
    dir_name: str = Field(
        default="worktrees",
        min_length=1,
        description="Directory (next to the repository) that holds task worktrees"
    )

    @field_validator("dir_name")
    @classmethod
    def validate_dir_name(cls, v: str) -> str:
        """Ensure the worktrees directory is a single path component."""
        if "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"dir_name must be a single directory name, got '{v}'")
        return v


class WtreeConfig(BaseModel):
    """
    Top-level wtree configuration.

    Example .wtree.json:
        {
          "worktree": {
            "base_branch": "develop",
            "branch_prefix": "agent/"
          }
        }
    """
    model_config = ConfigDict(extra="ignore")

    worktree: WorktreeConfig = Field(
        default_factory=WorktreeConfig,
        description="Worktree naming and placement"
    )
