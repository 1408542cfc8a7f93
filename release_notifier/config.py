"""Run configuration for the release notifier."""

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigurationError

MONDAY_API_URL = "https://api.monday.com/v2"


class NotifierConfig(BaseModel):
    """Everything a single notification run needs.

    Built once by the CLI from options and ``INPUT_*`` environment variables,
    then passed explicitly to the pipeline. Nothing below the CLI reads the
    process environment.
    """

    commit_range: str = Field(
        ..., min_length=1, description="Git revision range, e.g. 'v1.0.0..HEAD'"
    )
    version: str = Field(..., min_length=1, description="Released version string")
    environment: str = Field(
        ..., min_length=1, description="Deployment environment, e.g. 'prod'"
    )
    description: str = Field(
        ..., min_length=1, description="Free-text release description"
    )
    column_id: str = Field(
        ..., min_length=1, description="monday.com column receiving the version"
    )
    monday_token: str = Field(..., min_length=1, description="monday.com API token")
    github_token: str = Field(..., min_length=1, description="GitHub API token")
    repository: str = Field(
        ..., description="GitHub repository in 'owner/name' form"
    )
    board_id: str | None = Field(
        None, description="monday.com board id; resolved from the first task if unset"
    )
    dry_run: bool = Field(
        False, description="Resolve everything but skip monday.com mutations"
    )
    monday_api_url: str = Field(MONDAY_API_URL, description="monday.com GraphQL URL")

    @field_validator("repository")
    @classmethod
    def _check_repository(cls, value: str) -> str:
        owner, _, name = value.partition("/")
        if not owner or not name or "/" in name:
            raise ValueError(
                f"Invalid repository '{value}'. Expected format: owner/name"
            )
        return value

    @field_validator("board_id")
    @classmethod
    def _blank_board_is_unset(cls, value: str | None) -> str | None:
        return value or None

    @property
    def owner(self) -> str:
        return self.repository.split("/", 1)[0]

    @property
    def repo_name(self) -> str:
        return self.repository.split("/", 1)[1]


def build_config(**values: object) -> NotifierConfig:
    """Validate raw inputs into a NotifierConfig.

    Raises:
        ConfigurationError: If a required value is missing or malformed
    """
    if not values.get("github_token"):
        raise ConfigurationError(
            "GitHub token not found. Please provide --github-token or ensure "
            "GITHUB_TOKEN environment variable is available."
        )

    try:
        return NotifierConfig.model_validate(values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from e
