"""Configuration management for labelnotes."""

import os
from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigMissing, EnvMissing, InvalidInput


DEFAULT_API_URL = "https://api.github.com"
DEFAULT_RELEASE_CONFIG = os.path.join(".github", "release.yml")

# Environment variables that must be present before any request is made
REQUIRED_ENV_VARS = ("GITHUB_TOKEN", "GITHUB_OWNER", "GITHUB_REPO")


class Config(BaseSettings):
    """Configuration settings for labelnotes."""

    github_api_url: str = DEFAULT_API_URL
    github_token: Optional[str] = None
    github_owner: Optional[str] = None
    github_repo: Optional[str] = None

    model_config = SettingsConfigDict(case_sensitive=False)

    @field_validator('github_api_url')
    @classmethod
    def normalize_api_url(cls, v):
        """Ensure API URL has proper protocol and no trailing slash."""
        if v and not v.startswith(('http://', 'https://')):
            v = f"https://{v}"
        return v.rstrip('/')

    @property
    def repository(self) -> str:
        return f"{self.github_owner}/{self.github_repo}"


class CategoryRule(BaseModel):
    """A changelog section and the labels that put a pull request in it."""

    title: str
    labels: List[str] = Field(default_factory=list)


class ReleaseConfig(BaseModel):
    """Ordered category rules plus labels that exclude a pull request."""

    categories: List[CategoryRule] = Field(default_factory=list)
    exclude_labels: List[str] = Field(default_factory=list)

    @classmethod
    def from_document(cls, document: Any) -> "ReleaseConfig":
        """Build from a parsed release.yml document.

        Args:
            document: Parsed YAML with a ``changelog`` section

        Returns:
            ReleaseConfig instance

        Raises:
            InvalidInput: If the document does not have the expected shape
        """
        if not isinstance(document, dict) or not isinstance(document.get('changelog'), dict):
            raise InvalidInput("Release config must contain a 'changelog' section")

        changelog = document['changelog']
        exclude = changelog.get('exclude') or {}
        if not isinstance(exclude, dict):
            raise InvalidInput("'changelog.exclude' must be a mapping")

        try:
            return cls(
                categories=changelog.get('categories') or [],
                exclude_labels=exclude.get('labels') or [],
            )
        except ValidationError as e:
            raise InvalidInput(f"Invalid release config: {e}")


def get_config(**overrides) -> Config:
    """Load configuration from environment variables.

    Args:
        **overrides: Values taking precedence over the environment; None is ignored

    Returns:
        Configuration object

    Raises:
        EnvMissing: If the token, owner or repository is not set
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    config = Config(**overrides)

    if not (config.github_token and config.github_owner and config.github_repo):
        raise EnvMissing(REQUIRED_ENV_VARS)

    return config


def load_release_config(config_path: Optional[str] = None) -> ReleaseConfig:
    """Load release configuration from a YAML file.

    Args:
        config_path: Path to release config, defaults to .github/release.yml
            under the current directory

    Returns:
        ReleaseConfig object

    Raises:
        ConfigMissing: If the file does not exist
        InvalidInput: If the file is not valid YAML or has the wrong shape
    """
    path = Path(config_path or Path.cwd() / DEFAULT_RELEASE_CONFIG)
    if not path.is_file():
        raise ConfigMissing(str(path))

    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidInput(f"Error parsing release config {path}: {e}")

    return ReleaseConfig.from_document(document)


def create_sample_config(path: str = DEFAULT_RELEASE_CONFIG) -> None:
    """Create a sample release configuration file.

    Args:
        path: Path where to create the sample config file

    Raises:
        FileExistsError: If a file already exists at path
    """
    sample_config = {
        'changelog': {
            'exclude': {'labels': ['skip-changelog']},
            'categories': [
                {'title': 'Features', 'labels': ['enhancement', 'feature']},
                {'title': 'Bug Fixes', 'labels': ['bug', 'fix']},
                {'title': 'Documentation', 'labels': ['documentation']},
            ],
        }
    }

    target = Path(path)
    if target.exists():
        raise FileExistsError(f"{path} already exists")
    target.parent.mkdir(parents=True, exist_ok=True)

    with open(target, 'x', encoding='utf-8') as f:
        yaml.safe_dump(sample_config, f, sort_keys=False)
