"""
Tests for environment settings and release config loading.
"""

import pytest
import yaml

from labelnotes.config import (
    Config,
    REQUIRED_ENV_VARS,
    create_sample_config,
    get_config,
    load_release_config,
)
from labelnotes.errors import ConfigMissing, EnvMissing, InvalidInput

RELEASE_YML = """
changelog:
  exclude:
    labels:
      - skip-changelog
  categories:
    - title: Features
      labels: [enhancement]
    - title: Fixes
      labels: [bug, hotfix]
"""


@pytest.fixture
def github_env(monkeypatch):
    monkeypatch.setenv('GITHUB_TOKEN', 'env-token')
    monkeypatch.setenv('GITHUB_OWNER', 'acme')
    monkeypatch.setenv('GITHUB_REPO', 'widgets')
    monkeypatch.delenv('GITHUB_API_URL', raising=False)


# =============================================================================
# Environment
# =============================================================================


class TestGetConfig:
    def test_reads_environment(self, github_env):
        config = get_config()

        assert config.github_token == 'env-token'
        assert config.repository == 'acme/widgets'
        assert config.github_api_url == 'https://api.github.com'

    def test_override_wins_and_none_ignored(self, github_env):
        config = get_config(github_api_url='https://ghe.example.com/api/v3', github_token=None)

        assert config.github_api_url == 'https://ghe.example.com/api/v3'
        assert config.github_token == 'env-token'

    @pytest.mark.parametrize('missing', REQUIRED_ENV_VARS)
    def test_missing_variable_lists_all_names(self, github_env, monkeypatch, missing):
        monkeypatch.delenv(missing)

        with pytest.raises(EnvMissing) as exc_info:
            get_config()

        for name in REQUIRED_ENV_VARS:
            assert name in str(exc_info.value)

    def test_api_url_normalized(self):
        config = Config(github_api_url='ghe.example.com/api/v3/')
        assert config.github_api_url == 'https://ghe.example.com/api/v3'


# =============================================================================
# Release config
# =============================================================================


class TestLoadReleaseConfig:
    def test_load(self, tmp_path):
        path = tmp_path / 'release.yml'
        path.write_text(RELEASE_YML)

        release_config = load_release_config(str(path))

        assert [c.title for c in release_config.categories] == ['Features', 'Fixes']
        assert release_config.categories[1].labels == ['bug', 'hotfix']
        assert release_config.exclude_labels == ['skip-changelog']

    def test_default_path_under_cwd(self, tmp_path, monkeypatch):
        (tmp_path / '.github').mkdir()
        (tmp_path / '.github' / 'release.yml').write_text(RELEASE_YML)
        monkeypatch.chdir(tmp_path)

        assert len(load_release_config().categories) == 2

    def test_missing_file_names_path(self, tmp_path):
        path = tmp_path / 'nope.yml'

        with pytest.raises(ConfigMissing) as exc_info:
            load_release_config(str(path))

        assert str(path) in str(exc_info.value)

    def test_exclude_section_optional(self, tmp_path):
        path = tmp_path / 'release.yml'
        path.write_text('changelog:\n  categories:\n    - title: Fixes\n      labels: [bug]\n')

        assert load_release_config(str(path)).exclude_labels == []

    def test_missing_changelog_section(self, tmp_path):
        path = tmp_path / 'release.yml'
        path.write_text('other: true\n')

        with pytest.raises(InvalidInput):
            load_release_config(str(path))

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / 'release.yml'
        path.write_text('changelog: [unclosed\n')

        with pytest.raises(InvalidInput):
            load_release_config(str(path))

    def test_category_without_title(self, tmp_path):
        path = tmp_path / 'release.yml'
        path.write_text('changelog:\n  categories:\n    - labels: [bug]\n')

        with pytest.raises(InvalidInput):
            load_release_config(str(path))


class TestCreateSampleConfig:
    def test_sample_is_loadable(self, tmp_path):
        path = tmp_path / '.github' / 'release.yml'

        create_sample_config(str(path))

        release_config = load_release_config(str(path))
        assert release_config.categories[0].title == 'Features'
        assert release_config.exclude_labels == ['skip-changelog']
        assert 'changelog' in yaml.safe_load(path.read_text())

    def test_does_not_overwrite(self, tmp_path):
        path = tmp_path / 'release.yml'
        path.write_text('keep me')

        with pytest.raises(FileExistsError):
            create_sample_config(str(path))

        assert path.read_text() == 'keep me'
