# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
from pathlib import Path

from tcq.config import Settings


def test_cfg_001_defaults_apply_for_empty_environment() -> None:
    settings = Settings.from_env({"CI_PROJECT_DIR": "/builds/app"})

    assert settings.report_path == Path("gl-codequality.json")
    assert settings.job_name == "tsc"
    assert settings.ci_config_path == ".gitlab-ci.yml"
    assert settings.commit_sha is None
    assert settings.project_url is None
    assert settings.gitlab_ci is False
    assert settings.project_dir == Path("/builds/app")


def test_cfg_002_values_read_from_environment() -> None:
    settings = Settings.from_env(
        {
            "TYPESCRIPT_CODE_QUALITY_REPORT": "reports/tsc.json",
            "CI_JOB_NAME": "typecheck",
            "CI_COMMIT_SHORT_SHA": "1a2b3c4d",
            "CI_PROJECT_URL": "https://gitlab.example.com/group/app",
            "GITLAB_CI": "true",
        }
    )

    assert settings.report_path == Path("reports/tsc.json")
    assert settings.job_name == "typecheck"
    assert settings.commit_sha == "1a2b3c4d"
    assert settings.project_url == "https://gitlab.example.com/group/app"
    assert settings.gitlab_ci is True
    assert settings.project_dir == Path.cwd()


def test_cfg_003_blank_report_path_falls_back_to_default() -> None:
    settings = Settings.from_env({"TYPESCRIPT_CODE_QUALITY_REPORT": "  "})

    assert settings.report_path == Path("gl-codequality.json")
