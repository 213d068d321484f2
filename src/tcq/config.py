# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Runtime settings sourced from the CI environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_REPORT_PATH = "gl-codequality.json"
DEFAULT_JOB_NAME = "tsc"
DEFAULT_CI_CONFIG_PATH = ".gitlab-ci.yml"


def _env_str(env: Mapping[str, str], name: str) -> str | None:
    """Return a stripped environment value, or ``None`` when blank."""
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


@dataclass(frozen=True)
class Settings:
    """Describe one conversion run.

    Only ``report_path`` affects behaviour. The CI values are logged as run
    context.

    Attributes:
        report_path: Code quality report file to create or extend.
        job_name: CI job name.
        commit_sha: Short commit SHA of the pipeline.
        ci_config_path: Path of the CI configuration file.
        project_dir: Checkout directory of the project.
        project_url: Web URL of the project.
        gitlab_ci: Whether the process runs inside GitLab CI.
    """

    report_path: Path
    job_name: str = DEFAULT_JOB_NAME
    commit_sha: str | None = None
    ci_config_path: str = DEFAULT_CI_CONFIG_PATH
    project_dir: Path = Path(".")
    project_url: str | None = None
    gitlab_ci: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            env: Environment mapping; ``os.environ`` when omitted.

        Returns:
            Settings with defaults applied for unset or blank values.
        """
        if env is None:
            env = os.environ
        project_dir = _env_str(env, "CI_PROJECT_DIR")
        return cls(
            report_path=Path(
                _env_str(env, "TYPESCRIPT_CODE_QUALITY_REPORT") or DEFAULT_REPORT_PATH
            ),
            job_name=_env_str(env, "CI_JOB_NAME") or DEFAULT_JOB_NAME,
            commit_sha=_env_str(env, "CI_COMMIT_SHORT_SHA"),
            ci_config_path=_env_str(env, "CI_CONFIG_PATH") or DEFAULT_CI_CONFIG_PATH,
            project_dir=Path(project_dir) if project_dir else Path.cwd(),
            project_url=_env_str(env, "CI_PROJECT_URL"),
            gitlab_ci=(_env_str(env, "GITLAB_CI") or "").lower() == "true",
        )
