"""Configuration module for Jira API interactions."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import dotenv_values

from ..exceptions import ConfigError
from ..utils.logging import log_config_param

logger = logging.getLogger("jico.jira.config")


@dataclass(frozen=True)
class JiraConfig:
    """Jira Cloud API configuration.

    Built once per invocation from the process environment and an optional
    ``.env`` file, then passed explicitly to everything that needs it.
    """

    url: str  # Base URL for Jira, without trailing slash
    email: str  # Account email used for basic auth
    api_token: str  # API token used for basic auth
    project_key: str | None = None  # Default project for create/list
    default_jql: str | None = None  # Default query for list
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @classmethod
    def from_env(
        cls,
        env_file: str | os.PathLike[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "JiraConfig":
        """Create configuration from environment variables and a .env file.

        Values from ``environ`` (the process environment by default) take
        precedence over values read from the file. The file never modifies
        the process environment.

        Args:
            env_file: Path to a .env file; ``.env`` in the working directory
                is used when omitted and present
            environ: Mapping to read variables from instead of os.environ

        Returns:
            JiraConfig with the merged values

        Raises:
            ConfigError: If JIRA_BASE_URL, JIRA_EMAIL or JIRA_API_TOKEN is missing
        """
        values = _merge_sources(env_file, os.environ if environ is None else environ)

        url = _required(values, "JIRA_BASE_URL").rstrip("/")
        email = _required(values, "JIRA_EMAIL")
        api_token = _required(values, "JIRA_API_TOKEN")

        ssl_verify_env = (values.get("JIRA_SSL_VERIFY") or "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        config = cls(
            url=url,
            email=email,
            api_token=api_token,
            project_key=values.get("JIRA_PROJECT_KEY") or None,
            default_jql=values.get("JIRA_DEFAULT_JQL") or None,
            ssl_verify=ssl_verify,
        )
        config.log_summary()
        return config

    def log_summary(self) -> None:
        log_config_param(logger, "Jira", "URL", self.url)
        log_config_param(logger, "Jira", "email", self.email)
        log_config_param(logger, "Jira", "API token", self.api_token, sensitive=True)
        log_config_param(logger, "Jira", "project key", self.project_key)
        log_config_param(logger, "Jira", "default JQL", self.default_jql)
        if not self.ssl_verify:
            logger.warning("SSL verification is disabled for %s", self.url)


def _merge_sources(
    env_file: str | os.PathLike[str] | None, environ: Mapping[str, str]
) -> dict[str, str]:
    file_values: dict[str, str] = {}
    if env_file is not None:
        logger.debug(f"Loading configuration file: {env_file}")
        raw = dotenv_values(env_file)
    elif os.path.isfile(".env"):
        logger.debug("Loading configuration file: .env")
        raw = dotenv_values(".env")
    else:
        raw = {}
    for key, value in raw.items():
        if value is not None:
            file_values[key] = value

    merged = dict(file_values)
    for key, value in environ.items():
        if value:
            merged[key] = value
    return merged


def _required(values: Mapping[str, str], name: str) -> str:
    value = values.get(name)
    if not value:
        raise ConfigError(f"Missing {name} (set in environment or .env)")
    return value
