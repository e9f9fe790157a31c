"""Resolution of the MODX install parameters from flags, prompts and defaults."""

import logging
import os
import socket
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from modxinstall.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_DB_USER,
    DEFAULT_LANGUAGE,
    GENERATE_SENTINEL,
    MANAGER_USER_SUFFIX,
)
from modxinstall.errors import ValidationError
from modxinstall.errors_catalog import actionable_error
from modxinstall.models import ExplicitInputs, InstallParameters
from modxinstall.services.password_generator import generate_password
from modxinstall.services.prompts import PromptChannel
from modxinstall.services.validation import (
    normalize_base_url,
    normalize_host,
    validate_password,
)

PROMPT_NOTICE = "Please complete the following details to install MODX. Leave empty to use the [default]."
MASKED_VALUE = "********"


def _validate_manager_password(value: str) -> str:
    if value == GENERATE_SENTINEL:
        return value
    return validate_password(value)


@dataclass(frozen=True)
class FieldRule:
    name: str
    label: str
    question: str
    default: Optional[str] = None
    default_label: Optional[str] = None
    secret: bool = False
    validator: Optional[Callable[[str], str]] = None
    normalizer: Optional[Callable[[str], str]] = None
    finalizer: Optional[Callable[[str], str]] = None

    def prompt_text(self) -> str:
        shown = self.default_label if self.default_label is not None else self.default
        if shown is None:
            return self.question
        return f"{self.question} [{shown}]"

    def intake(self, value: str) -> str:
        """Normalize and check a supplied or typed value."""
        if self.normalizer:
            value = self.normalizer(value)
        if not value.strip():
            raise ValidationError(actionable_error("empty_value", label=self.label))
        if self.validator:
            value = self.validator(value)
        return value


class ParameterResolver:
    """Determines each install parameter from explicit input, a prompt or a default."""

    def __init__(
        self,
        channel: PromptChannel,
        working_dir: str,
        logger: logging.Logger,
        hostname: Optional[str] = None,
        password_factory: Callable[[], str] = generate_password,
    ):
        self.channel = channel
        self.working_dir = working_dir
        self.logger = logger
        self.hostname = hostname if hostname is not None else socket.gethostname()
        self.password_factory = password_factory

    def build_rules(self) -> List[FieldRule]:
        project = os.path.basename(os.path.normpath(self.working_dir))
        return [
            FieldRule("db_name", "DB Name", "Database Name", default=project),
            FieldRule("db_user", "DB User", "Database User", default=DEFAULT_DB_USER),
            FieldRule(
                "db_password",
                "DB Password",
                "Database Password",
                secret=True,
                validator=validate_password,
            ),
            FieldRule(
                "db_host",
                "DB Host",
                "Hostname",
                default=self.hostname,
                normalizer=normalize_host,
            ),
            FieldRule(
                "base_url",
                "Base URL",
                "Base URL",
                default=DEFAULT_BASE_URL,
                normalizer=normalize_base_url,
            ),
            FieldRule("language", "Language", "Manager Language", default=DEFAULT_LANGUAGE),
            FieldRule(
                "manager_user",
                "Manager User",
                "Manager User",
                default=f"{project}{MANAGER_USER_SUFFIX}",
            ),
            FieldRule(
                "manager_password",
                "Manager Password",
                "Manager User Password",
                default=GENERATE_SENTINEL,
                default_label="generated",
                secret=True,
                validator=_validate_manager_password,
                finalizer=self.generate_if_requested,
            ),
            FieldRule("manager_email", "Manager Email", "Manager Email"),
        ]

    def resolve(self, explicit: ExplicitInputs) -> InstallParameters:
        if not explicit.is_complete():
            self.channel.echo(PROMPT_NOTICE)

        values: Dict[str, str] = {}
        for rule in self.build_rules():
            values[rule.name] = self.resolve_field(rule, explicit.get(rule.name))

        params = InstallParameters(**values)
        self.logger.debug("Resolved install parameters: %r", params)
        return params

    def resolve_field(self, rule: FieldRule, supplied: Optional[str]) -> str:
        if supplied is not None:
            shown = MASKED_VALUE if rule.secret else supplied
            self.channel.echo(f"{rule.label + ':':<18}{shown}")
            value = rule.intake(supplied)
        else:
            value = self.channel.ask(
                rule.prompt_text(),
                default=rule.default,
                hidden=rule.secret,
                validator=rule.intake,
            )

        if rule.finalizer:
            value = rule.finalizer(value)
        return value

    def generate_if_requested(self, value: str) -> str:
        if value != GENERATE_SENTINEL:
            return value
        generated = self.password_factory()
        self.channel.notice(f"Generated Manager Password: {generated}")
        return generated
