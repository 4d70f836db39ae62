from __future__ import annotations

from typing import Iterable

from kiosk_config.core.types import ConfigurationModel, ValidationError
from kiosk_config.observability.logging import get_logger

from .rules import DEFAULT_RULES, Rule


class ValidationEngine:
    """Run an ordered list of independent rules over a configuration snapshot.

    Results are concatenated in rule order, then in each rule's own order. No
    sorting, no de-duplication.
    """

    def __init__(self, rules: Iterable[Rule] = DEFAULT_RULES) -> None:
        self._rules: tuple[Rule, ...] = tuple(rules)
        self._log = get_logger("kiosk_config.validation")

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def validate(self, model: ConfigurationModel) -> list[ValidationError]:
        errors: list[ValidationError] = []
        for rule in self._rules:
            errors.extend(rule(model))
        self._log.debug("validation_done", error_count=len(errors), mode=model.mode)
        return errors

    def validate_field(self, model: ConfigurationModel, field_id: str) -> str | None:
        """Message of the first error bound to `field_id`.

        This re-runs the full rule set; it is not an incremental validator.
        """

        for err in self.validate(model):
            if err.field == field_id:
                return err.message
        return None


_default_engine = ValidationEngine()


def validate(model: ConfigurationModel) -> list[ValidationError]:
    return _default_engine.validate(model)


def validate_field(model: ConfigurationModel, field_id: str) -> str | None:
    return _default_engine.validate_field(model, field_id)
