"""Config settings – Settings base class and ExportSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from csvtable.config.encoder import (
    BoolEncodingStrategy,
    BoolStrategy,
    CustomBool,
    DateEncodingStrategy,
    DeferredToDate,
    EncoderConfiguration,
    Formatted,
    ISO8601,
)
from csvtable.config.validation import InvalidSettingValueError

_BOOL_STRATEGIES: dict[str, BoolEncodingStrategy] = {
    "true_false": BoolEncodingStrategy.TRUE_FALSE,
    "true_false_uppercase": BoolEncodingStrategy.TRUE_FALSE_UPPERCASE,
    "yes_no": BoolEncodingStrategy.YES_NO,
    "yes_no_uppercase": BoolEncodingStrategy.YES_NO_UPPERCASE,
    "integer": BoolEncodingStrategy.INTEGER,
}
_DATE_STRATEGIES = ("iso8601", "deferred", "formatted")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ExportSettings(Settings):
    """Export options read from ``CSVTABLE_*`` environment variables.

    ``date_strategy`` is one of ``iso8601``, ``deferred`` or ``formatted``
    (the latter requires ``date_format``). ``bool_strategy`` is one of the
    :class:`BoolEncodingStrategy` names in snake case, or ``custom`` together
    with ``true_token`` and ``false_token``.
    """

    _prefix: ClassVar[str] = "CSVTABLE"

    date_strategy: str = "iso8601"
    date_format: str = ""
    bool_strategy: str = "true_false"
    true_token: str = ""
    false_token: str = ""
    quote_line_breaks: bool = False
    bom: bool = False
    output_dir: str = "."

    def _validate(self) -> None:
        self.date_strategy = self.date_strategy.strip().lower()
        self.bool_strategy = self.bool_strategy.strip().lower()
        if self.date_strategy not in _DATE_STRATEGIES:
            raise InvalidSettingValueError(
                "date_strategy", self.date_strategy, f"expected one of {', '.join(_DATE_STRATEGIES)}"
            )
        if self.date_strategy == "formatted" and not self.date_format:
            raise InvalidSettingValueError(
                "date_format", self.date_format, "required when date_strategy is 'formatted'"
            )
        if self.bool_strategy == "custom":
            if not self.true_token or not self.false_token:
                raise InvalidSettingValueError(
                    "bool_strategy", self.bool_strategy, "custom requires true_token and false_token"
                )
        elif self.bool_strategy not in _BOOL_STRATEGIES:
            raise InvalidSettingValueError(
                "bool_strategy",
                self.bool_strategy,
                f"expected one of {', '.join([*_BOOL_STRATEGIES, 'custom'])}",
            )

    def to_configuration(self) -> EncoderConfiguration:
        """Build the :class:`EncoderConfiguration` these settings describe."""
        date_strategy: DateEncodingStrategy
        if self.date_strategy == "deferred":
            date_strategy = DeferredToDate()
        elif self.date_strategy == "formatted":
            date_strategy = Formatted.pattern(self.date_format)
        else:
            date_strategy = ISO8601()

        bool_strategy: BoolStrategy
        if self.bool_strategy == "custom":
            bool_strategy = CustomBool(self.true_token, self.false_token)
        else:
            bool_strategy = _BOOL_STRATEGIES[self.bool_strategy]

        return EncoderConfiguration(
            date_strategy=date_strategy,
            bool_strategy=bool_strategy,
            quote_line_breaks=self.quote_line_breaks,
        )


__all__ = ["ExportSettings", "Settings"]
